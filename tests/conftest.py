"""Shared pytest fixtures for fixturehash tests."""

import pytest
import tempfile
import shutil
from pathlib import Path

from fixturehash.core.config import Config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    """
    Run inside temp_dir with a private global config file.

    Environment overrides are cleared so the host's settings never leak in.
    Returns the path of the global config file.
    """
    global_config = temp_dir / 'global.cfg'
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', global_config)
    monkeypatch.chdir(temp_dir)
    for key in ('CORE_ABBREV', 'CORE_CHUNKSIZE', 'CORE_ENCODING'):
        monkeypatch.delenv(f'FIXTUREHASH_{key}', raising=False)
    return global_config


@pytest.fixture
def fixture_files(temp_dir):
    """Create sample fixture files, including a nested one."""
    (temp_dir / 'images').mkdir()
    files = {
        'empty': temp_dir / 'empty.bin',
        'abc': temp_dir / 'abc.txt',
        'image': temp_dir / 'images' / 'cat.jpg',
    }
    files['empty'].write_bytes(b'')
    files['abc'].write_bytes(b'abc')
    files['image'].write_bytes(bytes(range(256)) * 40)
    return files
