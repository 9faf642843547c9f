"""Integration tests for hash and key commands."""

import hashlib

from click.testing import CliRunner
from fixturehash.cli.main import cli

ABC_SHA1 = 'a9993e364706816aba3e25717850c26c9cd0d89d'
EMPTY_SHA1 = 'da39a3ee5e6b4b0d3255bfef95601890afd80709'
TEST_COM_SHA1 = '50334ee0b51600df6397ce93ceed4728c37fee4e'


class TestHashCommand:
    """Tests for fixturehash hash."""

    def test_hash_files(self, isolated_config, fixture_files):
        """Test hashing files prints one line per file."""
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', 'abc.txt', 'empty.bin'])
        assert result.exit_code == 0
        assert ABC_SHA1 in result.output
        assert EMPTY_SHA1 in result.output
        assert 'abc.txt' in result.output

    def test_hash_string(self, isolated_config):
        """Test hashing a string option."""
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', '-s', 'http://test.com'])
        assert result.exit_code == 0
        assert TEST_COM_SHA1 in result.output

    def test_hash_stdin_default(self, isolated_config):
        """Test stdin is hashed when no inputs are given."""
        runner = CliRunner()
        result = runner.invoke(cli, ['hash'], input=b'abc')
        assert result.exit_code == 0
        assert ABC_SHA1 in result.output

    def test_hash_stdin_chunked(self, isolated_config, monkeypatch):
        """Test stdin honours core.chunksize and still hashes everything."""
        monkeypatch.setenv('FIXTUREHASH_CORE_CHUNKSIZE', '7')
        data = bytes(range(256)) * 5
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', '--stdin'], input=data)
        assert result.exit_code == 0
        assert hashlib.sha1(data).hexdigest() in result.output

    def test_hash_abbrev(self, isolated_config, fixture_files):
        """Test --abbrev shortens digests."""
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', '--abbrev', '7', 'abc.txt'])
        assert result.exit_code == 0
        assert ABC_SHA1[:7] in result.output
        assert ABC_SHA1 not in result.output

    def test_hash_abbrev_from_config(self, isolated_config, fixture_files, monkeypatch):
        """Test core.abbrev is used when --abbrev is absent."""
        monkeypatch.setenv('FIXTUREHASH_CORE_ABBREV', '10')
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', 'abc.txt'])
        assert result.exit_code == 0
        assert ABC_SHA1[:10] in result.output
        assert ABC_SHA1 not in result.output

    def test_hash_bad_config(self, isolated_config, fixture_files, monkeypatch):
        """Test invalid config aborts."""
        monkeypatch.setenv('FIXTUREHASH_CORE_CHUNKSIZE', 'big')
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', 'abc.txt'])
        assert result.exit_code != 0
        assert 'chunksize' in result.output

    def test_hash_missing_file(self, isolated_config):
        """Test missing files are rejected."""
        runner = CliRunner()
        result = runner.invoke(cli, ['hash', 'missing.bin'])
        assert result.exit_code != 0


class TestKeyCommand:
    """Tests for fixturehash key."""

    def test_key(self, isolated_config):
        """Test the cache filename is printed for each key."""
        runner = CliRunner()
        result = runner.invoke(cli, ['key', 'http://test.com', 'abc'])
        assert result.exit_code == 0
        assert TEST_COM_SHA1 in result.output
        assert ABC_SHA1 in result.output

    def test_key_unencodable(self, isolated_config):
        """Test a key that can't be encoded is reported, not raised."""
        runner = CliRunner()
        result = runner.invoke(cli, ['key', 'caf\udce9'])
        assert result.exit_code == 1
        assert 'Cannot encode key' in result.output
        assert not isinstance(result.exception, UnicodeEncodeError)

    def test_key_requires_argument(self, isolated_config):
        """Test at least one key is needed."""
        runner = CliRunner()
        result = runner.invoke(cli, ['key'])
        assert result.exit_code != 0


def test_help_shows_banner():
    """Test help output includes the banner and commands."""
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'fixturehash' in result.output
    assert 'verify' in result.output
