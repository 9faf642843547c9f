"""Checksum manifests in sha1sum format.

Each line is ``<digest>  <path>`` (text mode) or ``<digest> *<path>``
(binary mode). Blank lines and lines starting with ``#`` are skipped.
Paths are resolved relative to the manifest's directory.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .hash import DEFAULT_CHUNK_SIZE, hash_file, is_hex_digest

STATUS_OK = 'OK'
STATUS_FAILED = 'FAILED'
STATUS_MISSING = 'MISSING'
STATUS_UNREADABLE = 'UNREADABLE'


@dataclass
class ManifestEntry:
    """One expected digest from a manifest."""
    digest: str
    path: str
    line: int


@dataclass
class CheckResult:
    """Outcome of verifying one manifest entry."""
    entry: ManifestEntry
    status: str
    actual: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def parse_manifest(text: str) -> List[ManifestEntry]:
    """
    Parse manifest text into entries.

    Raises:
        ValueError: If a line is not a valid manifest line
    """
    entries = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.lstrip().startswith('#'):
            continue

        parts = line.split(' ', 1)
        if len(parts) != 2:
            raise ValueError(f"Malformed manifest line {lineno}: {line!r}")

        digest, rest = parts[0].lower(), parts[1]
        if not is_hex_digest(digest):
            raise ValueError(f"Invalid digest on manifest line {lineno}: {parts[0]!r}")

        # ' path' is text mode, '*path' is binary mode
        if rest.startswith((' ', '*')):
            rest = rest[1:]
        if not rest:
            raise ValueError(f"Missing path on manifest line {lineno}")

        entries.append(ManifestEntry(digest=digest, path=rest, line=lineno))
    return entries


def check_manifest(manifest_path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[CheckResult]:
    """
    Verify every file listed in a manifest.

    Args:
        manifest_path: Path to the manifest file
        chunk_size: Bytes read per block when hashing

    Returns:
        One CheckResult per manifest entry, in manifest order
    """
    manifest_path = Path(manifest_path)
    base = manifest_path.parent
    entries = parse_manifest(manifest_path.read_text(encoding='utf-8'))

    results = []
    for entry in entries:
        target = base / entry.path
        if not target.is_file():
            results.append(CheckResult(entry, STATUS_MISSING))
            continue
        try:
            actual = hash_file(target, chunk_size)
        except OSError:
            results.append(CheckResult(entry, STATUS_UNREADABLE))
            continue
        status = STATUS_OK if actual == entry.digest else STATUS_FAILED
        results.append(CheckResult(entry, status, actual))
    return results
