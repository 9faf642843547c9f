"""Tests for the assertion helpers."""

import pytest

from fixturehash.core.hash import EMPTY_SHA1
from fixturehash.testing import assert_sha1, assert_file_sha1, assert_hex_digest

ABC_SHA1 = 'a9993e364706816aba3e25717850c26c9cd0d89d'


def test_assert_sha1_passes():
    """Test matching digests pass, in either case."""
    assert_sha1(b'abc', ABC_SHA1)
    assert_sha1(b'abc', ABC_SHA1.upper())
    assert_sha1(b'abcdef', ABC_SHA1, length=3)


def test_assert_sha1_fails_with_both_digests():
    """Test the failure message names expected and actual."""
    with pytest.raises(AssertionError) as excinfo:
        assert_sha1(b'abc', EMPTY_SHA1)
    assert EMPTY_SHA1 in str(excinfo.value)
    assert ABC_SHA1 in str(excinfo.value)


def test_assert_file_sha1(fixture_files):
    """Test file assertions."""
    assert_file_sha1(fixture_files['abc'], ABC_SHA1)
    with pytest.raises(AssertionError):
        assert_file_sha1(fixture_files['empty'], ABC_SHA1)


def test_assert_hex_digest():
    """Test digest shape assertions."""
    assert_hex_digest(EMPTY_SHA1)
    with pytest.raises(AssertionError):
        assert_hex_digest('not a digest')
