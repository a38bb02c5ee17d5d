"""test_digest.py: tests for the sized digest helper."""
import pytest

from ip6gen._digest import _digest

name: str = "c0a010fb-2632-40cb-a105-90297cba567a"


@pytest.mark.parametrize("size,expected", [
    (1, "6e"),
    (2, "852d"),
    (8, "dfae9d64312d7096"),
    (10, "440c925b0b5cb23c600e"),
    (16, "cb83ab6b5730e1af6ef1d081fc1cf3f9"),
])
def test_known_digests(size: int, expected: str) -> None:
    """Verifies digests of each size against known BLAKE2b outputs.

    Args:
        size: Digest length in bytes.
        expected: The hex rendering of the digest.
    """
    assert _digest(name, size) == expected


def test_digest_length() -> None:
    """Verifies each byte renders as exactly two lowercase hex digits."""
    for size in range(1, 17):
        digest = _digest("alpha", size)
        assert len(digest) == size * 2
        assert digest == digest.lower()
        int(digest, 16)


def test_text_is_hashed_as_utf8() -> None:
    """Verifies text and its UTF-8 bytes hash the same."""
    assert _digest("héllo", 8) == _digest("héllo".encode("utf-8"), 8)
    assert _digest("héllo", 8) == "135dd36ec231afcb"
