"""_digest.py: sized BLAKE2b digests rendered as hex."""
import hashlib

from loguru import logger


def _digest(name: str | bytes, size: int) -> str:
    """Hashes a name into exactly ``size`` bytes.

    BLAKE2b stores the digest size in its parameter block, so a 2 byte
    digest is not a truncation of a 16 byte one.

    Args:
        name: Input to hash. Text is encoded as UTF-8.
        size: Digest length in bytes (1-64).

    Returns:
        str: Lowercase hex, ``2 * size`` characters long.
    """
    data = name.encode() if isinstance(name, str) else name
    logger.trace(f"blake2b digest_size={size} over {len(data)} bytes")
    return hashlib.blake2b(data, digest_size=size).hexdigest()
