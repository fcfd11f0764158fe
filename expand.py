import hashlib
import logging
import struct

logger = logging.getLogger(__name__)

LARGE_DOMAIN = b"large-challenge"


def expand_bytes(digest, length_bits, num_bytes):
    """
    Counter-mode SHA-256 expansion of a state digest.

    Every block hashes the requested bit length together with the block
    counter (numbered from 1), so expansions for different lengths share no
    blocks.

    Args:
        digest: Transcript state digest
        length_bits: Requested challenge length, bound into every block
        num_bytes: Number of output bytes

    Returns:
        num_bytes pseudorandom bytes
    """
    blocks = []
    produced = 0
    counter = 1
    while produced < num_bytes:
        hasher = hashlib.sha256()
        hasher.update(LARGE_DOMAIN)
        hasher.update(digest)
        hasher.update(struct.pack(">QQ", length_bits, counter))
        block = hasher.digest()
        blocks.append(block)
        produced += len(block)
        counter += 1
    return b''.join(blocks)[:num_bytes]


def derive_large_challenge(digest, length_bits):
    """
    Derive an integer of (approximately) length_bits bits from a state digest.

    The result keeps the low length_bits bits of the expanded output. The top
    bit is not forced, so the actual bit length is length_bits or, when the
    leading bits happen to be zero, a few bits fewer.

    Args:
        digest: Transcript state digest
        length_bits: Positive number of bits

    Returns:
        int: A non-negative integer below 2**length_bits

    Raises:
        ValueError: If length_bits is not a positive integer
    """
    if isinstance(length_bits, bool) or not isinstance(length_bits, int):
        raise ValueError(f"Challenge length must be an integer, got {length_bits!r}")
    if length_bits <= 0:
        raise ValueError(f"Challenge length must be positive, got {length_bits}")

    num_bytes = (length_bits + 7) // 8
    output = expand_bytes(digest, length_bits, num_bytes)
    challenge = int.from_bytes(output, byteorder='big') & ((1 << length_bits) - 1)

    logger.debug(
        "Large challenge of %d bits requested, %d bits produced",
        length_bits, challenge.bit_length()
    )
    return challenge
