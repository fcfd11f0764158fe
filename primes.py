import hashlib
import logging
import struct

import gmpy2

from constants import SECURITY_PARAMETER, MAX_PRIME_ATTEMPTS

logger = logging.getLogger(__name__)

PRIME_DOMAIN = b"prime-challenge"
CANDIDATE_BITS = 8 * hashlib.sha256().digest_size


class PrimeSearchExhausted(RuntimeError):
    """Raised when no prime was found within MAX_PRIME_ATTEMPTS candidates."""


def is_probable_prime(n, rounds=SECURITY_PARAMETER):
    """
    Miller-Rabin probable-prime test.

    Args:
        n: Integer to test
        rounds: Number of Miller-Rabin rounds (error <= 4^-rounds)

    Returns:
        bool: True if n is prime with overwhelming probability
    """
    if n < 2:
        return False
    return bool(gmpy2.is_prime(n, rounds))


def prime_candidate(digest, attempt, bit_length):
    """
    Derive the candidate for one attempt of the prime search.

    Args:
        digest: Transcript state digest
        attempt: Attempt counter, mixed into the hash so every attempt differs
        bit_length: Number of low bits to keep

    Returns:
        An odd integer of at most bit_length bits
    """
    hasher = hashlib.sha256()
    hasher.update(PRIME_DOMAIN)
    hasher.update(digest)
    hasher.update(struct.pack(">Q", attempt))
    candidate = int.from_bytes(hasher.digest(), byteorder='big')
    candidate &= (1 << bit_length) - 1
    return candidate | 1


def derive_bounded_prime(digest, bound, max_attempts=MAX_PRIME_ATTEMPTS):
    """
    Find an odd probable prime strictly below bound by rejection sampling.

    Candidates are masked to the bit length of the bound and rejected when
    they are not below it, so there is no modular-reduction bias. The search
    is deterministic in (digest, bound). Candidates are always odd, so 2 is
    never returned and the bound must leave room for 3.

    Args:
        digest: Transcript state digest
        bound: Exclusive upper bound, at most 256 bits
        max_attempts: Number of candidates tried before giving up

    Returns:
        int: An odd probable prime p with 3 <= p < bound

    Raises:
        ValueError: If the bound is too small or too wide for a SHA-256 candidate
        PrimeSearchExhausted: If no candidate passed within max_attempts
    """
    if bound <= 3:
        raise ValueError(f"Prime bound must be greater than 3, got {bound}")
    bit_length = bound.bit_length()
    if bit_length > CANDIDATE_BITS:
        raise ValueError(
            f"Prime bound of {bit_length} bits exceeds the {CANDIDATE_BITS}-bit candidate size"
        )

    for attempt in range(max_attempts):
        candidate = prime_candidate(digest, attempt, bit_length)
        if candidate >= bound:
            continue
        if is_probable_prime(candidate):
            logger.debug("Prime challenge found after %d attempts", attempt + 1)
            return candidate

    # Only reachable with a misconfigured bound
    raise PrimeSearchExhausted(
        f"No prime below {bound} found in {max_attempts} attempts"
    )
