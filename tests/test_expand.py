import hashlib

import pytest

from expand import derive_large_challenge, expand_bytes


def state(seed):
    return hashlib.sha256(seed).digest()


@pytest.mark.parametrize("length_bits", [1, 7, 8, 9, 255, 256, 257, 2048, 2048 + 233])
def test_challenge_never_exceeds_length(length_bits):
    for seed in [b"111", b"aaa", b"333"]:
        challenge = derive_large_challenge(state(seed), length_bits)
        assert 0 <= challenge < 2**length_bits


def test_bit_length_is_usually_exact():
    # Half of the draws keep their top bit, three quarters lose at most one bit
    length_bits = 2048
    bit_lengths = [
        derive_large_challenge(state(str(i).encode()), length_bits).bit_length()
        for i in range(64)
    ]
    assert sum(b == length_bits for b in bit_lengths) >= 16
    assert sum(b >= length_bits - 1 for b in bit_lengths) >= 32
    assert min(bit_lengths) >= length_bits - 32


def test_expansion_is_deterministic():
    digest = state(b"aaa")
    assert derive_large_challenge(digest, 3000) == derive_large_challenge(digest, 3000)
    assert expand_bytes(digest, 3000, 100) == expand_bytes(digest, 3000, 100)
    assert len(expand_bytes(digest, 3000, 100)) == 100


def test_different_lengths_share_no_blocks():
    digest = state(b"333")
    short = expand_bytes(digest, 256, 32)
    long = expand_bytes(digest, 512, 64)
    assert short not in long
    assert derive_large_challenge(digest, 512) >> 256 != derive_large_challenge(digest, 256)


@pytest.mark.parametrize("length_bits", [0, -1, 2.5, "2048", None, True])
def test_invalid_length(length_bits):
    with pytest.raises(ValueError):
        derive_large_challenge(state(b"111"), length_bits)
