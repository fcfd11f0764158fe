from constants import BIT_LIMIT, MIN_253, MODULUS, SECURITY_PARAMETER
from primes import is_probable_prime


def test_bound_constant_has_bit_limit_length():
    assert MIN_253.bit_length() == BIT_LIMIT


def test_modulus_is_bn254_scalar_field_order():
    assert MODULUS == 21888242871839275222246405745257275088548364400416034343698204186575808495617
    assert MODULUS.bit_length() == 254
    assert is_probable_prime(MODULUS, SECURITY_PARAMETER)


def test_bound_constant_leaves_headroom_below_modulus():
    assert MIN_253 < MODULUS
