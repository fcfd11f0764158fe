"""
Fixed parameters shared by every transcript in the process.

The modulus is the order of the BN254 scalar field, taken from py_ecc so that
challenges always fit into a field element of the curve used by the provers.
"""

from py_ecc.optimized_bn128 import curve_order

# Scalar-field order of BN254 (254 bits)
MODULUS = curve_order

# Primes drawn in Mode.MAX252 stay below MIN_253, i.e. fit in 252 bits
BIT_LIMIT = 253
MIN_253 = 1 << (BIT_LIMIT - 1)

# Miller-Rabin rounds for every primality test (error <= 4^-32)
SECURITY_PARAMETER = 32

# Upper limit on candidates tried for a single prime challenge
MAX_PRIME_ATTEMPTS = 100_000
