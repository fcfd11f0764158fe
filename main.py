#!/usr/bin/env python3
"""
Fiat-Shamir Transcript Demo: prime and large challenges
"""

import argparse
import logging

from constants import MODULUS, MIN_253
from primes import is_probable_prime
from transcript import Mode, init_transcript


def demo_prime_challenges(transcript, rounds):
    print(f"=== Prime Challenges (mode={transcript.mode.value}) ===")

    for i in range(rounds):
        challenge = transcript.get_prime_challenge_using_transcript()
        print(f"challenge[{i}] = {challenge}")
        print(f"  bits={challenge.bit_length()} prime={is_probable_prime(challenge)} "
              f"<modulus={challenge < MODULUS} <min253={challenge < MIN_253}")
    print()


def demo_large_challenge(transcript, length_bits):
    print(f"=== Large Challenge ({length_bits} bits) ===")

    challenge = transcript.get_large_challenge_using_transcript(length_bits)
    print(f"bits={challenge.bit_length()}")
    print(f"hex={challenge:x}\n")


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Derive Fiat-Shamir challenges from a message transcript")
    parser.add_argument("messages", nargs="*", default=["111", "aaa", "333"],
                        help="Initial transcript messages")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.DEFAULT.value,
                        help="Bound applied to prime challenges")
    parser.add_argument("--rounds", type=int, default=2,
                        help="Number of prime challenges to derive")
    parser.add_argument("--large-bits", type=positive_int, default=None,
                        help="Also derive a large challenge of this many bits")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    transcript = init_transcript(args.messages, Mode(args.mode))
    demo_prime_challenges(transcript, args.rounds)
    if args.large_bits is not None:
        demo_large_challenge(transcript, args.large_bits)

    transcript.print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
