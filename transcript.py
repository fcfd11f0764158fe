import logging
import sys
from enum import Enum

import gmpy2

from accumulator import HashAccumulator
from constants import MODULUS, MIN_253
from expand import derive_large_challenge
from primes import derive_bounded_prime

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Selects the bound applied to prime challenges."""

    DEFAULT = "default"
    # Primes additionally capped below MIN_253 (at most 252 bits)
    MAX252 = "max252"


class Transcript:
    """
    Handles protocol transcript and deterministic challenge generation for Fiat-Shamir transform.

    The transcript absorbs every protocol message in order and derives challenges
    from the accumulated state. Each challenge is appended back into the transcript
    as its decimal string (see decimal_string), so every later challenge is bound
    to all earlier ones.
    Prover and verifier replaying the same messages obtain the same challenges.

    A transcript is owned by a single protocol run and is not safe for concurrent
    mutation.
    """

    def __init__(self, mode=Mode.DEFAULT):
        """
        Initialize an empty transcript.

        Args:
            mode: Mode selecting the bound for prime challenges
        """
        if not isinstance(mode, Mode):
            raise ValueError(f"Unsupported transcript mode: {mode!r}")
        self.mode = mode
        self.accumulator = HashAccumulator()

    @property
    def bound(self):
        """Exclusive upper bound for prime challenges in the current mode."""
        if self.mode is Mode.MAX252:
            return min(MODULUS, MIN_253)
        return MODULUS

    def append(self, message):
        """
        Append a message to the transcript to update its state.

        Args:
            message: The message string
        """
        if not isinstance(message, str):
            raise TypeError(f"Transcript messages must be str, got {type(message).__name__}")
        self.accumulator.absorb(message.encode('utf-8'))

    def append_slice(self, messages):
        """
        Append messages in order, exactly as repeated calls to append() would.

        Args:
            messages: Iterable of message strings
        """
        for message in messages:
            self.append(message)

    def get_prime_challenge_using_transcript(self):
        """
        Generate a prime challenge from the current transcript state.

        After the prime is found its decimal string is appended to the
        transcript, so calling this twice yields two different primes and the
        second one equals what a fresh transcript produces after an explicit
        append(decimal_string(first)).

        Returns:
            int: A probable prime below self.bound
        """
        challenge = derive_bounded_prime(self.accumulator.digest(), self.bound)
        # Bind the next challenge to this one
        self.append(decimal_string(challenge))
        return challenge

    def get_large_challenge_using_transcript(self, length_bits):
        """
        Generate a large challenge of approximately length_bits bits.

        The challenge's decimal string is appended back into the transcript,
        as for prime challenges.

        Args:
            length_bits: Positive number of bits

        Returns:
            int: A non-negative integer below 2**length_bits
        """
        challenge = derive_large_challenge(self.accumulator.digest(), length_bits)
        self.append(decimal_string(challenge))
        return challenge

    def clone(self):
        """
        Fork the transcript: the copy has the same mode and state and evolves independently.
        """
        new_transcript = Transcript(self.mode)
        new_transcript.accumulator = self.accumulator.clone()
        return new_transcript

    def print(self, file=None):
        """
        Print the absorbed messages for debugging. Does not touch the hash state.

        Args:
            file: Output stream (default: sys.stdout)
        """
        out = file if file is not None else sys.stdout
        print(f"Transcript(mode={self.mode.value}, messages={len(self)})", file=out)
        for i, message in enumerate(self.accumulator.messages):
            print(f"  [{i}] {_render(message)}", file=out)
        print(f"  state: {self.accumulator.digest().hex()}", file=out)

    def __len__(self):
        return len(self.accumulator)


def decimal_string(value):
    """
    Canonical decimal representation of a challenge, as appended to the transcript.

    Unlike str(), this is not subject to the interpreter's digit limit for
    int-to-str conversion, which large challenges exceed.
    """
    return gmpy2.mpz(value).digits(10)


def _render(message):
    try:
        text = message.decode('utf-8')
    except UnicodeDecodeError:
        return f"0x{message.hex()}"
    if len(text) > 80:
        return f"{text[:77]}... ({len(text)} chars)"
    return repr(text)


def init_transcript(messages, mode=Mode.DEFAULT):
    """
    Create a transcript of the given mode and append messages to it.

    Args:
        messages: Iterable of initial message strings
        mode: Mode selecting the bound for prime challenges

    Returns:
        Transcript: The initialized transcript
    """
    transcript = Transcript(mode)
    transcript.append_slice(messages)
    logger.debug("Transcript initialized with %d messages (mode=%s)", len(transcript), mode.value)
    return transcript
