import hashlib
import struct


class HashAccumulator:
    """
    Running SHA-256 state over an ordered list of framed messages.

    Every message is prefixed with its length before being hashed, so the
    boundaries between messages are part of the state: absorbing b"ab" then
    b"c" never collides with absorbing b"a" then b"bc".
    """

    def __init__(self):
        """
        Initialize an empty accumulator.
        """
        self.hasher = hashlib.sha256()
        self.messages = []

    def absorb(self, data):
        """
        Absorb one message into the running state.

        Args:
            data: The message bytes (may be empty)
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Can only absorb bytes, got {type(data).__name__}")

        data = bytes(data)
        # Frame: len(data) as 8-byte big-endian || data
        self.hasher.update(struct.pack(">Q", len(data)))
        self.hasher.update(data)
        self.messages.append(data)

    def digest(self):
        """
        Digest everything absorbed so far.

        The digest is computed on a copy of the hash object, so the accumulator
        keeps absorbing afterwards as if digest() had never been called.

        Returns:
            32 bytes of SHA-256 output
        """
        return self.hasher.copy().digest()

    def clone(self):
        """
        Create an independent accumulator with the same state and message log.
        """
        new_accumulator = HashAccumulator()
        new_accumulator.hasher = self.hasher.copy()
        new_accumulator.messages = list(self.messages)
        return new_accumulator

    def __len__(self):
        return len(self.messages)
