import pytest

from accumulator import HashAccumulator


def absorb_all(messages):
    accumulator = HashAccumulator()
    for message in messages:
        accumulator.absorb(message)
    return accumulator


def test_framing_separates_message_boundaries():
    assert absorb_all([b"ab", b"c"]).digest() != absorb_all([b"a", b"bc"]).digest()
    assert absorb_all([b"abc"]).digest() != absorb_all([b"ab", b"c"]).digest()


def test_empty_messages_are_not_ignored():
    assert absorb_all([]).digest() != absorb_all([b""]).digest()
    assert absorb_all([b"a"]).digest() != absorb_all([b"a", b""]).digest()


def test_digest_is_repeatable_and_non_destructive():
    accumulator = absorb_all([b"111", b"aaa"])
    first = accumulator.digest()
    assert accumulator.digest() == first
    assert len(first) == 32

    accumulator.absorb(b"333")
    assert accumulator.digest() != first
    assert accumulator.digest() == absorb_all([b"111", b"aaa", b"333"]).digest()


def test_message_log_keeps_order():
    accumulator = absorb_all([b"x", b"", bytearray(b"y")])
    assert accumulator.messages == [b"x", b"", b"y"]
    assert len(accumulator) == 3


def test_clone_is_independent():
    accumulator = absorb_all([b"111"])
    copy = accumulator.clone()
    assert copy.digest() == accumulator.digest()

    copy.absorb(b"aaa")
    assert copy.digest() != accumulator.digest()
    assert accumulator.messages == [b"111"]


def test_absorb_rejects_str():
    with pytest.raises(TypeError):
        HashAccumulator().absorb("111")
