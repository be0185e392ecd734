import random

import pytest

from ringipc.message import LETTERS, MAX_SIZE, Message, crc16, random_message


class _FixedRng:
    def __init__(self, length, letter="a"):
        self.length = length
        self.letter = letter

    def randrange(self, stop):
        assert stop == MAX_SIZE + 2
        return self.length

    def choice(self, seq):
        assert self.letter in seq
        return self.letter


def test_crc16_of_empty_is_initial_value():
    assert crc16(b"") == 0xFFFF


def test_crc16_standard_check_value():
    assert crc16(b"123456789") == 0x29B1


def test_crc16_accepts_bytearray():
    assert crc16(bytearray(b"hello")) == crc16(b"hello")


def test_crc16_fits_in_sixteen_bits():
    rng = random.Random(7)
    for _ in range(50):
        data = bytes(rng.randrange(256) for _ in range(rng.randrange(40)))
        assert 0 <= crc16(data) <= 0xFFFF


def test_message_checksum_matches_payload():
    msg = Message(b"abcXYZ")
    assert msg.checksum == crc16(b"abcXYZ")
    assert msg.size == 6
    assert msg.type == 0


def test_message_rejects_oversized_payload():
    with pytest.raises(ValueError):
        Message(b"a" * (MAX_SIZE + 1))


def test_message_accepts_maximum_payload():
    assert Message(b"z" * MAX_SIZE).size == MAX_SIZE


def test_message_rejects_bad_type():
    with pytest.raises(ValueError):
        Message(b"a", type=256)


def test_describe_format():
    msg = Message(b"abc")
    text = msg.describe()
    assert text == f"Message type: 0, hash: {crc16(b'abc'):04x}, size: 3, data: abc"


def test_describe_empty_message():
    assert Message().describe() == "Message type: 0, hash: ffff, size: 0, data: "


def test_random_message_is_letters_with_valid_checksum():
    rng = random.Random(1234)
    for _ in range(30):
        msg = random_message(rng)
        assert msg.size <= MAX_SIZE
        assert all(chr(b) in LETTERS for b in msg.data)
        assert msg.checksum == crc16(msg.data)


def test_random_message_is_reproducible_with_seed():
    first = [random_message(random.Random(99)) for _ in range(3)]
    second = [random_message(random.Random(99)) for _ in range(3)]
    assert first == second


def test_random_message_length_256_wraps_to_empty():
    msg = random_message(_FixedRng(256))
    assert msg.data == b""
    assert msg.checksum == 0xFFFF


def test_random_message_uses_drawn_length_and_letters():
    msg = random_message(_FixedRng(3, "Q"))
    assert msg.data == b"QQQ"