import pytest

from qrforge.compact import BitBuffer


def test_push8_lined():
    res = BitBuffer(64)
    res.push_u8(0)
    res.push_u8(1)
    res.push_u8(2)
    assert len(res) == 24
    assert res.data[:4] == bytes([0, 1, 2, 0])


def test_push_bits_half():
    res = BitBuffer(64)
    res.push_bits(0b1111, 4)
    assert len(res) == 4
    res.push_bits(0, 8)
    assert len(res) == 12
    res.push_bits(0b1111, 4)
    assert len(res) == 16
    assert res.data[:4] == bytes([0b1111_0000, 0b0000_1111, 0, 0])


def test_push_bits_random():
    res = BitBuffer(64)

    res.push_bits(0b1111, 2)
    assert len(res) == 2
    assert res.data[:4] == bytes([0b1100_0000, 0, 0, 0])

    res.push_bits(0, 1)
    assert len(res) == 3
    assert res.data[:4] == bytes([0b1100_0000, 0, 0, 0])

    res.push_bits(5, 3)
    assert len(res) == 6
    assert res.data[:4] == bytes([0b1101_0100, 0, 0, 0])

    res.push_bits(0b1101, 2)
    assert len(res) == 8
    assert res.data[:4] == bytes([0b1101_0101, 0, 0, 0])


def test_push_bits_push8():
    res = BitBuffer(64)
    res.push_bits(0b1111, 3)
    assert res.data[:4] == bytes([0b1110_0000, 0, 0, 0])

    res.push_u8(0b1001_1110)
    assert res.data[:4] == bytes([0b1111_0011, 0b1100_0000, 0, 0])


def test_push_bits_push8_2():
    res = BitBuffer(64)
    res.push_bits(0b1111, 3)
    assert res.data[:4] == bytes([0b1110_0000, 0, 0, 0])

    res.push_u8(0b1001_1110)
    assert res.data[:4] == bytes([0b1111_0011, 0b1100_0000, 0, 0])

    res.push_u8(0b1001_1110)
    assert res.data[:4] == bytes([0b1111_0011, 0b1101_0011, 0b1100_0000, 0])


def test_push8_push_bits():
    res = BitBuffer(64)
    res.push_u8(0b1001_1110)
    assert res.data[:4] == bytes([0b1001_1110, 0, 0, 0])

    res.push_bits(0b1_1011_1001_1110, 13)
    assert res.data[:4] == bytes([0b1001_1110, 0b1101_1100, 0b1111_0000, 0])


def test_push_slice():
    res = BitBuffer(64)
    res.push_bytes([0b1001_1110, 0b1001_1110, 0b1001_1110])
    assert res.data[:4] == bytes([0b1001_1110, 0b1001_1110, 0b1001_1110, 0])


def test_push_slice_off():
    res = BitBuffer(64)
    res.push_bits(0b1111, 3)
    assert res.data[:4] == bytes([0b1110_0000, 0, 0, 0])

    res.push_bytes([0b0000_0000, 0b1111_1111, 0b0000_0000])
    assert res.data[:4] == bytes([0b1110_0000, 0b0001_1111, 0b1110_0000, 0b0000_0000])


def test_push_bits_off():
    res = BitBuffer(64)

    res.push_bits(0, 17)
    assert len(res) == 17
    assert res.data[:8] == bytes(8)

    res.push_bits(0b1_1111_1111_1111_1111, 17)
    expected = [0, 0, 0b0111_1111, 0b1111_1111, 0b1100_0000, 0, 0, 0]
    assert res.data[:8] == bytes(expected)

    res.push_bits(0, 17)
    assert res.data[:8] == bytes(expected)

    res.push_bits(0b1, 2)
    expected[6] |= 0b0000_1000
    assert res.data[:8] == bytes(expected)

    res.push_u8(0b1111_1111)
    expected[6] |= 0b0000_1111
    expected[7] |= 0b1111_1000
    assert res.data[:8] == bytes(expected)


def test_push_random():
    res = BitBuffer(64)

    res.push_bits(1, 1)
    assert res.data[:8] == bytes([0b1000_0000, 0, 0, 0, 0, 0, 0, 0])

    res.push_u8(0b1010_1010)
    assert res.data[:8] == bytes([0b1101_0101, 0, 0, 0, 0, 0, 0, 0])

    res.push_bits(1, 1)
    assert res.data[:8] == bytes([0b1101_0101, 0b0100_0000, 0, 0, 0, 0, 0, 0])

    res.push_bits(1, 3)
    assert res.data[:8] == bytes([0b1101_0101, 0b0100_1000, 0, 0, 0, 0, 0, 0])


def test_str_lists_pushed_bits_only():
    res = BitBuffer(16)
    res.push_bits(0b1011, 4)
    assert str(res) == "1011"


def test_from_bytes_uses_given_length():
    res = BitBuffer.from_bytes(bytes([0b1010_0000]), 3)
    assert len(res) == 3
    assert str(res) == "101"


def test_from_bytes_pads_short_data():
    res = BitBuffer.from_bytes(bytes([0xFF]), 20)
    assert len(res.data) >= 3
    assert str(res) == "1" * 8 + "0" * 12


def test_iteration_matches_str():
    res = BitBuffer(16)
    res.push_u8(0b1100_1010)
    assert "".join("1" if bit else "0" for bit in res) == str(res)


def test_fill_alternates_pad_bytes():
    res = BitBuffer(32)
    res.push_u8(0x40)
    res.fill()
    assert len(res) == 32
    assert res.data[:4] == bytes([0x40, 236, 17, 236])


def test_fill_when_full_adds_nothing():
    res = BitBuffer(16)
    res.push_bytes([1, 2])
    res.fill()
    assert len(res) == 16


def test_fill_requires_byte_alignment():
    res = BitBuffer(32)
    res.push_bits(1, 3)
    with pytest.raises(ValueError):
        res.fill()


def test_storage_grows_past_capacity():
    res = BitBuffer(8)
    res.push_bytes([1, 2, 3])
    assert len(res) == 24
    assert res.data[:3] == bytes([1, 2, 3])


def test_push_u8_rejects_out_of_range():
    res = BitBuffer(8)
    with pytest.raises(ValueError):
        res.push_u8(256)


def test_push_bits_rejects_negative_length():
    res = BitBuffer(8)
    with pytest.raises(ValueError):
        res.push_bits(1, -1)