import pytest

from glyphpad.fontreader import FontReader


def test_reads_unsigned_big_endian():
    reader = FontReader(b"\x12\x34\x56\x78")
    assert reader.read_uint16() == 0x1234
    assert reader.read_uint16() == 0x5678


def test_reads_signed_values():
    assert FontReader(b"\xff\xfe").read_int16() == -2
    assert FontReader(b"\xff\xff\xff\xff").read_int32() == -1
    assert FontReader(b"\xff\xff\xff\xff").read_uint32() == 0xFFFFFFFF


def test_read_byte_and_string():
    reader = FontReader(b"\x07head")
    assert reader.read_byte() == 7
    assert reader.read_string(4) == "head"


def test_go_to_and_location():
    data = b"\x00\x01\x02\x03\x04"
    reader = FontReader(data)
    reader.go_to(2)
    assert reader.read_byte() == data[2]
    assert reader.location == 3


def test_skip_moves_forward():
    reader = FontReader(b"\x00\x00\x00\x09")
    reader.skip(3)
    assert reader.read_byte() == 9


def test_reading_past_end_raises():
    reader = FontReader(b"\x01")
    with pytest.raises(EOFError, match="Unexpected end of file"):
        reader.read_uint16()


def test_negative_offset_is_rejected():
    with pytest.raises(ValueError):
        FontReader(b"\x00").go_to(-1)


def test_from_path(tmp_path):
    path = tmp_path / "font.bin"
    path.write_bytes(b"\xab\xcd")
    assert FontReader.from_path(path).read_uint16() == 0xABCD