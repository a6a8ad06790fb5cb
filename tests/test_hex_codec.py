import logging

import pytest

from ChromaKit import RGB, DecodeHex, EncodeHex, InvalidArgument


def testEncodePrimaries():
    assert EncodeHex(RGB(255, 0, 0)) == "#FF0000"
    assert EncodeHex(RGB(0, 255, 0)) == "#00FF00"
    assert EncodeHex(RGB(0, 0, 0)) == "#000000"


def testEncodeWritesLowNibbleFirst():
    assert EncodeHex(RGB(1, 2, 3)) == "#102030"
    assert EncodeHex(RGB(0x12, 0x34, 0x56)) == "#214365"
    assert EncodeHex(RGB(0xAB, 0x0F, 0xF0)) == "#BAF00F"


def testEncodeAcceptsChannelsAndSequences():
    assert EncodeHex(255, 0, 0) == EncodeHex(RGB(255, 0, 0))
    assert EncodeHex((0, 255, 0)) == "#00FF00"
    with pytest.raises(InvalidArgument):
        EncodeHex(256, 0, 0)


def testDecodeVectors():
    assert DecodeHex("#00FF00") == RGB(0, 255, 0)
    assert DecodeHex("#123456") == RGB(0x12, 0x34, 0x56)
    assert DecodeHex("#ff00aa") == DecodeHex("#FF00AA") == RGB(255, 0, 170)
    assert DecodeHex(hex_color="#0000FF") == RGB(0, 0, 255)


def testDecodeEveryByte():
    for n in range(256):
        assert DecodeHex("#%02X0000" % n).r == n
        assert DecodeHex("#00%02x00" % n).g == n


@pytest.mark.parametrize("hex", ["123456", "#12345", "#12345G", "#1234567", "", "##12345", "#12#456", "#ZZZZZZ"])
def testDecodeRejectsMalformed(hex):
    with pytest.raises(InvalidArgument):
        DecodeHex(hex)


def testDecodeRejectsNonString():
    with pytest.raises(InvalidArgument):
        DecodeHex(0x123456)


def testRoundTripSymmetricNibbles():
    for n in range(16):
        channel = n * 17
        color = RGB(channel, 255 - channel, channel)
        assert DecodeHex(EncodeHex(color)) == color


def testRoundTripSwapsNibbles():
    color = RGB(0x12, 0x34, 0x56)
    assert DecodeHex(EncodeHex(color)) == RGB(0x21, 0x43, 0x65)
    assert DecodeHex(EncodeHex(DecodeHex(EncodeHex(color)))) == color


def testMissingTableEntryIsInternalError(monkeypatch, caplog):
    from ChromaKit import InternalError
    from ChromaKit.ColorMath import HexCodec

    monkeypatch.delitem(HexCodec._DIGIT_VALUES, "A")
    caplog.set_level(logging.DEBUG, logger="ChromaKit")
    with pytest.raises(InternalError):
        DecodeHex("#A00000")
    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    assert caplog.records[0].name == "ChromaKit.ColorMath.HexCodec"


@pytest.mark.parametrize("hex_color", [0x123456, "#12345", "123456", "#12345G"])
def testRejectedHexIsLoggedAtDebug(hex_color, caplog):
    caplog.set_level(logging.DEBUG, logger="ChromaKit")
    with pytest.raises(InvalidArgument):
        DecodeHex(hex_color)
    assert [r.levelno for r in caplog.records] == [logging.DEBUG]
    assert caplog.records[0].name == "ChromaKit.ColorMath.HexCodec"


def testValidHexDoesNotLog(caplog):
    caplog.set_level(logging.DEBUG, logger="ChromaKit")
    assert DecodeHex("#00FF00") == RGB(0, 255, 0)
    assert caplog.records == []
