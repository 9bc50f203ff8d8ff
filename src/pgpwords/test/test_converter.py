import pytest
from hypothesis import given
import hypothesis.strategies as st
from zope.interface import implementer

from .._interfaces import IWordlist
from ..converter import PGPWordListConverter
from ..errors import (InvalidHexValueError, InvalidPGPWordError,
                      MissingTableEntryError, PGPWordsError, WordOrderError)
from ..wordlist import PGPWordList, get_default_wordlist


@pytest.fixture
def converter():
    return PGPWordListConverter()


def test_default_wordlist():
    assert PGPWordListConverter().wordlist is get_default_wordlist()
    wl = PGPWordList()
    assert PGPWordListConverter(wl).wordlist is wl


def test_wordlist_must_provide_interface():
    with pytest.raises(TypeError):
        PGPWordListConverter(wordlist={"00": ["aardvark", "adroitness"]})


def test_even_word(converter):
    assert converter.even_word_for_hex("0A") == "allow"
    assert converter.even_word_for_hex("0a") == "allow"
    assert converter.even_word_for_hex("A") == "allow"
    assert converter.even_word_for_hex(" 0A\t") == "allow"
    assert converter.even_word_for_hex("00") == "aardvark"
    assert converter.even_word_for_hex("FF") == "Zulu"


def test_hex_trims_unicode_whitespace(converter):
    # str.strip() rules: NBSP is trimmed, NUL is not
    assert converter.even_word_for_hex("\u00a00A\u00a0") == "allow"
    with pytest.raises(InvalidHexValueError):
        converter.even_word_for_hex("\x00A")


def test_odd_word(converter):
    assert converter.odd_word_for_hex("21") == "Camelot"
    assert converter.odd_word_for_hex("ff") == "Yucatan"
    assert converter.odd_word_for_hex("82") == "Istanbul"


@pytest.mark.parametrize("method", ["even_word_for_hex", "odd_word_for_hex"])
@pytest.mark.parametrize("value, reason", [
    (None, "null"),
    ("", "empty"),
    ("  ", "empty"),
    ("100", "too large"),
    ("0x1", "too large"),
    ("GG", "not valid hexadecimal"),
    ("+1", "not valid hexadecimal"),
    ("-1", "not valid hexadecimal"),
    ("_1", "not valid hexadecimal"),
    ("é1", "not valid hexadecimal"),
])
def test_invalid_hex(converter, method, value, reason):
    with pytest.raises(InvalidHexValueError) as e:
        getattr(converter, method)(value)
    assert reason in str(e.value)


def test_invalid_hex_chains_parse_error(converter):
    with pytest.raises(InvalidHexValueError) as e:
        converter.even_word_for_hex("GG")
    assert isinstance(e.value.__cause__, ValueError)


@implementer(IWordlist)
class EmptyWordlist(object):
    def words_for_byte(self, byte_value):
        return None

    def byte_for_word(self, word):
        return None


def test_missing_table_entry():
    c = PGPWordListConverter(EmptyWordlist())
    with pytest.raises(MissingTableEntryError):
        c.even_word_for_hex("00")
    with pytest.raises(MissingTableEntryError):
        c.odd_word_for_hex("FF")


def test_hex_for_word(converter):
    assert converter.hex_for_word("showgirl") == "BC"
    assert converter.hex_for_word("SHOWGIRL") == "BC"
    assert converter.hex_for_word("pyramid") == "BC"
    assert converter.hex_for_word("Zulu") == "FF"


def test_hex_for_word_not_padded(converter):
    assert converter.hex_for_word("allow") == "A"
    assert converter.hex_for_word("aardvark") == "0"


def test_hex_for_word_invalid(converter):
    with pytest.raises(InvalidPGPWordError) as e:
        converter.hex_for_word("foobar")
    assert "foobar" in str(e.value)
    with pytest.raises(InvalidPGPWordError):
        converter.hex_for_word(None)
    with pytest.raises(InvalidPGPWordError):
        converter.hex_for_word("")


@given(st.integers(min_value=0, max_value=255))
def test_hex_round_trip(byte_value):
    converter = PGPWordListConverter()
    hex_string = "%02X" % byte_value
    even = converter.even_word_for_hex(hex_string)
    odd = converter.odd_word_for_hex(hex_string)
    assert int(converter.hex_for_word(even), 16) == byte_value
    assert int(converter.hex_for_word(odd), 16) == byte_value


def test_word_for_byte(converter):
    assert converter.word_for_byte(0x0A, 0) == "allow"
    assert converter.word_for_byte(0x0A, 1) == "Apollo"
    assert converter.word_for_byte(0x0A, 6) == "allow"
    with pytest.raises(MissingTableEntryError):
        converter.word_for_byte(256, 0)


def test_bytes_to_words(converter):
    assert converter.bytes_to_words(b"\xe5\x82\x94") == [
        "topmost", "Istanbul", "Pluto"]
    assert converter.bytes_to_words(b"\x00\x00") == ["aardvark", "adroitness"]
    assert converter.bytes_to_words(b"") == []


def test_words_to_bytes(converter):
    words = ["topmost", "Istanbul", "Pluto"]
    assert converter.words_to_bytes(words) == b"\xe5\x82\x94"
    assert converter.words_to_bytes(["TOPMOST", "istanbul"]) == b"\xe5\x82"
    assert converter.words_to_bytes([]) == b""


def test_words_to_bytes_unknown(converter):
    with pytest.raises(InvalidPGPWordError) as e:
        converter.words_to_bytes(["topmost", "foobar"])
    assert "position 1" in str(e.value)
    assert not isinstance(e.value, WordOrderError)


def test_words_to_bytes_order(converter):
    # "Istanbul" dropped: "Pluto" is an even word at an odd position
    with pytest.raises(WordOrderError) as e:
        converter.words_to_bytes(["topmost", "Pluto"])
    assert e.value.position == 1
    assert e.value.word == "Pluto"
    assert isinstance(e.value, InvalidPGPWordError)
    assert isinstance(e.value, PGPWordsError)
    assert e.value.args == ("Pluto", 1)
    assert "Pluto" in repr(e.value)


def test_words_to_bytes_unchecked(converter):
    assert converter.words_to_bytes(["topmost", "Pluto"],
                                    check_parity=False) == b"\xe5\x94"


@given(st.binary(max_size=32))
def test_words_round_trip(data):
    converter = PGPWordListConverter()
    assert converter.words_to_bytes(converter.bytes_to_words(data)) == data


def test_hex_to_words(converter):
    expected = ["topmost", "Istanbul", "Pluto", "vagabond"]
    assert converter.hex_to_words("E58294F2") == expected
    assert converter.hex_to_words("e5 82 94 f2") == expected
    assert converter.hex_to_words("E5:82:94:F2") == expected


@pytest.mark.parametrize("value", [None, "", " : ", "E58", "E5GG", "0xE5"])
def test_hex_to_words_invalid(converter, value):
    with pytest.raises(InvalidHexValueError):
        converter.hex_to_words(value)
