from attr import Factory, attrib, attrs
from twisted.python import log

from . import _interfaces
from .errors import (InvalidHexValueError, InvalidPGPWordError,
                     MissingTableEntryError, WordOrderError)
from .util import hexstr_to_bytes, provides, strip_fingerprint
from .wordlist import get_default_wordlist


@attrs
class PGPWordListConverter(object):
    """
    Validated conversions between hex values and PGP words.

    Single values go through ``even_word_for_hex``, ``odd_word_for_hex``
    and ``hex_for_word``. Whole fingerprints go through ``bytes_to_words``
    and ``words_to_bytes``, which pick the even or odd word by position.
    """
    _wordlist = attrib(default=Factory(get_default_wordlist),
                       validator=provides(_interfaces.IWordlist))

    @property
    def wordlist(self):
        return self._wordlist

    def even_word_for_hex(self, hex_string):
        """
        :param str hex_string: one or two hex digits, without a leading 0x
        :return str: the even word for that byte
        :raises InvalidHexValueError: if ``hex_string`` is not a valid byte
        """
        return self._entry_for_byte(self._hex_to_byte(hex_string)).even_word

    def odd_word_for_hex(self, hex_string):
        """
        :param str hex_string: one or two hex digits, without a leading 0x
        :return str: the odd word for that byte
        :raises InvalidHexValueError: if ``hex_string`` is not a valid byte
        """
        return self._entry_for_byte(self._hex_to_byte(hex_string)).odd_word

    def hex_for_word(self, word):
        """
        Return the byte value of ``word`` as uppercase hex without a 0x
        prefix. Values below 0x10 come back as a single digit ("A", not
        "0A").

        :raises InvalidPGPWordError: if ``word`` is None or not a PGP word
        """
        if word is None:
            raise InvalidPGPWordError("Cannot convert None to a hexadecimal value")
        byte_value = self._wordlist.byte_for_word(word)
        if byte_value is None:
            raise InvalidPGPWordError("PGP word not recognised: %s" % word)
        return "%X" % byte_value

    def word_for_byte(self, byte_value, position):
        entry = self._entry_for_byte(byte_value)
        if position % 2 == 0:
            return entry.even_word
        return entry.odd_word

    def bytes_to_words(self, data):
        """Return the words that read out ``data``, one per byte."""
        return [self.word_for_byte(b, i) for i, b in enumerate(data)]

    def words_to_bytes(self, words, check_parity=True):
        """
        Turn a sequence of PGP words (any case) back into bytes.

        With ``check_parity`` every word must come from the list that
        matches its position, otherwise WordOrderError is raised.
        """
        out = bytearray()
        for position, word in enumerate(words):
            byte_value = self._wordlist.byte_for_word(word)
            if byte_value is None:
                log.msg("unknown PGP word %r at position %d" % (word, position))
                raise InvalidPGPWordError(
                    "PGP word not recognised at position %d: %s"
                    % (position, word))
            if check_parity:
                if position % 2 == 0:
                    in_order = self._wordlist.is_even_word(word)
                else:
                    in_order = self._wordlist.is_odd_word(word)
                if not in_order:
                    log.msg("PGP word %r out of order at position %d"
                            % (word, position))
                    raise WordOrderError(word, position)
            out.append(byte_value)
        return bytes(out)

    def hex_to_words(self, hex_string):
        """
        Read out a whole fingerprint given as hex. Colons and whitespace
        between digits are ignored.
        """
        if hex_string is None:
            raise InvalidHexValueError(
                "Cannot convert to PGP words - null value given instead of a"
                " hexadecimal fingerprint")
        digits = strip_fingerprint(hex_string)
        if not digits:
            raise InvalidHexValueError(
                "Cannot convert to PGP words - empty fingerprint")
        if len(digits) % 2:
            raise InvalidHexValueError(
                "Cannot convert to PGP words - odd number of hex digits in %r"
                % hex_string)
        try:
            data = hexstr_to_bytes(digits)
        except ValueError as e:
            raise InvalidHexValueError(
                "Cannot convert to PGP words - %r is not valid hexadecimal"
                % hex_string) from e
        return self.bytes_to_words(data)

    def _entry_for_byte(self, byte_value):
        entry = self._wordlist.words_for_byte(byte_value)
        if entry is None:
            raise MissingTableEntryError(
                "No PGP words for byte value %r" % (byte_value,))
        return entry

    def _hex_to_byte(self, hex_string):
        if hex_string is None:
            raise InvalidHexValueError(
                "Cannot convert to PGP word - null value given instead of a"
                " hexadecimal value")
        trimmed = hex_string.strip()
        if not trimmed:
            raise InvalidHexValueError(
                "Cannot convert to PGP word - empty string given instead of a"
                " hexadecimal value")
        if len(trimmed) > 2:
            raise InvalidHexValueError(
                "Cannot convert to PGP word - hexadecimal value is too large")
        try:
            # two digits at most, so this is always exactly one byte
            return hexstr_to_bytes(trimmed.zfill(2))[0]
        except ValueError as e:
            raise InvalidHexValueError(
                "Cannot convert to PGP word - %r is not valid hexadecimal"
                % trimmed) from e
