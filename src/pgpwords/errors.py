class PGPWordsError(Exception):
    """Parent class for all pgpwords-related errors"""


class InvalidHexValueError(PGPWordsError):
    """
    The value given is not a hexadecimal byte. PGP words are looked up by
    one or two hex digits (00 to FF), without a leading 0x.
    """


class InvalidPGPWordError(PGPWordsError):
    """
    The word given is not in the PGP Word List. Check the spelling, or ask
    your correspondent to read it again.
    """


class WordOrderError(InvalidPGPWordError):
    """
    A word was found in the wrong position. PGP words alternate between the
    even and odd lists, so this usually means a word was dropped, repeated,
    or two words were swapped.
    """

    def __init__(self, word, position):
        super().__init__(word, position)
        self.word = word
        self.position = position

    def __str__(self):
        return "%r cannot appear at position %d" % (self.word, self.position)


class MissingTableEntryError(PGPWordsError):
    """The word table has no entry for this byte value."""
