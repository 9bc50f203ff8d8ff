from zope.interface import Interface

# These interfaces are private: we use them as markers to catch a converter
# being handed something that is not a word table.


class IWordlist(Interface):
    def words_for_byte(byte_value):
        """Return the WordEntry for BYTE_VALUE, or None if there is none."""

    def byte_for_word(word):
        """Return the byte value of WORD (any case), or None if WORD is not
        in the list."""

    def is_even_word(word):
        """True if WORD (any case) belongs to the even list."""

    def is_odd_word(word):
        """True if WORD (any case) belongs to the odd list."""

    def get_completions(prefix, num_words, separator):
        """Return the set of phrases that could complete PREFIX."""
