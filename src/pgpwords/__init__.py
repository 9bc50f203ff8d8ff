from .wordlist import PGPWordList, WordEntry, get_default_wordlist
from .converter import PGPWordListConverter
from .errors import (PGPWordsError, InvalidHexValueError, InvalidPGPWordError,
                     WordOrderError, MissingTableEntryError)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "PGPWordList", "WordEntry", "get_default_wordlist",
    "PGPWordListConverter",

    # errors
    "PGPWordsError", "InvalidHexValueError", "InvalidPGPWordError",
    "WordOrderError", "MissingTableEntryError",
]
