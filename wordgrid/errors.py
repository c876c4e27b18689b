"""Exception hierarchy for wordgrid.

Loader errors describe bad input and are reported to the user.
InvariantViolation means the search core itself is inconsistent and is
never caught inside the package.
"""


class WordGridError(Exception):
    """Base exception for wordgrid failures."""


class DictionaryLoadError(WordGridError):
    """Raised when the word list cannot be read."""


class BoardError(WordGridError, ValueError):
    """Raised when a board is empty, ragged or has multi-character cells."""


class InvariantViolation(WordGridError, AssertionError):
    """Raised when a structure known correct by construction is not."""
