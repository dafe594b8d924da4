"""
Error taxonomy for fretscope.

Theory errors mean a caller passed a value outside one of the closed
domains (note names, scale styles, voicings, degrees, string indexes).
MalformedTab is the only error meant to reach an end user.
"""


class FretscopeError(Exception):
    """Base class for all fretscope errors."""


class TheoryError(FretscopeError, ValueError):
    """A music-theory function was given an out-of-domain value."""


class InvalidRoot(TheoryError):
    pass


class InvalidStyle(TheoryError):
    pass


class InvalidVoicing(TheoryError):
    pass


class InvalidDegree(TheoryError):
    pass


class InvalidString(TheoryError):
    pass


MALFORMED_TAB_MESSAGE = (
    "Could not find valid tab content. Make sure the text includes lines "
    "starting with E|, B|, G|, D|, A| followed by tab characters."
)


class MalformedTab(FretscopeError, ValueError):
    """Pasted text did not contain a usable tab block."""

    def __init__(self, message: str = MALFORMED_TAB_MESSAGE, reason: str = ""):
        super().__init__(message)
        self.message = message
        self.reason = reason
