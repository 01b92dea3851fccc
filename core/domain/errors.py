"""Exception hierarchy for the password generator."""


class PasswordGeneratorError(Exception):
    """Base class for all password generator errors."""


class ReseedUnsupported(PasswordGeneratorError):
    """The platform's secure random source cannot be re-seeded."""


class InvalidRange(PasswordGeneratorError, ValueError):
    """Sampling range where lo >= hi."""
    
    def __init__(self, lo: int, hi: int) -> None:
        super().__init__(f"Invalid sampling range [{lo}, {hi}]: lo must be < hi")
        self.lo = lo
        self.hi = hi


class MalformedInputError(PasswordGeneratorError, ValueError):
    """An interactive token that should have been an integer was not."""
    
    def __init__(self, token: str) -> None:
        super().__init__(f"Expected an integer, got {token!r}")
        self.token = token


class InputClosedError(PasswordGeneratorError, EOFError):
    """The interactive input stream has no more tokens."""
