"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class BatchStatus(str, Enum):
    """Outcome of a single generate() call."""
    OK = "OK"
    LENGTH_OUT_OF_RANGE = "LENGTH_OUT_OF_RANGE"
    COUNT_OUT_OF_RANGE = "COUNT_OUT_OF_RANGE"
    RESEED_FAILED = "RESEED_FAILED"
    SAMPLING_FAILED = "SAMPLING_FAILED"


class SamplerName(str, Enum):
    """Secure sampler registry names."""
    SYSTEM = "system"


class MenuCommand(str, Enum):
    """Interactive menu commands (case-sensitive)."""
    GEN = "GEN"
    EXIT = "EXIT"


class ExitCode:
    """Process exit codes."""
    OK = 0
    INPUT_CLOSE_FAILED = 1


class AsciiCode:
    """Printable ASCII boundaries."""
    SPACE = 32
    TILDE = 126


class Messages:
    """User-visible console text."""
    BANNER = "Password generator is operational."
    CHARSET = (
        "Passwords generated using: \n"
        "a-z,A-Z,0-9, spaces and printable symbols such as: !,.|,? ...\n"
    )
    MENU_PROMPT = "Enter GEN to generate passwords or EXIT to close application: "
    LENGTH_PROMPT = "Enter length of the generated password: "
    COUNT_PROMPT = "Enter amount of passwords to generate: "
    INVALID_NUMBER = "Invalid input, enter a number."
    INVALID_COMMAND = "Invalid command."
    CLOSED = "Password generator closed."
    CLOSE_FAILED = "Error closing input."
    
    LENGTH_OUT_OF_RANGE = "ERROR: Password length must be between {min} and {max} characters."
    COUNT_OUT_OF_RANGE = "ERROR: Can only generate {min} to {max} passwords."
    RESEED_FAILED = "Error reseeding random generator. {cause}"
    SAMPLING_FAILED = (
        "Error generating new number: first code is greater than or equal to last code. "
        "{emitted} password(s) were already shown."
    )
    BATCH_HEADER = "\n{count} random passwords of length {length} :\n"
