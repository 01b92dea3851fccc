"""Domain models, constants and errors."""

from core.domain.models import PolicyBounds, GenerationRequest, BatchResult, DEFAULT_POLICY
from core.domain.consts import (
    BatchStatus,
    SamplerName,
    MenuCommand,
    ExitCode,
    AsciiCode,
    Messages,
)
from core.domain.errors import (
    PasswordGeneratorError,
    ReseedUnsupported,
    InvalidRange,
    MalformedInputError,
    InputClosedError,
)

__all__ = [
    "PolicyBounds",
    "GenerationRequest",
    "BatchResult",
    "DEFAULT_POLICY",
    "BatchStatus",
    "SamplerName",
    "MenuCommand",
    "ExitCode",
    "AsciiCode",
    "Messages",
    "PasswordGeneratorError",
    "ReseedUnsupported",
    "InvalidRange",
    "MalformedInputError",
    "InputClosedError",
]
