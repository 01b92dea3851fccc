"""Password generation services."""

from generator.services.batch_generator import PasswordBatchGenerator

__all__ = [
    "PasswordBatchGenerator",
]
