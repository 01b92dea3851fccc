"""Domain models for policy, requests and batch results."""

import sys
from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from core.domain.consts import AsciiCode, BatchStatus


class PolicyBounds(BaseModel):
    """Immutable generation policy.
    
    Violating an ordering constraint is a configuration error and raises
    pydantic.ValidationError at construction.
    """
    model_config = ConfigDict(frozen=True)
    
    min_length: int = Field(8, ge=1, description="Shortest allowed password")
    max_length: int = Field(64, ge=1, description="Longest allowed password")
    min_count: int = Field(1, ge=1, description="Fewest passwords per batch")
    max_count: int = Field(20, ge=1, description="Most passwords per batch")
    first_code: int = Field(AsciiCode.SPACE, ge=0, le=sys.maxunicode, description="First character code (inclusive)")
    last_code: int = Field(AsciiCode.TILDE, ge=0, le=sys.maxunicode, description="Last character code (inclusive)")
    
    @model_validator(mode='after')
    def validate_bounds(self) -> 'PolicyBounds':
        """Validate that every lower bound sits below its upper bound."""
        if self.first_code >= self.last_code:
            raise ValueError(
                f"first_code ({self.first_code}) must be < last_code ({self.last_code})"
            )
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must be <= max_length ({self.max_length})"
            )
        if self.min_count > self.max_count:
            raise ValueError(
                f"min_count ({self.min_count}) must be <= max_count ({self.max_count})"
            )
        return self
    
    def length_allowed(self, length: int) -> bool:
        return self.min_length <= length <= self.max_length
    
    def count_allowed(self, count: int) -> bool:
        return self.min_count <= count <= self.max_count
    
    @property
    def alphabet_size(self) -> int:
        """Number of distinct characters a password can contain."""
        return self.last_code - self.first_code + 1


DEFAULT_POLICY = PolicyBounds()


@dataclass(frozen=True)
class GenerationRequest:
    """One batch request: `count` passwords of `length` characters."""
    length: int
    count: int


class BatchResult(BaseModel):
    """Tagged result of one batch. Never carries password text."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "OK",
                "length": 16,
                "count": 3,
                "emitted": 3,
                "error_message": None
            }
        }
    )
    
    status: BatchStatus = Field(..., description="Batch outcome")
    length: int = Field(..., description="Requested password length")
    count: int = Field(..., description="Requested number of passwords")
    emitted: int = Field(0, ge=0, description="Passwords handed to the caller before returning")
    error_message: Optional[str] = Field(None, description="User-visible error if status is not OK")
    
    @property
    def ok(self) -> bool:
        """True if the whole batch was produced."""
        return self.status == BatchStatus.OK
