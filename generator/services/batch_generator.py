"""Batch password generation over a secure sampler."""

import logging
from typing import Callable, Iterator, Optional
from core.config.config import config
from core.domain.consts import BatchStatus, Messages
from core.domain.errors import InvalidRange, ReseedUnsupported
from core.domain.models import BatchResult, GenerationRequest, PolicyBounds, DEFAULT_POLICY
from core.factories.sampler_factory import create_sampler
from core.interfaces.secure_sampler import SecureSampler

logger = logging.getLogger(__name__)


class PasswordBatchGenerator:
    """
    Validates batch requests and produces passwords from a secure sampler.
    
    The generator owns its sampler exclusively. A batch runs to completion
    (or aborts) before generate() returns, so reseeding and sampling for one
    batch never interleave with another. Passwords are handed to the caller
    one at a time and never stored or logged here.
    """
    
    def __init__(
        self,
        sampler: Optional[SecureSampler] = None,
        policy: PolicyBounds = DEFAULT_POLICY,
    ) -> None:
        self.sampler = sampler if sampler is not None else create_sampler(config.SAMPLER)
        self.policy = policy
    
    def validate(self, request: GenerationRequest) -> Optional[BatchResult]:
        """
        Check a request against the policy without touching the sampler.
        
        Length is checked first; a bad length short-circuits the count check.
        
        Returns:
            A LENGTH_OUT_OF_RANGE or COUNT_OUT_OF_RANGE result, or None if valid.
        """
        if not self.policy.length_allowed(request.length):
            return self._failure(
                request,
                BatchStatus.LENGTH_OUT_OF_RANGE,
                Messages.LENGTH_OUT_OF_RANGE.format(
                    min=self.policy.min_length, max=self.policy.max_length
                ),
            )
        if not self.policy.count_allowed(request.count):
            return self._failure(
                request,
                BatchStatus.COUNT_OUT_OF_RANGE,
                Messages.COUNT_OUT_OF_RANGE.format(
                    min=self.policy.min_count, max=self.policy.max_count
                ),
            )
        return None
    
    def iter_passwords(self, length: int, count: int) -> Iterator[str]:
        """
        Lazily yield `count` passwords of `length` characters.
        
        Each character is sampled independently and uniformly from
        [first_code, last_code]. No validation and no reseed happen here.
        
        Raises:
            InvalidRange: If the sampler rejects the policy's code range
        """
        first_code = self.policy.first_code
        last_code = self.policy.last_code
        for _ in range(count):
            yield "".join(
                chr(self.sampler.sample(first_code, last_code))
                for _ in range(length)
            )
    
    def generate(
        self,
        length: int,
        count: int,
        emit: Callable[[str], None],
    ) -> BatchResult:
        """
        Run one batch: validate, reseed once, then emit each password.
        
        `emit` receives every password as soon as it is complete. Nothing is
        emitted for a rejected request or a failed reseed. On a sampling
        failure the passwords already emitted stay emitted and are counted
        in the result.
        
        Returns:
            BatchResult tagged OK, LENGTH_OUT_OF_RANGE, COUNT_OUT_OF_RANGE,
            RESEED_FAILED or SAMPLING_FAILED.
        """
        request = GenerationRequest(length=length, count=count)
        
        rejected = self.validate(request)
        if rejected is not None:
            logger.info(f"Rejected batch (length={length}, count={count}): {rejected.status.value}")
            return rejected
        
        try:
            self.sampler.reseed()
        except ReseedUnsupported as e:
            logger.error(f"Reseed failed, batch aborted (length={length}, count={count}): {e}")
            return self._failure(
                request,
                BatchStatus.RESEED_FAILED,
                Messages.RESEED_FAILED.format(cause=e),
            )
        
        emitted = 0
        try:
            for password in self.iter_passwords(length, count):
                emit(password)
                emitted += 1
        except InvalidRange as e:
            logger.error(
                f"Sampling failed after {emitted}/{count} passwords "
                f"(length={length}): {e}"
            )
            return self._failure(
                request,
                BatchStatus.SAMPLING_FAILED,
                Messages.SAMPLING_FAILED.format(emitted=emitted),
                emitted=emitted,
            )
        
        logger.debug(f"Batch complete: {emitted} passwords of length {length}")
        return BatchResult(
            status=BatchStatus.OK,
            length=length,
            count=count,
            emitted=emitted,
        )
    
    @staticmethod
    def _failure(
        request: GenerationRequest,
        status: BatchStatus,
        message: str,
        emitted: int = 0,
    ) -> BatchResult:
        return BatchResult(
            status=status,
            length=request.length,
            count=request.count,
            emitted=emitted,
            error_message=message,
        )
