"""Sampler backed by the operating system CSPRNG."""

import logging
import os
import secrets
from core.interfaces.secure_sampler import SecureSampler
from core.domain.errors import InvalidRange, ReseedUnsupported

logger = logging.getLogger(__name__)

# Bytes read from the OS source when probing it on reseed
RESEED_PROBE_BYTES = 32


class SystemSecureSampler(SecureSampler):
    """Sampler drawing from the OS random source through `secrets`.
    
    The kernel source mixes in fresh entropy on its own, so reseed() cannot
    inject anything. It reads from the source to prove it is usable and
    counts the call, which keeps the once-per-batch discipline observable.
    """
    
    def __init__(self) -> None:
        self.reseed_count: int = 0
        self.sample_count: int = 0
    
    def reseed(self) -> None:
        """Probe the OS entropy source and record the reseed."""
        try:
            os.urandom(RESEED_PROBE_BYTES)
        except (NotImplementedError, OSError) as e:
            logger.error(f"Secure random source unavailable: {e}")
            raise ReseedUnsupported(str(e) or type(e).__name__) from e
        self.reseed_count += 1
        logger.debug(f"Sampler reseeded (reseed_count={self.reseed_count})")
    
    def sample(self, lo: int, hi: int) -> int:
        """Return a uniform integer in [lo, hi] inclusive.
        
        Raises:
            InvalidRange: If lo >= hi
        """
        if lo >= hi:
            raise InvalidRange(lo, hi)
        self.sample_count += 1
        # randbelow(n) is uniform over [0, n), so n = hi - lo + 1 keeps hi reachable
        return lo + secrets.randbelow(hi - lo + 1)
