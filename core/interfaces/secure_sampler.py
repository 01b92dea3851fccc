"""Abstract secure sampler interface."""

from abc import ABC, abstractmethod


class SecureSampler(ABC):
    """Abstract cryptographically secure integer sampler.
    
    All samplers must implement:
    - reseed: Mix fresh entropy into the generator state
    - sample: Draw a uniformly distributed integer from an inclusive range
    
    Instances are not safe to share between concurrent batches; each batch
    must own its sampler for the reseed-then-sample sequence.
    """
    
    @abstractmethod
    def reseed(self) -> None:
        """Mix fresh entropy into the generator state.
        
        Raises:
            ReseedUnsupported: If the secure source cannot be re-seeded
        """
        pass
    
    @abstractmethod
    def sample(self, lo: int, hi: int) -> int:
        """Return an integer uniformly distributed over [lo, hi].
        
        Both ends are inclusive.
        
        Args:
            lo: Lowest value that may be returned
            hi: Highest value that may be returned
            
        Returns:
            Integer in [lo, hi]
            
        Raises:
            InvalidRange: If lo >= hi
        """
        pass
