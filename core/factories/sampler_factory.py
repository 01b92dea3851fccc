"""Factory for creating secure sampler instances."""

from core.interfaces.secure_sampler import SecureSampler
from core.implementations.samplers import SystemSecureSampler
from core.domain.consts import SamplerName


SAMPLERS: dict[str, type[SecureSampler]] = {
    SamplerName.SYSTEM.value: SystemSecureSampler,
}


def create_sampler(sampler_name: str) -> SecureSampler:
    """Factory for creating secure samplers.
    
    Every call returns a new instance so that no two generators share
    sampler state.
        
    Returns:
        SecureSampler instance
        
    Raises:
        ValueError: If sampler_name is unknown
    """
    try:
        sampler_cls = SAMPLERS[sampler_name]
    except KeyError:
        raise ValueError(f"Unknown sampler: {sampler_name}")
    return sampler_cls()
