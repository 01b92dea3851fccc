"""Secure sampler implementations.

This package contains concrete implementations of SecureSampler.
"""

from core.implementations.samplers.system_sampler import SystemSecureSampler

__all__ = ["SystemSecureSampler"]
