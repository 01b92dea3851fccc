"""Shared domain layer: config, models, sampler capability."""
