"""Factories for pluggable implementations."""
