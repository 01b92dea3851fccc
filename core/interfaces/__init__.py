"""Capability interfaces."""
