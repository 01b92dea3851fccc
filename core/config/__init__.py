"""Operational configuration."""
