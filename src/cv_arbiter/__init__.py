"""Deterministic CV bullet scoring and rewrite arbitration."""

__version__ = "0.1.0"
