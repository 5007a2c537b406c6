"""Shared helpers for modelgraph."""

from .names import qualify, split_identifier, strip_namespace, validate_identifier

__all__ = ["split_identifier", "qualify", "strip_namespace", "validate_identifier"]
