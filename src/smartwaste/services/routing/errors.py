"""Routing error types."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when routing input is rejected before any route is built."""
