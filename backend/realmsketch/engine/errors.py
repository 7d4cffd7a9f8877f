"""Engine error types."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a caller passes a canvas or object list the engine cannot lay out."""
