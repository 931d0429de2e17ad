"""Pure helper functions shared by adapters."""

from .messages import extract_system, strip_images

__all__ = ["extract_system", "strip_images"]
