"""Response normalization."""

from .processor import Processor

__all__ = ["Processor"]
