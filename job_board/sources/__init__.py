"""Feed source connectors."""

from .base import JobSource
from .empllo import EmplloSource

__all__ = ["JobSource", "EmplloSource"]
