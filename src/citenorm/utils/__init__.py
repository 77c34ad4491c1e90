"""Common utility functions for citenorm."""

from citenorm.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
