"""Object backend contract."""

from importexport.backends.object.base import ObjectBackend

__all__ = ["ObjectBackend"]
