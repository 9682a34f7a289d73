"""Import/export template management with pluggable object and format backends."""

__version__ = "0.1.0"
