"""A strict printf-style formatter: ``printf`` renders templates, ``conversions`` renders single values."""

__version__ = "1.0.0"
__all__ = ["conversions", "printf"]