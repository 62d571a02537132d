"""Date pattern compiler: ``DateFormatter.define(pattern)`` formats and parses days."""

from .compiler import compile_pattern
from .date_formatter import DateFormatter

__all__ = ["DateFormatter", "compile_pattern"]
