"""Diagnostics package.

Light-weight command-line checks over registered calendars.
"""

__all__ = ["pretty_month", "round_trip"]
