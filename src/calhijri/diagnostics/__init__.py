"""Diagnostics package.

- pretty_month, round_trip: always available
- drift: needs the diagnostics extras (numpy, matplotlib for --plot)
"""

__all__ = ["pretty_month", "round_trip", "drift"]
