"""Diagnostics package.

- new_years_table, pretty_month, round_trip: always available, text output
- leap_years: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years"]
