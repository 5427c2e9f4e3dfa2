"""Client, data records, data writers and Click command groups for the Andamio Network API."""

__version__ = "0.1.0"