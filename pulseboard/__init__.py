"""Pulseboard - project progress dashboard.

Tracks projects, their tasks and teams, and derives progress,
filtered/sorted listings and a 12-month timeline from them.
"""

__version__ = "0.3.0"
