"""Lawn Mower Revolution: mow grass and weeds against the clock."""

__version__ = "0.1.0"