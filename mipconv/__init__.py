"""Helpers for MIP data conversion: text utilities, logging, sequences, settings, sites and tripolar grids."""

__version__ = "2.6.0"