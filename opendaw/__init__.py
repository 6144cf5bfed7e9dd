"""Project model, editing commands and timing helpers for a digital audio workstation."""

__version__ = "0.1.0"