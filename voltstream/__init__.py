"""Voltstream customer feedback triage service."""

__version__ = "0.1.0"
