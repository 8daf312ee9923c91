"""Exposure and Response Prevention (ERP) task tracker core."""

__version__ = "0.1.0"
