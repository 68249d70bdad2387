"""Manage Fuel toolchains, their settings, overrides and component store."""

__version__ = "0.1.0"