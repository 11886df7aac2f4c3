"""Validation, pagination, errors, JSON responses, settings and page contexts for a marketplace web backend."""

__version__ = "0.1.0"