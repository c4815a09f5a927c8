"""Statutory social-insurance contribution calculator."""

__version__ = "0.1.0"
