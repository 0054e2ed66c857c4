"""Expectations, matchers and a simple fake result holder for tests."""

__version__ = "0.1.0"