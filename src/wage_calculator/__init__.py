"""Wage calculator: monthly salary, social insurance and income tax breakdown."""

__version__ = "0.1.0"
