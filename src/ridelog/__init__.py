"""Ridelog - income, expense, mileage and work hours tracker for drivers."""

__version__ = "0.1.0"
