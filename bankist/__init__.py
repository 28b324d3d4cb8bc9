"""Bankist banking dashboard package."""
