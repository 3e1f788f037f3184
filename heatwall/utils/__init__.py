"""Utility helpers for dates and value normalization."""
