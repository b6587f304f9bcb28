"""Penalty logging rules."""
