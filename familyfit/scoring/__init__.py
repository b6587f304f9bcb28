"""Scoring engine and its derived views."""
