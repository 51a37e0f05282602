"""Utility helpers for statsctl."""
