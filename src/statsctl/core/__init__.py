"""Core configuration for statsctl."""
