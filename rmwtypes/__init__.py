"""Middleware-level data types: QoS, durations, endpoint info and option structures."""

__version__ = "0.1.0"