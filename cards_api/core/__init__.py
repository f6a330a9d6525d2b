"""
Core utilities shared across the card catalogue API.

This package hosts configuration, the error taxonomy with its HTTP responder,
logging setup and password helpers. Routers and services depend on these
primitives instead of reading the environment themselves.
"""
