"""Chirpy: small chirp/user API backed by a single JSON document."""

__version__ = "0.1.0"
