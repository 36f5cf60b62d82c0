"""
Core utilities shared across the Chirpy API.

This package hosts configuration helpers (env vars, paths), password hashing
and bearer-token helpers. Routers and services depend on these primitives
instead of reading os.environ or touching crypto libraries directly.
"""
