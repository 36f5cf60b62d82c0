"""
High-level use cases for the Chirpy API.

Each service module orchestrates repositories/helpers to implement business
rules (register, login, post a chirp). Routers call these services instead of
touching the JSON store directly.
"""
