"""
Core utilities shared across the Creatives API.

This package hosts configuration, logging setup, the error taxonomy,
password hashing, bearer tokens and the request auth guard.  Routers and
services depend on these primitives instead of reading the environment
or decoding headers themselves.
"""
