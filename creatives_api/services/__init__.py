"""
High-level use cases for the Creatives API.

Each service orchestrates the repository to implement business rules
(registration, profile upsert, likes, ...).  Routers call these services
instead of opening database sessions directly.
"""
