"""
FastAPI routers grouped by resource (accounts, auth, profiles, posts).

Each module exposes an ``APIRouter`` included by ``creatives_api.app``.
Services are looked up on ``app.state`` so tests can swap them.
"""
