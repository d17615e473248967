"""Access to the services registered on ``app.state`` by the app factory."""
from __future__ import annotations

from fastapi import Request


def get_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if svc is None:
        raise RuntimeError(f"{name} not configured")
    return svc
