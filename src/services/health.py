"""Liveness payload served at /api/health."""
from config import HEALTH_MESSAGE


def health_payload() -> dict:
    return {"status": "OK", "message": HEALTH_MESSAGE}
