"""Ping utility used by the API health-check."""

from loancalc import __version__


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_ping_payload() -> dict:
    return {"message": get_ping_message(), "version": __version__}
