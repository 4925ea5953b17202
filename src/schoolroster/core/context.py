"""Explicit request context passed into service calls."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Identity of the acting user for a single request."""

    user_id: str
