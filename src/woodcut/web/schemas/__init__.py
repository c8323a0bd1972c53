"""Pydantic request and response schemas for the REST API."""

from woodcut.web.schemas.requests import LayoutRequest
from woodcut.web.schemas.responses import (
    BoardSchema,
    BoardUsageSchema,
    CutLayoutSchema,
    PlacementSchema,
)

__all__ = [
    "BoardSchema",
    "BoardUsageSchema",
    "CutLayoutSchema",
    "LayoutRequest",
    "PlacementSchema",
]
