"""Pydantic request schemas for the REST API.

Piece and board entries reuse the configuration file models so a request
body accepts the same fields as a cut plan file.
"""

from pydantic import BaseModel, Field

from woodcut.application.config import BoardConfig, PieceConfig
from woodcut.domain import RotationPolicy


class LayoutRequest(BaseModel):
    """Request body for layout endpoints."""

    board: BoardConfig = Field(
        default_factory=BoardConfig, description="Stock board size in cm"
    )
    rotation_policy: RotationPolicy = Field(
        default=RotationPolicy.FREE, description="Whether pieces may be rotated"
    )
    project_name: str | None = Field(
        default=None, description="Project name shown in the bill of materials"
    )
    pieces: list[PieceConfig] = Field(
        ..., min_length=1, description="Pieces to cut"
    )
