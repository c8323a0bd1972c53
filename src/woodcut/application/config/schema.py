"""Pydantic schema for cut plan configuration files.

A cut plan configuration describes one board size and the list of pieces to
cut from it. Enums are shared with the domain layer so values in JSON match
the domain's string values.
"""

from __future__ import annotations

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from woodcut.domain.value_objects import GrainDirection, RotationPolicy

# Supported schema versions for configuration files
# Version 1.0: Board size, rotation policy and piece list with edge margins
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class EdgeName(str, Enum):
    """Names of the four piece edges."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class BoardConfig(BaseModel):
    """Stock board dimensions in centimeters.

    Attributes:
        length: Board extent along the x axis.
        width: Board extent along the y axis.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    length: float = Field(default=244.0, gt=0, description="Board length in cm")
    width: float = Field(default=122.0, gt=0, description="Board width in cm")


class EdgeMarginsConfig(BaseModel):
    """Per-edge trim margins in centimeters. Zero leaves an edge untrimmed."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    top: float = Field(default=0.0, ge=0)
    right: float = Field(default=0.0, ge=0)
    bottom: float = Field(default=0.0, ge=0)
    left: float = Field(default=0.0, ge=0)


class TrimConfig(BaseModel):
    """Shorthand applying one margin value to a set of edges.

    Attributes:
        value: Margin in cm for every listed edge.
        edges: Edges to trim.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    value: float = Field(..., ge=0, description="Margin in cm")
    edges: list[EdgeName] = Field(default_factory=list, description="Edges to trim")


class PieceConfig(BaseModel):
    """One requested piece.

    Attributes:
        id: Optional identifier; assigned from the list position when omitted.
        category: Free-form label shown in reports.
        length: Nominal length in cm.
        width: Nominal width in cm.
        quantity: Number of identical units.
        grain_direction: Axis of the piece the grain runs along.
        edge_margins: Explicit per-edge margins.
        trim: Single-value margin on selected edges.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    id: str | None = Field(default=None, min_length=1)
    category: str = Field(default="Uncategorized")
    length: float = Field(..., gt=0, description="Length in cm")
    width: float = Field(..., gt=0, description="Width in cm")
    quantity: int = Field(default=1, ge=1)
    grain_direction: GrainDirection = GrainDirection.LONGITUDINAL
    edge_margins: EdgeMarginsConfig | None = None
    trim: TrimConfig | None = None

    @model_validator(mode="after")
    def validate_single_margin_source(self) -> "PieceConfig":
        """Ensure margins are given either per edge or as a trim shorthand."""
        if self.edge_margins is not None and self.trim is not None:
            raise ValueError("Specify either 'edge_margins' or 'trim', not both")
        return self


class ProjectConfig(BaseModel):
    """Descriptive project metadata used in report headers."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str | None = None


class CutPlanConfiguration(BaseModel):
    """Root configuration model for a cut plan.

    Attributes:
        schema_version: Version string in format "major.minor".
        project: Optional project metadata.
        board: Board size (defaults to 244 x 122 cm).
        rotation_policy: Whether pieces may be rotated on the board.
        pieces: Pieces to cut (at least one).
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    board: BoardConfig = Field(default_factory=BoardConfig)
    rotation_policy: RotationPolicy = RotationPolicy.FREE
    pieces: list[PieceConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_piece_ids(self) -> "CutPlanConfiguration":
        """Ensure explicit piece ids are unique."""
        seen: set[str] = set()
        for piece in self.pieces:
            if piece.id is None:
                continue
            if piece.id in seen:
                raise ValueError(f"Duplicate piece id '{piece.id}'")
            seen.add(piece.id)
        return self
