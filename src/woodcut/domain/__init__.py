"""Domain layer - value objects, errors and pure services."""

from .exceptions import InvalidInput, InvalidPiece, LayoutError, PieceTooLarge
from .services import PieceExpander, WasteAccumulator, expand_pieces
from .value_objects import (
    AtomicPieceInstance,
    BoardSize,
    CutLayout,
    EdgeMargins,
    GrainDirection,
    Placement,
    RotationPolicy,
    WoodPiece,
)

__all__ = [
    "AtomicPieceInstance",
    "BoardSize",
    "CutLayout",
    "EdgeMargins",
    "GrainDirection",
    "InvalidInput",
    "InvalidPiece",
    "LayoutError",
    "PieceExpander",
    "PieceTooLarge",
    "Placement",
    "RotationPolicy",
    "WasteAccumulator",
    "WoodPiece",
    "expand_pieces",
]
