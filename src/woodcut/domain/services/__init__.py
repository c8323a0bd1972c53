"""Pure domain services for the layout engine."""

from .piece_expander import PieceExpander, expand_pieces
from .waste import WasteAccumulator

__all__ = [
    "PieceExpander",
    "WasteAccumulator",
    "expand_pieces",
]
