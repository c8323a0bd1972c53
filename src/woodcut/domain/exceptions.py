"""Errors raised by the layout engine.

Every error is raised before any layout is returned; the engine never
produces a partial layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from woodcut.domain.value_objects import BoardSize


class LayoutError(Exception):
    """Base class for all layout engine errors."""

    pass


class InvalidInput(LayoutError):
    """Raised when the board or piece list fails validation."""

    pass


class InvalidPiece(InvalidInput):
    """Raised when a specific piece fails validation.

    Attributes:
        piece_id: Id of the offending piece.
    """

    def __init__(self, piece_id: str, message: str) -> None:
        self.piece_id = piece_id
        super().__init__(message)


class PieceTooLarge(InvalidPiece):
    """Raised when a piece cannot fit an empty board in any allowed orientation.

    Attributes:
        piece_id: Id of the offending piece.
        effective_length: Length including left/right trim margins.
        effective_width: Width including top/bottom trim margins.
        board: Board the piece was tested against.
    """

    def __init__(
        self,
        piece_id: str,
        effective_length: float,
        effective_width: float,
        board: BoardSize,
    ) -> None:
        self.effective_length = effective_length
        self.effective_width = effective_width
        self.board = board
        super().__init__(
            piece_id,
            f"Piece '{piece_id}' ({effective_length:g}x{effective_width:g} cm "
            f"including trim) does not fit on a "
            f"{board.length:g}x{board.width:g} cm board",
        )
