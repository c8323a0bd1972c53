"""Conversion of validated configuration into domain values."""

from woodcut.application.config.schema import (
    BoardConfig,
    CutPlanConfiguration,
    PieceConfig,
)
from woodcut.domain.value_objects import (
    BoardSize,
    EdgeMargins,
    RotationPolicy,
    WoodPiece,
)


def config_to_board(config: CutPlanConfiguration | BoardConfig) -> BoardSize:
    """Convert the board section to a BoardSize."""
    board = config.board if isinstance(config, CutPlanConfiguration) else config
    return BoardSize(length=board.length, width=board.width)


def config_to_policy(config: CutPlanConfiguration) -> RotationPolicy:
    return config.rotation_policy


def piece_config_to_margins(piece: PieceConfig) -> EdgeMargins:
    """Resolve a piece's margins from either explicit values or the trim shorthand."""
    if piece.edge_margins is not None:
        m = piece.edge_margins
        return EdgeMargins(top=m.top, right=m.right, bottom=m.bottom, left=m.left)
    if piece.trim is not None:
        return EdgeMargins.on_edges(
            piece.trim.value, [edge.value for edge in piece.trim.edges]
        )
    return EdgeMargins()


def config_to_pieces(
    config: CutPlanConfiguration | list[PieceConfig],
) -> list[WoodPiece]:
    """Convert piece entries to WoodPieces, in order.

    Pieces without an id get ``P<n>`` where n is their 1-based position,
    counting up while ``P<n>`` is already taken by another entry.
    """
    entries = config.pieces if isinstance(config, CutPlanConfiguration) else config
    taken = {entry.id for entry in entries if entry.id is not None}

    pieces: list[WoodPiece] = []
    for index, entry in enumerate(entries, start=1):
        piece_id = entry.id
        if piece_id is None:
            piece_id = _generated_id(index, taken)
            taken.add(piece_id)
        pieces.append(
            WoodPiece(
                id=piece_id,
                length=entry.length,
                width=entry.width,
                quantity=entry.quantity,
                category=entry.category,
                edge_margins=piece_config_to_margins(entry),
                grain_direction=entry.grain_direction,
            )
        )
    return pieces


def _generated_id(position: int, taken: set[str]) -> str:
    number = position
    while f"P{number}" in taken:
        number += 1
    return f"P{number}"
