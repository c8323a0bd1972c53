"""Application commands (use cases) for cut layout computation."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from woodcut.domain import (
    BoardSize,
    CutLayout,
    PieceExpander,
    RotationPolicy,
    WasteAccumulator,
    WoodPiece,
)
from woodcut.infrastructure.bin_packing import PackingConfig, ShelfBinPacker

from .services.layout_assembler import LayoutAssemblerService

logger = logging.getLogger(__name__)


class ComputeLayoutCommand:
    """Command to compute a cutting plan for a piece list.

    Runs expansion, packing, waste accounting and assembly in order. Holds no
    state between executions; the same inputs always give the same layout.
    """

    def __init__(
        self,
        policy: RotationPolicy = RotationPolicy.FREE,
        assembler: LayoutAssemblerService | None = None,
    ) -> None:
        self.policy = policy
        self.expander = PieceExpander(policy)
        self.assembler = assembler or LayoutAssemblerService()

    def execute(self, board: BoardSize, pieces: Sequence[WoodPiece]) -> CutLayout:
        """Execute the layout computation.

        Args:
            board: Stock board size.
            pieces: Pieces to cut, in display order. Not modified.

        Returns:
            CutLayout with board count, placements and trim waste.

        Raises:
            InvalidInput: If a piece fails validation (e.g. duplicate id).
            PieceTooLarge: If a piece does not fit an empty board.
        """
        instances = self.expander.expand(pieces)

        packer = ShelfBinPacker(PackingConfig(board=board, rotation_policy=self.policy))
        placements = packer.pack(instances)

        total_waste = WasteAccumulator(pieces).total(instances)

        layout = self.assembler.assemble(board, placements, total_waste)
        logger.info(
            "Layout for %d pieces: %d boards, trim waste %.2f",
            len(pieces),
            layout.boards_needed,
            layout.total_waste,
        )
        return layout


def compute_layout(
    board: BoardSize,
    pieces: Sequence[WoodPiece],
    policy: RotationPolicy = RotationPolicy.FREE,
) -> CutLayout:
    """Compute a cutting plan for pieces on boards of one size.

    Args:
        board: Stock board size.
        pieces: Pieces to cut. Not modified.
        policy: Rotation policy (defaults to free rotation).

    Returns:
        The cut layout.
    """
    return ComputeLayoutCommand(policy).execute(board, pieces)


@lru_cache(maxsize=128)
def _cached_layout(
    board: BoardSize,
    pieces: tuple[WoodPiece, ...],
    policy: RotationPolicy,
) -> CutLayout:
    return compute_layout(board, pieces, policy)


def compute_layout_cached(
    board: BoardSize,
    pieces: Sequence[WoodPiece],
    policy: RotationPolicy = RotationPolicy.FREE,
) -> CutLayout:
    """Memoized compute_layout keyed by input values.

    Layouts are immutable, so returning a shared cached instance is safe.
    Errors are not cached and are raised again on every call.
    """
    return _cached_layout(board, tuple(pieces), policy)
