"""Trim waste accounting.

Waste here is the material consumed by trim margins. It depends only on the
margins and quantities of the pieces, never on where they end up on a board.
"""

from __future__ import annotations

from typing import Sequence

from woodcut.domain.value_objects import AtomicPieceInstance, WoodPiece


class WasteAccumulator:
    """Sums trim waste over atomic instances.

    Top and bottom margins run along the piece length; left and right margins
    run along the piece width. Each margin contributes its value times the
    length of the edge it trims.
    """

    def __init__(self, pieces: Sequence[WoodPiece]) -> None:
        """Initialize with the piece list the instances were expanded from.

        Args:
            pieces: Source pieces, used to look up each instance's margins.
        """
        self._pieces = {piece.id: piece for piece in pieces}

    def instance_waste(self, instance: AtomicPieceInstance) -> float:
        """Trim waste contributed by a single instance."""
        margins = self._pieces[instance.source_piece_id].edge_margins
        return (margins.top + margins.bottom) * instance.effective_length + (
            margins.left + margins.right
        ) * instance.effective_width

    def total(self, instances: Sequence[AtomicPieceInstance]) -> float:
        """Total trim waste across all instances."""
        return sum(self.instance_waste(instance) for instance in instances)

    def by_piece(self, instances: Sequence[AtomicPieceInstance]) -> dict[str, float]:
        """Trim waste per source piece id, in first-seen order."""
        totals: dict[str, float] = {}
        for instance in instances:
            totals[instance.source_piece_id] = totals.get(
                instance.source_piece_id, 0.0
            ) + self.instance_waste(instance)
        return totals
