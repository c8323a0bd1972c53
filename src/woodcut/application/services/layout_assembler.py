"""Layout assembler service.

Combines packer output and the waste total into the CutLayout value handed
to callers. Performs no computation beyond counting boards.
"""

from __future__ import annotations

from typing import Sequence

from woodcut.domain.value_objects import BoardSize, CutLayout, Placement


class LayoutAssemblerService:
    """Service for assembling the final CutLayout."""

    def assemble(
        self,
        board: BoardSize,
        placements: Sequence[Placement],
        total_waste: float,
    ) -> CutLayout:
        """Assemble a CutLayout from packing results.

        Args:
            board: Board size used for packing.
            placements: Placements in packing order.
            total_waste: Trim waste total.

        Returns:
            CutLayout with boards_needed set to the highest board index + 1.
        """
        boards_needed = max((p.board_index for p in placements), default=-1) + 1
        return CutLayout(
            board=board,
            boards_needed=boards_needed,
            placements=tuple(placements),
            total_waste=total_waste,
        )
