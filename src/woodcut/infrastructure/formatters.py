"""Output formatters for cut layouts."""

from __future__ import annotations

import json
from typing import Any, Sequence

from woodcut.domain.services import WasteAccumulator, expand_pieces
from woodcut.domain.value_objects import (
    CutLayout,
    GrainDirection,
    Placement,
    WoodPiece,
)

# Trim waste is accumulated in cm and reported in meters
CM_PER_METER = 100.0

GRAIN_LABELS: dict[GrainDirection, str] = {
    GrainDirection.LONGITUDINAL: "Longitudinal",
    GrainDirection.TRANSVERSE: "Transverse",
}


def trimmed_edges_text(piece: WoodPiece) -> str:
    """Describe which edges carry trim, e.g. ``top + left`` or ``none``."""
    edges = piece.edge_margins.selected_edges
    return " + ".join(edges) if edges else "none"


class LayoutSummaryFormatter:
    """Formats a layout as a per-board placement listing."""

    def format(self, layout: CutLayout) -> str:
        if layout.is_empty:
            return "No pieces to lay out."

        lines = [
            "CUT LAYOUT",
            "=" * 70,
            f"Board size:    {layout.board.length:g} x {layout.board.width:g} cm",
            f"Boards needed: {layout.boards_needed}",
            f"Pieces placed: {layout.total_pieces}",
            f"Trim waste:    {layout.total_waste / CM_PER_METER:.2f} m",
        ]

        for index in range(layout.boards_needed):
            lines.append("")
            lines.append(
                f"Board {index + 1} ({layout.utilization(index):.1f}% used)"
            )
            lines.append("-" * 70)
            lines.append(
                f"{'Piece':<16} {'#':<5} {'X':<10} {'Y':<10} {'Size (cm)':<18} Rotated"
            )
            for placement in layout.placements_on(index):
                lines.append(self._format_placement(placement))

        return "\n".join(lines)

    def _format_placement(self, placement: Placement) -> str:
        size = f"{placement.length:g} x {placement.width:g}"
        rotated = "yes" if placement.rotated else "no"
        return (
            f"{placement.piece_id:<16} {placement.instance_ordinal:<5} "
            f"{placement.x:<10g} {placement.y:<10g} {size:<18} {rotated}"
        )


class BillOfMaterialsFormatter:
    """Formats the piece list and layout totals as a bill of materials.

    One row per requested piece with its grain, trimmed edges, total margin
    and trim waste, followed by a project summary.
    """

    def format(
        self,
        layout: CutLayout,
        pieces: Sequence[WoodPiece],
        project_name: str | None = None,
    ) -> str:
        if not pieces:
            return "No pieces in bill of materials."

        waste_by_piece = WasteAccumulator(pieces).by_piece(expand_pieces(pieces))

        lines = ["BILL OF MATERIALS"]
        if project_name:
            lines.append(f"Project: {project_name}")
        lines.extend(
            [
                "=" * 96,
                f"{'Category':<18} {'Length':<8} {'Width':<8} {'Qty':<5} "
                f"{'Grain':<13} {'Trimmed edges':<26} {'Margin':<8} Waste (m)",
                "-" * 96,
            ]
        )

        for piece in pieces:
            lines.append(
                f"{piece.category:<18} {piece.length:<8g} {piece.width:<8g} "
                f"{piece.quantity:<5} {GRAIN_LABELS[piece.grain_direction]:<13} "
                f"{trimmed_edges_text(piece):<26} {piece.edge_margins.total:<8g} "
                f"{waste_by_piece.get(piece.id, 0.0) / CM_PER_METER:.2f}"
            )

        total_quantity = sum(piece.quantity for piece in pieces)
        lines.extend(
            [
                "-" * 96,
                "",
                "PROJECT SUMMARY",
                f"Board length:  {layout.board.length:g} cm",
                f"Board width:   {layout.board.width:g} cm",
                f"Boards needed: {layout.boards_needed}",
                f"Total pieces:  {total_quantity}",
                f"Trim waste:    {layout.total_waste / CM_PER_METER:.2f} m",
            ]
        )
        return "\n".join(lines)


class JsonExporter:
    """Exports layout data as JSON."""

    def to_dict(self, layout: CutLayout) -> dict[str, Any]:
        return {
            "board": {"length": layout.board.length, "width": layout.board.width},
            "boards_needed": layout.boards_needed,
            "total_waste": layout.total_waste,
            "placements": [self._format_placement(p) for p in layout.placements],
        }

    def export(self, layout: CutLayout) -> str:
        """Export a layout as a JSON string."""
        return json.dumps(self.to_dict(layout), indent=2)

    def _format_placement(self, placement: Placement) -> dict[str, Any]:
        return {
            "piece_id": placement.piece_id,
            "instance_ordinal": placement.instance_ordinal,
            "board_index": placement.board_index,
            "x": placement.x,
            "y": placement.y,
            "length": placement.length,
            "width": placement.width,
            "rotated": placement.rotated,
        }
