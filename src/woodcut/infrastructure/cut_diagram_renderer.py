"""Cut diagram rendering for layout visualization.

This module renders each board of a CutLayout as SVG, showing piece
placements, dimensions, rotation indicators and optional grain arrows.
Coordinates follow the layout: origin at the board's top-left corner,
x along the board length and y along the board width.
"""

from __future__ import annotations

import math
from typing import Sequence
from xml.sax.saxutils import escape

from woodcut.domain.value_objects import (
    CutLayout,
    GrainDirection,
    Placement,
    WoodPiece,
)

# Fill colors cycled per placement on a board
PIECE_COLORS: tuple[str, ...] = (
    "#3b82f6",  # Blue
    "#10b981",  # Green
    "#f59e0b",  # Amber
    "#ef4444",  # Red
    "#8b5cf6",  # Violet
    "#ec4899",  # Pink
    "#14b8a6",  # Teal
    "#f97316",  # Orange
)


class CutDiagramRenderer:
    """Renders cut diagrams in SVG format.

    Attributes:
        scale: Pixels per centimeter.
        board_fill: Fill color for the board background.
        board_stroke: Stroke color for the board outline.
        text_color: Color for header text, labels and grain arrows.
        show_dimensions: Whether to show nominal piece dimensions.
        show_labels: Whether to show piece labels (category, or id).
        show_grain: Whether to draw grain direction arrows.
        board_gap: Vertical gap between boards in combined output, in pixels.
    """

    header_height: float = 30.0

    def __init__(
        self,
        scale: float = 4.0,
        board_fill: str = "#fef3c7",
        board_stroke: str = "#92400e",
        text_color: str = "#000000",
        show_dimensions: bool = True,
        show_labels: bool = True,
        show_grain: bool = False,
        board_gap: float = 20.0,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.board_fill = board_fill
        self.board_stroke = board_stroke
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels
        self.show_grain = show_grain
        self.board_gap = board_gap

    def board_size_px(self, layout: CutLayout) -> tuple[float, float]:
        """SVG width and height of one board including its header."""
        return (
            layout.board.length * self.scale,
            layout.board.width * self.scale + self.header_height,
        )

    def render_svg(
        self,
        layout: CutLayout,
        board_index: int,
        pieces: Sequence[WoodPiece] | None = None,
    ) -> str:
        """Generate an SVG cut diagram for a single board.

        Args:
            layout: The computed layout.
            board_index: Zero-based board to render.
            pieces: Source pieces, used for labels, nominal dimensions and
                grain. Without them pieces are labelled by id and sized by
                their footprint.

        Returns:
            SVG document as a string.

        Raises:
            IndexError: If board_index is outside the layout's boards.
        """
        if not 0 <= board_index < layout.boards_needed:
            raise IndexError(
                f"Board {board_index} out of range (layout has "
                f"{layout.boards_needed} boards)"
            )

        svg_width, svg_height = self.board_size_px(layout)
        parts = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
        ]
        parts.extend(self._render_board(layout, board_index, self._lookup(pieces)))
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(
        self, layout: CutLayout, pieces: Sequence[WoodPiece] | None = None
    ) -> list[str]:
        """Generate one SVG document per board."""
        return [
            self.render_svg(layout, index, pieces)
            for index in range(layout.boards_needed)
        ]

    def render_combined_svg(
        self, layout: CutLayout, pieces: Sequence[WoodPiece] | None = None
    ) -> str:
        """Generate a single SVG with all boards stacked vertically."""
        board_width, board_height = self.board_size_px(layout)
        count = layout.boards_needed
        total_height = count * board_height + max(count - 1, 0) * self.board_gap

        lookup = self._lookup(pieces)
        parts = [
            f'<svg width="{board_width}" height="{total_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
        ]
        for index in range(count):
            offset = index * (board_height + self.board_gap)
            parts.append(f'  <g transform="translate(0, {offset})">')
            parts.extend(
                "  " + line for line in self._render_board(layout, index, lookup)
            )
            parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts)

    def _lookup(self, pieces: Sequence[WoodPiece] | None) -> dict[str, WoodPiece]:
        return {piece.id: piece for piece in pieces or ()}

    def _render_board(
        self,
        layout: CutLayout,
        board_index: int,
        lookup: dict[str, WoodPiece],
    ) -> list[str]:
        board_width, _ = self.board_size_px(layout)
        parts = [
            self._render_header(layout, board_index, board_width),
            "  <!-- Board outline -->",
            f'  <rect x="0" y="{self.header_height}" width="{board_width}" '
            f'height="{layout.board.width * self.scale}" '
            f'fill="{self.board_fill}" stroke="{self.board_stroke}" stroke-width="2"/>',
            "  <!-- Placed pieces -->",
        ]
        for idx, placement in enumerate(layout.placements_on(board_index)):
            color = PIECE_COLORS[idx % len(PIECE_COLORS)]
            parts.append(self._render_piece(placement, lookup.get(placement.piece_id), color))
        return parts

    def _render_header(
        self, layout: CutLayout, board_index: int, svg_width: float
    ) -> str:
        header_text = (
            f"Board {board_index + 1} of {layout.boards_needed} - "
            f"{layout.board.length:g} x {layout.board.width:g} cm - "
            f"{layout.utilization(board_index):.1f}% used"
        )
        return (
            f"  <!-- Header -->\n"
            f'  <rect x="0" y="0" width="{svg_width}" height="{self.header_height}" '
            f'fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{self.header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>'
        )

    def _render_piece(
        self,
        placement: Placement,
        piece: WoodPiece | None,
        fill_color: str,
    ) -> str:
        """Render a single placement as an SVG rect with text."""
        x = placement.x * self.scale
        y = self.header_height + placement.y * self.scale
        w = placement.length * self.scale
        h = placement.width * self.scale

        svg_parts = [
            "  <g>",
            f'    <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill_color}" fill-opacity="0.7" stroke="{fill_color}" '
            f'stroke-width="1.5"/>',
        ]

        font_size = min(12, min(w, h) / 4)
        text_x = x + w / 2
        text_y = y + h / 2

        # Pieces too small for readable text only get the rectangle
        if font_size >= 6:
            if self.show_labels:
                label = piece.category if piece is not None else placement.piece_id
                svg_parts.append(
                    f'    <text x="{text_x}" y="{text_y - font_size / 2}" '
                    f'text-anchor="middle" font-family="Arial, sans-serif" '
                    f'font-size="{font_size}" fill="{self.text_color}">'
                    f"{escape(label)}</text>"
                )
            if self.show_dimensions:
                dims_y = text_y + font_size / 2 + 2 if self.show_labels else text_y
                svg_parts.append(
                    f'    <text x="{text_x}" y="{dims_y}" '
                    f'text-anchor="middle" font-family="Arial, sans-serif" '
                    f'font-size="{font_size * 0.8}" fill="{self.text_color}">'
                    f"{self._dimension_text(placement, piece)}</text>"
                )

        if self.show_grain and piece is not None:
            svg_parts.append(
                self._render_grain_indicator(placement, piece, x, y, w, h)
            )

        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def _dimension_text(self, placement: Placement, piece: WoodPiece | None) -> str:
        """Nominal dimensions as laid on the board, e.g. ``100×50``."""
        if piece is None:
            along_x, along_y = placement.length, placement.width
        elif placement.rotated:
            along_x, along_y = piece.width, piece.length
        else:
            along_x, along_y = piece.length, piece.width
        text = f"{along_x:g}×{along_y:g}"
        if placement.rotated:
            text += " (R)"
        return text

    def _render_grain_indicator(
        self,
        placement: Placement,
        piece: WoodPiece,
        x: float,
        y: float,
        w: float,
        h: float,
    ) -> str:
        """Render an arrow along the piece's grain axis as placed.

        Longitudinal grain follows the piece length, which lies along the
        board's x axis unless the piece is rotated. Transverse grain follows
        the piece width.
        """
        along_x = (piece.grain_direction == GrainDirection.LONGITUDINAL) != placement.rotated

        arrow_margin = 5.0
        arrow_length = min(20.0, min(w, h) / 4)
        arrow_x = x + w - arrow_margin - arrow_length
        arrow_y = y + h - arrow_margin

        if along_x:
            return self._render_arrow(
                arrow_x,
                arrow_y - arrow_length / 2,
                arrow_x + arrow_length,
                arrow_y - arrow_length / 2,
            )
        return self._render_arrow(
            arrow_x + arrow_length / 2,
            arrow_y - arrow_length,
            arrow_x + arrow_length / 2,
            arrow_y,
        )

    def _render_arrow(self, x1: float, y1: float, x2: float, y2: float) -> str:
        """Render an arrow from (x1, y1) to (x2, y2)."""
        svg = f'    <line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
        svg += f'stroke="{self.text_color}" stroke-width="1.5"/>\n'

        angle = math.atan2(y2 - y1, x2 - x1)
        head_length = 6
        head_angle = math.pi / 6

        lx = x2 - head_length * math.cos(angle - head_angle)
        ly = y2 - head_length * math.sin(angle - head_angle)
        rx = x2 - head_length * math.cos(angle + head_angle)
        ry = y2 - head_length * math.sin(angle + head_angle)

        svg += f'    <polygon points="{x2},{y2} {lx},{ly} {rx},{ry}" '
        svg += f'fill="{self.text_color}"/>'
        return svg
