"""Value objects for cut layout planning.

All dimensions are in centimeters. Boards are oriented as given: a board's
``length`` runs along the x axis and its ``width`` along the y axis, with the
origin at the top-left corner.

All dataclasses are frozen (immutable) so they can be shared between
callers and used as cache keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import InvalidInput, InvalidPiece

EDGE_NAMES: tuple[str, ...] = ("top", "right", "bottom", "left")


class GrainDirection(str, Enum):
    """Direction the wood grain must run for a piece.

    Attributes:
        LONGITUDINAL: Grain runs parallel to the piece length.
        TRANSVERSE: Grain runs parallel to the piece width.
    """

    LONGITUDINAL = "longitudinal"
    TRANSVERSE = "transverse"


class RotationPolicy(str, Enum):
    """Rule deciding whether pieces may be turned 90 degrees on the board.

    Attributes:
        FREE: Any piece may rotate. Grain follows the piece, and the
            placement's ``rotated`` flag tells renderers to turn the grain
            lines with it.
        GRAIN_LOCKED: Grain is fixed relative to the board axes, so no piece
            may rotate regardless of its grain direction.
    """

    FREE = "free"
    GRAIN_LOCKED = "grain_locked"


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class BoardSize:
    """Stock board dimensions.

    Attributes:
        length: Extent along the x axis in cm.
        width: Extent along the y axis in cm.
    """

    length: float = 244.0
    width: float = 122.0

    def __post_init__(self) -> None:
        if not _is_positive(self.length):
            raise InvalidInput(f"Board length must be positive, got {self.length!r}")
        if not _is_positive(self.width):
            raise InvalidInput(f"Board width must be positive, got {self.width!r}")

    @property
    def area(self) -> float:
        """Board area in square centimeters."""
        return self.length * self.width


@dataclass(frozen=True)
class EdgeMargins:
    """Trim allowance on each edge of a piece. Zero means the edge is not trimmed."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def __post_init__(self) -> None:
        for name in EDGE_NAMES:
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInput(
                    f"Edge margin '{name}' must be non-negative, got {value!r}"
                )

    @classmethod
    def on_edges(cls, value: float, edges: tuple[str, ...] | list[str]) -> EdgeMargins:
        """Apply one margin value to the selected edges.

        Args:
            value: Margin in cm applied to every selected edge.
            edges: Edge names ("top", "right", "bottom", "left").

        Raises:
            InvalidInput: If an edge name is unknown.
        """
        unknown = [edge for edge in edges if edge not in EDGE_NAMES]
        if unknown:
            raise InvalidInput(f"Unknown edge name(s): {', '.join(unknown)}")
        return cls(**{edge: value for edge in set(edges)})

    @property
    def selected_edges(self) -> tuple[str, ...]:
        """Names of edges that carry a trim margin, in top/right/bottom/left order."""
        return tuple(name for name in EDGE_NAMES if getattr(self, name) > 0)

    @property
    def total(self) -> float:
        """Sum of all four margins."""
        return self.top + self.right + self.bottom + self.left


@dataclass(frozen=True)
class WoodPiece:
    """A requested rectangular cut with a quantity of identical units.

    Attributes:
        id: Identifier unique within one piece list.
        length: Nominal length in cm (x axis when not rotated).
        width: Nominal width in cm (y axis when not rotated).
        quantity: Number of identical units needed.
        category: Free-form label for reports; not used by packing.
        edge_margins: Trim allowance per edge.
        grain_direction: Axis of the piece the grain runs along.
    """

    id: str
    length: float
    width: float
    quantity: int = 1
    category: str = "Uncategorized"
    edge_margins: EdgeMargins = field(default_factory=EdgeMargins)
    grain_direction: GrainDirection = GrainDirection.LONGITUDINAL

    def __post_init__(self) -> None:
        if not _is_positive(self.length):
            raise InvalidPiece(
                self.id, f"Piece '{self.id}' length must be positive, got {self.length!r}"
            )
        if not _is_positive(self.width):
            raise InvalidPiece(
                self.id, f"Piece '{self.id}' width must be positive, got {self.width!r}"
            )
        if self.quantity < 1:
            raise InvalidPiece(
                self.id, f"Piece '{self.id}' quantity must be at least 1, got {self.quantity!r}"
            )

    @property
    def effective_length(self) -> float:
        """Length including left and right trim."""
        return self.length + self.edge_margins.left + self.edge_margins.right

    @property
    def effective_width(self) -> float:
        """Width including top and bottom trim."""
        return self.width + self.edge_margins.top + self.edge_margins.bottom


@dataclass(frozen=True)
class AtomicPieceInstance:
    """One physical unit of a WoodPiece, placed individually.

    Attributes:
        source_piece_id: Id of the WoodPiece this unit comes from.
        instance_ordinal: 1-based unit number within its piece.
        effective_length: Margin-adjusted length in cm.
        effective_width: Margin-adjusted width in cm.
        rotation_allowed: Whether the packer may turn this unit 90 degrees.
        sequence: Position in the expanded instance list.
    """

    source_piece_id: str
    instance_ordinal: int
    effective_length: float
    effective_width: float
    rotation_allowed: bool
    sequence: int

    @property
    def effective_area(self) -> float:
        return self.effective_length * self.effective_width

    def footprint(self, rotated: bool) -> tuple[float, float]:
        """Extents along the board's (x, y) axes for an orientation."""
        if rotated:
            return self.effective_width, self.effective_length
        return self.effective_length, self.effective_width


@dataclass(frozen=True)
class Placement:
    """A piece unit placed at a position on a board.

    Attributes:
        piece_id: Id of the source WoodPiece.
        board_index: Zero-based index of the board.
        x: Distance of the left edge from the board's left edge in cm.
        y: Distance of the top edge from the board's top edge in cm.
        rotated: True if the unit is turned 90 degrees from its authored
            orientation.
        instance_ordinal: 1-based unit number within its piece.
        length: Extent along the board's x axis (effective, oriented).
        width: Extent along the board's y axis (effective, oriented).
    """

    piece_id: str
    board_index: int
    x: float
    y: float
    rotated: bool = False
    instance_ordinal: int = 1
    length: float = 0.0
    width: float = 0.0

    def __post_init__(self) -> None:
        if self.board_index < 0:
            raise ValueError("Board index must be non-negative")
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def right_edge(self) -> float:
        return self.x + self.length

    @property
    def bottom_edge(self) -> float:
        return self.y + self.width

    @property
    def area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class CutLayout:
    """Complete cutting plan for a piece list.

    Attributes:
        board: Board size the plan was computed for.
        boards_needed: Number of boards used.
        placements: Every placed unit, in packing order.
        total_waste: Material consumed by trim margins.
    """

    board: BoardSize
    boards_needed: int
    placements: tuple[Placement, ...]
    total_waste: float

    def __post_init__(self) -> None:
        if self.boards_needed < 0:
            raise ValueError("Boards needed must be non-negative")
        if self.total_waste < 0:
            raise ValueError("Total waste must be non-negative")

    @property
    def is_empty(self) -> bool:
        return not self.placements

    @property
    def total_pieces(self) -> int:
        """Number of placed units across all boards."""
        return len(self.placements)

    def placements_on(self, board_index: int) -> tuple[Placement, ...]:
        """Placements on one board, in packing order."""
        return tuple(p for p in self.placements if p.board_index == board_index)

    def used_area(self, board_index: int) -> float:
        """Area covered by placed footprints on one board."""
        return sum(p.area for p in self.placements_on(board_index))

    def utilization(self, board_index: int) -> float:
        """Percentage of one board's area covered by placed footprints."""
        return self.used_area(board_index) / self.board.area * 100
