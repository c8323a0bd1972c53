"""Shelf-based bin packing of piece instances onto stock boards.

The shelf algorithm cuts each board into horizontal bands (shelves). Pieces
are placed left-to-right along the current shelf; when the next piece no
longer fits, a new shelf is opened below it, and when the board has no room
for another shelf a new board is opened.

Only the current shelf of the current board is ever considered, so boards
are filled strictly in the order they are opened and every opened board
holds at least one piece.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from woodcut.domain.exceptions import PieceTooLarge
from woodcut.domain.value_objects import (
    AtomicPieceInstance,
    BoardSize,
    Placement,
    RotationPolicy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for shelf packing.

    Attributes:
        board: Stock board size shared by every board in the run.
        rotation_policy: Policy the instances were expanded under, kept for
            logging and reports.
    """

    board: BoardSize = field(default_factory=BoardSize)
    rotation_policy: RotationPolicy = RotationPolicy.FREE


@dataclass
class _Shelf:
    """Internal shelf representation for the packing algorithm.

    Attributes:
        y: Top Y position of the shelf on its board.
        height: Height of the shelf (y-extent of the piece that opened it).
        x_cursor: X position where the next piece on this shelf starts.
    """

    y: float
    height: float
    x_cursor: float = 0.0


@dataclass
class _BoardState:
    """Internal state for the board currently being filled.

    Attributes:
        index: Board index (0-based).
        board: Board dimensions.
        shelf: The shelf pieces are currently added to, if any.
        y_cursor: Y position where the next new shelf starts.
    """

    index: int
    board: BoardSize
    shelf: _Shelf | None = None
    y_cursor: float = 0.0

    @property
    def available_height(self) -> float:
        """Remaining height for new shelves."""
        return self.board.width - self.y_cursor


class ShelfBinPacker:
    """Greedy next-fit shelf packer with optional 90 degree rotation.

    Instances are sorted by descending effective area, then descending
    effective length, then input order, which makes the output fully
    deterministic for a given input.

    Attributes:
        config: Packing configuration (board size, rotation policy).
    """

    def __init__(self, config: PackingConfig) -> None:
        self.config = config

    def pack(self, instances: Sequence[AtomicPieceInstance]) -> list[Placement]:
        """Place every instance on a board.

        Args:
            instances: Expanded piece instances.

        Returns:
            Placements in packing order.

        Raises:
            PieceTooLarge: If an instance does not fit an empty board in any
                allowed orientation.
        """
        placements = list(self.iter_placements(instances))
        if placements:
            logger.info(
                "Packed %d instances onto %d boards",
                len(placements),
                placements[-1].board_index + 1,
            )
        return placements

    def iter_placements(
        self, instances: Sequence[AtomicPieceInstance]
    ) -> Iterator[Placement]:
        """Yield placements one instance at a time, in packing order.

        The generator holds all packing state, so a caller with very large
        inputs can consume it in chunks.
        """
        ordered = self._sort_instances(instances)
        logger.debug("Packing %d instances", len(ordered))

        state: _BoardState | None = None
        for instance in ordered:
            placement = None

            if state is not None:
                placement = self._place_on_current_shelf(instance, state)
                if placement is None:
                    placement = self._place_on_new_shelf(instance, state)

            if placement is None:
                state = self._open_board(instance, state)
                placement = self._place_on_new_shelf(instance, state)
                if placement is None:
                    raise PieceTooLarge(
                        instance.source_piece_id,
                        instance.effective_length,
                        instance.effective_width,
                        self.config.board,
                    )

            if placement.rotated:
                logger.debug(
                    "Instance '%s' #%d placed rotated at (%s, %s) on board %d",
                    placement.piece_id,
                    placement.instance_ordinal,
                    placement.x,
                    placement.y,
                    placement.board_index,
                )
            yield placement

    def _sort_instances(
        self, instances: Sequence[AtomicPieceInstance]
    ) -> list[AtomicPieceInstance]:
        """Sort by area (largest first), then length (longest first), then input order."""
        return sorted(
            instances,
            key=lambda i: (-i.effective_area, -i.effective_length, i.sequence),
        )

    def _open_board(
        self, instance: AtomicPieceInstance, previous: _BoardState | None
    ) -> _BoardState:
        index = 0 if previous is None else previous.index + 1
        logger.debug(
            "Opening board %d for instance '%s' #%d",
            index,
            instance.source_piece_id,
            instance.instance_ordinal,
        )
        return _BoardState(index=index, board=self.config.board)

    def _orientations(self, instance: AtomicPieceInstance) -> tuple[bool, ...]:
        """Orientations to evaluate, un-rotated first."""
        if instance.rotation_allowed:
            return (False, True)
        return (False,)

    def _place_on_current_shelf(
        self, instance: AtomicPieceInstance, state: _BoardState
    ) -> Placement | None:
        """Try the current shelf, preferring the orientation with least height waste."""
        shelf = state.shelf
        if shelf is None:
            return None

        best: tuple[float, bool] | None = None
        for rotated in self._orientations(instance):
            x_extent, y_extent = instance.footprint(rotated)
            if (
                y_extent <= shelf.height
                and shelf.x_cursor + x_extent <= state.board.length
            ):
                waste = shelf.height - y_extent
                # Strict comparison keeps the un-rotated orientation on ties
                if best is None or waste < best[0]:
                    best = (waste, rotated)

        if best is None:
            return None

        rotated = best[1]
        placement = self._make_placement(
            instance, state.index, shelf.x_cursor, shelf.y, rotated
        )
        shelf.x_cursor = placement.right_edge
        return placement

    def _place_on_new_shelf(
        self, instance: AtomicPieceInstance, state: _BoardState
    ) -> Placement | None:
        """Try to open a new shelf below the last one on the current board.

        The height waste of a new shelf is the vertical space left over when
        shelves of its height are stacked into the remaining board height.
        """
        available = state.available_height
        best: tuple[float, bool] | None = None
        for rotated in self._orientations(instance):
            x_extent, y_extent = instance.footprint(rotated)
            if (
                state.y_cursor + y_extent <= state.board.width
                and x_extent <= state.board.length
            ):
                waste = available % y_extent
                if best is None or waste < best[0]:
                    best = (waste, rotated)

        if best is None:
            return None

        rotated = best[1]
        shelf = _Shelf(y=state.y_cursor, height=instance.footprint(rotated)[1])
        placement = self._make_placement(instance, state.index, 0.0, shelf.y, rotated)
        shelf.x_cursor = placement.right_edge
        state.shelf = shelf
        state.y_cursor = placement.bottom_edge
        return placement

    def _make_placement(
        self,
        instance: AtomicPieceInstance,
        board_index: int,
        x: float,
        y: float,
        rotated: bool,
    ) -> Placement:
        x_extent, y_extent = instance.footprint(rotated)
        return Placement(
            piece_id=instance.source_piece_id,
            board_index=board_index,
            x=x,
            y=y,
            rotated=rotated,
            instance_ordinal=instance.instance_ordinal,
            length=x_extent,
            width=y_extent,
        )
