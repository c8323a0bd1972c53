"""Expansion of a piece list into individually placeable units."""

from __future__ import annotations

import logging
from typing import Sequence

from woodcut.domain.exceptions import InvalidPiece
from woodcut.domain.value_objects import (
    AtomicPieceInstance,
    RotationPolicy,
    WoodPiece,
)

logger = logging.getLogger(__name__)


class PieceExpander:
    """Turns WoodPieces into AtomicPieceInstances.

    Each piece with quantity N becomes N instances with quantity 1. Expansion
    is stable: all instances of piece i precede all instances of piece i+1.

    Attributes:
        policy: Rotation policy deciding each instance's rotation_allowed flag.
    """

    def __init__(self, policy: RotationPolicy = RotationPolicy.FREE) -> None:
        self.policy = policy

    def expand(self, pieces: Sequence[WoodPiece]) -> list[AtomicPieceInstance]:
        """Expand pieces into atomic instances.

        Args:
            pieces: Piece list in the caller's order.

        Returns:
            One instance per unit of quantity, in stable input order.

        Raises:
            InvalidPiece: If two pieces share an id.
        """
        seen: set[str] = set()
        instances: list[AtomicPieceInstance] = []

        for piece in pieces:
            if piece.id in seen:
                raise InvalidPiece(piece.id, f"Duplicate piece id '{piece.id}'")
            seen.add(piece.id)

            rotation_allowed = self.rotation_allowed(piece)
            for ordinal in range(1, piece.quantity + 1):
                instances.append(
                    AtomicPieceInstance(
                        source_piece_id=piece.id,
                        instance_ordinal=ordinal,
                        effective_length=piece.effective_length,
                        effective_width=piece.effective_width,
                        rotation_allowed=rotation_allowed,
                        sequence=len(instances),
                    )
                )

        logger.debug(
            "Expanded %d pieces into %d instances", len(seen), len(instances)
        )
        return instances

    def rotation_allowed(self, piece: WoodPiece) -> bool:
        """Check whether a piece may be turned 90 degrees under the policy.

        Under FREE the grain travels with the piece, so rotation never
        violates it. Under GRAIN_LOCKED both grain directions are tied to a
        board axis and turning the piece would move the grain to the other
        axis.
        """
        if self.policy == RotationPolicy.GRAIN_LOCKED:
            logger.debug(
                "Piece '%s' locked to its %s grain",
                piece.id,
                piece.grain_direction.value,
            )
            return False
        return True


def expand_pieces(
    pieces: Sequence[WoodPiece],
    policy: RotationPolicy = RotationPolicy.FREE,
) -> list[AtomicPieceInstance]:
    """Expand pieces into atomic instances with a one-off PieceExpander."""
    return PieceExpander(policy).expand(pieces)
