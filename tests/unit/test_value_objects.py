"""Unit tests for layout value objects."""

import math

import pytest

from woodcut.domain import (
    AtomicPieceInstance,
    BoardSize,
    CutLayout,
    EdgeMargins,
    GrainDirection,
    InvalidInput,
    InvalidPiece,
    Placement,
    WoodPiece,
)


class TestBoardSize:
    """Tests for BoardSize value object."""

    def test_defaults_to_standard_board(self) -> None:
        board = BoardSize()
        assert board.length == 244.0
        assert board.width == 122.0
        assert board.area == pytest.approx(29768.0)

    @pytest.mark.parametrize(
        "length,width",
        [(0.0, 122.0), (244.0, 0.0), (-1.0, 122.0), (math.inf, 122.0), (244.0, math.nan)],
    )
    def test_rejects_non_positive_or_non_finite(self, length: float, width: float) -> None:
        with pytest.raises(InvalidInput):
            BoardSize(length=length, width=width)

    def test_is_hashable(self) -> None:
        assert hash(BoardSize()) == hash(BoardSize(244.0, 122.0))


class TestEdgeMargins:
    """Tests for EdgeMargins value object."""

    def test_defaults_to_no_trim(self) -> None:
        margins = EdgeMargins()
        assert margins.total == 0.0
        assert margins.selected_edges == ()

    def test_negative_margin_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="left"):
            EdgeMargins(left=-0.5)

    def test_non_finite_margin_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            EdgeMargins(top=math.inf)

    def test_on_edges_applies_value_to_selected_edges(self) -> None:
        margins = EdgeMargins.on_edges(0.5, ["left", "top"])
        assert margins == EdgeMargins(top=0.5, left=0.5)
        assert margins.selected_edges == ("top", "left")
        assert margins.total == 1.0

    def test_on_edges_ignores_repeated_names(self) -> None:
        assert EdgeMargins.on_edges(1.0, ["top", "top"]) == EdgeMargins(top=1.0)

    def test_on_edges_unknown_edge_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="middle"):
            EdgeMargins.on_edges(1.0, ["top", "middle"])


class TestWoodPiece:
    """Tests for WoodPiece value object."""

    def test_defaults(self) -> None:
        piece = WoodPiece(id="a", length=100.0, width=50.0)
        assert piece.quantity == 1
        assert piece.category == "Uncategorized"
        assert piece.grain_direction == GrainDirection.LONGITUDINAL
        assert piece.edge_margins == EdgeMargins()

    def test_effective_dimensions_include_margins(self) -> None:
        piece = WoodPiece(
            id="a",
            length=100.0,
            width=50.0,
            edge_margins=EdgeMargins(top=1.0, right=2.0, bottom=3.0, left=4.0),
        )
        assert piece.effective_length == 106.0
        assert piece.effective_width == 54.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"length": 0.0, "width": 50.0},
            {"length": 100.0, "width": -5.0},
            {"length": math.nan, "width": 50.0},
            {"length": 100.0, "width": 50.0, "quantity": 0},
        ],
    )
    def test_invalid_values_raise_invalid_piece(self, kwargs: dict) -> None:
        with pytest.raises(InvalidPiece) as exc_info:
            WoodPiece(id="bad", **kwargs)
        assert exc_info.value.piece_id == "bad"

    def test_invalid_piece_is_invalid_input(self) -> None:
        with pytest.raises(InvalidInput):
            WoodPiece(id="bad", length=-1.0, width=1.0)


class TestAtomicPieceInstance:
    """Tests for AtomicPieceInstance."""

    def test_footprint_swaps_when_rotated(self) -> None:
        instance = AtomicPieceInstance(
            source_piece_id="a",
            instance_ordinal=1,
            effective_length=50.0,
            effective_width=41.0,
            rotation_allowed=True,
            sequence=0,
        )
        assert instance.footprint(False) == (50.0, 41.0)
        assert instance.footprint(True) == (41.0, 50.0)
        assert instance.effective_area == 2050.0


class TestPlacement:
    """Tests for Placement."""

    def test_edges_and_area(self) -> None:
        placement = Placement(
            piece_id="a", board_index=0, x=10.0, y=20.0, length=30.0, width=40.0
        )
        assert placement.right_edge == 40.0
        assert placement.bottom_edge == 60.0
        assert placement.area == 1200.0

    def test_negative_coordinates_rejected(self) -> None:
        with pytest.raises(ValueError):
            Placement(piece_id="a", board_index=0, x=-1.0, y=0.0)

    def test_negative_board_index_rejected(self) -> None:
        with pytest.raises(ValueError):
            Placement(piece_id="a", board_index=-1, x=0.0, y=0.0)


class TestCutLayout:
    """Tests for CutLayout."""

    @pytest.fixture
    def layout(self) -> CutLayout:
        return CutLayout(
            board=BoardSize(100.0, 100.0),
            boards_needed=2,
            placements=(
                Placement("a", 0, 0.0, 0.0, length=50.0, width=50.0),
                Placement("b", 0, 50.0, 0.0, length=50.0, width=50.0),
                Placement("c", 1, 0.0, 0.0, length=10.0, width=10.0),
            ),
            total_waste=0.0,
        )

    def test_placements_on_board(self, layout: CutLayout) -> None:
        assert [p.piece_id for p in layout.placements_on(0)] == ["a", "b"]
        assert [p.piece_id for p in layout.placements_on(1)] == ["c"]

    def test_utilization(self, layout: CutLayout) -> None:
        assert layout.utilization(0) == pytest.approx(50.0)
        assert layout.utilization(1) == pytest.approx(1.0)

    def test_totals(self, layout: CutLayout) -> None:
        assert layout.total_pieces == 3
        assert not layout.is_empty

    def test_negative_waste_rejected(self) -> None:
        with pytest.raises(ValueError):
            CutLayout(board=BoardSize(), boards_needed=0, placements=(), total_waste=-1.0)
