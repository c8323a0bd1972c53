"""Tests for CutDiagramRenderer SVG output."""

import xml.etree.ElementTree as ET

import pytest

from woodcut.application import compute_layout
from woodcut.domain import BoardSize, CutLayout, GrainDirection, RotationPolicy, WoodPiece
from woodcut.infrastructure import CutDiagramRenderer

SVG_NS = "{http://www.w3.org/2000/svg}"


def texts(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    return [el.text or "" for el in root.iter(f"{SVG_NS}text")]


@pytest.fixture
def renderer() -> CutDiagramRenderer:
    return CutDiagramRenderer()


@pytest.fixture
def single_layout(standard_board: BoardSize, single_piece: WoodPiece) -> CutLayout:
    return compute_layout(standard_board, [single_piece])


@pytest.fixture
def two_board_layout(
    standard_board: BoardSize, trimmed_pieces: list[WoodPiece]
) -> CutLayout:
    return compute_layout(standard_board, trimmed_pieces, RotationPolicy.GRAIN_LOCKED)


class TestRendererInit:
    """Tests for renderer configuration."""

    @pytest.mark.parametrize("scale", [0.0, -1.0])
    def test_non_positive_scale_rejected(self, scale: float) -> None:
        with pytest.raises(ValueError, match="Scale"):
            CutDiagramRenderer(scale=scale)

    def test_board_size_includes_header(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout
    ) -> None:
        assert renderer.board_size_px(single_layout) == (976.0, 518.0)


class TestRenderSvg:
    """Tests for single-board SVG rendering."""

    def test_is_well_formed_svg(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout
    ) -> None:
        root = ET.fromstring(renderer.render_svg(single_layout, 0))
        assert root.tag == f"{SVG_NS}svg"
        # Header, board outline and one piece
        assert len(list(root.iter(f"{SVG_NS}rect"))) == 3

    def test_header_text(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout
    ) -> None:
        svg = renderer.render_svg(single_layout, 0)
        assert "Board 1 of 1 - 244 x 122 cm - 16.8% used" in texts(svg)

    def test_piece_rect_is_scaled_below_header(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout
    ) -> None:
        root = ET.fromstring(renderer.render_svg(single_layout, 0))
        piece_rect = list(root.iter(f"{SVG_NS}rect"))[2]
        assert float(piece_rect.get("x")) == 0.0
        assert float(piece_rect.get("y")) == 30.0
        assert float(piece_rect.get("width")) == 400.0
        assert float(piece_rect.get("height")) == 200.0

    def test_label_falls_back_to_piece_id(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout
    ) -> None:
        assert "shelf" in texts(renderer.render_svg(single_layout, 0))

    def test_label_uses_category_and_is_escaped(
        self, renderer: CutDiagramRenderer, standard_board: BoardSize
    ) -> None:
        pieces = [WoodPiece(id="a", length=100.0, width=50.0, category="Top & <Base>")]
        layout = compute_layout(standard_board, pieces)
        assert "Top & <Base>" in texts(renderer.render_svg(layout, 0, pieces))

    def test_rotated_dimensions_show_nominal_size(
        self,
        renderer: CutDiagramRenderer,
        standard_board: BoardSize,
        trimmed_pieces: list[WoodPiece],
    ) -> None:
        layout = compute_layout(standard_board, trimmed_pieces)
        assert "40×50 (R)" in texts(renderer.render_svg(layout, 0, trimmed_pieces))

    def test_board_index_out_of_range(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout
    ) -> None:
        with pytest.raises(IndexError):
            renderer.render_svg(single_layout, 1)

    def test_hidden_labels_and_dimensions(self, single_layout: CutLayout) -> None:
        renderer = CutDiagramRenderer(show_labels=False, show_dimensions=False)
        # Only the header text remains
        assert len(texts(renderer.render_svg(single_layout, 0))) == 1


class TestGrainIndicator:
    """Tests for grain direction arrows."""

    @pytest.mark.parametrize("grain", list(GrainDirection))
    def test_arrow_drawn_when_enabled(
        self, standard_board: BoardSize, grain: GrainDirection
    ) -> None:
        pieces = [WoodPiece(id="a", length=100.0, width=50.0, grain_direction=grain)]
        layout = compute_layout(standard_board, pieces)
        root = ET.fromstring(CutDiagramRenderer(show_grain=True).render_svg(layout, 0, pieces))
        line = next(root.iter(f"{SVG_NS}line"))
        horizontal = line.get("y1") == line.get("y2")
        assert horizontal == (grain == GrainDirection.LONGITUDINAL)
        assert len(list(root.iter(f"{SVG_NS}polygon"))) == 1

    def test_arrow_turns_with_rotated_piece(
        self, standard_board: BoardSize, trimmed_pieces: list[WoodPiece]
    ) -> None:
        layout = compute_layout(standard_board, trimmed_pieces)
        svg = CutDiagramRenderer(show_grain=True).render_svg(layout, 0, trimmed_pieces)
        line = next(ET.fromstring(svg).iter(f"{SVG_NS}line"))
        assert line.get("x1") == line.get("x2")

    def test_no_arrow_by_default(
        self, renderer: CutDiagramRenderer, single_layout: CutLayout, single_piece: WoodPiece
    ) -> None:
        root = ET.fromstring(renderer.render_svg(single_layout, 0, [single_piece]))
        assert list(root.iter(f"{SVG_NS}line")) == []


class TestMultiBoardRendering:
    """Tests for rendering every board."""

    def test_render_all_svg(
        self, renderer: CutDiagramRenderer, two_board_layout: CutLayout
    ) -> None:
        svgs = renderer.render_all_svg(two_board_layout)
        assert len(svgs) == 2
        assert "Board 2 of 2" in svgs[1]

    def test_combined_svg_stacks_boards(
        self, renderer: CutDiagramRenderer, two_board_layout: CutLayout
    ) -> None:
        root = ET.fromstring(renderer.render_combined_svg(two_board_layout))
        assert float(root.get("height")) == 2 * 518.0 + 20.0
        groups = [g for g in root.iter(f"{SVG_NS}g") if g.get("transform")]
        assert [g.get("transform") for g in groups] == [
            "translate(0, 0.0)",
            "translate(0, 538.0)",
        ]
        # Two headers, two board outlines and ten pieces
        assert len(list(root.iter(f"{SVG_NS}rect"))) == 14

    def test_combined_svg_of_empty_layout(
        self, renderer: CutDiagramRenderer, standard_board: BoardSize
    ) -> None:
        root = ET.fromstring(renderer.render_combined_svg(compute_layout(standard_board, [])))
        assert float(root.get("height")) == 0.0
