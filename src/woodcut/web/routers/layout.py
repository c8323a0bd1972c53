"""Layout router for cut plan computation."""

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse, Response

from woodcut.application import compute_layout_cached
from woodcut.application.config import config_to_board, config_to_pieces
from woodcut.domain import CutLayout, WoodPiece
from woodcut.infrastructure import CutDiagramRenderer
from woodcut.web.dependencies import BomFormatterDep
from woodcut.web.schemas import CutLayoutSchema, LayoutRequest

router = APIRouter(prefix="/layout", tags=["layout"])


def _compute(request: LayoutRequest) -> tuple[list[WoodPiece], CutLayout]:
    pieces = config_to_pieces(request.pieces)
    layout = compute_layout_cached(
        config_to_board(request.board), pieces, request.rotation_policy
    )
    return pieces, layout


@router.post("", response_model=CutLayoutSchema)
async def create_layout(request: LayoutRequest) -> CutLayoutSchema:
    """Compute the cutting plan for a piece list.

    Invalid pieces and pieces larger than the board are reported as 422
    responses by the registered exception handlers.
    """
    _, layout = _compute(request)
    return CutLayoutSchema.from_layout(layout)


@router.post("/diagram")
async def layout_diagram(
    request: LayoutRequest,
    show_grain: bool = Query(default=False, description="Draw grain arrows"),
    scale: float = Query(default=4.0, gt=0, description="Pixels per cm"),
) -> Response:
    """Render all boards of the layout as one SVG document."""
    pieces, layout = _compute(request)
    renderer = CutDiagramRenderer(scale=scale, show_grain=show_grain)
    svg = renderer.render_combined_svg(layout, pieces)
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/bom", response_class=PlainTextResponse)
async def layout_bom(request: LayoutRequest, formatter: BomFormatterDep) -> str:
    """Render the bill of materials as plain text."""
    pieces, layout = _compute(request)
    return formatter.format(layout, pieces, request.project_name)
