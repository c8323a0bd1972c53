"""Infrastructure layer - packing algorithm, renderers and formatters."""

from .bin_packing import PackingConfig, ShelfBinPacker
from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import (
    BillOfMaterialsFormatter,
    JsonExporter,
    LayoutSummaryFormatter,
    trimmed_edges_text,
)

__all__ = [
    # Bin packing
    "PackingConfig",
    "ShelfBinPacker",
    # Cut diagram rendering
    "CutDiagramRenderer",
    # Formatters
    "BillOfMaterialsFormatter",
    "JsonExporter",
    "LayoutSummaryFormatter",
    "trimmed_edges_text",
]
