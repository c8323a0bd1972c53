"""Application layer - use cases and orchestration."""

from .commands import ComputeLayoutCommand, compute_layout, compute_layout_cached

__all__ = [
    "ComputeLayoutCommand",
    "compute_layout",
    "compute_layout_cached",
]
