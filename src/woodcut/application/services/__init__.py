"""Application services."""

from .layout_assembler import LayoutAssemblerService

__all__ = ["LayoutAssemblerService"]
