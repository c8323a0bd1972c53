"""Dependency injection for FastAPI routes."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from woodcut.infrastructure import BillOfMaterialsFormatter


@lru_cache
def get_bom_formatter() -> BillOfMaterialsFormatter:
    """Get the shared bill of materials formatter."""
    return BillOfMaterialsFormatter()


BomFormatterDep = Annotated[BillOfMaterialsFormatter, Depends(get_bom_formatter)]
