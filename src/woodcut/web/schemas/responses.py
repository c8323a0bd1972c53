"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field

from woodcut.domain import CutLayout


class BoardSchema(BaseModel):
    """Stock board dimensions."""

    length: float = Field(..., description="Board length in cm")
    width: float = Field(..., description="Board width in cm")


class PlacementSchema(BaseModel):
    """One piece instance placed on a board."""

    piece_id: str = Field(..., description="Id of the source piece")
    instance_ordinal: int = Field(..., description="1-based unit number within the piece")
    board_index: int = Field(..., description="Zero-based board index")
    x: float = Field(..., description="Left edge in cm from the board's left side")
    y: float = Field(..., description="Top edge in cm from the board's top side")
    length: float = Field(..., description="Footprint along the board length in cm")
    width: float = Field(..., description="Footprint along the board width in cm")
    rotated: bool = Field(..., description="Whether the piece is turned 90 degrees")


class BoardUsageSchema(BaseModel):
    """Usage summary of one board."""

    board_index: int = Field(..., description="Zero-based board index")
    piece_count: int = Field(..., description="Number of pieces on the board")
    utilization: float = Field(..., description="Covered area as percent of the board")


class CutLayoutSchema(BaseModel):
    """Response for layout computation."""

    board: BoardSchema
    boards_needed: int = Field(..., description="Number of boards used")
    total_pieces: int = Field(..., description="Number of placed piece instances")
    total_waste: float = Field(..., description="Trim waste in cm")
    total_waste_m: float = Field(..., description="Trim waste in meters")
    placements: list[PlacementSchema] = Field(default_factory=list)
    boards: list[BoardUsageSchema] = Field(default_factory=list)

    @classmethod
    def from_layout(cls, layout: CutLayout) -> "CutLayoutSchema":
        """Build the response from a computed layout."""
        return cls(
            board=BoardSchema(length=layout.board.length, width=layout.board.width),
            boards_needed=layout.boards_needed,
            total_pieces=layout.total_pieces,
            total_waste=layout.total_waste,
            total_waste_m=round(layout.total_waste / 100.0, 2),
            placements=[
                PlacementSchema(
                    piece_id=p.piece_id,
                    instance_ordinal=p.instance_ordinal,
                    board_index=p.board_index,
                    x=p.x,
                    y=p.y,
                    length=p.length,
                    width=p.width,
                    rotated=p.rotated,
                )
                for p in layout.placements
            ],
            boards=[
                BoardUsageSchema(
                    board_index=index,
                    piece_count=len(layout.placements_on(index)),
                    utilization=round(layout.utilization(index), 2),
                )
                for index in range(layout.boards_needed)
            ],
        )
