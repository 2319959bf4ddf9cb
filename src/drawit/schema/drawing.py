"""Drawing and rating schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import WireModel


class RateDrawingRequest(WireModel):
    """Request schema for rating a drawing

    No range clamping: any float is accepted and the backend decides what
    is valid.
    """

    rating: float = Field(..., description="Rating value", examples=[4.5])

    def with_rating(self, rating: float) -> "RateDrawingRequest":
        return self.model_copy(update={"rating": rating})


class Point(WireModel):
    x: float
    y: float


class DrawingPath(WireModel):
    """One stroke of a drawing"""

    color: int = Field(0, description="ARGB color")
    stroke_width: float = Field(0.0, description="Stroke width in pixels")
    points: List[Point] = Field(default_factory=list)


class Drawing(WireModel):
    """Drawing record as submitted and returned by the backend"""

    drawing_id: str = Field(..., description="Drawing ID")
    user_id: Optional[str] = Field(None, description="Artist user ID")
    game_id: Optional[str] = Field(None, description="Game the drawing belongs to")
    round_number: int = Field(0, description="Round in which it was drawn")
    word: Optional[str] = Field(None, description="Word that was drawn")
    timestamp: Optional[datetime] = Field(None, description="Submission time")
    average_rating: float = Field(0.0, description="Average rating")
    rating_count: int = Field(0, description="Number of ratings received")
    user_rating: int = Field(0, description="Rating given by the current user")
    paths: List[DrawingPath] = Field(default_factory=list, description="Strokes")
