"""
Pydantic schemas for the highlight API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List

from app.config import settings
from app.schemas.term import TermResponse


class HighlightRequest(BaseModel):
    """용어 검출 요청"""
    text: str = Field(..., min_length=1, max_length=settings.MAX_TEXT_LENGTH, description="English source text")

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """텍스트 검증 (blank text is rejected, the text itself is kept as sent)"""
        if not v.strip():
            raise ValueError("テキストを入力してください")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "text": "The nation state is central to the balance of power."
            }
        }


class MatchResponse(BaseModel):
    """A located term occurrence"""
    start: int = Field(..., description="Start offset (inclusive)")
    end: int = Field(..., description="End offset (exclusive)")
    original_text: str = Field(..., description="Matched text as typed")
    term: TermResponse


class HighlightResponse(BaseModel):
    """용어 검출 응답"""
    html: str = Field(..., description="Escaped HTML with highlighted terms")
    summary_html: str = Field(..., description="Detected term cards")
    matches: List[MatchResponse]
    terms: List[TermResponse] = Field(..., description="Unique detected terms, first-seen order")
    terms_count: int
    matches_count: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    message: str
