"""
Pydantic schemas for dictionary and custom term API requests and responses.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class TermBase(BaseModel):
    """Fields shared by term requests."""
    en: str = Field(..., max_length=255, description="English term")
    ja: str = Field(..., max_length=255, description="Japanese translation")
    category: Optional[str] = Field(None, max_length=50, description="Category key (default: custom)")
    note: Optional[str] = Field(None, description="Explanation shown in the tooltip")
    reference: Optional[str] = Field(None, description="Citation (author, work, year)")


class TermCreateRequest(TermBase):
    """용어 추가 요청."""

    class Config:
        json_schema_extra = {
            "example": {
                "en": "security dilemma",
                "ja": "安全保障のジレンマ",
                "category": "security",
                "note": "自国の安全強化が他国の不安を招く状況",
                "reference": "Jervis (1978)"
            }
        }


class TermUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""
    en: Optional[str] = Field(None, max_length=255)
    ja: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=50)
    note: Optional[str] = None
    reference: Optional[str] = None


class TermResponse(BaseModel):
    """A dictionary term (built-in terms have no id)."""
    id: Optional[str] = None
    en: str
    ja: str
    category: str
    note: str = ""
    reference: str = ""


class CustomTermResponse(TermResponse):
    """A stored custom term with audit fields."""
    id: str
    added_by: Optional[str] = None
    added_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TermListResponse(BaseModel):
    terms: List[CustomTermResponse]


class BulkTermRecord(BaseModel):
    """One bulk record; incomplete records are counted as skipped."""
    en: Optional[str] = Field(None, max_length=255)
    ja: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=50)
    note: Optional[str] = None
    reference: Optional[str] = None


class BulkImportRequest(BaseModel):
    """Bulk import of already-split records."""
    terms: List[BulkTermRecord] = Field(..., description="Terms to import")


class BulkTextImportRequest(BaseModel):
    """Bulk import of raw lines: en, ja, category?, note?, reference?"""
    raw: str = Field(..., description="Tab- or comma-delimited lines")


class BulkImportResponse(BaseModel):
    imported: int
    skipped: int
    total: int


class TermDeleteResponse(BaseModel):
    removed: CustomTermResponse


class DictionaryResponse(BaseModel):
    """Filtered view of built-in + custom terms."""
    terms: List[TermResponse]
    count: int
    total: int


class CategoryResponse(BaseModel):
    key: str
    icon: str
    label: str
