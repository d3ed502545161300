"""
API endpoints for browsing the dictionary and the category registry.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.auth import get_current_user
from app.core.categories import list_categories
from app.database import get_db
from app.schemas.term import CategoryResponse, DictionaryResponse, TermResponse
from app.services.dictionary_service import DictionaryService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dictionary", response_model=DictionaryResponse)
def get_dictionary(
    q: Optional[str] = Query(None, description="Search in en, ja, note and reference"),
    category: Optional[str] = Query(None, description="Category key"),
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user)
):
    """
    Built-in + custom terms, filtered and sorted by English phrase.

    Returns:
        terms, count (after filtering) and total (whole dictionary)
    """
    terms, total = DictionaryService(db).search(query=q, category=category)
    logger.debug(f"Dictionary view: {len(terms)} / {total}")
    return DictionaryResponse(
        terms=[TermResponse(**t.to_dict()) for t in terms],
        count=len(terms),
        total=total
    )


@router.get("/categories", response_model=List[CategoryResponse])
async def get_categories():
    """Category registry (icon + label per key)."""
    return [CategoryResponse(**entry) for entry in list_categories()]
