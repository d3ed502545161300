"""
API endpoints for the server-managed custom dictionary.
Handles routing and validation only - business logic is in TermService.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.auth import get_current_user, require_admin
from app.core.term_io import EXPORT_FILENAME, parse_bulk_text
from app.database import get_db
from app.schemas.term import (
    BulkImportRequest,
    BulkImportResponse,
    BulkTextImportRequest,
    CustomTermResponse,
    TermCreateRequest,
    TermDeleteResponse,
    TermListResponse,
    TermUpdateRequest,
)
from app.services.term_service import TermService, DuplicateTermError, TermNotFoundError
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


def _raise_http(e: Exception):
    """Map service exceptions to HTTP errors."""
    if isinstance(e, DuplicateTermError):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, TermNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="用語が見つかりません")
    if isinstance(e, ValueError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    logger.error(f"❌ 용어 처리 실패: {str(e)}", exc_info=True)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="用語の保存中にエラーが発生しました"
    )


@router.get("/terms", response_model=TermListResponse)
def list_terms(
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user)
):
    """All custom terms in insertion order."""
    rows = TermService(db).list_terms()
    return TermListResponse(terms=[CustomTermResponse.model_validate(row) for row in rows])


@router.post("/terms", response_model=CustomTermResponse, status_code=status.HTTP_201_CREATED)
def add_term(
    request: TermCreateRequest,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user)
):
    """
    Add a custom term (any authenticated user).

    Raises:
        HTTPException 400: en or ja missing
        HTTPException 409: en already in the dictionary
    """
    try:
        term = TermService(db).add_term(request.model_dump(), username=user["username"])
    except Exception as e:
        _raise_http(e)
    return CustomTermResponse.model_validate(term)


@router.post("/terms/bulk", response_model=BulkImportResponse)
def bulk_import_terms(
    request: BulkImportRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """
    Bulk import (admin only).

    Records with missing fields or duplicate English phrases are skipped.
    """
    try:
        result = TermService(db).bulk_import(
            [t.model_dump() for t in request.terms],
            username=admin["username"]
        )
    except Exception as e:
        _raise_http(e)
    return BulkImportResponse(**result)


@router.post("/terms/import", response_model=BulkImportResponse)
def import_terms_text(
    request: BulkTextImportRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """
    Bulk import from raw lines (admin only).

    Each line: en, ja, category?, note?, reference? separated by tabs or commas.
    """
    records = parse_bulk_text(request.raw)
    if not records:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="有効なデータがありません")
    try:
        result = TermService(db).bulk_import(records, username=admin["username"])
    except Exception as e:
        _raise_http(e)
    return BulkImportResponse(**result)


@router.get("/terms/export")
def export_terms(
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user)
):
    """Custom terms as "en, ja, category, note, reference" lines."""
    content = TermService(db).export_csv()
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'}
    )


@router.put("/terms/{term_id}", response_model=CustomTermResponse)
def update_term(
    term_id: str,
    request: TermUpdateRequest,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """Partial update (admin only)."""
    try:
        term = TermService(db).update_term(
            term_id,
            request.model_dump(exclude_unset=True),
            username=admin["username"]
        )
    except Exception as e:
        _raise_http(e)
    return CustomTermResponse.model_validate(term)


@router.delete("/terms/{term_id}", response_model=TermDeleteResponse)
def delete_term(
    term_id: str,
    db: Session = Depends(get_db),
    admin: dict = Depends(require_admin)
):
    """Delete a custom term (admin only)."""
    try:
        removed = TermService(db).delete_term(term_id)
    except Exception as e:
        _raise_http(e)
    return TermDeleteResponse(removed=CustomTermResponse(**removed))
