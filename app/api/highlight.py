"""
용어 검출 API 엔드포인트

Highlights dictionary terms in pasted English text.
Business logic is in HighlightService.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.auth import get_current_user
from app.database import get_db
from app.schemas.highlight import HighlightRequest, HighlightResponse, MatchResponse
from app.schemas.term import TermResponse
from app.services.highlight_service import HighlightService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/highlight", response_model=HighlightResponse, status_code=status.HTTP_200_OK)
def highlight_terms(
    request: HighlightRequest,
    db: Session = Depends(get_db),
    user: dict = Depends(get_current_user)
):
    """
    용어 검출 API

    Args:
        request: 검출 요청
            - text: English text to analyse

    Returns:
        HighlightResponse:
            - html: escaped markup with term-highlight spans (tooltip data in data-* attributes)
            - summary_html: detected term cards
            - matches: located matches sorted by position
            - terms: unique detected terms
            - terms_count / matches_count

    Raises:
        HTTPException 500: 처리 중 오류
    """
    try:
        result = HighlightService(db).highlight(request.text)
    except Exception as e:
        logger.error(f"❌ 용어 검출 실패: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="用語の検出中にエラーが発生しました"
        )

    logger.info(f"✅ 용어 검출 완료: user={user['username']}, terms={result['terms_count']}")

    return HighlightResponse(
        html=result["html"],
        summary_html=result["summary_html"],
        matches=[
            MatchResponse(
                start=m.start,
                end=m.end,
                original_text=m.original_text,
                term=TermResponse(**m.term.to_dict())
            )
            for m in result["matches"]
        ],
        terms=[TermResponse(**t.to_dict()) for t in result["terms"]],
        terms_count=result["terms_count"],
        matches_count=result["matches_count"]
    )
