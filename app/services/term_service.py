"""
Custom term service.

Write side of the dictionary: add, bulk import, update, delete and export
server-managed terms. English phrases are unique case-insensitively across
the built-in and custom lists.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.categories import DEFAULT_CATEGORY
from app.core.term_cache import term_cache, CUSTOM_TERMS_KEY
from app.core.term_io import export_terms_csv
from app.models.term import CustomTerm, generate_term_id
from app.services.dictionary_service import DictionaryService

logger = logging.getLogger(__name__)


class DuplicateTermError(ValueError):
    """The English phrase is already in the dictionary."""


class TermNotFoundError(LookupError):
    """No custom term with the given id."""


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


class TermService:
    """
    커스텀 용어 비즈니스 로직 서비스.

    담당 역할:
    - 입력 검증 및 중복 체크
    - 데이터베이스 작업
    - 캐시 무효화

    사용 예시:
        >>> service = TermService(db)
        >>> term = service.add_term({"en": "détente", "ja": "緊張緩和"}, username="admin")
    """

    def __init__(self, db: Session):
        self.db = db
        self.dictionary = DictionaryService(db)
        self._term_cache = term_cache

    def _invalidate(self) -> None:
        self._term_cache.invalidate(CUSTOM_TERMS_KEY)

    def list_terms(self) -> List[CustomTerm]:
        return (
            self.db.query(CustomTerm)
            .order_by(CustomTerm.added_at, CustomTerm.id)
            .all()
        )

    def _stored_keys(self) -> set:
        return {key for (key,) in self.db.query(CustomTerm.en_key)}

    def get_term(self, term_id: str) -> CustomTerm:
        term = self.db.query(CustomTerm).filter(CustomTerm.id == term_id).first()
        if term is None:
            raise TermNotFoundError(f"用語が見つかりません: {term_id}")
        return term

    def _new_row(self, data: Dict[str, Any], username: str) -> CustomTerm:
        en = _clean(data.get("en"))
        return CustomTerm(
            id=generate_term_id(),
            en=en,
            en_key=en.lower(),
            ja=_clean(data.get("ja")),
            category=_clean(data.get("category")) or DEFAULT_CATEGORY,
            note=data.get("note") or "",
            reference=data.get("reference") or "",
            added_by=username,
            added_at=datetime.now(timezone.utc),
        )

    def add_term(self, data: Dict[str, Any], username: str) -> CustomTerm:
        """
        Add one custom term.

        Raises:
            ValueError: en or ja missing
            DuplicateTermError: en already registered (built-in or custom)
        """
        if not _clean(data.get("en")) or not _clean(data.get("ja")):
            raise ValueError("英語と日本語訳は必須です")

        if self.dictionary.find_by_en(data["en"]) is not None:
            raise DuplicateTermError("この用語は既に登録されています")

        term = self._new_row(data, username)
        try:
            self.db.add(term)
            self.db.commit()
            self.db.refresh(term)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateTermError("この用語は既に登録されています") from e
        except Exception:
            self.db.rollback()
            raise
        finally:
            self._invalidate()

        logger.info(f"➕ 용어 추가: '{term.en}' by {username}")
        return term

    def bulk_import(self, records: Iterable[Dict[str, Any]], username: str) -> Dict[str, int]:
        """
        Import many terms; invalid and duplicate records are skipped.

        Returns:
            {"imported": n, "skipped": n, "total": custom term count}

        Raises:
            ValueError: No records given
            DuplicateTermError: A concurrent insert took one of the phrases
        """
        records = list(records)
        if not records:
            raise ValueError("インポートする用語の配列が必要です")

        imported = 0
        skipped = 0
        # 캐시가 아닌 DB 기준으로 중복 체크 (다른 worker 의 insert 포함)
        taken_keys = self._stored_keys() | {t.key for t in self.dictionary.builtin_terms}

        try:
            for data in records:
                en = _clean(data.get("en"))
                if not en or not _clean(data.get("ja")):
                    skipped += 1
                    continue
                key = en.lower()
                if key in taken_keys:
                    skipped += 1
                    continue

                self.db.add(self._new_row(data, username))
                taken_keys.add(key)
                imported += 1

            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateTermError("この用語は既に登録されています") from e
        except Exception:
            self.db.rollback()
            raise
        finally:
            self._invalidate()

        total = self.db.query(CustomTerm).count()
        logger.info(f"📥 일괄 가져오기: imported={imported}, skipped={skipped}, total={total}")
        return {"imported": imported, "skipped": skipped, "total": total}

    def update_term(self, term_id: str, data: Dict[str, Any], username: str) -> CustomTerm:
        """
        Partial update.

        en, ja and category change only when a non-empty value is given;
        note and reference change whenever they are present in data.

        Raises:
            TermNotFoundError: Unknown id
            DuplicateTermError: New en collides with another term
        """
        term = self.get_term(term_id)

        en = _clean(data.get("en"))
        if en and en.lower() != term.en_key:
            if self.dictionary.find_by_en(en, exclude_id=term.id) is not None:
                raise DuplicateTermError("この用語は既に登録されています")

        try:
            if en:
                term.en = en
                term.en_key = en.lower()
            if _clean(data.get("ja")):
                term.ja = _clean(data["ja"])
            if _clean(data.get("category")):
                term.category = _clean(data["category"])
            if data.get("note") is not None:
                term.note = data["note"]
            if data.get("reference") is not None:
                term.reference = data["reference"]
            term.updated_by = username
            term.updated_at = datetime.now(timezone.utc)

            self.db.commit()
            self.db.refresh(term)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateTermError("この用語は既に登録されています") from e
        except Exception:
            self.db.rollback()
            raise
        finally:
            self._invalidate()

        logger.info(f"✏️ 용어 수정: '{term.en}' by {username}")
        return term

    def delete_term(self, term_id: str) -> Dict[str, Any]:
        """
        Delete a custom term.

        Returns:
            Field values of the removed term

        Raises:
            TermNotFoundError: Unknown id
        """
        term = self.get_term(term_id)
        removed = term.to_dict()
        try:
            self.db.delete(term)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        finally:
            self._invalidate()

        logger.info(f"🗑️ 용어 삭제: '{removed['en']}'")
        return removed

    def export_csv(self) -> str:
        """Custom terms in the export format."""
        return export_terms_csv(row.to_term() for row in self.list_terms())
