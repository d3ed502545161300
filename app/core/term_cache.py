"""
용어 캐싱 모듈 (Term Cache)

Keeps the server-managed custom term list in memory so highlight requests
do not hit the database every time. Writes go through TermService, which
invalidates the entry. Only the single key CUSTOM_TERMS_KEY is stored.

사용 예시:
    >>> from app.core.term_cache import term_cache
    >>>
    >>> terms = term_cache.get(CUSTOM_TERMS_KEY)
    >>> if terms is None:
    ...     terms = load_from_db()
    ...     term_cache.set(CUSTOM_TERMS_KEY, terms)
    >>>
    >>> # 용어 변경 시 캐시 무효화
    >>> term_cache.invalidate(CUSTOM_TERMS_KEY)
"""

from datetime import datetime, timedelta
from typing import Dict, Any, Optional, Tuple
import logging
import threading

from agent.term_detection.models import Term
from app.config import settings

logger = logging.getLogger(__name__)

CUSTOM_TERMS_KEY = "custom"


class TermCache:
    """
    TTL 캐시 for term lists

    특징:
    - TTL (Time-To-Live) 기반 자동 만료
    - Thread-safe 구현
    - 수동 무효화 지원

    Attributes:
        ttl_seconds: 캐시 유효 시간 (초)
    """

    def __init__(self, ttl_seconds: int = 300):  # 5분
        self._cache: Dict[str, Tuple[Tuple[Term, ...], datetime]] = {}
        self._ttl = timedelta(seconds=ttl_seconds)
        self._lock = threading.Lock()

        logger.info(f"📦 TermCache 초기화: TTL={ttl_seconds}s")

    def _now(self) -> datetime:
        return datetime.now()

    def get(self, key: str) -> Optional[Tuple[Term, ...]]:
        """
        캐시에서 용어 리스트 조회

        Returns:
            Cached terms, or None on a miss or an expired entry
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                logger.debug(f"❌ 캐시 미스: key={key}")
                return None

            terms, timestamp = entry
            if self._now() - timestamp > self._ttl:
                del self._cache[key]
                logger.debug(f"⏰ 캐시 만료: key={key}")
                return None

            logger.debug(f"✅ 캐시 히트: key={key}, terms={len(terms)}")
            return terms

    def set(self, key: str, terms: Tuple[Term, ...]) -> None:
        """캐시에 용어 리스트 저장"""
        with self._lock:
            self._cache[key] = (tuple(terms), self._now())
            logger.debug(f"💾 캐시 저장: key={key}, terms={len(terms)}")

    def invalidate(self, key: str) -> bool:
        """
        특정 키의 캐시 무효화

        Returns:
            True if an entry was removed
        """
        with self._lock:
            if self._cache.pop(key, None) is not None:
                logger.info(f"🔄 캐시 무효화: key={key}")
                return True
            return False

    def clear(self) -> None:
        """전체 캐시 초기화"""
        with self._lock:
            self._cache.clear()
            logger.info("🧹 전체 캐시 초기화 완료")

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._cache),
                "ttl_seconds": self._ttl.total_seconds(),
                "cached_keys": list(self._cache.keys())
            }


# 전역 싱글톤 인스턴스
term_cache = TermCache(ttl_seconds=settings.TERM_CACHE_TTL_SECONDS)


def get_term_cache() -> TermCache:
    """TermCache 싱글톤 인스턴스 반환"""
    return term_cache
