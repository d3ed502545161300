"""
SQLAlchemy ORM model for server-managed custom terms.
"""
from sqlalchemy import Column, String, Text, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from app.database import Base
import uuid

from agent.term_detection.models import Term


def generate_term_id() -> str:
    return uuid.uuid4().hex


class CustomTerm(Base):
    """Custom dictionary term added through the API."""
    __tablename__ = "custom_terms"

    id = Column(String(32), primary_key=True, default=generate_term_id)

    # Term information
    en = Column(String(255), nullable=False)
    en_key = Column(String(255), nullable=False)  # lower(en), case-insensitive uniqueness
    ja = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, default="custom")
    note = Column(Text, nullable=False, default="")
    reference = Column(Text, nullable=False, default="")

    # Audit
    added_by = Column(String(50), nullable=True)
    added_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_by = Column(String(50), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint('en_key', name='custom_terms_en_key_unique'),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "en": self.en,
            "ja": self.ja,
            "category": self.category,
            "note": self.note or "",
            "reference": self.reference or "",
            "added_by": self.added_by,
            "added_at": self.added_at,
            "updated_by": self.updated_by,
            "updated_at": self.updated_at,
        }

    def to_term(self) -> Term:
        """Immutable value used by the matcher."""
        return Term(
            en=self.en,
            ja=self.ja,
            category=self.category or "custom",
            note=self.note or "",
            reference=self.reference or "",
            id=self.id,
        )
