"""
Category registry for dictionary terms.

Display-only metadata (icon + label). Matching treats the category as an
opaque string.
"""
from typing import Dict, List

DEFAULT_CATEGORY = "custom"

CATEGORIES: Dict[str, Dict[str, str]] = {
    "theory": {"icon": "🧠", "label": "国際関係理論"},
    "security": {"icon": "🛡️", "label": "安全保障"},
    "diplomacy": {"icon": "🤝", "label": "外交"},
    "organization": {"icon": "🏛️", "label": "国際機構"},
    "economy": {"icon": "💹", "label": "国際政治経済"},
    "law": {"icon": "⚖️", "label": "国際法"},
    "region": {"icon": "🌏", "label": "地域研究"},
    "custom": {"icon": "📝", "label": "カスタム"},
}


def get_category(key: str) -> Dict[str, str]:
    """Registry entry for a key, falling back to the custom category."""
    return CATEGORIES.get(key) or CATEGORIES[DEFAULT_CATEGORY]


def get_category_label(key: str) -> str:
    """Label for a known key, empty string for unknown keys."""
    entry = CATEGORIES.get(key)
    return entry["label"] if entry else ""


def list_categories() -> List[Dict[str, str]]:
    return [{"key": key, **entry} for key, entry in CATEGORIES.items()]
