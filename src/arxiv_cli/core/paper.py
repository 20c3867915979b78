"""
Normalized paper record
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Field order of one metadata line; summary is intentionally absent
METADATA_FIELDS = (
    'id',
    'updated',
    'published',
    'title',
    'authors',
    'primary_category',
    'categories',
    'pdf_url',
    'html_url',
    'comment',
)


@dataclass(frozen=True)
class Paper:
    """One arXiv feed entry"""
    id: str
    title: str
    summary: str = ""
    updated: str = ""
    published: str = ""
    authors: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    pdf_url: str = ""
    html_url: str = ""
    comment: Optional[str] = None

    @property
    def primary_category(self) -> Optional[str]:
        """First category term in source order"""
        return self.categories[0] if self.categories else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for metadata serialization (no summary)"""
        result = {name: getattr(self, name) for name in METADATA_FIELDS}
        result['authors'] = list(self.authors)
        result['categories'] = list(self.categories)
        if self.comment is None:
            del result['comment']
        return result

    def to_json(self) -> str:
        """Serialize to a single JSONL line"""
        return json.dumps(self.to_dict(), ensure_ascii=False)
