from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class NewsItem:
    id: int
    title: str
    content: str
    excerpt: Optional[str]
    category: str
    author: Optional[str]
    image_url: Optional[str]
    published: bool
    created_at: datetime
    updated_at: datetime
