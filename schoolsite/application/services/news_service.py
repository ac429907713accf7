import logging
from typing import Any, Dict, List, Optional

from ...domain.models import NewsItem
from ...domain.ports.persistence import NewsRepository

logger = logging.getLogger(__name__)

REQUIRED_NEWS_FIELDS = ("title", "content", "category")


class NewsItemNotFound(LookupError):
    pass


class NewsService:
    """Publishes school news; visitors only ever see published items."""

    def __init__(self, repository: NewsRepository) -> None:
        self._repository = repository

    def list_published(self, category: Optional[str] = None) -> List[NewsItem]:
        return self._repository.get_news(published_only=True, category=category)

    def get_published(self, news_id: int) -> NewsItem:
        item = self._repository.get_news_item(news_id)
        if item is None or not item.published:
            raise NewsItemNotFound("News item not found")
        return item

    def list_all(self) -> List[NewsItem]:
        return self._repository.get_news()

    def create(self, fields: Dict[str, Any]) -> NewsItem:
        cleaned = self._clean(fields)
        missing = [name for name in REQUIRED_NEWS_FIELDS if not cleaned.get(name)]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")
        item = self._repository.create_news(cleaned)
        logger.info("Created news item %s (published=%s)", item.id, item.published)
        return item

    def update(self, news_id: int, fields: Dict[str, Any]) -> NewsItem:
        self._require(news_id)
        cleaned = self._clean(fields)
        if cleaned.get("published") is None:
            cleaned.pop("published", None)
        blank = [name for name in REQUIRED_NEWS_FIELDS if name in cleaned and not cleaned[name]]
        if blank:
            raise ValueError(f"Fields cannot be empty: {', '.join(blank)}")
        return self._repository.update_news(news_id, cleaned)

    def delete(self, news_id: int) -> None:
        self._require(news_id)
        self._repository.delete_news(news_id)
        logger.info("Deleted news item %s", news_id)

    def _require(self, news_id: int) -> NewsItem:
        item = self._repository.get_news_item(news_id)
        if item is None:
            raise NewsItemNotFound("News item not found")
        return item

    @staticmethod
    def _clean(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {
            name: value.strip() if isinstance(value, str) else value
            for name, value in fields.items()
        }
