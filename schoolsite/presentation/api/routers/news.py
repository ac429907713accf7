from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from ....application.services.news_service import NewsItemNotFound, NewsService
from ....core.dependencies import get_news_service
from ....domain.models import AdminPrincipal, NewsItem
from ...api.dependencies import ensure_site_available, require_admin
from ...api.schemas.news import NewsCreateRequest, NewsUpdateRequest

router = APIRouter(tags=["News"])


@router.get("/api/news", dependencies=[Depends(ensure_site_available)])
def list_news(news_service: NewsService = Depends(get_news_service)) -> Dict[str, Any]:
    items = [_serialize_news(item) for item in news_service.list_published()]
    return {"items": items, "count": len(items)}


@router.get("/api/news/category/{category}", dependencies=[Depends(ensure_site_available)])
def list_news_by_category(
    category: str,
    news_service: NewsService = Depends(get_news_service),
) -> Dict[str, Any]:
    items = [_serialize_news(item) for item in news_service.list_published(category)]
    return {"items": items, "count": len(items)}


@router.get("/api/news/{news_id}", dependencies=[Depends(ensure_site_available)])
def get_news_item(news_id: int, news_service: NewsService = Depends(get_news_service)) -> Dict[str, Any]:
    try:
        item = news_service.get_published(news_id)
    except NewsItemNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _serialize_news(item)


@router.get("/api/admin/news")
def list_all_news(
    news_service: NewsService = Depends(get_news_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    items = [_serialize_news(item) for item in news_service.list_all()]
    return {"items": items, "count": len(items)}


@router.post("/api/admin/news", status_code=status.HTTP_201_CREATED)
def create_news(
    payload: NewsCreateRequest,
    news_service: NewsService = Depends(get_news_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        item = news_service.create(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_news(item)


@router.put("/api/admin/news/{news_id}")
def update_news(
    news_id: int,
    payload: NewsUpdateRequest,
    news_service: NewsService = Depends(get_news_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        item = news_service.update(news_id, payload.model_dump(exclude_unset=True))
    except NewsItemNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_news(item)


@router.delete("/api/admin/news/{news_id}")
def delete_news(
    news_id: int,
    news_service: NewsService = Depends(get_news_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        news_service.delete(news_id)
    except NewsItemNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"message": "News deleted successfully"}


def _serialize_news(item: NewsItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "content": item.content,
        "excerpt": item.excerpt,
        "category": item.category,
        "author": item.author,
        "imageUrl": item.image_url,
        "published": item.published,
        "createdAt": item.created_at.isoformat(),
        "updatedAt": item.updated_at.isoformat(),
    }
