"""FastAPI dependency utilities."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Header, HTTPException, Request, status

from notice.application.filters import (
    FilterContext,
    FilterRegistry,
    NotificationSource,
    PreferenceStoreFactory,
    build_default_registry,
)
from notice.application.sources import AggregatingNotificationSource, CachingNotificationSource
from notice.config import get_settings
from notice.domain.services import NotificationHistoryService, PreferenceStore
from notice.infrastructure.database import SessionLocal
from notice.infrastructure.feed import StaticNotificationSource
from notice.infrastructure.history import SqlAlchemyHistoryService
from notice.infrastructure.preferences import SqlAlchemyPreferenceStore
from notice.infrastructure.security import generate_csrf_token


def get_username(x_remote_user: str | None = Header(default=None)) -> str:
    """Return the user the fronting portal authenticated for this request."""

    username = (x_remote_user or "").strip()
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Remote-User header",
        )
    return username


@lru_cache
def get_history_service() -> NotificationHistoryService:
    """Return the shared database-backed history service."""

    return SqlAlchemyHistoryService(SessionLocal)


def get_preference_store_factory() -> PreferenceStoreFactory:
    """Return a factory building database-backed preference stores."""

    def preferences_for(username: str, instance_id: str) -> PreferenceStore:
        return SqlAlchemyPreferenceStore(
            SessionLocal, username=username, instance_id=instance_id
        )

    return preferences_for


@lru_cache
def get_notification_source() -> NotificationSource:
    """Return the configured sources, cached per user."""

    settings = get_settings()
    sources: dict[str, NotificationSource] = {}
    if settings.notifications_file:
        sources["feed"] = StaticNotificationSource(settings.notifications_file)
    return CachingNotificationSource(
        AggregatingNotificationSource(sources),
        ttl_seconds=settings.cache_ttl_seconds,
    )


def get_filter_registry(
    history: NotificationHistoryService = Depends(get_history_service),
    preferences_for: PreferenceStoreFactory = Depends(get_preference_store_factory),
) -> FilterRegistry:
    """Return the filters applied to every notification request."""

    return build_default_registry(history, preferences_for)


def get_csrf_token(username: str = Depends(get_username)) -> str | None:
    """Return the anti-forgery token issued to ``username``, if enabled."""

    return generate_csrf_token(username, get_settings().csrf_secret)


def get_filter_context(
    request: Request,
    username: str = Depends(get_username),
    csrf_token: str | None = Depends(get_csrf_token),
) -> FilterContext:
    """Describe the current request to the filter chain."""

    return FilterContext(
        username=username,
        request_url=str(request.url),
        context_path=request.scope.get("root_path", ""),
        csrf_token=csrf_token,
    )


__all__ = [
    "get_csrf_token",
    "get_filter_context",
    "get_filter_registry",
    "get_history_service",
    "get_notification_source",
    "get_preference_store_factory",
    "get_username",
]
