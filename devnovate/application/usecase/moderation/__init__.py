"""Moderation use cases."""

from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase
from .list_moderation_queue import (
    ListModerationQueueRequest,
    ListModerationQueueResponse,
    ListModerationQueueUseCase,
)
from .moderate_blog import ModerateBlogRequest, ModerateBlogResponse, ModerateBlogUseCase

__all__ = [
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
    "ListModerationQueueRequest",
    "ListModerationQueueResponse",
    "ListModerationQueueUseCase",
    "ModerateBlogRequest",
    "ModerateBlogResponse",
    "ModerateBlogUseCase",
]
