"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
