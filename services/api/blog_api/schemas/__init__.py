"""Pydantic schemas for API request/response validation."""

from blog_api.schemas.common import ErrorDetail, ErrorResponse
from blog_api.schemas.posts import (
    BlogPost,
    BlogPostCard,
    BlogPostCardsResponse,
    BlogPostFormData,
    BlogPostFormRequest,
    BlogPostsResponse,
    PaginationInfo,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "BlogPost",
    "BlogPostCard",
    "BlogPostCardsResponse",
    "BlogPostFormData",
    "BlogPostFormRequest",
    "BlogPostsResponse",
    "PaginationInfo",
]
