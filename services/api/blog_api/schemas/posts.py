"""Schemas for blog posts (/v1/posts).

Field aliases match the stored JSON document:
{"id", "title", "content", "imgUrl", "createdAt"}.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from blog_api.services.formatting import is_valid_url


class BlogPost(BaseModel):
    """A single blog post as persisted."""

    id: int = Field(ge=1)
    title: str
    content: str
    img_url: str | None = Field(alias="imgUrl", default=None)
    created_at: datetime = Field(alias="createdAt")

    model_config = {"populate_by_name": True}

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        # Naive timestamps cannot be ordered against aware ones.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class BlogPostFormData(BaseModel):
    """Editable fields of a post, as submitted by the form.

    Carries no constraints: the store trusts whatever it is given.
    """

    title: str
    content: str
    img_url: str = Field(alias="imgUrl", default="")

    model_config = {"populate_by_name": True}


class BlogPostFormRequest(BlogPostFormData):
    """Request body for create/update with the form's field validation."""

    @field_validator("title")
    @classmethod
    def _title_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v

    @field_validator("content")
    @classmethod
    def _content_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content is required")
        return v

    @field_validator("img_url", mode="before")
    @classmethod
    def _valid_img_url(cls, v: object) -> object:
        if v is None:
            return ""
        if isinstance(v, str) and not is_valid_url(v):
            raise ValueError("Please enter a valid URL")
        return v


class PaginationInfo(BaseModel):
    """Page bookkeeping for a post listing."""

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages", ge=0)
    posts_per_page: int = Field(alias="postsPerPage", ge=1)
    total_posts: int = Field(alias="totalPosts", ge=0)

    model_config = {"populate_by_name": True}


class BlogPostsResponse(BaseModel):
    """Response payload for GET /v1/posts.

    totalPages is 0 when nothing matched.
    """

    posts: list[BlogPost]
    pagination: PaginationInfo


class BlogPostCard(BaseModel):
    """List-view projection of a post: preview text instead of full content."""

    id: int
    title: str
    img_url: str | None = Field(alias="imgUrl", default=None)
    created_at: datetime = Field(alias="createdAt")
    formatted_date: str = Field(alias="formattedDate")
    excerpt: str

    model_config = {"populate_by_name": True}


class BlogPostCardsResponse(BaseModel):
    """Response payload for GET /v1/posts/cards."""

    posts: list[BlogPostCard]
    pagination: PaginationInfo
