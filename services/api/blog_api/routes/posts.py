"""Blog post endpoints.

GET    /v1/posts             - Page of posts (newest first, optional title search)
GET    /v1/posts/cards       - Same page projected to preview cards
GET    /v1/posts/{postId}    - Single post
POST   /v1/posts             - Create post
PUT    /v1/posts/{postId}    - Update post
DELETE /v1/posts/{postId}    - Delete post

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from blog_api.schemas import (
    BlogPost,
    BlogPostCardsResponse,
    BlogPostFormRequest,
    BlogPostsResponse,
    ErrorDetail,
    ErrorResponse,
)
from blog_api.services.post_store import PostStore, get_post_store, to_card

router = APIRouter()


def _not_found(post_id: int) -> HTTPException:
    error = ErrorResponse(
        error=ErrorDetail(
            code="POST_NOT_FOUND",
            message=f"Post {post_id} not found",
            detail={"post_id": post_id},
        )
    )
    return HTTPException(status_code=404, detail=error.model_dump())


@router.get("", response_model=BlogPostsResponse)
async def list_posts(
    page: int = Query(default=1, ge=1, description="1-based page number"),
    search: str = Query(default="", max_length=200, description="Case-insensitive title filter"),
    store: PostStore = Depends(get_post_store),
) -> BlogPostsResponse:
    """Get one page of posts.

    Returns:
        BlogPostsResponse; pagination.totalPages is 0 when nothing matched.
    """
    return store.query(page=page, search_query=search)


@router.get("/cards", response_model=BlogPostCardsResponse)
async def list_post_cards(
    page: int = Query(default=1, ge=1),
    search: str = Query(default="", max_length=200),
    excerpt_length: int = Query(default=150, alias="excerptLength", ge=1, le=2000),
    store: PostStore = Depends(get_post_store),
) -> BlogPostCardsResponse:
    """Get one page of posts as preview cards (excerpt + display date)."""
    result = store.query(page=page, search_query=search)
    return BlogPostCardsResponse(
        posts=[to_card(post, excerpt_length) for post in result.posts],
        pagination=result.pagination,
    )


@router.get("/{post_id}", response_model=BlogPost)
async def get_post(
    post_id: int = Path(ge=1, description="Post ID"),
    store: PostStore = Depends(get_post_store),
) -> BlogPost:
    """Get a single post.

    Raises:
        HTTPException 404: If post not found.
    """
    post = store.get_by_id(post_id)
    if post is None:
        raise _not_found(post_id)
    return post


@router.post("", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_post(
    form: BlogPostFormRequest,
    store: PostStore = Depends(get_post_store),
) -> BlogPost:
    """Create a post from validated form data."""
    return store.create(form)


@router.put("/{post_id}", response_model=BlogPost)
async def update_post(
    form: BlogPostFormRequest,
    post_id: int = Path(ge=1),
    store: PostStore = Depends(get_post_store),
) -> BlogPost:
    """Update title, content and image of a post.

    Raises:
        HTTPException 404: If post not found.
    """
    post = store.update(post_id, form)
    if post is None:
        raise _not_found(post_id)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int = Path(ge=1),
    store: PostStore = Depends(get_post_store),
) -> Response:
    """Delete a post.

    Raises:
        HTTPException 404: If nothing was deleted.
    """
    if not store.delete(post_id):
        raise _not_found(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
