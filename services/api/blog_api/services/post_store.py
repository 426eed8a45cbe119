"""Post store: the canonical post list and the queries over it.

Storage layout:
- One JSON array of posts under the `blog_posts` key
- Absent or blank value = uninitialized (seeded on startup), reads as no posts

Listing logic:
1. Filter by case-insensitive title substring (when the search is not blank)
2. Sort by createdAt DESC (stable, ties keep stored order)
3. Slice page N of POSTS_PER_PAGE

Every operation is one load -> compute -> store round trip. Concurrent
writers are not coordinated: the last write wins.
"""

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
import logging
import math

from pydantic import TypeAdapter, ValidationError

from blog_api.schemas import (
    BlogPost,
    BlogPostCard,
    BlogPostFormData,
    BlogPostsResponse,
    PaginationInfo,
)
from blog_api.services.formatting import DEFAULT_EXCERPT_LENGTH, format_date, generate_excerpt
from blog_api.services.seed import load_seed_posts
from blog_api.stores.base import KeyValueStorage
from blog_api.stores.storage import get_storage

STORAGE_KEY = "blog_posts"
POSTS_PER_PAGE = 9

logger = logging.getLogger("uvicorn.error")

_posts_adapter = TypeAdapter(list[BlogPost])


class StorageCorruptError(RuntimeError):
    pass


def _utc_now() -> datetime:
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class PostStore:
    """CRUD and paginated search over posts kept in a key-value storage."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = STORAGE_KEY,
        seed_posts: Sequence[BlogPost] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._storage = storage
        self._key = key
        self._seed_posts = seed_posts
        self._clock = clock

    def initialize(self) -> bool:
        """Seed storage if the key is absent or blank.

        Returns:
            True if seed data was written, False if the key already existed.
        """
        if self._storage.get(self._key):
            return False

        seed = list(self._seed_posts) if self._seed_posts is not None else load_seed_posts()
        self._save(seed)
        logger.info(f"Post storage seeded with {len(seed)} posts")
        return True

    def list_all(self) -> list[BlogPost]:
        """Get all posts in stored order.

        Raises:
            StorageCorruptError: If the stored document cannot be parsed.
        """
        raw = self._storage.get(self._key)
        if not raw:
            return []

        try:
            return _posts_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Stored posts under '{self._key}' are unreadable: {e.error_count()} errors")
            raise StorageCorruptError(f"Stored posts under '{self._key}' are corrupt") from e

    def query(self, page: int = 1, search_query: str = "") -> BlogPostsResponse:
        """Get one page of posts, newest first, optionally filtered by title.

        Args:
            page: 1-based page number. Pages past the end (or below 1) are empty.
            search_query: Case-insensitive title substring. Blank means no filter.

        Returns:
            BlogPostsResponse with the page slice and pagination info.
        """
        posts = self.list_all()

        if search_query.strip():
            needle = search_query.lower()
            posts = [post for post in posts if needle in post.title.lower()]

        posts = sorted(posts, key=lambda post: post.created_at, reverse=True)

        total_posts = len(posts)
        total_pages = math.ceil(total_posts / POSTS_PER_PAGE)

        if page < 1:
            page_posts: list[BlogPost] = []
        else:
            start = (page - 1) * POSTS_PER_PAGE
            page_posts = posts[start : start + POSTS_PER_PAGE]

        return BlogPostsResponse(
            posts=page_posts,
            pagination=PaginationInfo(
                current_page=page,
                total_pages=total_pages,
                posts_per_page=POSTS_PER_PAGE,
                total_posts=total_posts,
            ),
        )

    def get_by_id(self, post_id: int) -> BlogPost | None:
        return next((post for post in self.list_all() if post.id == post_id), None)

    def create(self, form: BlogPostFormData) -> BlogPost:
        """Append a new post with the next id and the current time."""
        posts = self.list_all()
        next_id = max((post.id for post in posts), default=0) + 1

        post = BlogPost(
            id=next_id,
            title=form.title,
            content=form.content,
            img_url=form.img_url or None,
            created_at=self._clock(),
        )
        posts.append(post)
        self._save(posts)

        logger.info(f"Post {post.id} created")
        return post

    def update(self, post_id: int, form: BlogPostFormData) -> BlogPost | None:
        """Replace title, content and imgUrl of a post.

        id and createdAt are kept. Returns None if no post has this id.
        """
        posts = self.list_all()

        for index, post in enumerate(posts):
            if post.id != post_id:
                continue
            updated = post.model_copy(
                update={
                    "title": form.title,
                    "content": form.content,
                    "img_url": form.img_url or None,
                }
            )
            posts[index] = updated
            self._save(posts)
            logger.info(f"Post {post_id} updated")
            return updated

        logger.warning(f"Update skipped: post {post_id} not found")
        return None

    def delete(self, post_id: int) -> bool:
        """Remove a post. Returns False (and writes nothing) if it did not exist."""
        posts = self.list_all()
        remaining = [post for post in posts if post.id != post_id]

        if len(remaining) == len(posts):
            logger.warning(f"Delete skipped: post {post_id} not found")
            return False

        self._save(remaining)
        logger.info(f"Post {post_id} deleted")
        return True

    def excerpt(self, content: str, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
        return generate_excerpt(content, max_length)

    def _save(self, posts: Sequence[BlogPost]) -> None:
        document = _posts_adapter.dump_json(list(posts), by_alias=True).decode("utf-8")
        self._storage.set(self._key, document)


def to_card(post: BlogPost, excerpt_length: int = DEFAULT_EXCERPT_LENGTH) -> BlogPostCard:
    """Project a post to its list-view card."""
    return BlogPostCard(
        id=post.id,
        title=post.title,
        img_url=post.img_url,
        created_at=post.created_at,
        formatted_date=format_date(post.created_at),
        excerpt=generate_excerpt(post.content, excerpt_length),
    )


def get_post_store() -> PostStore:
    """Post store bound to the process-wide storage (FastAPI dependency)."""
    return PostStore(get_storage())
