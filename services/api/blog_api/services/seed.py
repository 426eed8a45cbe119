"""Bundled seed posts used to populate empty storage."""

from functools import lru_cache
from importlib import resources

from pydantic import TypeAdapter

from blog_api.schemas import BlogPost

SEED_RESOURCE = "seed_posts.json"


@lru_cache
def _read_seed_document() -> str:
    return resources.files("blog_api.data").joinpath(SEED_RESOURCE).read_text(encoding="utf-8")


def load_seed_posts() -> list[BlogPost]:
    """Load the bundled seed posts in their stored order."""
    return TypeAdapter(list[BlogPost]).validate_json(_read_seed_document())
