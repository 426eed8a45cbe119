#!/usr/bin/env python3
"""Seed post storage with the bundled posts.

Behavior:
- Uses the backend configured via env (STORAGE_BACKEND, DATABASE_URL, REDIS_URL)
- Idempotent: existing posts are never overwritten

Usage:
  cd services/api
  python -m scripts.seed

Optional env vars:
  SEED_RESET=1   delete stored posts first (destroys existing posts)
"""

import logging
import os

from dotenv import load_dotenv

from blog_api.services.post_store import STORAGE_KEY, PostStore
from blog_api.stores.storage import close_storage, init_storage

load_dotenv()

logger = logging.getLogger("uvicorn.error")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    storage = init_storage()
    try:
        if _env_flag("SEED_RESET"):
            storage.delete(STORAGE_KEY)
            logger.info(f"Deleted stored posts under '{STORAGE_KEY}'")

        store = PostStore(storage)
        seeded = store.initialize()
        total = len(store.list_all())
        if seeded:
            print(f"Seeded {total} posts")
        else:
            print(f"Storage already holds {total} posts, nothing to do")
    finally:
        close_storage()


if __name__ == "__main__":
    main()
