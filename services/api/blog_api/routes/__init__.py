"""API routes."""

from fastapi import APIRouter

from blog_api.routes import posts

api_router = APIRouter()

# Post CRUD + search/pagination
api_router.include_router(posts.router, prefix="/v1/posts", tags=["posts"])
