import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fileblog import dependencies as deps
from fileblog.schemas.blog import Post, PostCreate, PostUpdate
from fileblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()

REQUIRED_FIELDS_DETAIL = "Title and content are required"


@router.get("/posts", response_model=List[Post])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts, newest first."""
    try:
        return service.list_posts().posts
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/search", response_model=List[Post])
def search_posts(
    q: Optional[str] = Query(default=None),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Case-insensitive substring search over title, content and tags."""
    if not q:
        return []
    try:
        return service.search_posts(q)
    except Exception as e:
        logger.error(f"Unexpected error searching posts for {q!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to search posts")


@router.get("/tag/{tag}", response_model=List[Post])
def get_posts_by_tag(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return service.get_posts_by_tag(tag)
    except Exception as e:
        logger.error(f"Unexpected error filtering posts by tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.post("/posts", response_model=Post, status_code=201)
def create_post(
    payload: PostCreate,
    service: PostsService = Depends(deps.get_posts_service),
):
    _require_title_and_content(payload)
    try:
        return service.create_post(payload)
    except Exception as e:
        logger.error(f"Unexpected error creating post: {e}")
        raise HTTPException(status_code=500, detail="Failed to create post")


@router.get("/posts/{filename}", response_model=Post)
def get_post(
    filename: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by its filename handle."""
    try:
        post = service.get_post(filename)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.put("/posts/{filename}", response_model=Post)
def update_post(
    filename: str,
    payload: PostUpdate,
    service: PostsService = Depends(deps.get_posts_service),
):
    _require_title_and_content(payload)
    try:
        post = service.update_post(filename, payload)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error updating post {filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update post")


@router.delete("/posts/{filename}")
def delete_post(
    filename: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        deleted = service.delete_post(filename)
    except Exception as e:
        logger.error(f"Unexpected error deleting post {filename}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete post")
    if not deleted:
        raise HTTPException(status_code=404, detail="Post not found")
    return {"deleted": True}


def _require_title_and_content(payload: PostCreate) -> None:
    if not (payload.title or "").strip() or not (payload.content or "").strip():
        raise HTTPException(status_code=400, detail=REQUIRED_FIELDS_DETAIL)
