import datetime
import logging
import uuid
from typing import Callable, List, Optional

from pydantic import ValidationError

from fileblog.schemas.blog import (
    ListingWarning,
    Post,
    PostCreate,
    PostListing,
    PostUpdate,
)
from fileblog.utils import parse_tags, slugify

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Anonymous"
FALLBACK_SLUG = "post"
HANDLE_SUFFIX_LENGTH = 8
MAX_HANDLE_ATTEMPTS = 5


class PostsService:
    def __init__(
        self,
        repo,
        clock: Optional[Callable[[], datetime.datetime]] = None,
        suffix_factory: Optional[Callable[[], str]] = None,
    ):
        self.repo = repo
        self.clock = clock or _utcnow
        self.suffix_factory = suffix_factory or _random_suffix

    def generate_handle(self, title: str) -> str:
        """
        Slug of the title plus a short random suffix, e.g. ``my-first-post-1a2b3c4d``.
        Regenerates the suffix when the handle is already taken.
        """
        if not title or not title.strip():
            raise ValueError("title must be non-empty")

        slug = slugify(title) or FALLBACK_SLUG
        for _ in range(MAX_HANDLE_ATTEMPTS):
            handle = f"{slug}-{self.suffix_factory()}"
            if not self.repo.exists(handle):
                return handle
            logger.warning(f"Handle collision for {handle}, retrying")
        raise RuntimeError(f"Could not allocate a unique handle for {title!r}")

    def list_posts(self) -> PostListing:
        docs, warnings = self.repo.list_post_docs()
        posts = []
        for handle, doc in docs:
            post = parse_post(doc, handle)
            if post is None:
                warnings.append(
                    ListingWarning(
                        filename=f"{handle}.json", reason="invalid post document"
                    )
                )
                continue
            posts.append(post)

        posts.sort(key=lambda p: p.createdAt, reverse=True)
        return PostListing(posts=posts, warnings=warnings)

    def get_post(self, handle: str) -> Optional[Post]:
        doc = self.repo.get_post_doc(handle)
        if doc is None:
            return None
        return parse_post(doc, handle)

    def create_post(self, data: PostCreate) -> Post:
        now = self.clock()
        title = data.title.strip()
        post = Post(
            id=str(uuid.uuid4()),
            title=title,
            content=data.content.strip(),
            author=_clean(data.author) or DEFAULT_AUTHOR,
            tags=parse_tags(data.tags),
            createdAt=now,
            updatedAt=now,
            filename=self.generate_handle(title),
        )
        self.repo.save_post_doc(post.filename, _to_doc(post))
        logger.info(f"Created post {post.filename}")
        return post

    def update_post(self, handle: str, data: PostUpdate) -> Optional[Post]:
        stored = self.repo.get_post_doc(handle)
        if stored is None:
            return None
        existing = parse_post(stored, handle)
        if existing is None:
            return None

        changes = {
            "updatedAt": _next_timestamp(self.clock(), existing.updatedAt),
        }
        for field in ("title", "content", "author"):
            value = _clean(getattr(data, field))
            if value:
                changes[field] = value
        if data.tags is not None:
            changes["tags"] = parse_tags(data.tags)

        updated = existing.model_copy(update=changes)
        # keys this model does not know about are carried over untouched
        doc = {k: v for k, v in stored.items() if k != "filename"}
        doc.update(_to_doc(updated))
        self.repo.save_post_doc(handle, doc)
        logger.info(f"Updated post {handle}")
        return updated

    def delete_post(self, handle: str) -> bool:
        deleted = self.repo.delete_post_doc(handle)
        if deleted:
            logger.info(f"Deleted post {handle}")
        return deleted

    def search_posts(self, query: str) -> List[Post]:
        needle = query.lower()
        return [
            post
            for post in self.list_posts().posts
            if needle in post.title.lower()
            or needle in post.content.lower()
            or any(needle in tag.lower() for tag in post.tags)
        ]

    def get_posts_by_tag(self, tag: str) -> List[Post]:
        wanted = tag.lower()
        return [
            post
            for post in self.list_posts().posts
            if any(t.lower() == wanted for t in post.tags)
        ]


def parse_post(doc: dict, handle: str) -> Optional[Post]:
    """Validate a stored document and reattach its handle."""
    try:
        return Post.model_validate({**doc, "filename": handle})
    except ValidationError as e:
        logger.warning(f"Failed to parse post {handle}: {e}")
        return None


def _to_doc(post: Post) -> dict:
    return post.model_dump(mode="json", exclude={"filename"})


def _clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if value else value


def _next_timestamp(
    now: datetime.datetime, previous: datetime.datetime
) -> datetime.datetime:
    # clocks can be coarse; updatedAt must still move forward
    if now <= previous:
        return previous + datetime.timedelta(microseconds=1)
    return now


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def _random_suffix() -> str:
    return uuid.uuid4().hex[:HANDLE_SUFFIX_LENGTH]
