import datetime
import itertools
from typing import Dict, List, Optional

from fileblog.db.file_store import FileStore


class FakeFileStore(FileStore):
    """
    Minimal in-memory FileStore stand-in.
    Names listed in `unreadable` raise PermissionError on read.
    Set missing_root=True to make list() behave like a missing directory.
    """

    def __init__(
        self,
        files: Optional[Dict[str, bytes]] = None,
        unreadable=(),
        missing_root: bool = False,
    ):
        self.files = dict(files or {})
        self.unreadable = set(unreadable)
        self.missing_root = missing_root
        self.writes: List[str] = []

    def read(self, name: str) -> bytes:
        if name in self.unreadable:
            raise PermissionError(name)
        if name not in self.files:
            raise FileNotFoundError(name)
        return self.files[name]

    def write(self, name: str, data: bytes) -> None:
        self.writes.append(name)
        self.files[name] = data

    def list(self) -> List[str]:
        if self.missing_root:
            raise FileNotFoundError("posts")
        return sorted(set(self.files) | self.unreadable)

    def remove(self, name: str) -> None:
        if name not in self.files:
            raise FileNotFoundError(name)
        del self.files[name]

    def exists(self, name: str) -> bool:
        return name in self.files


class StepClock:
    """
    Deterministic clock: each call returns the next instant, one minute apart.
    """

    def __init__(self, start: Optional[datetime.datetime] = None):
        self.start = start or datetime.datetime(
            2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc
        )
        self._ticks = itertools.count()

    def __call__(self) -> datetime.datetime:
        return self.start + datetime.timedelta(minutes=next(self._ticks))


def sequence_suffixes(*suffixes: str):
    """Suffix factory that hands out the given suffixes in order."""
    remaining = iter(suffixes)
    return lambda: next(remaining)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        search_return=None,
        tag_return=None,
        create_return=None,
        update_return=None,
        delete_return=True,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._search_return = search_return or []
        self._tag_return = tag_return or []
        self._create_return = create_return
        self._update_return = update_return
        self._delete_return = delete_return
        self.calls = []

    def list_posts(self):
        from fileblog.schemas.blog import PostListing

        self.calls.append(("list_posts",))
        return PostListing(posts=self._list_posts_return)

    def get_post(self, handle: str):
        self.calls.append(("get_post", handle))
        return self._get_post_return

    def search_posts(self, query: str):
        self.calls.append(("search_posts", query))
        return self._search_return

    def get_posts_by_tag(self, tag: str):
        self.calls.append(("get_posts_by_tag", tag))
        return self._tag_return

    def create_post(self, data):
        self.calls.append(("create_post", data))
        return self._create_return

    def update_post(self, handle: str, data):
        self.calls.append(("update_post", handle, data))
        return self._update_return

    def delete_post(self, handle: str):
        self.calls.append(("delete_post", handle))
        return self._delete_return
