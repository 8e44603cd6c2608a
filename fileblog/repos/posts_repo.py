import json
import logging
from typing import List, Optional, Tuple

from fileblog.db.file_store import FileStore
from fileblog.schemas.blog import ListingWarning

logger = logging.getLogger(__name__)

POST_FILE_SUFFIX = ".json"


class FilePostsRepo:
    def __init__(self, store: FileStore):
        self.store = store

    def list_post_docs(self) -> Tuple[List[Tuple[str, dict]], List[ListingWarning]]:
        docs: List[Tuple[str, dict]] = []
        warnings: List[ListingWarning] = []
        try:
            names = self.store.list()
        except OSError as e:
            logger.error(f"Error reading posts directory: {e}")
            return docs, [ListingWarning(filename="", reason=str(e))]

        for name in names:
            if not name.endswith(POST_FILE_SUFFIX):
                continue
            handle = name.removesuffix(POST_FILE_SUFFIX)
            try:
                doc = self._load(name)
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable post file {name}: {e}")
                warnings.append(ListingWarning(filename=name, reason=str(e)))
                continue
            docs.append((handle, doc))
        return docs, warnings

    def get_post_doc(self, handle: str) -> Optional[dict]:
        try:
            return self._load(self._file_name(handle))
        except FileNotFoundError:
            logger.warning(f"Post {handle} not found")
        except ValueError as e:
            logger.warning(f"Failed to read post {handle}: {e}")
        return None

    def save_post_doc(self, handle: str, doc: dict) -> None:
        payload = json.dumps(doc, indent=2, ensure_ascii=False)
        self.store.write(self._file_name(handle), payload.encode("utf-8"))

    def delete_post_doc(self, handle: str) -> bool:
        try:
            self.store.remove(self._file_name(handle))
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Could not delete post {handle}: {e}")
            return False
        return True

    def exists(self, handle: str) -> bool:
        try:
            return self.store.exists(self._file_name(handle))
        except ValueError:
            return False

    def _load(self, name: str) -> dict:
        raw = self.store.read(name)
        doc = json.loads(raw.decode("utf-8"))
        if not isinstance(doc, dict):
            raise ValueError(f"expected a JSON object, got {type(doc).__name__}")
        return doc

    @staticmethod
    def _file_name(handle: str) -> str:
        return f"{handle}{POST_FILE_SUFFIX}"
