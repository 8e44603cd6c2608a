import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from fileblog.settings import settings


def _default_file_mode() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


DEFAULT_FILE_MODE = _default_file_mode()


class FileStore(ABC):
    """
    Flat namespace of named byte blobs.
    Implementations raise FileNotFoundError for names that do not exist.
    """

    @abstractmethod
    def read(self, name: str) -> bytes: ...

    @abstractmethod
    def write(self, name: str, data: bytes) -> None: ...

    @abstractmethod
    def list(self) -> List[str]: ...

    @abstractmethod
    def remove(self, name: str) -> None: ...

    @abstractmethod
    def exists(self, name: str) -> bool: ...


class LocalFileStore(FileStore):
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def read(self, name: str) -> bytes:
        return self._path(name).read_bytes()

    def write(self, name: str, data: bytes) -> None:
        target = self._path(name)
        self.ensure_root()
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp-", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.chmod(tmp_name, self._mode_for(target))
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @staticmethod
    def _mode_for(target: Path) -> int:
        # mkstemp creates 0600 files; keep the existing mode or honour the umask
        try:
            return stat.S_IMODE(target.stat().st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    def list(self) -> List[str]:
        return sorted(
            entry.name
            for entry in self.root.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        )

    def remove(self, name: str) -> None:
        self._path(name).unlink()

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def _path(self, name: str) -> Path:
        if (
            not name
            or name.startswith(".")
            or "/" in name
            or "\\" in name
            or "\x00" in name
        ):
            raise ValueError(f"Invalid file name: {name!r}")
        return self.root / name


def get_file_store() -> LocalFileStore:
    """
    Build the store over the configured posts directory.
    Called at runtime so tests can point POSTS_DIR elsewhere.
    """
    return LocalFileStore(settings.posts_path)
