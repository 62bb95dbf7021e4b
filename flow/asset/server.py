"""Asynchronous asset loading from registered filesystems and HTTP."""

from __future__ import annotations

import abc
import os
import posixpath
import threading
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")


class AssetError(Exception):
    """Raised for misconfigured servers and failed asset operations."""


class RawData(NamedTuple):
    """Bytes read for an asset and the modification time of their source.

    ``mod_time`` is the file's modification time in nanoseconds, or None
    when the data came over HTTP.
    """

    data: bytes
    mod_time: int | None


class Handle(Generic[T]):
    """A reference to an asset that is loaded in the background.

    The handle starts out empty. Once loading finishes it holds either the
    asset or the error that stopped it. Every successful load or reload
    increases the generation.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.mod_time: int | None = None
        self._value: T | None = None
        self._error: BaseException | None = None
        self._done = False
        self._generation = 0
        self._finished = threading.Event()
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        """Number of times a value has been stored in the handle."""
        return self._generation

    @property
    def done(self) -> bool:
        """True once loading has finished, either with a value or an error."""
        return self._done

    @property
    def error(self) -> BaseException | None:
        """The last loading error, without waiting."""
        return self._error

    @property
    def value(self) -> T | None:
        """The current value, without waiting."""
        return self._value

    def set(self, value: T) -> None:
        """Store a value, clear any error and bump the generation."""
        with self._lock:
            self._error = None
            self._value = value
            self._done = True
            self._generation += 1

    def get(self) -> T | None:
        """Wait for loading to finish and return the value.

        Raises the loading error if one was recorded.
        """
        self.wait()
        if self._error is not None:
            raise self._error
        return self._value

    def wait(self, timeout: float | None = None) -> bool:
        """Block until loading finishes; return False if the timeout ran out."""
        return self._finished.wait(timeout)

    def _fail(self, error: BaseException) -> None:
        with self._lock:
            self._error = error

    def _finish(self) -> None:
        self._done = True
        self._finished.set()

    def __repr__(self) -> str:
        return f"Handle({self.name!r}, done={self._done}, generation={self._generation})"


class Loader(abc.ABC, Generic[T]):
    """Turns raw bytes into an asset and back, for a set of file extensions."""

    @abc.abstractmethod
    def extensions(self) -> list[str]:
        """Return the extensions (such as ".json") this loader handles."""

    @abc.abstractmethod
    def load(self, server: Server, data: bytes) -> T:
        """Build the asset from its raw bytes."""

    @abc.abstractmethod
    def store(self, server: Server, value: T) -> bytes:
        """Serialize the asset back into bytes."""


@dataclass
class Filesystem:
    """A directory on disk; ``prefix`` is filled in when it is registered."""

    path: str
    prefix: str = field(default="", init=False)

    def resolve(self, relative: str) -> str:
        """Return the on-disk path of a path relative to this filesystem."""
        return os.path.join(self.path, relative.lstrip("/"))


def get_extension(name: str) -> str:
    """Return everything from the first dot of the last path segment.

    ``"dir/test.1.json"`` gives ``".1.json"``. A name whose only dot is its
    very first character has no extension.
    """
    start = name.rfind("/") + 1
    index = name.find(".", start)
    if index > 0:
        return name[index:]
    return ""


def _scheme(path: str) -> str:
    try:
        return urllib.parse.urlsplit(path).scheme
    except ValueError:
        return ""


class Server:
    """Loads assets by name through loaders chosen by file extension."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._filesystems: dict[str, Filesystem] = {}
        self._loaders: dict[str, Loader[Any]] = {}
        self._handles: dict[str, Handle[Any]] = {}

    def register_filesystem(self, prefix: str, filesystem: Filesystem) -> None:
        """Serve names starting with the prefix from the filesystem."""
        with self._lock:
            if prefix in self._filesystems:
                raise AssetError(
                    "failed to register filesystem, prefix already registered"
                )
            filesystem.prefix = prefix
            self._filesystems[prefix] = filesystem

    def register(self, loader: Loader[Any]) -> None:
        """Register a loader for each of its extensions."""
        with self._lock:
            for ext in loader.extensions():
                if ext in self._loaders:
                    raise AssetError(f"duplicate loader registration: {ext}")
                self._loaders[ext] = loader

    def _find_filesystem(self, path: str) -> tuple[Filesystem, str]:
        for prefix, filesystem in self._filesystems.items():
            if path.startswith(prefix):
                return filesystem, path[len(prefix):]
        raise AssetError(f"couldn't find file prefix: {path}")

    def _loader_for(self, name: str) -> Loader[Any]:
        ext = get_extension(name)
        loader = self._loaders.get(ext)
        if loader is None:
            raise AssetError(f"could not find loader for extension: {ext} ({name})")
        return loader

    def _mod_time(self, path: str) -> int:
        filesystem, trimmed = self._find_filesystem(path)
        return os.stat(filesystem.resolve(trimmed)).st_mtime_ns

    def read_raw(self, path: str) -> RawData:
        """Read the bytes behind a name, from HTTP(S) or a registered filesystem."""
        if _scheme(path) in ("http", "https"):
            return RawData(self._read_http(path), None)
        filesystem, trimmed = self._find_filesystem(path)
        full_path = filesystem.resolve(trimmed)
        with open(full_path, "rb") as file:
            mod_time = os.fstat(file.fileno()).st_mtime_ns
            return RawData(file.read(), mod_time)

    @staticmethod
    def _read_http(url: str) -> bytes:
        try:
            with urllib.request.urlopen(url) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            if exc.code == 304:
                return exc.read()
            raise AssetError(f"unable to fetch http status code: {exc.code}") from exc

    def write_raw(self, path: str, data: bytes) -> None:
        """Write bytes to the file behind a name, creating directories."""
        filesystem, trimmed = self._find_filesystem(path)
        full_path = filesystem.resolve(trimmed)
        directory = os.path.dirname(full_path)
        if directory:
            os.makedirs(directory, mode=0o750, exist_ok=True)
        with open(full_path, "wb") as file:
            file.write(data)

    def _get_handle(self, name: str) -> tuple[Handle[Any], bool]:
        with self._lock:
            handle = self._handles.get(name)
            if handle is not None:
                return handle, True
            handle = Handle(name)
            self._handles[name] = handle
            return handle, False

    def load(self, name: str) -> Handle[Any]:
        """Start loading a file and return its handle.

        Loading the same name again returns the existing handle.
        """
        with self._lock:
            existing = self._handles.get(name)
        if existing is not None:
            return existing
        loader = self._loader_for(name)
        handle, loaded = self._get_handle(name)
        if loaded:
            return handle

        def run() -> None:
            try:
                raw = self.read_raw(name)
                handle.mod_time = raw.mod_time
                handle.set(loader.load(self, raw.data))
            except Exception as exc:  # noqa: BLE001 - recorded on the handle
                handle._fail(exc)
            finally:
                handle._finish()

        threading.Thread(target=run, name=f"asset-load:{name}", daemon=True).start()
        return handle

    def load_dir(self, path: str, recursive: bool = False) -> list[Handle[Any]]:
        """Load every file in a directory, in name order.

        Subdirectories are descended into only when ``recursive`` is set. An
        unknown prefix or unreadable directory yields an empty list.
        """
        try:
            filesystem, trimmed = self._find_filesystem(path)
        except AssetError:
            return []
        directory = posixpath.normpath(trimmed)
        try:
            entries = sorted(os.scandir(filesystem.resolve(directory)), key=lambda e: e.name)
        except OSError:
            return []

        handles: list[Handle[Any]] = []
        for entry in entries:
            child = posixpath.normpath(posixpath.join(filesystem.prefix, directory, entry.name))
            if entry.is_dir():
                if recursive:
                    handles.extend(self.load_dir(child, recursive))
                continue
            handles.append(self.load(child))
        return handles

    def reload(self, handle: Handle[Any]) -> threading.Thread | None:
        """Reload the handle's file in the background if it has changed.

        Does nothing while the handle is still loading. Returns the worker
        thread, or None when no reload was started.
        """
        if not handle.done:
            return None
        loader = self._loader_for(handle.name)

        def run() -> None:
            try:
                mod_time = self._mod_time(handle.name)
                if handle.mod_time == mod_time:
                    return
                raw = self.read_raw(handle.name)
                handle.mod_time = raw.mod_time
                handle.set(loader.load(self, raw.data))
            except Exception as exc:  # noqa: BLE001 - recorded on the handle
                handle._fail(exc)

        thread = threading.Thread(target=run, name=f"asset-reload:{handle.name}", daemon=True)
        thread.start()
        return thread

    def store(self, handle: Handle[Any]) -> None:
        """Serialize the handle's value and write it back to its file."""
        loader = self._loader_for(handle.name)
        handle.wait()
        value = handle.value
        if value is None:
            raise AssetError("handle data can't be None when storing")
        self.write_raw(handle.name, loader.store(self, value))