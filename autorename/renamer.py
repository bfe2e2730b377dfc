"""Watch a directory and rename newly created images in a fixed order."""

from __future__ import annotations

import logging
import os
import queue
import threading
import time
from collections.abc import Iterable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})

_POLL_INTERVAL = 0.1


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def is_image_file(path: str | os.PathLike[str]) -> bool:
    """Tell whether the path has one of the supported image extensions."""
    return _extension(os.fspath(path)) in IMAGE_EXTENSIONS


class _QueueingHandler(FileSystemEventHandler):
    def __init__(self, sink: queue.Queue[str]) -> None:
        super().__init__()
        self._sink = sink

    def on_created(self, event: FileSystemEvent) -> None:
        self._sink.put(os.fsdecode(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        # A file renamed into place shows up under its new name.
        self._sink.put(os.fsdecode(event.dest_path))


class DirectoryRenamer:
    """Renames images appearing in one directory to the given names, in order."""

    def __init__(
        self,
        directory: str | os.PathLike[str],
        names: Iterable[str],
        settle_delay: float = 0.5,
    ) -> None:
        self.directory = os.fspath(directory)
        self.names = list(names)
        self.settle_delay = settle_delay
        self._used_count = 0
        self._used_paths: set[str] = set()
        self._renamed: list[str] = []
        self._lock = threading.Lock()

    @property
    def remaining(self) -> int:
        """Number of names not yet handed out."""
        return len(self.names) - self._used_count

    @property
    def done(self) -> bool:
        """True once every name has been used."""
        return self._used_count >= len(self.names)

    @property
    def renamed(self) -> list[str]:
        """Paths produced so far, in the order they were produced."""
        return list(self._renamed)

    def handle_created(self, path: str | os.PathLike[str]) -> str | None:
        """Rename a newly created file and return its new path.

        Returns None when the file is not an image, was produced by this
        renamer, has vanished, no names are left, or the rename failed.
        """
        path = os.fspath(path)
        with self._lock:
            if not is_image_file(path):
                return None
            if path in self._used_paths:
                return None
            if self.done:
                return None
            new_path = os.path.join(
                self.directory, self.names[self._used_count] + _extension(path)
            )
            if self.settle_delay > 0:
                time.sleep(self.settle_delay)
            if not os.path.lexists(path):
                return None
            try:
                os.replace(path, new_path)
            except OSError as exc:
                logger.error("renaming %s failed: %s", path, exc)
                return None
            logger.info("renamed %s to %s", path, new_path)
            self._used_count += 1
            self._used_paths.add(new_path)
            self._renamed.append(new_path)
            return new_path

    def run(self, stop_event: threading.Event | None = None) -> list[str]:
        """Watch the directory until every name is used or ``stop_event`` is set.

        Returns the paths produced during this run.
        """
        produced: list[str] = []
        if self.done:
            return produced

        events: queue.Queue[str] = queue.Queue()
        observer = Observer()
        observer.schedule(_QueueingHandler(events), self.directory, recursive=False)
        observer.start()
        try:
            while not self.done:
                if stop_event is not None and stop_event.is_set():
                    break
                try:
                    path = events.get(timeout=_POLL_INTERVAL)
                except queue.Empty:
                    continue
                new_path = self.handle_created(path)
                if new_path is not None:
                    produced.append(new_path)
        finally:
            observer.stop()
            observer.join()
        return produced


def monitor_dir(
    root_path: str | os.PathLike[str],
    dir_name: str,
    names: Iterable[str],
    stop_event: threading.Event | None = None,
) -> list[str]:
    """Watch ``root_path/dir_name`` and rename new images to ``names`` in order."""
    directory = os.path.join(os.fspath(root_path), dir_name)
    return DirectoryRenamer(directory, names).run(stop_event)