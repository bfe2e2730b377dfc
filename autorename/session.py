"""One round of automatic renaming: check input, reset the workspace, watch."""

from __future__ import annotations

import os
import shutil
import threading
import time
from collections.abc import Iterable
from contextlib import suppress
from pathlib import Path

from .renamer import DirectoryRenamer


class ValidationError(ValueError):
    """Raised when the session's settings cannot be used."""


def is_valid_root(path: str | os.PathLike[str]) -> bool:
    """Tell whether the working folder path is filled in and exists."""
    if not os.fspath(path):
        return False
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def _remove(entry: Path) -> None:
    if entry.is_dir() and not entry.is_symlink():
        shutil.rmtree(entry, ignore_errors=True)
    else:
        with suppress(OSError):
            entry.unlink()


class RenameSession:
    """Watches every subfolder of a working folder and renames new images.

    Each subfolder hands out the full list of names on its own, starting
    from the first one.
    """

    def __init__(
        self,
        root_path: str | os.PathLike[str],
        dirs: Iterable[str] = (),
        names: Iterable[str] = (),
    ) -> None:
        self.root_path = os.fspath(root_path)
        self.dirs = list(dirs)
        self.names = list(names)
        self._stop_event = threading.Event()
        self._renamers: list[DirectoryRenamer] = []
        self._threads: list[threading.Thread] = []
        self._started = False

    def validate(self) -> None:
        """Raise ValidationError if the root, a subfolder or a name is unusable."""
        if not is_valid_root(self.root_path):
            raise ValidationError("working folder does not exist or is not filled in")
        if any(not name for name in self.dirs):
            raise ValidationError("a subfolder name is not filled in")
        if any(not name for name in self.names):
            raise ValidationError("a name in the naming order is not filled in")

    def prepare_workspace(self) -> None:
        """Empty the working folder and create the subfolders in it."""
        root = Path(self.root_path)
        with suppress(OSError):
            for entry in list(root.iterdir()):
                _remove(entry)
        for name in self.dirs:
            with suppress(OSError):
                (root / name).mkdir(parents=True, exist_ok=True)

    @property
    def results(self) -> list[list[str]]:
        """Renamed paths for each subfolder, in the order of ``dirs``."""
        return [renamer.renamed for renamer in self._renamers]

    @property
    def done(self) -> bool:
        """True once the session was started and every watcher has finished."""
        return self._started and not any(t.is_alive() for t in self._threads)

    def start(self) -> None:
        """Validate, reset the workspace and start one watcher per subfolder."""
        if self._started:
            raise RuntimeError("session already started")
        self.validate()
        self.prepare_workspace()
        self._renamers = [
            DirectoryRenamer(os.path.join(self.root_path, name), self.names)
            for name in self.dirs
        ]
        self._threads = [
            threading.Thread(
                target=renamer.run,
                args=(self._stop_event,),
                name=f"autorename-{name}",
                daemon=True,
            )
            for name, renamer in zip(self.dirs, self._renamers)
        ]
        self._started = True
        for thread in self._threads:
            thread.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for every watcher to finish; return True if all have."""
        if not self._started:
            raise RuntimeError("session not started")
        deadline = None if timeout is None else time.monotonic() + timeout
        for thread in self._threads:
            if deadline is None:
                thread.join()
            else:
                thread.join(max(0.0, deadline - time.monotonic()))
        return not any(thread.is_alive() for thread in self._threads)

    def stop(self) -> None:
        """Ask every watcher to stop and wait until they have."""
        self._stop_event.set()
        for thread in self._threads:
            thread.join()