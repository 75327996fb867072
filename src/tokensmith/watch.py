"""
Watch mode.

Polls the tokens directory (and the project override file) for changes and
re-runs the full generation pass. Bursts of file events, e.g. an editor
saving several token files at once, collapse into one rebuild through a
debounce window.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ["*.json"]
DEFAULT_DEBOUNCE = 0.2


class FileWatcher:
    """
    Watches files for changes using polling (cross-platform compatible).

    Uses mtime-based change detection to avoid external dependencies.
    """

    def __init__(
        self,
        paths: list[Path],
        on_change: Callable[[Path], None],
        patterns: list[str] | None = None,
        poll_interval: float = 0.5,
    ):
        """
        Initialize the file watcher.

        Args:
            paths: Directories or files to watch
            on_change: Callback when a file changes
            patterns: Glob patterns matched inside watched directories
            poll_interval: How often to check for changes (seconds)
        """
        self.paths = paths
        self.on_change = on_change
        self.patterns = patterns or list(DEFAULT_PATTERNS)
        self.poll_interval = poll_interval

        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._file_mtimes: dict[Path, float] = {}

    def start(self) -> None:
        """Start watching for file changes."""
        self._file_mtimes = self._scan_files()
        self._thread = threading.Thread(target=self._watch_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop watching for file changes."""
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=2)

    def _scan_files(self) -> dict[Path, float]:
        """Scan all watched paths and return file mtimes."""
        mtimes: dict[Path, float] = {}

        for watch_path in self.paths:
            if not watch_path.exists():
                continue

            if watch_path.is_file():
                try:
                    mtimes[watch_path] = watch_path.stat().st_mtime
                except OSError:
                    pass
            else:
                for pattern in self.patterns:
                    for file_path in watch_path.rglob(pattern):
                        try:
                            mtimes[file_path] = file_path.stat().st_mtime
                        except OSError:
                            pass

        return mtimes

    def poll(self) -> list[Path]:
        """
        Compare the current state against the last scan.

        Returns:
            Files that are new, modified or deleted since the previous poll.
        """
        current = self._scan_files()
        changed = [
            path
            for path, mtime in current.items()
            if path not in self._file_mtimes or mtime > self._file_mtimes[path]
        ]
        changed.extend(path for path in self._file_mtimes if path not in current)
        self._file_mtimes = current
        return changed

    def _watch_loop(self) -> None:
        """Main watch loop that polls for file changes."""
        while not self._stop_event.is_set():
            try:
                for file_path in self.poll():
                    try:
                        self.on_change(file_path)
                    except Exception:
                        logger.exception("Error in change callback for %s", file_path)
            except OSError as e:
                logger.error("File watcher error: %s", e)

            self._stop_event.wait(self.poll_interval)


class DebouncedRunner:
    """
    Collapses rapid ``trigger`` calls into a single ``action`` call.

    Each trigger cancels the pending timer and starts a new one, so the
    action runs once ``delay`` seconds after the last event. Runs never
    overlap: a timer that fires while the action is running waits for it.
    """

    def __init__(
        self,
        action: Callable[[], Any],
        delay: float = DEFAULT_DEBOUNCE,
        timer_factory: Callable[[float, Callable[[], None]], Any] | None = None,
    ):
        self.action = action
        self.delay = delay
        self._timer_factory = timer_factory or threading.Timer
        self._timer: Any = None
        self._lock = threading.Lock()
        self._run_lock = threading.Lock()
        self.runs = 0

    def trigger(self, path: Path | None = None) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self._timer_factory(self.delay, self._fire)
            if hasattr(self._timer, "daemon"):
                self._timer.daemon = True
            self._timer.start()
        if path is not None:
            logger.debug("Change detected: %s", path)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        with self._run_lock:
            self.runs += 1
            try:
                self.action()
            except Exception:
                # A broken token file must not stop the watcher; the next save retries
                logger.exception("Rebuild failed")


def watch_paths(tokens_dir: Path, overrides_path: Path | None = None) -> list[Path]:
    paths = [tokens_dir]
    if overrides_path is not None:
        paths.append(overrides_path)
    return paths


def watch_and_rebuild(
    tokens_dir: Path,
    rebuild: Callable[[], Any],
    *,
    overrides_path: Path | None = None,
    debounce: float = DEFAULT_DEBOUNCE,
    poll_interval: float = 0.5,
    stop_event: threading.Event | None = None,
) -> None:
    """
    Block, rebuilding whenever a watched token file changes.

    Runs until ``stop_event`` is set (or forever, until KeyboardInterrupt).
    """
    runner = DebouncedRunner(rebuild, delay=debounce)
    watcher = FileWatcher(
        watch_paths(tokens_dir, overrides_path),
        on_change=runner.trigger,
        poll_interval=poll_interval,
    )
    stop_event = stop_event or threading.Event()

    watcher.start()
    logger.info("Watching %s for changes", tokens_dir)
    try:
        while not stop_event.wait(0.5):
            pass
    finally:
        watcher.stop()
        runner.cancel()
