"""Watch mode: one full build, then per-icon rebuilds on file changes.

The watchdog observer thread only enqueues changed paths. Rebuilds run on the
thread that called :meth:`WatchOrchestrator.run_watch`, one event at a time and
in notification order, so two rebuilds never write to the output tree at once.

By default the aggregate index is left as produced by the last full build.
Set ``watch.reindex_on_change`` to regenerate index, type declarations and
manifest after every incremental rebuild.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, Dict, List, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .logging import get_logger, log_exception
from .models import ManifestEntry
from .orchestrator import BuildOrchestrator

RebuildCallback = Callable[[Path, Optional[ManifestEntry]], None]
ObserverFactory = Callable[[], Any]

_POLL_SECONDS = 0.25


class _IconEventHandler(FileSystemEventHandler):
    """Forwards file created, modified and moved-into-place events to the rebuild queue."""

    def __init__(self, events: "queue.Queue[Path]") -> None:
        super().__init__()
        self._events = events

    def on_modified(self, event: FileSystemEvent) -> None:
        self._enqueue(event, event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        self._enqueue(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save atomically rename a temp file over the variant.
        self._enqueue(event, event.dest_path)

    def _enqueue(self, event: FileSystemEvent, path: str | bytes) -> None:
        if event.is_directory:
            return
        if isinstance(path, bytes):
            path = path.decode("utf-8")
        self._events.put(Path(path))


class WatchOrchestrator:
    """Keeps generated modules in sync with the icons directory."""

    def __init__(
        self,
        builder: BuildOrchestrator,
        *,
        observer_factory: ObserverFactory = Observer,
        on_rebuild: RebuildCallback | None = None,
        reindex_on_change: bool | None = None,
    ) -> None:
        self.builder = builder
        self.config = builder.config
        self._observer_factory = observer_factory
        self._on_rebuild = on_rebuild
        if reindex_on_change is None:
            reindex_on_change = self.config.watch.reindex_on_change
        self.reindex_on_change = reindex_on_change
        self._events: "queue.Queue[Path]" = queue.Queue()
        self._entries: Dict[str, ManifestEntry] = {}
        self.logger = get_logger("watch")

    @property
    def entries(self) -> List[ManifestEntry]:
        """Manifest as last known to the watcher, in discovery order."""
        return [self._entries[name] for name in sorted(self._entries)]

    def run_watch(self, stop_event: threading.Event | None = None) -> None:
        """Build once, then rebuild changed icons until ``stop_event`` is set."""
        self.logger.info("Starting watch mode...")
        result = self.builder.run_full_build()
        self._entries = {entry.name: entry for entry in result.entries}

        stop_event = stop_event or threading.Event()
        icons_dir = self.config.icons_dir
        observer = self._observer_factory()
        observer.schedule(_IconEventHandler(self._events), str(icons_dir), recursive=True)
        observer.start()
        self.logger.info("Watching %s for changes...", icons_dir)
        try:
            while not stop_event.is_set():
                try:
                    path = self._events.get(timeout=_POLL_SECONDS)
                except queue.Empty:
                    continue
                self._process(path)
        except KeyboardInterrupt:
            self.logger.info("Watcher stopped by user")
        finally:
            observer.stop()
            observer.join()

    def handle_change(self, path: Path) -> Optional[ManifestEntry]:
        """Recompile the icon directory containing ``path``."""
        icon_dir = self.resolve_icon_dir(path)
        if icon_dir is None:
            self.logger.debug("Ignoring change outside an icon directory: %s", path)
            return None

        self.logger.info("File changed: %s", path)
        self.logger.info("Rebuilding %s...", icon_dir.name)
        entry = self.builder.compile_icon(icon_dir)
        if entry is not None:
            self._entries[entry.name] = entry
            self.logger.info("Rebuilt %s", icon_dir.name)
        else:
            self._entries.pop(icon_dir.name, None)

        if self.reindex_on_change:
            self.builder.reindex(self.entries)
            self.logger.info("Regenerated index for %d icons", len(self._entries))
        return entry

    def resolve_icon_dir(self, path: Path) -> Optional[Path]:
        """Return the icon directory a changed file belongs to, if any."""
        icons_dir = self.config.icons_dir.resolve()
        path = Path(path).resolve()
        icon_dir = path.parent
        if icon_dir.parent != icons_dir:
            return None
        if self.config.watch.ignore_hidden and (
            path.name.startswith(".") or icon_dir.name.startswith(".")
        ):
            return None
        return icon_dir

    def _process(self, path: Path) -> None:
        try:
            entry = self.handle_change(path)
        except Exception as exc:
            log_exception(self.logger, f"Rebuild failed for {path}", exc)
            return
        if self._on_rebuild is not None and self.resolve_icon_dir(path) is not None:
            self._on_rebuild(path, entry)
