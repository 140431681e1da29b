"""
Durable key-value storage shared by client contexts.

A StorageArea is the per-user store (optionally a JSON file). Each client
context opens its own LocalStorage handle on it; writes through one handle
are announced to the listeners of every other handle, the way browser
storage events reach other tabs but not the tab that made the change.
"""
import json
import logging
import os
import tempfile
from collections import namedtuple
from typing import Callable, Dict, List, Optional

from errors import PersistenceFailure

logger = logging.getLogger(__name__)

StorageEvent = namedtuple('StorageEvent', ['key', 'old_value', 'new_value'])

Listener = Callable[[StorageEvent], None]


class StorageArea:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._handles: List['LocalStorage'] = []
        self._data: Dict[str, str] = self._read_file()

    def _read_file(self) -> Dict[str, str]:
        if not self.path or not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Could not read storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Storage file {self.path} is not an object, ignoring it")
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_file(self, data: Dict[str, str]) -> None:
        if not self.path:
            return

        directory = os.path.dirname(self.path) or '.'
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.storage-', suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise PersistenceFailure(f"Could not write {self.path}: {e}") from e

    def open(self) -> 'LocalStorage':
        handle = LocalStorage(self)
        self._handles.append(handle)
        return handle

    def close(self, handle: 'LocalStorage') -> None:
        if handle in self._handles:
            self._handles.remove(handle)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put(self, key: str, value: Optional[str], origin: Optional['LocalStorage'] = None) -> None:
        """Set (or with value None, remove) a key and notify other handles"""
        old_value = self._data.get(key)
        if old_value == value:
            return

        updated = dict(self._data)
        if value is None:
            updated.pop(key, None)
        else:
            updated[key] = value

        self._write_file(updated)
        self._data = updated

        self._dispatch([StorageEvent(key, old_value, value)], origin)

    def reload(self) -> List[StorageEvent]:
        """Pick up changes written to the file by another process"""
        fresh = self._read_file()
        events = [
            StorageEvent(key, self._data.get(key), fresh.get(key))
            for key in sorted(set(self._data) | set(fresh))
            if self._data.get(key) != fresh.get(key)
        ]
        self._data = fresh
        self._dispatch(events, None)
        return events

    def _dispatch(self, events: List[StorageEvent], origin: Optional['LocalStorage']) -> None:
        for handle in list(self._handles):
            if handle is origin:
                continue
            for event in events:
                handle._notify(event)


class LocalStorage:
    """One client context's view of a StorageArea"""

    def __init__(self, area: StorageArea):
        self.area = area
        self._listeners: List[Listener] = []

    def get_item(self, key: str) -> Optional[str]:
        return self.area.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.area.put(key, str(value), origin=self)

    def remove_item(self, key: str) -> None:
        self.area.put(key, None, origin=self)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register for changes made by other contexts; returns an unsubscribe callable"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StorageEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Storage listener failed for key '{event.key}': {e}")

    def close(self) -> None:
        self._listeners.clear()
        self.area.close(self)
