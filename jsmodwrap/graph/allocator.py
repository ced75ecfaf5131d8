"""
Module Id Allocator — Default sequential id factory.

Ids are integers handed out in first-seen order. The same path always gets
the same id from one factory, and distinct paths never share one.
"""

import threading

from jsmodwrap.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.GRAPH)


class ModuleIdFactory:
    """Callable allocator: absolute path -> int id."""

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._lock = threading.Lock()

    def __call__(self, path: str) -> int:
        with self._lock:
            module_id = self._ids.get(path)
            if module_id is None:
                module_id = len(self._ids)
                self._ids[path] = module_id
                log.debug("module_id_allocated", path=path, module_id=module_id)
            return module_id

    def __len__(self) -> int:
        return len(self._ids)

    def known_paths(self) -> list[str]:
        """Paths in allocation order."""
        with self._lock:
            return list(self._ids)

    def reset(self) -> None:
        with self._lock:
            self._ids.clear()


def create_module_id_factory() -> ModuleIdFactory:
    return ModuleIdFactory()
