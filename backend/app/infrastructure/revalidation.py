"""Path Revalidation — in-process view invalidation for rendered dashboard pages.

Invariants:
    - invalidate(path) bumps the path's version; versions only ever grow
    - A renderer holding version v for a path is stale once version(path) > v
    - Unknown paths start at version 0

Design Decisions:
    - Module-level singleton like db_manager: one registry per process,
      state lost on restart (renders are recomputed anyway)
    - Called after commit, never inside a store transaction
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class PathRevalidator:
    """Per-path version counters that mark cached renders stale."""

    def __init__(self):
        self._versions: dict[str, int] = defaultdict(int)

    def invalidate(self, path: str) -> None:
        self._versions[path] += 1
        logger.info(
            f"Revalidated {path} (v{self._versions[path]})",
            extra={"path": path},
        )

    def version(self, path: str) -> int:
        return self._versions.get(path, 0)

    def is_stale(self, path: str, seen_version: int) -> bool:
        return self.version(path) > seen_version


revalidator = PathRevalidator()


def get_revalidator() -> PathRevalidator:
    """FastAPI dependency for the process-wide revalidator."""
    return revalidator
