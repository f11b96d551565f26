# file: cmdsaga/commands/rollback_log.py

import logging
from collections import deque
from typing import Deque, Iterator, List

from cmdsaga.commands.base_command import BaseCommand, is_undoable

logger = logging.getLogger(__name__)


class RollbackLog:
    """
    Records the sub-commands a composite has completed, most recently
    completed first. That order is the order they are undone in.
    """
    def __init__(self):
        self._entries: Deque[BaseCommand] = deque()

    def record(self, command: BaseCommand):
        """Prepends a command that has just finished executing."""
        self._entries.appendleft(command)
        logger.debug(f"Recorded {command!r} for rollback. Size: {len(self._entries)}")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BaseCommand]:
        return iter(self._entries)

    def entries(self) -> List[BaseCommand]:
        return list(self._entries)

    async def undo_all(self):
        """
        Undoes every recorded command that supports it, one at a time,
        in log order. Each entry is removed before its undo runs, so it is
        undone at most once. A failing undo propagates and leaves the
        remaining entries in the log.
        """
        if not self._entries:
            return
        logger.info(f"Rolling back {len(self._entries)} command(s)")
        while self._entries:
            command = self._entries.popleft()
            if not is_undoable(command):
                logger.debug(f"No undo action for {command!r}, skipping")
                continue
            try:
                await command.undo()
            except Exception as e:
                logger.error(
                    f"Undo of {command!r} failed, {len(self._entries)} command(s) left unreverted: {e}"
                )
                raise
        logger.info("Rollback completed")
