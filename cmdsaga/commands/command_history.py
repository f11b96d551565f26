# file: cmdsaga/commands/command_history.py

import logging
from typing import List, Optional
from cmdsaga.commands.base_command import BaseCommand

class CommandHistory:
    """
    Tracks a history of executed commands so the latest can be undone.
    """
    def __init__(self, max_size: int = 50):
        self.history: List[BaseCommand] = []
        self.max_size = max_size
        self.logger = logging.getLogger(self.__class__.__name__)

    def __len__(self) -> int:
        return len(self.history)

    def push(self, command: BaseCommand):
        """Adds an executed command to the history."""
        if not command.executed:
            self.logger.warning(f"Attempted to push non-executed command {command!r} to history.")
            return

        self.history.append(command)
        if len(self.history) > self.max_size:
            self.history.pop(0)
        self.logger.debug(f"Pushed command to history. Size: {len(self.history)}")

    def pop(self) -> Optional[BaseCommand]:
        """Removes and returns the last executed command."""
        if not self.history:
            return None
        return self.history.pop()

    async def undo_last(self) -> bool:
        """
        Undoes the last command in the history.
        Returns False if there was nothing undoable to undo.
        """
        command = self.pop()
        if command is None:
            self.logger.info("No commands in history to undo.")
            return False
        if not command.undoable:
            self.logger.info(f"Last command {command!r} has no undo action, dropped from history.")
            return False

        self.logger.info(f"Undoing command: {command!r}")
        try:
            await command.undo()
        except Exception as e:
            # The command is consumed either way.
            self.logger.error(f"Failed to undo command {command!r}: {e}", exc_info=True)
            raise
        return True
