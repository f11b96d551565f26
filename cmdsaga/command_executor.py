# file: cmdsaga/command_executor.py

import logging
from typing import Any, Optional

from cmdsaga.commands.base_command import BaseCommand
from cmdsaga.commands.command_history import CommandHistory
from cmdsaga.utils.config_loader import ConfigLoader


async def invoke(command: BaseCommand) -> Any:
    """Executes a command and returns its result."""
    await command.execute()
    return command.result


class CommandExecutor:
    """
    Implements the Command Pattern's "Invoker".
    It accepts Command objects, executes them, and keeps a history of
    the ones that succeeded so they can be undone later.
    """
    def __init__(self, config_loader: Optional[ConfigLoader] = None):
        self.logger = logging.getLogger(self.__class__.__name__)

        max_history = 50
        if config_loader is not None:
            max_history = config_loader.get("commands_config.json", "max_history", max_history)
        self.history = CommandHistory(max_size=max_history)
        self.logger.info(f"CommandExecutor initialized with history size {max_history}")

    async def execute(self, command: BaseCommand) -> Any:
        """
        Executes a Command object and returns its result.

        Errors from the command propagate unchanged, after the command has
        compensated for itself.
        """
        self.logger.info(f"Executing command: {command!r}")
        try:
            result = await invoke(command)
        except Exception as e:
            self.logger.error(f"Command {command!r} failed: {e!r}")
            raise

        self.logger.info(f"Command {command!r} success.")
        self.history.push(command)
        return result

    async def undo(self) -> bool:
        """
        Undoes the last executed command.
        """
        return await self.history.undo_last()
