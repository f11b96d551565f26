# file: cmdsaga/commands/base_command.py

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Union

from cmdsaga.exceptions import CommandNotUndoableError, InvalidCommandError

ExecuteFn = Callable[[], Union[Any, Awaitable[Any]]]
UndoFn = Callable[[Any], Union[Any, Awaitable[Any]]]


async def resolve(value: Any) -> Any:
    """Awaits value if it is awaitable, otherwise returns it as-is."""
    if inspect.isawaitable(value):
        return await value
    return value


class BaseCommand(ABC):
    """
    Abstract base class for a command in the Command Pattern.

    Subclasses implement _run(), which returns the command's value.
    execute() stores that value in self.result and sets self.executed,
    but only when _run() completes without raising. If it raises and the
    command is undoable, undo() runs before the original error is re-raised.
    """
    def __init__(self):
        self.executed: bool = False
        self.result: Any = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def undoable(self) -> bool:
        """Whether this command carries a compensating action."""
        return False

    async def execute(self):
        """
        Execute the command.
        Populates self.result and sets self.executed = True on success.
        """
        try:
            value = await self._run()
        except Exception as e:
            if self.undoable:
                self.logger.debug(f"{self!r} failed ({e!r}), running its undo")
                await self.undo()
            raise
        self.result = value
        self.executed = True

    async def undo(self):
        """
        Reverse the effects of the execute method, if possible.
        """
        raise CommandNotUndoableError(f"{self!r} has no undo action")

    @abstractmethod
    async def _run(self) -> Any:
        """Performs the work and returns the value to store in result."""
        pass


class FunctionCommand(BaseCommand):
    """
    A command built from a plain execute function and an optional undo
    function. Either may be synchronous or return an awaitable.
    """
    def __init__(self, execute: ExecuteFn, undo: Optional[UndoFn] = None, name: Optional[str] = None):
        if not callable(execute):
            raise InvalidCommandError(f"execute must be callable, got {type(execute).__name__}")
        if undo is not None and not callable(undo):
            raise InvalidCommandError(f"undo must be callable, got {type(undo).__name__}")
        super().__init__()
        self.execute_fn = execute
        self.undo_fn = undo
        self.name = name or getattr(execute, "__name__", "command")

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name}>"

    @property
    def undoable(self) -> bool:
        return self.undo_fn is not None

    async def _run(self) -> Any:
        return await resolve(self.execute_fn())

    async def undo(self):
        if self.undo_fn is None:
            return await super().undo()
        # Return value is ignored.
        await resolve(self.undo_fn(self.result))


def command(execute: ExecuteFn, undo: Optional[UndoFn] = None, name: Optional[str] = None) -> FunctionCommand:
    """
    Creates a command from an execute function and, optionally, an undo
    function that receives the command's last result.
    """
    return FunctionCommand(execute, undo, name=name)


def is_command(value: Any) -> bool:
    """True if value is a command (anything built on BaseCommand)."""
    return isinstance(value, BaseCommand)


def is_undoable(value: Any) -> bool:
    """True if value is a command that carries a compensating action."""
    return is_command(value) and value.undoable
