# file: cmdsaga/commands/composite_command.py

from cmdsaga.commands.base_command import BaseCommand
from cmdsaga.commands.rollback_log import RollbackLog


class CompositeCommand(BaseCommand):
    """
    Base class for commands built out of other commands.

    Each execute() starts a fresh RollbackLog; undo() walks the log of the
    most recent execution. Composites are always undoable, even when the
    log is empty.
    """
    def __init__(self):
        super().__init__()
        self.rollback_log = RollbackLog()

    @property
    def undoable(self) -> bool:
        return True

    async def execute(self):
        self.rollback_log = RollbackLog()
        await super().execute()

    async def undo(self):
        await self.rollback_log.undo_all()
