# file: cmdsaga/commands/parallel_command.py

from typing import Any, List

from cmdsaga.commands.base_command import BaseCommand, is_command
from cmdsaga.commands.batch import run_batch
from cmdsaga.commands.composite_command import CompositeCommand
from cmdsaga.exceptions import InvalidCompositionError


class ParallelCommand(CompositeCommand):
    """
    Runs a fixed list of independent commands concurrently.

    The result is the list of sub-command results in input order,
    whatever order they finished in. If any sub-command fails, the
    siblings that completed are undone, most recently completed first.
    """
    def __init__(self, *commands: BaseCommand):
        for i, cmd in enumerate(commands):
            if not is_command(cmd):
                raise InvalidCompositionError(
                    f"Argument {i} is not a command: {type(cmd).__name__}"
                )
        super().__init__()
        self.commands: List[BaseCommand] = list(commands)

    def __repr__(self):
        return f"<{self.__class__.__name__} of {len(self.commands)}>"

    async def _run(self) -> List[Any]:
        self.logger.info(f"Executing {len(self.commands)} command(s) in parallel")
        return await run_batch(self.commands, self.rollback_log)
