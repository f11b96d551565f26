# file: cmdsaga/commands/compose.py

from typing import Any

from cmdsaga.commands.base_command import BaseCommand, is_command
from cmdsaga.commands.parallel_command import ParallelCommand
from cmdsaga.commands.sequential_command import SequentialCommand, StepFactory


def compose_parallel(*commands: BaseCommand) -> ParallelCommand:
    """Combines a fixed list of commands into one that runs them concurrently."""
    return ParallelCommand(*commands)


def compose_sequential(factory: StepFactory) -> SequentialCommand:
    """Combines the commands yielded by a step generator into one command."""
    return SequentialCommand(factory)


def compose(*args: Any):
    """
    Composes commands.

    compose(steps) with a single step-generator function builds a
    SequentialCommand; compose(cmd1, cmd2, ...) builds a ParallelCommand.
    """
    if len(args) == 1 and callable(args[0]) and not is_command(args[0]):
        return compose_sequential(args[0])
    return compose_parallel(*args)
