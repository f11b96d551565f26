# file: cmdsaga/commands/__init__.py

from cmdsaga.commands.base_command import BaseCommand, FunctionCommand, command, is_command, is_undoable
from cmdsaga.commands.rollback_log import RollbackLog
from cmdsaga.commands.composite_command import CompositeCommand
from cmdsaga.commands.parallel_command import ParallelCommand
from cmdsaga.commands.sequential_command import SequentialCommand
from cmdsaga.commands.compose import compose, compose_parallel, compose_sequential
from cmdsaga.commands.command_history import CommandHistory

__all__ = [
    "BaseCommand",
    "FunctionCommand",
    "command",
    "is_command",
    "is_undoable",
    "RollbackLog",
    "CompositeCommand",
    "ParallelCommand",
    "SequentialCommand",
    "compose",
    "compose_parallel",
    "compose_sequential",
    "CommandHistory",
]
