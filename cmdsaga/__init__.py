# file: cmdsaga/__init__.py
"""
Composable asynchronous commands with automatic compensation.

    create = command(create_order, cancel_order)
    charge = command(charge_card, refund_card)
    result = await invoke(compose(create, charge))
"""
from cmdsaga.commands import (
    BaseCommand,
    FunctionCommand,
    ParallelCommand,
    SequentialCommand,
    command,
    compose,
    compose_parallel,
    compose_sequential,
    is_command,
    is_undoable,
)
from cmdsaga.command_executor import CommandExecutor, invoke

__version__ = "0.1.0"

__all__ = [
    "BaseCommand",
    "FunctionCommand",
    "ParallelCommand",
    "SequentialCommand",
    "command",
    "compose",
    "compose_parallel",
    "compose_sequential",
    "is_command",
    "is_undoable",
    "invoke",
    "CommandExecutor",
]
