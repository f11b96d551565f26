# file: cmdsaga/commands/batch.py
"""Concurrent fan-out shared by the parallel and sequential composers."""
import asyncio
import logging
from typing import Any, List, Sequence

from cmdsaga.commands.base_command import BaseCommand, is_command
from cmdsaga.commands.rollback_log import RollbackLog

logger = logging.getLogger(__name__)


async def run_batch(items: Sequence[Any], log: RollbackLog) -> List[Any]:
    """
    Executes every command in items concurrently and records each one in
    log as it completes. Non-command items pass through untouched.

    Returns a list mirroring items positionally, with each command
    replaced by its result. Waits for all commands to settle; if any
    failed, the first failure to occur is re-raised.
    """
    failures: List[Exception] = []

    async def _execute_and_record(cmd: BaseCommand):
        try:
            await cmd.execute()
        except Exception as e:
            failures.append(e)
            return
        log.record(cmd)

    commands = [item for item in items if is_command(item)]
    logger.debug(f"Executing {len(commands)} command(s) concurrently")
    await asyncio.gather(*(_execute_and_record(cmd) for cmd in commands))

    if failures:
        for extra in failures[1:]:
            logger.warning(f"Additional failure in the same batch: {extra!r}")
        raise failures[0]

    return [item.result if is_command(item) else item for item in items]
