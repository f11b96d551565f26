# file: tests/test_rollback_log.py

import pytest
from unittest.mock import AsyncMock

from cmdsaga.commands.base_command import command
from cmdsaga.commands.rollback_log import RollbackLog


def test_record_prepends_entries():
    """Tests that the most recently recorded command comes first."""
    log = RollbackLog()
    first, second = command(lambda: 1), command(lambda: 2)

    log.record(first)
    log.record(second)

    assert log.entries() == [second, first]
    assert len(log) == 2

@pytest.mark.asyncio
async def test_undo_all_walks_entries_in_order(journal, make_step):
    log = RollbackLog()
    for name in ("a", "b", "c"):
        step = make_step(name)
        await step.execute()
        log.record(step)

    await log.undo_all()

    assert journal.names("undo") == ["c", "b", "a"]
    assert len(log) == 0

@pytest.mark.asyncio
async def test_undo_all_skips_plain_commands():
    log = RollbackLog()
    undo = AsyncMock()
    log.record(command(lambda: 1, undo))
    log.record(command(lambda: 2))

    await log.undo_all()

    undo.assert_awaited_once()

@pytest.mark.asyncio
async def test_undo_all_on_empty_log_does_nothing():
    await RollbackLog().undo_all()

@pytest.mark.asyncio
async def test_undo_failure_leaves_remaining_entries():
    """Tests best-effort rollback: a failing undo stops the walk."""
    err = RuntimeError("undo failed")
    untouched = AsyncMock()
    log = RollbackLog()
    remaining = command(lambda: 1, untouched)
    log.record(remaining)
    log.record(command(lambda: 2, AsyncMock(side_effect=err)))

    with pytest.raises(RuntimeError) as exc_info:
        await log.undo_all()

    assert exc_info.value is err
    untouched.assert_not_awaited()
    assert log.entries() == [remaining]
