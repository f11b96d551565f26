# file: cmdsaga/commands/sequential_command.py

import inspect
from typing import Any, Callable, Generator

from cmdsaga.commands.base_command import is_command
from cmdsaga.commands.batch import run_batch
from cmdsaga.commands.composite_command import CompositeCommand
from cmdsaga.exceptions import InvalidCompositionError, InvalidStepGeneratorError

StepFactory = Callable[[], Generator[Any, Any, Any]]


class SequentialCommand(CompositeCommand):
    """
    Drives a step generator one step at a time.

    The generator yields what to do next:

    - a command: it is executed and its result is sent back;
    - a list or tuple: the commands in it run concurrently and a list is
      sent back with each command replaced by its result;
    - anything else: it is sent back unchanged.

    If a step fails, the error is thrown into the generator at the yield,
    so the step function can recover with a plain try/except. An error the
    generator does not handle fails the whole command, and every step that
    completed is undone, most recently completed first.

    Example:
        def checkout():
            order = yield create_order
            try:
                yield charge_card(order)
            except PaymentDeclined:
                yield notify_customer(order)
            return order

        cmd = SequentialCommand(checkout)
    """
    def __init__(self, factory: StepFactory):
        if not callable(factory) or is_command(factory):
            raise InvalidCompositionError(
                f"Step factory must be a callable returning a generator, got {type(factory).__name__}"
            )
        super().__init__()
        self.factory = factory

    def __repr__(self):
        return f"<{self.__class__.__name__} {getattr(self.factory, '__name__', 'steps')}>"

    async def _run(self) -> Any:
        steps = self.factory()
        if not inspect.isgenerator(steps):
            raise InvalidStepGeneratorError(
                f"{self!r}: step factory returned {type(steps).__name__}, expected a generator"
            )

        pending: Any = None
        throw = False
        step_count = 0
        try:
            while True:
                try:
                    if throw:
                        yielded = steps.throw(pending)
                    else:
                        yielded = steps.send(pending)
                except StopIteration as stop:
                    self.logger.debug(f"{self!r} finished after {step_count} step(s)")
                    # Nothing is left to recover a failure here, so it propagates.
                    return await self._resolve_step(stop.value)

                pending, throw = None, False
                step_count += 1
                try:
                    pending = await self._resolve_step(yielded)
                except Exception as e:
                    self.logger.debug(f"{self!r} step {step_count} failed, throwing {e!r} into the generator")
                    pending, throw = e, True
        finally:
            steps.close()

    async def _resolve_step(self, value: Any) -> Any:
        """Turns a yielded value into the value sent back to the generator."""
        if isinstance(value, (list, tuple)):
            return await run_batch(value, self.rollback_log)
        if is_command(value):
            await value.execute()
            self.rollback_log.record(value)
            return value.result
        return value
