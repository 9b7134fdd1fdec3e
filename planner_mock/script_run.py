"""
Local stand-in for the scripting backend's ``run`` surface.

The planning UI talks to the backend with a success/failure handler pair:

    runner.with_success_handler(on_ok).with_failure_handler(on_err).call(
        Operation.GET_PROJECT, project_id
    )

``ScriptRunner`` reproduces that shape over local storage. Each call waits a
simulated round trip, runs the matching handler from FUNCTION_MAP and hands
the envelope to the success handler. Errors raised while running go to the
failure handler, or are only logged when none was bound. ``invoke`` is the
same call without callbacks, returning a CallResult.
"""

import asyncio
import logging
import time

from planner_mock.api_functions import FUNCTION_MAP, UnknownOperationError, resolve_operation
from planner_mock.config import ARTIFICIAL_DELAY

logger = logging.getLogger(__name__)

EXECUTION_ERROR = "execution"
UNKNOWN_OPERATION = "unknown_operation"


class UnsupportedCallError(TypeError):
    """Raised when a call is attempted without a success handler."""


class CallResult:
    """Either the handler's return value or the error it raised."""

    def __init__(self, value=None, error=None, error_kind=None):
        self.value = value
        self.error = error
        self.error_kind = error_kind

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error, error_kind=EXECUTION_ERROR):
        return cls(error=error, error_kind=error_kind)

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"CallResult(value={self.value!r})"
        return f"CallResult(error={self.error!r}, error_kind={self.error_kind!r})"


class ScriptRunner:
    def __init__(self, context, delay=None, sleep=asyncio.sleep):
        self.context = context
        self.delay = ARTIFICIAL_DELAY["script_run"] if delay is None else delay
        self._sleep = sleep

    async def simulate_delay(self):
        if self.delay > 0:
            await self._sleep(self.delay)

    async def invoke(self, operation, *args):
        """Run one operation after the simulated delay and capture the outcome."""
        await self.simulate_delay()

        try:
            operation = resolve_operation(operation)
        except UnknownOperationError as e:
            logger.error(f"Error executing function: {e}")
            return CallResult.failure(e, UNKNOWN_OPERATION)

        logger.info(f"Function call received: {operation.value}")
        logger.info(f"Parameters: {list(args)}")

        start_time = time.perf_counter()
        try:
            result = FUNCTION_MAP[operation](self.context, *args)
        except Exception as e:
            logger.error(f"Error executing function: {operation.value}: {e!r}")
            return CallResult.failure(e)

        execution_time = time.perf_counter() - start_time
        logger.info(f"Function execution latency: {execution_time:.3f} seconds")
        logger.info(f"Function response: {result}")
        return CallResult.success(result)

    def with_success_handler(self, callback):
        if callback is None:
            raise UnsupportedCallError("A success handler is required to call an operation")
        return HandlerBinding(self, callback)


class HandlerBinding:
    def __init__(self, runner, success_callback, failure_callback=None):
        self.runner = runner
        self.success_callback = success_callback
        self.failure_callback = failure_callback

    def with_failure_handler(self, callback):
        return HandlerBinding(self.runner, self.success_callback, callback)

    async def call(self, operation, *args):
        result = await self.runner.invoke(operation, *args)
        if result.ok:
            self.success_callback(result.value)
        elif self.failure_callback is not None:
            self.failure_callback(result.error)
        else:
            logger.error(f"API Error: {result.error!r}")
        return result
