# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Confirmation loops that turn an asynchronous display state change into a
synchronous result.

wait_for_state() polls until the display reports a state; the command is sent
only once, by the caller. retry_until_confirmed() re-sends the command on every
attempt, because some commands (mute) are not always durable on the display.

Both loops are bounded, suspend only in asyncio.sleep(), and never leave
anything running after they return or raise.
"""

from __future__ import annotations

import asyncio
import logging
import time

from ..internal_types import *
from ..exceptions import (
    DeadlineExceededError,
    ConfirmationTimeoutError,
    ConfirmationExhaustedError,
  )
from ..pkg_logging import logger as pkg_logger

async def wait_for_state(
        read_state: Callable[[], Awaitable[T]],
        target: T,
        *,
        timeout_secs: float,
        poll_interval: float,
        description: str="state",
        deadline: Optional[float]=None,
        logger: Optional[logging.Logger]=None,
      ) -> T:
    """Polls read_state() every poll_interval seconds until it returns target.

       Args:
         read_state:    Reads the current state from the display.
         target:        The state to wait for.
         timeout_secs:  Maximum time to wait, in seconds.
         poll_interval: Seconds between polls. The first poll happens after one interval.
         description:   Human readable name of the state, for messages.
         deadline:      Optional absolute time.monotonic() deadline from the caller.
                        The earlier of this and now + timeout_secs is used.
         logger:        The logger to use. If None, the package logger is used.

       Returns:
         The state that matched target.

       Raises:
         ConfirmationTimeoutError if the state does not match before the deadline.
         Any error raised by read_state() other than DeadlineExceededError.
    """
    if logger is None:
        logger = pkg_logger
    start_time = time.monotonic()
    end_time = start_time + timeout_secs
    if deadline is not None:
        end_time = min(end_time, deadline)
    polls = 0
    while True:
        remaining = end_time - time.monotonic()
        if remaining <= 0:
            break
        await asyncio.sleep(min(poll_interval, remaining))
        if time.monotonic() >= end_time:
            break
        try:
            state = await read_state()
        except DeadlineExceededError as e:
            raise ConfirmationTimeoutError(
                f"Timed out waiting for {description} to change to {target}") from e
        polls += 1
        logger.info(f"Waiting for {description} to change to {target}, current status {state}")
        if state == target:
            logger.debug(f"{description} reached {target} after {polls} polls")
            return state
    raise ConfirmationTimeoutError(
        f"Timed out after {time.monotonic() - start_time:.3f} seconds waiting for {description} to change to {target}")

async def retry_until_confirmed(
        send_command: Callable[[], Awaitable[Any]],
        read_state: Callable[[], Awaitable[T]],
        target: T,
        *,
        retries: int,
        retry_delay: float,
        description: str="state",
        deadline: Optional[float]=None,
        logger: Optional[logging.Logger]=None,
      ) -> T:
    """Sends a command and reads back the state until the state matches target.

       The command is re-sent on every attempt. At most retries + 1 attempts are
       made.

       Args:
         send_command:  Sends the command to the display.
         read_state:    Reads the current state from the display.
         target:        The state to confirm.
         retries:       Number of additional attempts after the first.
         retry_delay:   Seconds to wait after a failed attempt.
         description:   Human readable name of the state, for messages.
         deadline:      Optional absolute time.monotonic() deadline from the caller,
                        checked before every attempt.
         logger:        The logger to use. If None, the package logger is used.

       Returns:
         The state that matched target.

       Raises:
         ConfirmationExhaustedError if no attempt is confirmed.
         DeadlineExceededError if the deadline passes between attempts.
         Any error raised by send_command() or read_state().
    """
    if logger is None:
        logger = pkg_logger
    attempts = retries + 1
    for attempt in range(1, attempts + 1):
        if deadline is not None and time.monotonic() >= deadline:
            raise DeadlineExceededError(
                f"Deadline passed after {attempt - 1} attempts to set {description}")
        await send_command()
        state = await read_state()
        if state == target:
            if attempt > 1:
                logger.info(f"{description} set to {target} after {attempt} attempts")
            return state
        logger.debug(f"Attempt {attempt}/{attempts}: {description} is {state}, expected {target}")
        if attempt < attempts:
            delay = retry_delay
            if deadline is not None:
                delay = max(0.0, min(delay, deadline - time.monotonic()))
            await asyncio.sleep(delay)
    raise ConfirmationExhaustedError(
        f"attempted to set {description} {attempts} times, could not", attempts=attempts)
