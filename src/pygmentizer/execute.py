# -*- mode: python; encoding: utf-8 -*-
#
# Copyright 2021 the Pygmentizer contributors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License.  You may obtain a copy of
# the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.  See the
# License for the specific language governing permissions and limitations under
# the License.

from __future__ import annotations

import asyncio
import dataclasses
import enum
import logging
import shlex
import subprocess
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)

from .arguments import Invocation
from .execerror import LaunchError, ProcessFailed, ProcessSignaled, ProcessTimedOut


class Outcome(enum.Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SIGNALED = "signaled"
    TIMED_OUT = "timed_out"

    @staticmethod
    def from_returncode(returncode: int) -> Outcome:
        if returncode == 0:
            return Outcome.SUCCEEDED
        # Negative return codes mean the child was terminated by signal -N.
        if returncode < 0:
            return Outcome.SIGNALED
        return Outcome.FAILED


@dataclasses.dataclass
class ExecuteResult:
    argv: Sequence[str]
    outcome: Outcome
    returncode: Optional[int]
    stdout: str
    stderr: str
    timeout: Optional[float] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.SUCCEEDED

    def raise_for_status(self) -> ExecuteResult:
        if self.outcome is Outcome.SUCCEEDED:
            return self
        if self.outcome is Outcome.TIMED_OUT:
            assert self.timeout is not None
            raise ProcessTimedOut.make(
                self.argv, self.timeout, self.stdout, self.stderr
            )
        assert self.returncode is not None
        if self.outcome is Outcome.SIGNALED:
            raise ProcessSignaled.make(
                self.argv, -self.returncode, self.stdout, self.stderr
            )
        raise ProcessFailed.make(self.argv, self.returncode, self.stdout, self.stderr)


def _decode(data: Union[bytes, str, None], encoding: str) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode(encoding, errors="replace")


def _log_result(result: ExecuteResult) -> None:
    if result.outcome is Outcome.TIMED_OUT:
        logger.info(
            "executed: `%s` [timed out after %gs]",
            shlex.join(result.argv),
            result.timeout,
        )
    elif result.succeeded:
        logger.debug(
            "executed: `%s` [returncode=%d]", shlex.join(result.argv), result.returncode
        )
    else:
        logger.info(
            "executed: `%s` [returncode=%d]", shlex.join(result.argv), result.returncode
        )


def execute(
    invocation: Invocation,
    *,
    timeout: Optional[float] = None,
    encoding: str = "utf-8",
) -> ExecuteResult:
    """Run |invocation| to completion and return its result

       Raises LaunchError if the process could not be started at all. Every
       other outcome is reported by the returned result."""

    argv = invocation.argv

    logger.debug("executing: `%s`", shlex.join(argv))

    if invocation.stdin is not None:
        stdin_data: Optional[bytes] = invocation.stdin.encode(encoding)
    else:
        stdin_data = None

    # Output is decoded here rather than by subprocess, so that no newline
    # translation takes place; execute_async() returns the same strings.
    try:
        completed = subprocess.run(
            argv,
            input=stdin_data,
            stdin=subprocess.DEVNULL if stdin_data is None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as error:
        # subprocess.run() has already killed the child at this point.
        assert timeout is not None
        result = ExecuteResult(
            argv,
            Outcome.TIMED_OUT,
            None,
            _decode(error.stdout, encoding),
            _decode(error.stderr, encoding),
            timeout,
        )
    except (OSError, ValueError) as error:
        raise LaunchError.make(argv, error) from error
    else:
        result = ExecuteResult(
            argv,
            Outcome.from_returncode(completed.returncode),
            completed.returncode,
            _decode(completed.stdout, encoding),
            _decode(completed.stderr, encoding),
            timeout,
        )

    _log_result(result)
    return result


async def _write_stdin(
    pipe: Optional[asyncio.StreamWriter], data: Optional[bytes]
) -> None:
    if pipe is None:
        return
    try:
        if data:
            pipe.write(data)
            await pipe.drain()
        pipe.close()
    except (BrokenPipeError, ConnectionResetError):
        # The child exited without reading all of its input.
        pass


async def execute_async(
    invocation: Invocation,
    *,
    timeout: Optional[float] = None,
    encoding: str = "utf-8",
) -> ExecuteResult:
    """Coroutine version of execute()

       The child never outlives the call: it is killed and reaped on timeout,
       and also if the calling task is cancelled."""

    argv = invocation.argv

    logger.debug("executing: `%s`", shlex.join(argv))

    if invocation.stdin is not None:
        stdin_mode = asyncio.subprocess.PIPE
        stdin_data: Optional[bytes] = invocation.stdin.encode(encoding)
    else:
        stdin_mode = asyncio.subprocess.DEVNULL
        stdin_data = None

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=stdin_mode,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as error:
        raise LaunchError.make(argv, error) from error

    logger.debug("executing: `%s`: started, pid=%d", shlex.join(argv), process.pid)

    assert process.stdout is not None and process.stderr is not None
    # Output is collected by separate tasks so that whatever was written before
    # a timeout is still available afterwards.
    readers = [
        asyncio.ensure_future(process.stdout.read()),
        asyncio.ensure_future(process.stderr.read()),
    ]
    timed_out = False

    try:
        try:
            await asyncio.wait_for(
                asyncio.gather(_write_stdin(process.stdin, stdin_data), process.wait()),
                timeout,
            )
        except asyncio.TimeoutError:
            timed_out = True
        finally:
            if process.returncode is None:
                process.kill()
                await process.wait()
        stdout, stderr = await asyncio.gather(*readers)
    finally:
        for reader in readers:
            if not reader.done():
                reader.cancel()

    if timed_out:
        assert timeout is not None
        result = ExecuteResult(
            argv,
            Outcome.TIMED_OUT,
            None,
            _decode(stdout, encoding),
            _decode(stderr, encoding),
            timeout,
        )
    else:
        assert process.returncode is not None
        result = ExecuteResult(
            argv,
            Outcome.from_returncode(process.returncode),
            process.returncode,
            _decode(stdout, encoding),
            _decode(stderr, encoding),
            timeout,
        )

    _log_result(result)
    return result


__all__ = ["ExecuteResult", "Outcome", "execute", "execute_async"]
