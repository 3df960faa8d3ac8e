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

import shlex
import signal
from typing import Any, Optional, Sequence, Union

from pygmentizer import base


class PygmentizeError(base.Error):
    argv: Sequence[str]

    def __str__(self) -> str:
        return str(self.args[0])

    @property
    def command(self) -> str:
        return shlex.join(self.argv)


class LaunchError(PygmentizeError):
    reason: Union[OSError, ValueError]

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        _, self.argv, self.reason = args

    @staticmethod
    def make(
        argv: Sequence[str], reason: Union[OSError, ValueError]
    ) -> LaunchError:
        description = getattr(reason, "strerror", None) or reason
        return LaunchError(
            f"failed to start `{shlex.join(argv)}`: {description}",
            argv,
            reason,
        )


class ProcessFailed(PygmentizeError):
    returncode: int
    stdout: str
    stderr: str

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        _, self.argv, self.returncode, self.stdout, self.stderr = args

    @staticmethod
    def make(
        argv: Sequence[str], returncode: int, stdout: str, stderr: str
    ) -> ProcessFailed:
        message = f"`{shlex.join(argv)}` failed with exit status {returncode}"
        if stderr.strip():
            message += f": {stderr.strip().splitlines()[-1]}"
        return ProcessFailed(message, argv, returncode, stdout, stderr)


class ProcessTimedOut(PygmentizeError):
    timeout: float
    stdout: str
    stderr: str

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        _, self.argv, self.timeout, self.stdout, self.stderr = args

    @staticmethod
    def make(
        argv: Sequence[str], timeout: float, stdout: str, stderr: str
    ) -> ProcessTimedOut:
        return ProcessTimedOut(
            f"`{shlex.join(argv)}` timed out after {timeout:g} seconds",
            argv,
            timeout,
            stdout,
            stderr,
        )


class ProcessSignaled(PygmentizeError):
    signal: Union[signal.Signals, int]
    stdout: str
    stderr: str

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        _, self.argv, self.signal, self.stdout, self.stderr = args

    @staticmethod
    def make(
        argv: Sequence[str], signum: int, stdout: str, stderr: str
    ) -> ProcessSignaled:
        signame: Optional[str]
        try:
            received: Union[signal.Signals, int] = signal.Signals(signum)
        except ValueError:
            received = signum
            signame = None
        else:
            signame = received.name
        return ProcessSignaled(
            f"`{shlex.join(argv)}` was terminated by signal {signame or signum}",
            argv,
            received,
            stdout,
            stderr,
        )


__all__ = [
    "PygmentizeError",
    "LaunchError",
    "ProcessFailed",
    "ProcessTimedOut",
    "ProcessSignaled",
]
