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

from contextvars import ContextVar
import json
import os
import sys
from typing import Optional, TypedDict

DEFAULT_EXECUTABLE = "pygmentize"
DEFAULT_TIMEOUT = 60.0
DEFAULT_ENCODING = "utf-8"


class Error(Exception):
    pass


class InvalidConfiguration(Error):
    pass


class MissingConfiguration(Error):
    pass


def in_virtualenv() -> bool:
    return sys.prefix != sys.base_prefix


def settings_dir() -> str:
    if "PYGMENTIZER_HOME" in os.environ:
        return os.path.join(os.environ["PYGMENTIZER_HOME"], "etc")
    # If installed in a virtual environment (default case) then return a sub-
    # directory inside the virtual environment.
    if in_virtualenv():
        return os.path.join(sys.prefix, "etc")
    # Otherwise, fall back to a reasonable system directory.
    return "/etc/pygmentizer"


def configuration_path() -> str:
    return os.path.join(settings_dir(), "configuration.json")


Configuration = TypedDict(
    "Configuration",
    {
        "pygmentize.executable": str,
        "pygmentize.timeout": Optional[float],
        "pygmentize.encoding": str,
    },
    total=False,
)

_CONFIGURATION: ContextVar[Optional[Configuration]] = ContextVar(
    "configuration", default=None
)


def configuration() -> Configuration:
    """Return the configuration, loading it on first use

       Raises MissingConfiguration if there is no configuration file, and
       InvalidConfiguration if its contents is not a JSON object."""

    cached = _CONFIGURATION.get()
    if cached is not None:
        return cached

    configuration_json_path = configuration_path()
    try:
        with open(configuration_json_path, encoding="utf-8") as file:
            configuration_json = file.read()
    except OSError:
        raise MissingConfiguration(configuration_json_path)

    try:
        configuration = json.loads(configuration_json)
    except ValueError as error:
        raise InvalidConfiguration(f"{configuration_json_path}: {error}")

    if not isinstance(configuration, dict):
        raise InvalidConfiguration(
            f"{configuration_json_path}: expected a JSON object"
        )

    _CONFIGURATION.set(configuration)
    return configuration


def reset_configuration() -> None:
    _CONFIGURATION.set(None)


__all__ = [
    "Error",
    "InvalidConfiguration",
    "MissingConfiguration",
    "Configuration",
    "configuration",
    "configuration_path",
    "reset_configuration",
    "settings_dir",
]
