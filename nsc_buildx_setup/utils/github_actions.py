# Copyright 2014-2022 Scalyr Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Helpers that talk to the GitHub Actions runner through workflow commands
(https://docs.github.com/en/actions/using-workflows/workflow-commands-for-github-actions).
"""

import contextlib
import logging
import os
import pathlib as pl
import uuid
from typing import MutableMapping


logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _issue_command(command: str, message: str = ""):
    print(f"::{command}::{message}", flush=True)


def info(message: str):
    print(message, flush=True)


@contextlib.contextmanager
def group(title: str):
    """
    Make all output printed within the context collapsable in the GitHub Actions log.
    """
    _issue_command("group", title)
    try:
        yield
    finally:
        _issue_command("endgroup")


def export_variable(
    name: str, value: str, environ: MutableMapping[str, str] = None
):
    """
    Set environment variable for the current process and for all following steps of the job.
    """
    if environ is None:
        environ = os.environ

    environ[name] = value

    github_env = environ.get("GITHUB_ENV")
    if not github_env:
        logger.warning(
            f"The 'GITHUB_ENV' variable is not set, variable '{name}' is exported only to the current process."
        )
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(
            f"Unexpected input: name or value of the variable '{name}' contains the delimiter '{delimiter}'."
        )

    with pl.Path(github_env).open("a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str):
    """
    Report an error annotation. The caller is responsible for exiting with a non-zero code.
    """
    _issue_command("error", _escape_data(message))
