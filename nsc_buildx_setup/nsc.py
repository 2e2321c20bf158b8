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
Operations that are performed by the Namespace Cloud CLI.
"""

import logging
import os
import pathlib as pl
import shutil
from typing import List, MutableMapping

from nsc_buildx_setup.config import SetupConfig
from nsc_buildx_setup.constants import CLI_NOT_FOUND_MESSAGE
from nsc_buildx_setup.utils.common import check_call_with_log
from nsc_buildx_setup.utils import github_actions

logger = logging.getLogger(__name__)


class NscCliNotFoundError(Exception):
    def __init__(self, message: str = CLI_NOT_FOUND_MESSAGE):
        super(NscCliNotFoundError, self).__init__(message)


def ensure_cli_available(config: SetupConfig):
    cli_path = shutil.which(config.cli_name)
    if cli_path is None:
        raise NscCliNotFoundError()

    logger.debug(f"Found Namespace Cloud CLI: {cli_path}")


def ensure_token(config: SetupConfig, environ: MutableMapping[str, str] = None):
    """
    Make sure that there is a valid token to open the proxy with.
    Managed runners already have the token file, otherwise the GitHub workflow identity token
    is exchanged for a Namespace Cloud token.
    """
    if environ is None:
        environ = os.environ

    if pl.Path(config.token_file).exists():
        github_actions.export_variable(
            config.token_file_env_var, config.token_file, environ=environ
        )
        return

    check_call_with_log(
        [
            config.cli_name,
            "auth",
            "exchange-github-token",
            f"--ensure={config.token_min_validity}",
        ],
        env=dict(environ),
        description="Exchange GitHub token for Namespace Cloud token.",
    )


def build_setup_command(config: SetupConfig, managed_runner: bool) -> List[str]:
    cmd_args = [
        config.cli_name,
        "docker",
        "buildx",
        "setup",
        f"--name={config.builder_name}",
        "--background",
        "--use",
        "--default_load",
    ]

    if managed_runner:
        cmd_args.append(f"--background_debug_dir={config.debug_dir}")

    return cmd_args


def provision_builder(config: SetupConfig, environ: MutableMapping[str, str] = None):
    """
    Start proxy to the remote build cluster in background and register it as the default buildx builder.
    """
    if environ is None:
        environ = os.environ

    check_call_with_log(
        build_setup_command(
            config=config,
            managed_runner=config.is_managed_runner(environ),
        ),
        env=dict(environ),
        description=f"Set up buildx builder '{config.builder_name}'.",
    )
