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
Configure docker buildx to run builds on the remote Namespace Cloud build cluster.

The sequence is:
    1. Make sure that the Namespace Cloud CLI is installed.
    2. Check whether the remote builder is already configured, for example by a previous run
        of this step in the same job or by the managed runner itself.
    3. If not, make sure there is a valid token and start proxy with a new buildx builder.
    4. Report the used builder.
"""

import logging
import os
from typing import MutableMapping

from nsc_buildx_setup.buildx import remote_builder_exists
from nsc_buildx_setup.config import SetupConfig
from nsc_buildx_setup.constants import (
    CHECK_BUILDER_GROUP_TITLE,
    PROXY_GROUP_TITLE,
    BUILDER_GROUP_TITLE,
    BUILDER_ALREADY_CONFIGURED_MESSAGE,
    CONFIGURED_MESSAGE,
)
from nsc_buildx_setup.nsc import (
    NscCliNotFoundError,
    ensure_cli_available,
    ensure_token,
    provision_builder,
)
from nsc_buildx_setup.utils import github_actions

logger = logging.getLogger(__name__)


def prepare_buildx(config: SetupConfig, environ: MutableMapping[str, str] = None):
    if environ is None:
        environ = os.environ

    with github_actions.group(CHECK_BUILDER_GROUP_TITLE):
        builder_exists = remote_builder_exists(config.builder_name)
        if builder_exists:
            github_actions.info(BUILDER_ALREADY_CONFIGURED_MESSAGE)

    if not builder_exists:
        with github_actions.group(PROXY_GROUP_TITLE):
            # The token is only needed to open the proxy.
            ensure_token(config, environ=environ)
            provision_builder(config, environ=environ)

    with github_actions.group(BUILDER_GROUP_TITLE):
        github_actions.info(config.builder_name)

    github_actions.info(CONFIGURED_MESSAGE)


def run(config: SetupConfig, environ: MutableMapping[str, str] = None) -> int:
    """
    Run the whole step and convert any error to the step failure.
    :return: Exit code of the step.
    """
    try:
        ensure_cli_available(config)
    except NscCliNotFoundError as e:
        github_actions.set_failed(str(e))
        return 1

    try:
        prepare_buildx(config, environ=environ)
    except Exception as e:
        logger.debug("Buildx setup has failed.", exc_info=True)
        github_actions.set_failed(str(e))
        return 1

    return 0
