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

import logging

from nsc_buildx_setup.utils.common import run_with_log

logger = logging.getLogger(__name__)


def builder_not_found_message(name: str) -> str:
    return f'no builder "{name}" found'


def is_builder_not_found_output(name: str, stdout: str, stderr: str) -> bool:
    """
    Tell whether output of the 'docker buildx inspect' command reports a missing builder.

    Docker does not provide a structured way to query that, so the check relies on the
    exact wording of its error message. Any other output, including unrelated errors,
    is treated as an existing builder.
    """
    message = builder_not_found_message(name)
    return message in stdout or message in stderr


def remote_builder_exists(name: str) -> bool:
    # Non-zero exit code is expected when builder is missing, so it is not checked.
    result = run_with_log(
        ["docker", "buildx", "inspect", name],
        capture_output=True,
        check=False,
        description=f"Inspect buildx builder '{name}'.",
    )

    stdout = result.stdout.decode(errors="replace")
    stderr = result.stderr.decode(errors="replace")
    logger.debug(f"Builder inspect exit code: {result.returncode}. Stderr: {stderr}")

    return not is_builder_not_found_output(name=name, stdout=stdout, stderr=stderr)
