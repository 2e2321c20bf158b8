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

# Name of the buildx builder which is backed by the Namespace Cloud proxy.
DEFAULT_BUILDER_NAME = "nsc-remote"

# Executable of the Namespace Cloud CLI.
DEFAULT_CLI_NAME = "nsc"

# Token file which is pre-provisioned on Namespace managed runners.
DEFAULT_TOKEN_FILE = "/var/run/nsc/token.json"
TOKEN_FILE_ENV_VAR = "NSC_TOKEN_FILE"

# Minimal remaining lifetime of the token, passed to the CLI as is.
DEFAULT_TOKEN_MIN_VALIDITY = "5m"

# Set only on Namespace managed runners.
RUNNER_IDENTITY_ENV_VAR = "NSC_VM_ID"
DEFAULT_DEBUG_DIR = "/home/runner/nsc"

# Prefix of the environment variables that override config fields.
CONFIG_ENV_VARS_PREFIX = "NSC_BUILDX_"

CLI_NOT_FOUND_MESSAGE = """Namespace Cloud CLI not found.

Please add a step this step to your workflow's job definition:

- uses: namespacelabs/nscloud-setup@v0"""

CHECK_BUILDER_GROUP_TITLE = "Check if Namespace Builder proxy is already configured"
PROXY_GROUP_TITLE = "Proxy Buildkit from Namespace Cloud"
BUILDER_GROUP_TITLE = "Builder"

BUILDER_ALREADY_CONFIGURED_MESSAGE = (
    "GitHub runner is already configured to use Namespace Cloud build cluster."
)
# Leading new line separates the message from the groups.
CONFIGURED_MESSAGE = (
    "\nConfigured buildx to use remote Namespace Cloud build cluster."
)
