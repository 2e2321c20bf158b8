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

import dataclasses
import os
from typing import Mapping

from nsc_buildx_setup.constants import (
    DEFAULT_BUILDER_NAME,
    DEFAULT_CLI_NAME,
    DEFAULT_TOKEN_FILE,
    TOKEN_FILE_ENV_VAR,
    DEFAULT_TOKEN_MIN_VALIDITY,
    RUNNER_IDENTITY_ENV_VAR,
    DEFAULT_DEBUG_DIR,
    CONFIG_ENV_VARS_PREFIX,
)


@dataclasses.dataclass(frozen=True)
class SetupConfig:
    """
    Dataclass that stores all settings that are required to configure the remote buildx builder.
    """

    builder_name: str = DEFAULT_BUILDER_NAME
    cli_name: str = DEFAULT_CLI_NAME
    token_file: str = DEFAULT_TOKEN_FILE
    token_file_env_var: str = TOKEN_FILE_ENV_VAR
    token_min_validity: str = DEFAULT_TOKEN_MIN_VALIDITY
    runner_identity_env_var: str = RUNNER_IDENTITY_ENV_VAR
    debug_dir: str = DEFAULT_DEBUG_DIR

    @staticmethod
    def create_from_env(environ: Mapping[str, str] = None):
        """
        Create config where each field can be overridden by the 'NSC_BUILDX_<FIELD>' env. variable,
        for example 'NSC_BUILDX_BUILDER_NAME'.
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        for field in dataclasses.fields(SetupConfig):
            value = environ.get(f"{CONFIG_ENV_VARS_PREFIX}{field.name.upper()}")
            if value:
                overrides[field.name] = value

        return SetupConfig(**overrides)

    def with_overrides(self, **kwargs):
        """
        Return copy of the config with the given fields replaced. Fields with None values are skipped.
        """
        return dataclasses.replace(
            self, **{k: v for k, v in kwargs.items() if v is not None}
        )

    def is_managed_runner(self, environ: Mapping[str, str] = None) -> bool:
        if environ is None:
            environ = os.environ
        return bool(environ.get(self.runner_identity_env_var))
