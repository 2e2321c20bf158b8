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

from nsc_buildx_setup.config import SetupConfig


class TestSetupConfig:
    def test_defaults(self):
        config = SetupConfig.create_from_env(environ={})

        assert config == SetupConfig(
            builder_name="nsc-remote",
            cli_name="nsc",
            token_file="/var/run/nsc/token.json",
            token_file_env_var="NSC_TOKEN_FILE",
            token_min_validity="5m",
            runner_identity_env_var="NSC_VM_ID",
            debug_dir="/home/runner/nsc",
        )

    def test_env_overrides(self):
        config = SetupConfig.create_from_env(
            environ={
                "NSC_BUILDX_BUILDER_NAME": "my-builder",
                "NSC_BUILDX_DEBUG_DIR": "/tmp/nsc-debug",
                "NSC_BUILDX_TOKEN_FILE": "",
            }
        )

        assert config.builder_name == "my-builder"
        assert config.debug_dir == "/tmp/nsc-debug"
        assert config.token_file == "/var/run/nsc/token.json"

    def test_with_overrides(self):
        config = SetupConfig().with_overrides(builder_name="other", cli_name=None)

        assert config.builder_name == "other"
        assert config.cli_name == "nsc"

    def test_is_managed_runner(self):
        config = SetupConfig()

        assert config.is_managed_runner({"NSC_VM_ID": "vm-1"})
        assert not config.is_managed_runner({"NSC_VM_ID": ""})
        assert not config.is_managed_runner({})
