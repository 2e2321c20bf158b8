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

import mock
import pytest

from nsc_buildx_setup.config import SetupConfig
from tests.nsc_buildx_setup_tests.common import (
    NSC_PATH,
    builder_not_found_stderr,
    completed,
)


@pytest.fixture
def config(tmp_path):
    # Token file does not exist by default.
    return SetupConfig(token_file=str(tmp_path / "token.json"))


@pytest.fixture
def github_env_file(tmp_path):
    path = tmp_path / "github_env"
    path.touch()
    return path


@pytest.fixture
def environ(github_env_file):
    return {"GITHUB_ENV": str(github_env_file)}


@pytest.fixture
def inspect_result():
    """
    Result of the 'docker buildx inspect' command. Builder is missing by default.
    """
    return dict(returncode=1, stdout=b"", stderr=builder_not_found_stderr())


@pytest.fixture
def run_mock(inspect_result):
    def _run(*args, **kwargs):
        cmd_args = kwargs.get("args")
        if cmd_args is None:
            cmd_args = args[0]
        if cmd_args[:3] == ["docker", "buildx", "inspect"]:
            return completed(cmd_args, **inspect_result)
        return completed(cmd_args)

    with mock.patch("subprocess.run", side_effect=_run) as m:
        yield m


@pytest.fixture
def which_mock():
    with mock.patch("shutil.which", return_value=NSC_PATH) as m:
        yield m
