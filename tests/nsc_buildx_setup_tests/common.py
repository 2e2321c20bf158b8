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

import subprocess


NSC_PATH = "/usr/local/bin/nsc"


def builder_not_found_stderr(name: str = "nsc-remote") -> bytes:
    return f'ERROR: no builder "{name}" found\n'.encode()


def completed(args, returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(
        args=args, returncode=returncode, stdout=stdout, stderr=stderr
    )


def get_called_commands(run_mock):
    """
    Get command line arguments of all commands that have been run through the mocked 'subprocess.run'.
    """
    result = []
    for call in run_mock.call_args_list:
        args, kwargs = call
        cmd_args = kwargs.get("args")
        if cmd_args is None:
            cmd_args = args[0]
        result.append(list(cmd_args))
    return result
