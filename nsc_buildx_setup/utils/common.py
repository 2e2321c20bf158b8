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
import os
import shlex
import subprocess


# If this environment variable is set, then debug messages are also logged.
DEBUG = bool(os.environ.get("NSC_BUILDX_DEBUG"))

# A counter for all commands that have been executed since start of the program.
# Just for more informative logging.
_COMMAND_COUNTER = 0

COMMAND_MESSAGE_PADDING = " " * 23


def init_logging(debug: bool = False):
    """
    Init logging. Log records go to stderr so they do not mix with the workflow commands
    that are printed to stdout.
    """

    level = logging.DEBUG if debug or DEBUG else logging.INFO

    logging.basicConfig(
        level=level,
        format="[%(levelname)s][%(module)s:%(lineno)s] %(message)s",
    )


def subprocess_command_run_with_log(func):
    """
    Wrapper for 'subprocess.run' and 'subprocess.check_call' functions that also logs
    additional info when command is executed.
    :param func: Function to wrap.
    """

    def wrapper(*args, description: str = None, **kwargs):
        global _COMMAND_COUNTER

        # Make info message with all command line arguments.
        cmd_args = kwargs.get("args")
        if cmd_args is None:
            cmd_args = args[0]
        if isinstance(cmd_args, list):
            cmd_str = shlex.join(cmd_args)
        else:
            cmd_str = cmd_args

        number = _COMMAND_COUNTER
        _COMMAND_COUNTER += 1

        message = f"### RUN COMMAND #{number}: '{cmd_str}'. ###"

        if description:
            message = f"{description}\n{COMMAND_MESSAGE_PADDING}{message}"

        logging.info(message)
        try:
            result = func(*args, **kwargs)
        except subprocess.CalledProcessError as e:
            logging.info(f" ### COMMAND #{number} FAILED. ###\n")
            raise e from None
        else:
            return result

    return wrapper


def _run(*args, **kwargs):
    # Looked up at call time, so patching 'subprocess.run' also affects logged runs.
    return subprocess.run(*args, **kwargs)


def _check_call(*args, **kwargs):
    return subprocess.run(*args, check=True, **kwargs)


# Alternative versions of subprocess functions that also log executed commands.
run_with_log = subprocess_command_run_with_log(_run)
check_call_with_log = subprocess_command_run_with_log(_check_call)
