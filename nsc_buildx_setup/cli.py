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
This is an entry point for the GitHub Actions step that configures buildx to use the remote
Namespace Cloud build cluster.
"""

import argparse
from typing import List

from nsc_buildx_setup.config import SetupConfig
from nsc_buildx_setup.prepare_buildx import run
from nsc_buildx_setup.utils.common import init_logging


def create_parser():
    parser = argparse.ArgumentParser(
        prog="nsc-buildx-setup",
        description="Configure docker buildx to use remote Namespace Cloud build cluster.",
    )

    parser.add_argument(
        "--builder-name",
        dest="builder_name",
        help="Name of the buildx builder.",
    )
    parser.add_argument(
        "--cli-name",
        dest="cli_name",
        help="Name or path of the Namespace Cloud CLI executable.",
    )
    parser.add_argument(
        "--token-file",
        dest="token_file",
        help="Path to the pre-provisioned Namespace Cloud token file.",
    )
    parser.add_argument(
        "--token-min-validity",
        dest="token_min_validity",
        help="Minimal time for which the exchanged token has to stay valid, e.g. '5m'.",
    )
    parser.add_argument(
        "--debug-dir",
        dest="debug_dir",
        help="Directory for the proxy debug output on Namespace managed runners.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: List[str] = None) -> int:
    args = create_parser().parse_args(argv)

    init_logging(debug=args.debug)

    config = SetupConfig.create_from_env().with_overrides(
        builder_name=args.builder_name,
        cli_name=args.cli_name,
        token_file=args.token_file,
        token_min_validity=args.token_min_validity,
        debug_dir=args.debug_dir,
    )

    return run(config)
