"""
Copyright 2024 Google LLC

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

     https://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import argparse

from ..commands.version import version
from ..utils.console import lisky_print
from .config import set_get_parser, set_set_parser


def set_parser(parser: argparse.ArgumentParser):
  lisky_subcommands = parser.add_subparsers(
      title="lisky subcommands", dest="lisky_subcommands", help="Top level commands"
  )
  set_command_parser = lisky_subcommands.add_parser(
      "set", help="Set a config variable and persist it."
  )
  get_command_parser = lisky_subcommands.add_parser(
      "get", help="Print the value of a config variable."
  )
  version_parser = lisky_subcommands.add_parser(
      "version", help="Command to get lisky version"
  )

  def default_subcommand_function(
      _args,
  ) -> int:  # args is unused, so pylint: disable=invalid-name
    """Default subcommand function.

    Args:
      _args: user provided arguments for running the command.

    Returns:
      0 if successful and 1 otherwise.
    """
    lisky_print("Welcome to lisky! See below for overall commands:", flush=True)
    parser.print_help()
    return 0

  parser.set_defaults(func=default_subcommand_function)
  version_parser.set_defaults(func=version)

  set_set_parser(set_parser=set_command_parser)
  set_get_parser(get_parser=get_command_parser)
