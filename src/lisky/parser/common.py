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
from typing import Protocol, Any

from argcomplete import ChoicesCompleter


class ParserOrArgumentGroup(Protocol):

  def add_argument(self, *args, **kwargs) -> Any:
    ...


def add_completed_argument(
    parserOrGroup: ParserOrArgumentGroup,
    name: str,
    choices: list[str],
    help_msg: str,
) -> None:
  """Adds a positional argument that shell-completes to `choices`.

  Values outside `choices` are still accepted by the parser so that the
  command itself can report them.
  """
  parserOrGroup.add_argument(
      name,
      type=str,
      help=help_msg,
  ).completer = ChoicesCompleter(choices)


def add_output_arguments(custom_parser_or_group: ParserOrArgumentGroup) -> None:
  """Add output format arguments to the parser or argument group.

  Both default to None, meaning the value stored in the config file applies.

  Args:
    custom_parser_or_group: parser or argument group to add the arguments to.
  """
  custom_parser_or_group.add_argument(
      '--json',
      action=argparse.BooleanOptionalAction,
      default=None,
      help='Print results as JSON instead of a table.',
  )
  custom_parser_or_group.add_argument(
      '--pretty',
      action=argparse.BooleanOptionalAction,
      default=None,
      help='Indent JSON output and draw borders around tables.',
  )
