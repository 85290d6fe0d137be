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

from ..commands.config import get_config, set_config
from ..core.config import CONFIG_VARIABLES, get_config_file_path
from .common import add_completed_argument, add_output_arguments

_AVAILABLE_VARIABLES = ', '.join(CONFIG_VARIABLES)


def set_set_parser(set_parser: argparse.ArgumentParser) -> None:
  set_parser.description = (
      f'Sets configuration <variable> to <value>. Variables available:'
      f' {_AVAILABLE_VARIABLES}. Configuration is persisted in'
      f' `{get_config_file_path()}`.'
  )
  set_parser.epilog = """Examples:
  lisky set json true
  lisky set name my_custom_lisky
  lisky set liskJS.testnet true"""
  set_parser.formatter_class = argparse.RawDescriptionHelpFormatter

  add_completed_argument(
      set_parser,
      'variable',
      choices=CONFIG_VARIABLES,
      help_msg=f'Config variable to set. Allowed: {_AVAILABLE_VARIABLES}.',
  )
  set_parser.add_argument(
      'value',
      type=str,
      help='New value. Boolean variables accept `true` or `false`.',
  )
  add_output_arguments(set_parser)
  set_parser.set_defaults(func=set_config)


def set_get_parser(get_parser: argparse.ArgumentParser) -> None:
  add_completed_argument(
      get_parser,
      'variable',
      choices=CONFIG_VARIABLES,
      help_msg=f'Config variable to read. Allowed: {_AVAILABLE_VARIABLES}.',
  )
  add_output_arguments(get_parser)
  get_parser.set_defaults(func=get_config)
