"""
Copyright 2025 Google LLC

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

from typing import Any

from ..core.config import Configuration, get_variable, set_variable
from ..utils.console import lisky_exit, lisky_print, print_result
from ..utils.errors import LiskyError
from ..utils.execution_context import is_json, is_pretty, set_output_format

SET_ERROR_PREFIX = 'Could not set config variable'
GET_ERROR_PREFIX = 'Could not get config variable'


def _apply_output_format(args, config: Configuration) -> None:
  """Command line flags win over the json/pretty config variables."""
  as_json = getattr(args, 'json', None)
  pretty = getattr(args, 'pretty', None)
  set_output_format(
      config.values.get('json') is True if as_json is None else as_json,
      config.values.get('pretty') is True if pretty is None else pretty,
  )


def _report_error(prefix: str, error: LiskyError) -> None:
  message = f'{prefix}: {error}'
  if is_json():
    print_result({'error': message}, as_json=True, pretty=is_pretty())
  else:
    lisky_print(message)


def _print(result: dict[str, Any]) -> None:
  print_result(result, as_json=is_json(), pretty=is_pretty())


def set_config(args) -> None:
  """Sets a config variable: `lisky set <variable> <value>`."""
  try:
    config = Configuration.load()
    _apply_output_format(args, config)
    result = set_variable(config, args.variable, args.value)
  except LiskyError as e:
    _report_error(SET_ERROR_PREFIX, e)
    lisky_exit(1)

  _print(result.to_dict())


def get_config(args) -> None:
  """Prints a config variable: `lisky get <variable>`."""
  try:
    config = Configuration.load()
    _apply_output_format(args, config)
    value = get_variable(config, args.variable)
  except LiskyError as e:
    _report_error(GET_ERROR_PREFIX, e)
    lisky_exit(1)

  _print({'variable': args.variable, 'value': value})
