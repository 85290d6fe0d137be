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

import json
import sys
from typing import Any, NoReturn

from tabulate import tabulate


def lisky_print(*args, **kwargs):
  """Helper function to print a prefix before function provided args.

  Args:
    *args: user provided print args.
    **kwargs: user provided print args.
  """
  sys.stdout.write("[lisky] ")
  print(*args, **kwargs)
  sys.stdout.flush()


def lisky_warn(*args, **kwargs):
  """Same as lisky_print, but on stderr so that result output stays clean."""
  sys.stderr.write("[lisky] ")
  print(*args, file=sys.stderr, **kwargs)
  sys.stderr.flush()


def lisky_exit(error_code) -> NoReturn:
  """Helper function to exit lisky with an associated error code.

  Args:
    error_code: If the code provided is zero, then no issues occurred.
  """
  if error_code == 0:
    sys.exit(0)
  else:
    lisky_warn(f"lisky failed, error code {error_code}")
    sys.exit(error_code)


def format_result(
    result: dict[str, Any], as_json: bool, pretty: bool
) -> str:
  """Renders a command result either as JSON or as a key/value table.

  Args:
    result: flat mapping returned by a command.
    as_json: render as JSON instead of a table.
    pretty: indent JSON output, draw a grid around table output.

  Returns:
    The rendered text.
  """
  if as_json:
    return json.dumps(result, indent=2 if pretty else None)

  rows = [[key, _format_cell(value)] for key, value in result.items()]
  table_fmt = "fancy_grid" if pretty else "plain"
  return tabulate(rows, tablefmt=table_fmt)


def print_result(result: dict[str, Any], as_json: bool, pretty: bool) -> None:
  rendered = format_result(result, as_json, pretty)
  if as_json:
    # Raw payload so that the output stays machine readable.
    print(rendered)
    sys.stdout.flush()
  else:
    lisky_print("\n" + rendered)


def _format_cell(value: Any) -> str:
  if isinstance(value, bool):
    return "true" if value else "false"
  if value is None:
    return ""
  return str(value)
