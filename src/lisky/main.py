# PYTHON_ARGCOMPLETE_OK

"""
Copyright 2023 Google LLC

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

r"""lisky: command line access to the lisky configuration file.

Usage:
  lisky set <variable> <value>
  lisky get <variable>
  lisky version
"""

import argparse
import sys

import argcomplete

from .parser.core import set_parser
################### Compatibility Check ###################
# Check that the user runs the below version or greater.


MINIMUM_PYTHON_VERSION = (3, 10)


def check_python_version(version_info: tuple[int, ...]) -> None:
  if tuple(version_info[:2]) < MINIMUM_PYTHON_VERSION:
    raise RuntimeError(
        'lisky must be run with Python'
        f' {MINIMUM_PYTHON_VERSION[0]}.{MINIMUM_PYTHON_VERSION[1]} or greater.'
        f' User currently is running {version_info[0]}.{version_info[1]}'
    )


check_python_version(tuple(sys.version_info))


def main() -> None:
  # Create top level parser for lisky command.
  parser = argparse.ArgumentParser(description='lisky command', prog='lisky')
  set_parser(parser=parser)
  argcomplete.autocomplete(parser)

  main_args = parser.parse_args()
  main_args.func(main_args)


if __name__ == '__main__':
  main()
