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

import argparse

import pytest
from argcomplete import ChoicesCompleter

from lisky.commands.config import get_config, set_config
from lisky.commands.version import version
from lisky.core.config import CONFIG_VARIABLES
from lisky.parser.core import set_parser


@pytest.fixture(name='parser')
def _parser():
  parser = argparse.ArgumentParser()
  set_parser(parser=parser)
  return parser


def test_set_command_parses_variable_and_value(parser):
  args = parser.parse_args(['set', 'liskJS.testnet', 'true'])

  assert args.variable == 'liskJS.testnet'
  assert args.value == 'true'
  assert args.json is None
  assert args.pretty is None
  assert args.func is set_config


def test_set_command_accepts_unknown_variable(parser):
  args = parser.parse_args(['set', 'unknown', 'x'])

  assert args.variable == 'unknown'


def test_set_command_requires_value(parser):
  with pytest.raises(SystemExit):
    parser.parse_args(['set', 'json'])


def test_output_flags(parser):
  args = parser.parse_args(['set', 'json', 'true', '--json', '--no-pretty'])

  assert args.json is True
  assert args.pretty is False


def test_get_command(parser):
  args = parser.parse_args(['get', 'name', '--pretty'])

  assert args.variable == 'name'
  assert args.pretty is True
  assert args.func is get_config


def test_version_command(parser):
  args = parser.parse_args(['version'])

  assert args.func is version


def test_no_command_prints_help(parser, capsys):
  args = parser.parse_args([])

  assert args.func(args) == 0
  assert 'Welcome to lisky!' in capsys.readouterr().out


def test_variable_argument_completes_to_allow_list(parser):
  subparsers = next(
      action
      for action in parser._actions  # pylint: disable=protected-access
      if isinstance(action, argparse._SubParsersAction)  # pylint: disable=protected-access
  )
  set_parser_ = subparsers.choices['set']
  variable_action = next(
      action
      for action in set_parser_._actions  # pylint: disable=protected-access
      if action.dest == 'variable'
  )

  assert isinstance(variable_action.completer, ChoicesCompleter)
  assert list(variable_action.completer.choices) == CONFIG_VARIABLES
