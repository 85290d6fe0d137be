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

import copy
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from setuptools_scm import get_version as setuptools_get_version
from importlib.metadata import version, PackageNotFoundError

from ..utils.console import lisky_warn
from ..utils.errors import FileSystemError, ValidationError
from ..utils.feature_flags import is_non_interactive
from ..utils.file import ensure_directory_exists, read_json_file, write_json_file


def get_version() -> str:
  lisky_version_override = os.getenv('LISKY_VERSION_OVERRIDE', '')
  if lisky_version_override != '':
    return lisky_version_override

  try:
    return setuptools_get_version()
  except LookupError:
    pass

  try:
    return version('lisky')
  except PackageNotFoundError:
    pass

  raise LookupError('unable to determine version number')


CONFIG_DIR_ENV = 'LISKY_CONFIG_DIR'
CONFIG_DIR_NAME = '.lisky'
CONFIG_FILE_NAME = 'config.json'

WRITE_FAIL_WARNING = (
    'Config file could not be written: your changes will not be persisted.'
)
READ_FAIL_MESSAGE = (
    'Config file cannot be read or is not valid JSON. Please check {path} or'
    ' delete the file so we can create a new one from defaults.'
)

DEFAULT_CONFIG: dict[str, Any] = {
    'name': 'lisky',
    'json': False,
    'pretty': False,
    'liskJS': {
        'testnet': False,
        'node': '',
        'port': '',
        'ssl': False,
    },
}


def get_config_file_path() -> str:
  """Resolves the config file, honouring the LISKY_CONFIG_DIR override."""
  config_dir = os.getenv(CONFIG_DIR_ENV, '') or os.path.join(
      os.path.expanduser('~'), CONFIG_DIR_NAME
  )
  return os.path.join(config_dir, CONFIG_FILE_NAME)


class ValueKind(Enum):
  BOOLEAN = 'boolean'
  STRING = 'string'


@dataclass(frozen=True)
class _Variable:
  name: str
  path: tuple[str, ...]
  kind: ValueKind


class VariableSpec(Enum):
  """Variables that can be set through `lisky set`."""

  JSON = _Variable('json', ('json',), ValueKind.BOOLEAN)
  NAME = _Variable('name', ('name',), ValueKind.STRING)
  PRETTY = _Variable('pretty', ('pretty',), ValueKind.BOOLEAN)
  LISKJS_TESTNET = _Variable(
      'liskJS.testnet', ('liskJS', 'testnet'), ValueKind.BOOLEAN
  )
  LISKJS_SSL = _Variable('liskJS.ssl', ('liskJS', 'ssl'), ValueKind.BOOLEAN)
  LISKJS_NODE = _Variable('liskJS.node', ('liskJS', 'node'), ValueKind.STRING)
  LISKJS_PORT = _Variable('liskJS.port', ('liskJS', 'port'), ValueKind.STRING)

  @property
  def variable_name(self) -> str:
    return self.value.name

  @property
  def path(self) -> tuple[str, ...]:
    return self.value.path

  @property
  def kind(self) -> ValueKind:
    return self.value.kind

  @classmethod
  def from_name(cls, variable_name: str) -> 'VariableSpec':
    for spec in cls:
      if spec.variable_name == variable_name:
        return spec
    raise ValidationError('Unsupported variable name.')

  def coerce(self, raw_value: str) -> bool | str:
    """Validates `raw_value` against the variable kind.

    Booleans accept exactly `true` or `false`; strings are kept verbatim.
    """
    if self.kind is ValueKind.BOOLEAN:
      if raw_value not in ['true', 'false']:
        raise ValidationError('Value must be a boolean.')
      return raw_value == 'true'
    return raw_value


CONFIG_VARIABLES = [spec.variable_name for spec in VariableSpec]


@dataclass
class SetResult:
  message: str
  warning: str | None = None

  def to_dict(self) -> dict[str, str]:
    result = {'message': self.message}
    if self.warning is not None:
      result['warning'] = self.warning
    return result


class Configuration:
  """In-memory lisky configuration tree bound to the file it persists to."""

  def __init__(
      self, values: dict[str, Any] | None = None, path: str | None = None
  ) -> None:
    self.values: dict[str, Any] = {} if values is None else values
    self.path = path if path is not None else get_config_file_path()

  @classmethod
  def load(cls, path: str | None = None) -> 'Configuration':
    """Loads the config file, creating it from defaults on first use.

    A config file that cannot be read, or that does not hold a JSON object,
    is replaced in memory by the defaults. In non-interactive mode read and
    initial write failures are raised as FileSystemError instead.

    Args:
      path: config file location, defaults to get_config_file_path().

    Returns:
      The loaded configuration.
    """
    path = path if path is not None else get_config_file_path()

    if not os.path.exists(path):
      config = cls(copy.deepcopy(DEFAULT_CONFIG), path)
      try:
        config.save()
      except OSError as e:
        if is_non_interactive():
          raise FileSystemError(WRITE_FAIL_WARNING) from e
        lisky_warn(WRITE_FAIL_WARNING)
      return config

    try:
      values = read_json_file(path)
    except (OSError, ValueError):
      values = None

    if not isinstance(values, dict):
      message = READ_FAIL_MESSAGE.format(path=path)
      if is_non_interactive():
        raise FileSystemError(message)
      lisky_warn(message)
      return cls(copy.deepcopy(DEFAULT_CONFIG), path)

    return cls(values, path)

  def save(self) -> None:
    """Writes the whole tree to disk. Raises OSError on failure."""
    ensure_directory_exists(os.path.dirname(self.path))
    write_json_file(self.path, self.values)

  def to_dict(self) -> dict[str, Any]:
    return copy.deepcopy(self.values)


def _set_nested_value(
    tree: dict[str, Any], path: tuple[str, ...], value: Any
) -> None:
  node = tree
  for component in path[:-1]:
    child = node.get(component)
    if not isinstance(child, dict):
      child = {}
      node[component] = child
    node = child
  node[path[-1]] = value


def _get_nested_value(tree: dict[str, Any], path: tuple[str, ...]) -> Any:
  node: Any = tree
  for component in path:
    if not isinstance(node, dict) or component not in node:
      return None
    node = node[component]
  return node


def _attempt_write_to_file(
    config: Configuration, path: tuple[str, ...], raw_value: str
) -> SetResult:
  try:
    config.save()
    write_success = True
  except OSError:
    write_success = False

  if not write_success and is_non_interactive():
    raise FileSystemError(WRITE_FAIL_WARNING)

  variable_path = '.'.join(path)
  result = SetResult(
      message=f'Successfully set {variable_path} to {raw_value}.'
  )
  if not write_success:
    result.warning = WRITE_FAIL_WARNING
  return result


def set_variable(
    config: Configuration, variable_name: str, raw_value: str
) -> SetResult:
  """Sets an allow-listed variable and persists the whole configuration.

  Validation happens before the tree is touched, so a ValidationError never
  leaves a partial change behind. A failed write is reported as a warning on
  the result, or raised as FileSystemError in non-interactive mode.

  Args:
    config: configuration to mutate.
    variable_name: dotted variable name, e.g. `liskJS.testnet`.
    raw_value: value as typed by the user.

  Returns:
    SetResult describing the change.
  """
  spec = VariableSpec.from_name(variable_name)
  value = spec.coerce(raw_value)
  _set_nested_value(config.values, spec.path, value)
  return _attempt_write_to_file(config, spec.path, raw_value)


def get_variable(config: Configuration, variable_name: str) -> bool | str | None:
  """Returns the value of an allow-listed variable, None when unset."""
  spec = VariableSpec.from_name(variable_name)
  return _get_nested_value(config.values, spec.path)
