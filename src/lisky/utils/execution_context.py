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

json_output = False
pretty_output = False


def set_output_format(json_value: bool, pretty_value: bool) -> None:
  """Sets the json and pretty output flags."""
  set_json(json_value)
  set_pretty(pretty_value)


def set_json(json_value: bool) -> None:
  """Sets the json output flag."""
  global json_output
  json_output = json_value


def set_pretty(pretty_value: bool) -> None:
  """Sets the pretty output flag."""
  global pretty_output
  pretty_output = pretty_value


def is_json() -> bool:
  """Returns the current value of the json output flag."""
  return json_output


def is_pretty() -> bool:
  """Returns the current value of the pretty output flag."""
  return pretty_output
