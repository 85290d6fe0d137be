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

import os

NON_INTERACTIVE_MODE_ENV = "NON_INTERACTIVE_MODE"


def get_boolean_flag(flag: str, default: bool = False) -> bool:
  """Reads a boolean environment flag.

  Only the literal strings `true` and `false` are recognised, anything else
  falls back to `default`.
  """
  value = os.getenv(flag, "")
  if value in ["true", "false"]:
    return value == "true"
  return default


def is_non_interactive() -> bool:
  """Whether lisky runs unattended, read from the environment on every call."""
  return get_boolean_flag(NON_INTERACTIVE_MODE_ENV, default=False)
