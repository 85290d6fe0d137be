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


class LiskyError(Exception):
  """Base class for errors reported to the user by lisky commands."""

  message: str

  def __init__(self, message: str):
    super().__init__(message)
    self.message = message

  def __str__(self):
    return self.message


class ValidationError(LiskyError):
  """The user supplied an unsupported variable name or a malformed value."""


class FileSystemError(LiskyError):
  """The config file could not be read or written."""
