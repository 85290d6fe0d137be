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
import os
from typing import Any


def ensure_directory_exists(directory_path: str) -> None:
  """Checks if a directory exists and creates it if it doesn't.

  Args:
    directory_path: The path to the directory.
  """
  if directory_path and not os.path.exists(directory_path):
    os.makedirs(directory_path)


def read_json_file(path: str) -> Any:
  """Reads and decodes a JSON document.

  Raises:
    OSError: the file could not be opened or read.
    ValueError: the content is not valid JSON.
  """
  with open(path, encoding='utf-8', mode='r') as stream:
    return json.load(stream)


def write_json_file(path: str, payload: Any) -> None:
  """Overwrites `path` with `payload` serialized as indented JSON.

  Args:
    path: destination file, truncated before writing.
    payload: JSON serializable object.

  Raises:
    OSError: the file could not be written.
  """
  with open(path, encoding='utf-8', mode='w') as stream:
    json.dump(payload, stream, indent=2)
    stream.write('\n')
