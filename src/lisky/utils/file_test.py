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

import pytest

from lisky.utils.file import ensure_directory_exists, read_json_file, write_json_file


def test_ensure_directory_exists_creates_nested_directories(tmp_path):
  target = tmp_path / 'a' / 'b'

  ensure_directory_exists(str(target))
  ensure_directory_exists(str(target))

  assert target.is_dir()


def test_write_json_file_overwrites_with_indented_json(tmp_path):
  path = tmp_path / 'config.json'
  path.write_text('{"old": "content", "more": "stuff"}')

  write_json_file(str(path), {'json': True})

  assert path.read_text() == '{\n  "json": true\n}\n'
  assert read_json_file(str(path)) == {'json': True}


def test_read_json_file_rejects_invalid_json(tmp_path):
  path = tmp_path / 'config.json'
  path.write_text('{oops')

  with pytest.raises(ValueError):
    read_json_file(str(path))


def test_write_json_file_raises_os_error_for_unwritable_path(tmp_path):
  blocker = tmp_path / 'blocker'
  blocker.write_text('')

  with pytest.raises(OSError):
    write_json_file(str(blocker / 'config.json'), {})
