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

from lisky.main import check_python_version


@pytest.mark.parametrize(
    'version_info', [(3, 10, 0), (3, 13, 1), (4, 0, 0), (4, 1, 2)]
)
def test_check_python_version_accepts_supported_versions(version_info):
  check_python_version(version_info)


@pytest.mark.parametrize('version_info', [(3, 9, 18), (2, 7, 18), (2, 11, 0)])
def test_check_python_version_rejects_old_versions(version_info):
  with pytest.raises(RuntimeError, match='3.10 or greater'):
    check_python_version(version_info)
