# Copyright 2024 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Base abstractions for query functions."""

from typing import Protocol, Sequence, TypeVar

_T_co = TypeVar('_T_co', covariant=True)


class QueryFn(Protocol[_T_co]):
  """Zero-argument query against a performance-counter source.

  Returns the queried objects, or raises if the source could not be queried.
  """

  def __call__(self) -> Sequence[_T_co]:
    """Queries the source."""
