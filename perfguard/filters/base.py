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

"""Filters which entirely reject a queried object."""

import abc
from typing import List, Sequence, TypeVar

from perfguard import objects as objects_lib

_O = TypeVar('_O', bound=objects_lib.NameIndexed)


class ObjectFilter(abc.ABC):
  """Keep/drop decision over objects addressed by name index."""

  @abc.abstractmethod
  def __call__(self, obj: objects_lib.NameIndexed, /) -> bool:
    """Returns True if the object should stay in the query result."""

  def reduce(self, objects: Sequence[_O]) -> List[_O]:
    """Returns a new list of the kept objects, in their original order."""
    return [o for o in objects if self(o)]
