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

"""Ways to drop disallowed objects from query results."""

from typing import List, Sequence, TypeVar

import attrs
from perfguard import objects as objects_lib
from perfguard.filters import base

_O = TypeVar('_O', bound=objects_lib.NameIndexed)


def remove_object(
    obj: objects_lib.NameIndexed, disallowed_ids: objects_lib.DisallowedIds
) -> bool:
  """Returns True if the object's name index is disallowed."""
  if disallowed_ids is None or len(disallowed_ids) == 0:
    return False
  return any(obj.name_index == i for i in disallowed_ids)


def reduce_objects(
    objects: Sequence[_O], disallowed_ids: objects_lib.DisallowedIds
) -> List[_O]:
  """Returns a new list without the disallowed objects, order preserved.

  Neither `objects` nor `disallowed_ids` is modified. A missing (None) or empty
  `disallowed_ids` keeps every object.

  Args:
    objects: Query result. Each element must expose `name_index`.
    disallowed_ids: Name indices to drop.

  Returns:
    Objects whose name index is not in `disallowed_ids`.
  """
  return [o for o in objects if not remove_object(o, disallowed_ids)]


@attrs.define
class DisallowedIdFilter(base.ObjectFilter):
  """Keeps objects whose name index is not disallowed.

  `disallowed_ids` is held by reference, so later changes made by the owner of
  the sequence apply to subsequent calls.
  """

  disallowed_ids: objects_lib.DisallowedIds = attrs.field(default=None)

  def __call__(self, obj: objects_lib.NameIndexed, /) -> bool:
    return not remove_object(obj, self.disallowed_ids)