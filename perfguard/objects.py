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

"""Performance-counter objects as returned by a perflib-style query."""

from typing import Any, Optional, Protocol, Sequence

import attrs
from perfguard.validation import runtime

# `None` means no filtering was configured, `[]` means nothing is disallowed.
DisallowedIds = Optional[Sequence[int]]


class NameIndexed(Protocol):
  """Anything addressable by a counter name index."""

  name_index: int


def _uint32_validator(instance, attribute, value) -> None:
  del instance
  runtime.assert_is_uint32(value, name=attribute.name)


@attrs.define(frozen=True)
class PerfObject:
  """One performance-counter object (category).

  Only `name_index` is ever inspected when reducing query results. Everything
  else is payload owned by the data source and passed through untouched.

  Attributes:
    name_index: Index of the object's name in the counter name table.
    name: Resolved object name, if the source provides it.
    help_text_index: Index of the object's help text in the help table.
    help_text: Resolved help text.
    instances: Opaque per-instance records.
    counter_defs: Opaque counter definitions.
  """

  name_index: int = attrs.field(validator=_uint32_validator)
  name: str = attrs.field(default='', kw_only=True)
  help_text_index: int = attrs.field(
      default=0, kw_only=True, validator=_uint32_validator
  )
  help_text: str = attrs.field(default='', kw_only=True)
  instances: Sequence[Any] = attrs.field(
      factory=tuple, kw_only=True, converter=tuple
  )
  counter_defs: Sequence[Any] = attrs.field(
      factory=tuple, kw_only=True, converter=tuple
  )
