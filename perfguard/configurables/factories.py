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

"""Factories for creating guarded queries across the code.

NOTE: Rules for this file when using gin:

1. The methods below should be called AFTER gin and absl flags are parsed in a
binary.

2. Methods below should NOT have default argument values, to fail and
detect quickly if gin was misconfigured.

3. Do NOT apply `gin.configurable` decorator explicitly on any methods in this
file. Importers can either apply `gin.configurable` on their own (e.g. inside
binary mains), or use gin's dynamic registration.
"""

from typing import TypeVar

from perfguard import objects as objects_lib
from perfguard.configurables import flags as flags_lib
from perfguard.filters import objects as filters_lib
from perfguard.queries import base
from perfguard.queries import wrappers

_O = TypeVar('_O', bound=objects_lib.NameIndexed)


def disallowed_id_filter_factory(
    disallowed_ids: objects_lib.DisallowedIds,
) -> filters_lib.DisallowedIdFilter:
  return filters_lib.DisallowedIdFilter(disallowed_ids=disallowed_ids)


def guarded_query_factory(
    query_fn: base.QueryFn[_O],
    strict: bool,
    disallowed_ids: objects_lib.DisallowedIds,
) -> base.QueryFn[_O]:
  """Guards `query_fn` with object reduction.

  Args:
    query_fn: Raw query, usually supplied by the data source.
    strict: Strictness policy.
    disallowed_ids: Name indices to drop. Parsed the same way as the
      `--perfguard_disallowed_object_ids` flag.

  Returns:
    Guarded query.
  """
  return wrappers.new_reductable_query_fn(
      query_fn,
      strict,
      flags_lib.parse_disallowed_ids(disallowed_ids),
  )


def guarded_query_from_flags(query_fn: base.QueryFn[_O]) -> base.QueryFn[_O]:
  """Guards `query_fn` using the `--perfguard_*` flags."""
  return wrappers.new_reductable_query_fn(
      query_fn,
      flags_lib.strict_from_flags(),
      flags_lib.disallowed_ids_from_flags(),
  )
