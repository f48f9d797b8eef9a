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

"""Wrappers which guard raw `QueryFn`s with object reduction."""

from typing import List, TypeVar

from absl import logging
import attrs
from perfguard import objects as objects_lib
from perfguard.filters import objects as filters_lib
from perfguard.queries import base

_O = TypeVar('_O', bound=objects_lib.NameIndexed)


@attrs.define
class ReductableQueryFnFunctor:
  """Turns a raw `QueryFn` into one that drops disallowed objects.

  Exceptions raised by the raw query always propagate unchanged, whatever the
  value of `strict`. On success, objects whose name index is in
  `disallowed_ids` are removed. `strict` does not change filtering; it is kept
  so callers can layer a stricter error policy on top. Non-strict mode is not
  a pass-through: unlike exporters that return unfiltered results when not
  strict, disallowed objects are dropped under both settings.

  `disallowed_ids` is read on every call rather than copied, so updates made
  by the configuration owner apply to the next query. Concurrent updates
  during a query must be synchronized by the owner.
  """

  strict: bool = attrs.field(default=True)
  disallowed_ids: objects_lib.DisallowedIds = attrs.field(default=None)

  def __attrs_post_init__(self):
    logging.info(
        'Guarding query with strict=%s, disallowed object ids=%s',
        self.strict,
        self.disallowed_ids,
    )

  def __call__(self, query_fn: base.QueryFn[_O]) -> base.QueryFn[_O]:
    """Returns the guarded query function."""

    def reductable_query_fn() -> List[_O]:
      try:
        objects = query_fn()
      except Exception as e:
        logging.warning('Query failed (strict=%s): %s', self.strict, e)
        raise

      reduced = filters_lib.reduce_objects(objects, self.disallowed_ids)
      logging.vlog(
          1,
          'Removed %d of %d queried objects.',
          len(objects) - len(reduced),
          len(objects),
      )
      return reduced

    return reductable_query_fn


def new_reductable_query_fn(
    query_fn: base.QueryFn[_O],
    strict: bool,
    disallowed_ids: objects_lib.DisallowedIds = None,
) -> base.QueryFn[_O]:
  """Wraps `query_fn` so its results never contain disallowed objects.

  Args:
    query_fn: Raw query to guard.
    strict: Strictness policy. Failures propagate and successful results are
      filtered under both settings; `strict=False` never disables filtering.
    disallowed_ids: Name indices to drop. None or empty keeps everything.

  Returns:
    Zero-argument query with the same contract as `query_fn`.
  """
  functor = ReductableQueryFnFunctor(
      strict=strict, disallowed_ids=disallowed_ids
  )
  return functor(query_fn)
