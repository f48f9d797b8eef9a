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

"""Command-line configuration of object reduction.

Binaries which guard their queries should read these flags through
`disallowed_ids_from_flags()` and `strict_from_flags()` after flag parsing.
"""

from typing import List, Optional, Sequence, Union

from absl import flags
from absl import logging
from perfguard.validation import runtime

_DISALLOWED_OBJECT_IDS = flags.DEFINE_list(
    'perfguard_disallowed_object_ids',
    None,
    'Comma-separated name indices of performance-counter objects to drop from'
    ' query results.',
)
_STRICT = flags.DEFINE_bool(
    'perfguard_strict',
    True,
    'Strictness policy of guarded queries. Filtering is applied either way.',
)


def parse_disallowed_ids(
    values: Optional[Sequence[Union[str, int]]],
) -> Optional[List[int]]:
  """Parses configured name indices, skipping malformed entries.

  Args:
    values: Raw configuration values. None means nothing was configured.

  Returns:
    Unique uint32 name indices in first-seen order, or None if `values` is
    None.
  """
  if values is None:
    return None

  parsed = []
  for value in values:
    if isinstance(value, str):
      value = value.strip()
      if not value:
        continue
      try:
        value = int(value, 10)
      except ValueError:
        logging.warning('Ignoring non-integer object id: %r', value)
        continue

    try:
      runtime.assert_is_uint32(value, name='object id')
    except (TypeError, ValueError) as e:
      logging.warning('Ignoring invalid object id: %s', e)
      continue

    if int(value) not in parsed:
      parsed.append(int(value))
  return parsed


def disallowed_ids_from_flags() -> Optional[List[int]]:
  return parse_disallowed_ids(_DISALLOWED_OBJECT_IDS.value)


def strict_from_flags() -> bool:
  return _STRICT.value
