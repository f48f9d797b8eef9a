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

"""Common validator logic for runtime / input checking."""

from typing import Any, Tuple
import numpy as np

IntervalType = Tuple[int, int]

_UINT32_INFO = np.iinfo(np.uint32)
UINT32_INTERVAL: IntervalType = (int(_UINT32_INFO.min), int(_UINT32_INFO.max))


def is_int_like(x: Any) -> bool:
  """Python or numpy integer, but not a bool."""
  if isinstance(x, (bool, np.bool_)):
    return False
  return isinstance(x, (int, np.integer))


def assert_is_uint32(x: Any, name: str = "value") -> None:
  """Checks if x is an integer representable as an unsigned 32-bit value."""
  if not is_int_like(x):
    raise TypeError(f"{name} {x!r} has non integer type {type(x).__name__}.")

  low, high = UINT32_INTERVAL
  if not low <= int(x) <= high:
    raise ValueError(f"{name} {x} out of bounds from [{low}, {high}].")
