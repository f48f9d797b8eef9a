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

"""Tests for runtime.py."""

from typing import Any

import numpy as np
from perfguard.validation import runtime

from absl.testing import absltest
from absl.testing import parameterized


class RuntimeTest(parameterized.TestCase):

  @parameterized.parameters(
      (0,),
      (123,),
      (2**32 - 1,),
      (np.uint32(7),),
      (np.int64(42),),
  )
  def test_valid_uint32(self, x: Any):
    runtime.assert_is_uint32(x)

  @parameterized.parameters(
      (-1,),
      (2**32,),
      (np.int64(-5),),
  )
  def test_out_of_range(self, x: Any):
    with self.assertRaises(ValueError):  # pylint:disable=g-error-prone-assert-raises
      runtime.assert_is_uint32(x)

  @parameterized.parameters(
      (True,),
      (1.0,),
      ('123',),
      (None,),
  )
  def test_non_integer(self, x: Any):
    with self.assertRaises(TypeError):  # pylint:disable=g-error-prone-assert-raises
      runtime.assert_is_uint32(x)


if __name__ == '__main__':
  absltest.main()
