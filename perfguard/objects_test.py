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

import attrs
from perfguard import objects

from absl.testing import absltest
from absl.testing import parameterized


class PerfObjectTest(parameterized.TestCase):

  def test_payload_defaults(self):
    obj = objects.PerfObject(238)
    self.assertEqual(obj.name_index, 238)
    self.assertEqual(obj.name, '')
    self.assertEqual(obj.help_text_index, 0)
    self.assertEqual(obj.instances, ())
    self.assertEqual(obj.counter_defs, ())

  def test_structural_equality(self):
    a = objects.PerfObject(123, name='Processor', instances=['_Total'])
    b = objects.PerfObject(123, name='Processor', instances=('_Total',))
    self.assertEqual(a, b)
    self.assertNotEqual(a, objects.PerfObject(234, name='Processor'))

  def test_frozen(self):
    obj = objects.PerfObject(123)
    with self.assertRaises(attrs.exceptions.FrozenInstanceError):
      obj.name_index = 234  # pytype: disable=not-writable

  @parameterized.parameters((-1,), (2**32,))
  def test_name_index_out_of_range(self, name_index: int):
    with self.assertRaises(ValueError):
      objects.PerfObject(name_index)

  def test_name_index_not_an_int(self):
    with self.assertRaises(TypeError):
      objects.PerfObject('123')

  def test_help_text_index_validated(self):
    with self.assertRaises(ValueError):
      objects.PerfObject(123, help_text_index=-1)


if __name__ == '__main__':
  absltest.main()
