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

"""Entryway to object reduction and query guarding."""

from perfguard.filters.objects import DisallowedIdFilter
from perfguard.filters.objects import reduce_objects
from perfguard.filters.objects import remove_object
from perfguard.objects import DisallowedIds
from perfguard.objects import NameIndexed
from perfguard.objects import PerfObject
from perfguard.queries.base import QueryFn
from perfguard.queries.wrappers import new_reductable_query_fn
from perfguard.queries.wrappers import ReductableQueryFnFunctor
