# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Configuration language functions."""

from .bool_conversion import bool2str, bool_to_string, DEFAULT_TRUE_STRING, DEFAULT_FALSE_STRING
from .dispatcher import FUNCTIONS, call_function, function_names

__all__ = [
    'bool2str',
    'bool_to_string',
    'DEFAULT_TRUE_STRING',
    'DEFAULT_FALSE_STRING',
    'FUNCTIONS',
    'call_function',
    'function_names',
]
