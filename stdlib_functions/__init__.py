# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""
Configuration language helper functions.

Functions take the raw argument list supplied at the call site and return a
value for the evaluating engine, or raise a ParseError subclass.

Example usage:

    from stdlib_functions import call_function, bool_to_string

    call_function("bool2str", [True, "yes", "no"])   # 'yes'
    bool_to_string(False)                             # 'false'
"""

__version__ = "0.1.0"

# Functions
from .functions import (
    bool2str,
    bool_to_string,
    DEFAULT_TRUE_STRING,
    DEFAULT_FALSE_STRING,
)

# Engine boundary
from .functions.dispatcher import (
    FUNCTIONS,
    call_function,
    function_names,
)

# Exceptions
from .error import (
    ParseError,
    ArityError,
    ArgumentTypeError,
    UnknownFunctionError,
)

__all__ = [
    # Version
    '__version__',

    # Functions
    'bool2str',
    'bool_to_string',
    'DEFAULT_TRUE_STRING',
    'DEFAULT_FALSE_STRING',

    # Engine boundary
    'FUNCTIONS',
    'call_function',
    'function_names',

    # Exceptions
    'ParseError',
    'ArityError',
    'ArgumentTypeError',
    'UnknownFunctionError',
]
