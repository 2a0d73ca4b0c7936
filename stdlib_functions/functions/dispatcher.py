# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Function table exposed to the evaluating engine."""

import logging
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Sequence

from ..error import ParseError, UnknownFunctionError
from .bool_conversion import bool2str

logger = logging.getLogger(__name__)

FUNCTIONS: Mapping[str, Callable[[Sequence[Any]], str]] = MappingProxyType({
    "bool2str": bool2str,
})


def function_names() -> List[str]:
    """Return the sorted names of all available functions."""
    return sorted(FUNCTIONS)


def call_function(name: str, arguments: Sequence[Any]) -> str:
    """Call a function by name with the engine's raw argument list.

    Args:
        name: Function name as written at the call site
        arguments: Ordered arguments, passed through without coercion

    Returns:
        The function's string result

    Raises:
        UnknownFunctionError: name is not in FUNCTIONS
        ParseError: the function rejected its arguments
    """
    function = FUNCTIONS.get(name)
    if function is None:
        raise UnknownFunctionError(name)

    logger.debug(f"Calling {name}() with {len(arguments)} argument(s)")
    try:
        return function(arguments)
    except ParseError as e:
        logger.error(f"[stdlib-functions] Failed to evaluate {name}(). Error: {e!r}")
        raise
