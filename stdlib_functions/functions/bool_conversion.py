# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Boolean to string conversion for configuration expressions.

The optional second and third arguments are what true and false are
converted to. With a single argument the result is 'true' or 'false'.

Examples:

    bool2str([True])                  => 'true'
    bool2str([True, 'yes', 'no'])     => 'yes'
    bool2str([False, 't', 'f'])       => 'f'
"""

from typing import Any, Sequence

from ..error import ArgumentTypeError, ArityError

DEFAULT_TRUE_STRING = "true"
DEFAULT_FALSE_STRING = "false"


def bool_to_string(
    value: bool,
    true_string: str = DEFAULT_TRUE_STRING,
    false_string: str = DEFAULT_FALSE_STRING,
) -> str:
    """Return true_string or false_string depending on value.

    Args:
        value: Boolean to convert. Integers are not accepted
        true_string: Returned when value is True
        false_string: Returned when value is False

    Returns:
        One of the two labels, unchanged

    Raises:
        ArgumentTypeError: value is not a bool, or a label is not a str
    """
    # bool is a subclass of int, so 0 and 1 have to be ruled out explicitly
    if type(value) is not bool:
        raise ArgumentTypeError("bool2str(): Requires a boolean to work with")

    if not all(isinstance(label, str) for label in (true_string, false_string)):
        raise ArgumentTypeError("bool2str(): Requires strings to convert to")

    return true_string if value else false_string


def bool2str(arguments: Sequence[Any]) -> str:
    """Convert a boolean to a string from a raw argument list.

    Args:
        arguments: [value] or [value, true_string, false_string]

    Returns:
        The converted string

    Raises:
        ArityError: argument count is neither 1 nor 3
        ArgumentTypeError: see bool_to_string
    """
    if len(arguments) not in (1, 3):
        raise ArityError("bool2str", len(arguments), "3")

    return bool_to_string(*arguments)
