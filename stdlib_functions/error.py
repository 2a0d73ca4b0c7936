# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Custom exceptions for the stdlib-functions library."""


class ParseError(Exception):
    """Base exception for errors raised to the evaluating engine."""
    pass


class ArityError(ParseError):
    """Wrong number of arguments given to a function."""
    def __init__(self, function_name: str, given: int, expected: str):
        self.function_name = function_name
        self.given = given
        self.expected = expected
        super().__init__(
            f"{function_name}(): Wrong number of arguments given ({given} for {expected})"
        )


class ArgumentTypeError(ParseError, TypeError):
    """Argument has the wrong type."""
    def __init__(self, message: str = "Argument has the wrong type"):
        super().__init__(message)


class UnknownFunctionError(ParseError):
    """No function registered under the requested name."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")
