# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this library; if not, see <http://www.gnu.org/licenses/>.

"""
preoccupied.bucket.versions.errors
Exceptions raised while matching paths and extracting versions.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


__all__ = (
    "InvalidVersionNumber",
    "PatternError",
)


class PatternError(ValueError):
    """
    The supplied pattern could not be compiled as a regular expression.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class InvalidVersionNumber(ValueError):
    """
    Text captured as a version number is not one to three dot-separated
    non-negative integers.
    """

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid version number: {value!r}")
        self.value = value


# The end.
