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
preoccupied.bucket.versions.prefix

Derive a literal directory prefix from a path pattern, suitable for narrowing
a bucket listing before the listing is filtered with the full pattern.

The pattern text is scanned by hand rather than by the regex engine. Scanning
stops at the first metacharacter or unrecognized backslash escape, and the
prefix is cut back to the last ``/`` seen before that point. Backslash
escapes of literal characters are unescaped and kept.

Example:

```python
assert prefix("hello/(.*).tgz") == "hello/"
assert prefix(r"a\\.b/c-(.*)") == "a.b/"
assert prefix(r"hello/\\d{3}/x") == "hello/"
assert prefix("hello-(.*).tgz") == ""
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import List

from .log import get_logger
from .matcher import PatternLike


__all__ = (
    "LITERAL_ESCAPES",
    "METACHARACTERS",
    "prefix",
)


logger = get_logger(__name__)


METACHARACTERS = frozenset("().*+?[]{}|^$")

# characters which, preceded by a backslash, stand for themselves. any other
# escape (\d, \w, \], \{, ...) ends the literal run.
LITERAL_ESCAPES = frozenset("[\\^$.|?*+()")

# quantifiers which may leave the preceding character out of a match
OPTIONAL_QUANTIFIERS = frozenset("?*{")


def _alternates(text: str) -> bool:
    """
    True if `text` has a ``|`` outside of any group or character class.
    """

    depth = 0
    in_class = False

    index = 0
    length = len(text)
    while index < length:
        char = text[index]

        if char == "\\":
            index += 2
            continue

        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            # a leading ] (after an optional ^) is a member, not the close
            if text[index + 1:index + 2] == "^":
                index += 1
            if text[index + 1:index + 2] == "]":
                index += 1
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == "|" and depth == 0:
            return True

        index += 1

    return False


def prefix(pattern: PatternLike) -> str:
    """
    Return the longest ``/``-terminated literal prefix shared by every path
    `pattern` can match, or an empty string when there is none.

    A ``/`` made optional by the quantifier that ends the scan (``a/?``,
    ``a/*``, ``a/{0,1}``) does not count as a boundary, and a pattern with a
    top level alternation has no prefix at all.

    Never raises. The pattern is not compiled, an invalid pattern still
    yields whatever literal prefix precedes its first metacharacter.

    :param pattern: regular expression string or compiled pattern
    """

    text = pattern if isinstance(pattern, str) else pattern.pattern

    literal: List[str] = []
    boundaries = [0]

    index = 0
    length = len(text)
    while index < length:
        char = text[index]

        if char == "\\":
            escaped = text[index + 1:index + 2]
            if not escaped or escaped not in LITERAL_ESCAPES:
                break
            literal.append(escaped)
            index += 2
            continue

        if char in METACHARACTERS:
            if char in OPTIONAL_QUANTIFIERS and boundaries[-1] == len(literal) > 0:
                boundaries.pop()
            break

        literal.append(char)
        if char == "/":
            boundaries.append(len(literal))
        index += 1

    if _alternates(text):
        result = ""
    else:
        result = "".join(literal[:boundaries[-1]])

    logger.debug("prefix_derived", pattern=text, prefix=result)
    return result


# The end.
