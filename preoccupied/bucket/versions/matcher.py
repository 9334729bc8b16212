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
preoccupied.bucket.versions.matcher

Filter object paths against a user supplied regular expression.

:func:`match` requires the pattern to span the whole path, so a pattern of
``abc`` accepts ``abc`` but not ``folder/abc``. :func:`match_unanchored`
accepts any path containing a match anywhere.

Both accept either a pattern string or an already compiled pattern, so a
caller filtering many listings may compile once and reuse it.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import re
from typing import Iterable, List, Pattern, Union


from .errors import PatternError
from .log import get_logger


__all__ = (
    "PatternLike",
    "compile_pattern",
    "match",
    "match_unanchored",
)


logger = get_logger(__name__)


PatternLike = Union[str, Pattern[str]]


def compile_pattern(pattern: PatternLike) -> Pattern[str]:
    """
    Compile `pattern`, passing through patterns that are already compiled.

    :raises PatternError: if the pattern is not a valid regular expression
    """

    if isinstance(pattern, re.Pattern):
        return pattern

    try:
        compiled = re.compile(pattern)
    except re.error as err:
        raise PatternError(pattern, str(err)) from err

    logger.debug("pattern_compiled", pattern=pattern, groups=compiled.groups)
    return compiled


def _filter(
        paths: Iterable[str],
        pattern: PatternLike,
        anchored: bool) -> List[str]:

    # compile before touching paths, a bad pattern yields no partial result
    compiled = compile_pattern(pattern)
    test = compiled.fullmatch if anchored else compiled.search

    matched = [path for path in paths if test(path) is not None]

    logger.debug("paths_matched", pattern=compiled.pattern,
                 anchored=anchored, matched=len(matched))
    return matched


def match(paths: Iterable[str], pattern: PatternLike) -> List[str]:
    """
    Return the paths which `pattern` matches in their entirety, preserving
    their order.

    :param paths: object paths, typically a bucket listing
    :param pattern: regular expression string or compiled pattern
    :raises PatternError: if the pattern is not a valid regular expression
    """

    return _filter(paths, pattern, True)


def match_unanchored(paths: Iterable[str], pattern: PatternLike) -> List[str]:
    """
    Return the paths containing at least one match of `pattern`, preserving
    their order.

    :param paths: object paths, typically a bucket listing
    :param pattern: regular expression string or compiled pattern
    :raises PatternError: if the pattern is not a valid regular expression
    """

    return _filter(paths, pattern, False)


# The end.
