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
preoccupied.bucket.versions.extractor

Extract a version from a single object path.

The version number is taken from the group named ``version`` when the pattern
declares one, wherever it sits in the pattern. Otherwise the first unnamed
capturing group is used.

Example:

```python
found = extract("abc-1.0.5-def-2.3.4.tgz", r"abc-(.*)-def-(?P<version>.*).tgz")
assert found.version_number == "2.3.4"

assert extract("abc.tgz", r"abc-(.*).tgz") is None
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Optional, Pattern

from pydantic import BaseModel, ConfigDict

from .log import get_logger
from .matcher import PatternLike, compile_pattern
from .version import Version, parse_version_number


__all__ = (
    "VERSION_GROUP",
    "ExtractedVersion",
    "extract",
    "version_group",
)


logger = get_logger(__name__)


VERSION_GROUP = "version"


class ExtractedVersion(BaseModel):
    """
    A path together with the version extracted from it.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    version: Version
    version_number: str


def version_group(compiled: Pattern[str]) -> Optional[int]:
    """
    Return the index of the group holding the version number, or None if the
    pattern has no suitable group.
    """

    index = compiled.groupindex.get(VERSION_GROUP)
    if index is not None:
        return index

    named = set(compiled.groupindex.values())
    for index in range(1, compiled.groups + 1):
        if index not in named:
            return index

    return None


def extract(
        path: str,
        pattern: PatternLike,
        *,
        anchored: bool = False) -> Optional[ExtractedVersion]:
    """
    Extract the version carried by `path`.

    Returns None when the pattern does not match the path, or when the
    version group did not take part in the match. That only means the path is
    not a versioned artifact.

    By default the pattern may match anywhere in the path. With `anchored`,
    it must match the whole path, and the version is read from that match.

    :param path: the object path
    :param pattern: regular expression string or compiled pattern
    :param anchored: require the pattern to span the whole path
    :raises PatternError: if the pattern is not a valid regular expression
    :raises InvalidVersionNumber: if the captured text is not a version number
    """

    compiled = compile_pattern(pattern)

    index = version_group(compiled)
    test = compiled.fullmatch if anchored else compiled.search
    found = test(path) if index is not None else None
    number = found.group(index) if found is not None else None

    if number is None:
        logger.debug("version_not_extracted", path=path, pattern=compiled.pattern)
        return None

    version = parse_version_number(number)

    logger.debug("version_extracted", path=path, version=str(version))
    return ExtractedVersion(path=path, version=version, version_number=number)


# The end.
