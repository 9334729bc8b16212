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
preoccupied.bucket.versions.extractions

Ordered collections of extracted versions.

Use :func:`extract_all` to turn a bucket listing into an :class:`Extractions`,
or :func:`list_versions` to have the listing narrowed by the pattern's prefix
first.

Example:

```python
found = extract_all(["abc-1.tgz", "abc-1.2.tgz", "abc-2.tgz"], r"abc-(.*).tgz")

assert found.latest().path == "abc-2.tgz"
assert found.get("1.2").path == "abc-1.2.tgz"
assert found.since("1.2").paths() == ["abc-1.2.tgz", "abc-2.tgz"]
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import operator
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union, overload

from .errors import InvalidVersionNumber
from .extractor import ExtractedVersion, extract
from .log import get_logger
from .matcher import PatternLike, compile_pattern
from .prefix import prefix
from .version import Version, parse_version_number


__all__ = (
    "Extractions",
    "Lister",
    "extract_all",
    "list_versions",
)


logger = get_logger(__name__)


def _as_version(value: Union[str, Version]) -> Version:
    if isinstance(value, Version):
        return value
    return parse_version_number(value)


class Extractions(Sequence[ExtractedVersion]):
    """
    Extracted versions in ascending version order. Entries sharing a version
    keep the order they were given in.
    """

    def __init__(self, entries: Iterable[ExtractedVersion] = ()) -> None:

        # sorted is stable, so ties keep their input order
        self._entries: List[ExtractedVersion] = sorted(
            entries, key=operator.attrgetter("version"))

        # the last entry for each version wins a lookup
        self._by_version: Dict[Version, ExtractedVersion] = {
            entry.version: entry for entry in self._entries}


    def get(self,
            version: Union[str, Version],
            default: Optional[ExtractedVersion] = None) -> Optional[ExtractedVersion]:
        """
        Return the entry whose version equals `version`, or `default`. A
        version number string is parsed first, so ``"1.2"`` finds ``1.2.0``.

        :raises InvalidVersionNumber: if `version` is a string which does not
          parse
        """

        return self._by_version.get(_as_version(version), default)


    @overload
    def __getitem__(self, index: int) -> ExtractedVersion:
        ...


    @overload
    def __getitem__(self, index: slice) -> "Extractions":
        ...


    def __getitem__(self, index):
        if isinstance(index, slice):
            return Extractions(self._entries[index])
        return self._entries[index]


    def __len__(self) -> int:
        return len(self._entries)


    def __contains__(self, item: object) -> bool:
        """
        True if `item` is a stored entry, or a Version or version number
        string equal to some stored entry's version.
        """

        if isinstance(item, ExtractedVersion):
            return item in self._entries
        elif isinstance(item, Version):
            return item in self._by_version
        elif isinstance(item, str):
            try:
                return parse_version_number(item) in self._by_version
            except InvalidVersionNumber:
                return False
        return False


    def __eq__(self, other: object) -> bool:
        if isinstance(other, Extractions):
            return self._entries == other._entries
        return NotImplemented


    def __repr__(self) -> str:
        return f"Extractions({self._entries!r})"


    def versions(self) -> List[Version]:
        """
        Return the distinct stored versions in ascending order.
        """

        return sorted(self._by_version)


    def paths(self) -> List[str]:
        """
        Return the stored paths in ascending version order.
        """

        return [entry.path for entry in self._entries]


    def latest(self) -> Optional[ExtractedVersion]:
        """
        Return the entry with the highest version.
        """

        return self._entries[-1] if self._entries else None


    def since(self, version: Union[str, Version, None]) -> "Extractions":
        """
        Return the entries whose version is at least `version`. With no
        version, only the latest entry is returned.
        """

        if version is None:
            latest = self.latest()
            return Extractions([latest] if latest is not None else [])

        floor = _as_version(version)
        return Extractions(entry for entry in self._entries if entry.version >= floor)


def extract_all(
        paths: Iterable[str],
        pattern: PatternLike,
        *,
        unanchored: bool = False) -> Extractions:
    """
    Extract a version from each path `pattern` matches, and return the
    results in ascending version order. Paths the pattern does not match, or
    matches without capturing a version, are dropped.

    The pattern must span the whole path unless `unanchored` is set, as with
    :func:`match` and :func:`match_unanchored`.

    :raises PatternError: if the pattern is not a valid regular expression
    :raises InvalidVersionNumber: if a captured version does not parse
    """

    compiled = compile_pattern(pattern)

    found = []
    for path in paths:
        extraction = extract(path, compiled, anchored=not unanchored)
        if extraction is not None:
            found.append(extraction)

    logger.debug("versions_extracted", pattern=compiled.pattern, found=len(found))
    return Extractions(found)


Lister = Callable[[str], Iterable[str]]


def list_versions(
        lister: Lister,
        pattern: PatternLike,
        *,
        unanchored: bool = False) -> Extractions:
    """
    Call `lister` with the prefix derived from `pattern`, then extract the
    versions from the paths it returns.

    :param lister: the caller's bucket listing, given a key prefix
    :raises PatternError: if the pattern is not a valid regular expression
    """

    compiled = compile_pattern(pattern)
    narrowed = prefix(compiled)

    logger.debug("listing_paths", prefix=narrowed)
    return extract_all(lister(narrowed), compiled, unanchored=unanchored)


# The end.
