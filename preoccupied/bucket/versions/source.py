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
preoccupied.bucket.versions.source

The version related settings of a bucket resource's source configuration.

Example:

```python
source = VersionedSource.model_validate({
    "regexp": "releases/app-(.*).tgz",
})

assert source.prefix() == "releases/"

found = source.versions(["releases/app-1.0.tgz", "releases/app-1.1.tgz"])
assert found.latest().version_number == "1.1"
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Iterable, List, Optional, Pattern

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .extractions import Extractions, Lister, extract_all, list_versions
from .extractor import ExtractedVersion, extract
from .matcher import compile_pattern, match, match_unanchored
from .prefix import prefix


__all__ = (
    "VersionedSource",
)


class VersionedSource(BaseModel):
    """
    Where versioned artifacts live in a bucket.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    regexp: str = Field(
        description="Pattern matching versioned object paths. The group named"
        " 'version', or else the first group, captures the version number.")

    unanchored: bool = Field(
        default=False,
        description="Accept paths containing a match anywhere, rather than"
        " only paths the pattern matches entirely.")


    @field_validator("regexp")
    @classmethod
    def _check_regexp(cls, value: str) -> str:
        # PatternError is a ValueError, pydantic reports it as a ValidationError
        compile_pattern(value)
        return value


    def pattern(self) -> Pattern[str]:
        """
        Return the compiled `regexp`.
        """

        return compile_pattern(self.regexp)


    def prefix(self) -> str:
        return prefix(self.regexp)


    def match(self, paths: Iterable[str]) -> List[str]:
        """
        Filter `paths`, anchored or not according to `unanchored`.
        """

        matcher = match_unanchored if self.unanchored else match
        return matcher(paths, self.pattern())


    def extract(self, path: str) -> Optional[ExtractedVersion]:
        """
        Extract the version from `path`, anchored or not according to
        `unanchored`.
        """

        return extract(path, self.pattern(), anchored=not self.unanchored)


    def versions(self, paths: Iterable[str]) -> Extractions:
        """
        Extract and order the versions found among `paths`.
        """

        return extract_all(paths, self.pattern(),
                           unanchored=self.unanchored)


    def list_versions(self, lister: Lister) -> Extractions:
        """
        As :meth:`versions`, over the paths `lister` returns for this
        source's prefix.
        """

        return list_versions(lister, self.pattern(),
                             unanchored=self.unanchored)


# The end.
