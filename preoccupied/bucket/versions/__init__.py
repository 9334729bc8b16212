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
preoccupied.bucket.versions
Path matching and version extraction for polling versioned objects in a
storage bucket.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from .errors import InvalidVersionNumber, PatternError
from .extractions import Extractions, extract_all, list_versions
from .extractor import ExtractedVersion, extract
from .matcher import compile_pattern, match, match_unanchored
from .prefix import prefix
from .source import VersionedSource
from .version import Version, parse_version_number


__all__ = (
    "InvalidVersionNumber",
    "PatternError",

    "Version",
    "parse_version_number",

    "compile_pattern",
    "match",
    "match_unanchored",

    "prefix",

    "ExtractedVersion",
    "extract",

    "Extractions",
    "extract_all",
    "list_versions",

    "VersionedSource",
)


# The end.
