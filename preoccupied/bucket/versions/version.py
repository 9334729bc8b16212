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
preoccupied.bucket.versions.version

The orderable version value extracted from object paths.

A version number is one to three dot-separated non-negative integers. Omitted
trailing components are zero, so ``"105"`` and ``"105.0"`` both parse to
``105.0.0``. Pre-release and build metadata are not accepted.

Example:

```python
version = parse_version_number("1.2")
assert str(version) == "1.2.0"
assert version < parse_version_number("1.10")
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import re
from typing import Any, Callable

from semver import Version as SemVersion

from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import InvalidVersionNumber


__all__ = (
    "Version",
    "parse_version_number",
)


# ASCII digits only, str.isdigit and \d would admit other scripts
version_number_like = re.compile(r"[0-9]+(?:\.[0-9]+){0,2}").fullmatch


def parse_version_number(text: str) -> "Version":
    """
    Parse a version number string into a :class:`Version`.

    :param text: one, two, or three dot-separated non-negative integers
    :raises InvalidVersionNumber: if the text is not of that form
    """

    if not isinstance(text, str) or not version_number_like(text):
        raise InvalidVersionNumber(text)

    parts = [int(part) for part in text.split(".")]
    parts.extend([0] * (3 - len(parts)))
    return Version(*parts)


def _ensure_version(value: Any) -> "Version":
    """
    Convert supported inputs into a :class:`Version` instance.
    """

    if isinstance(value, Version):
        return value
    if isinstance(value, SemVersion):
        if value.prerelease or value.build:
            raise InvalidVersionNumber(str(value))
        return Version(value.major, value.minor, value.patch)
    if isinstance(value, str):
        return parse_version_number(value)
    raise TypeError(f"Unsupported version value: {value!r}")


class Version(SemVersion):
    """
    A major.minor.patch triple, ordered lexicographically.

    Pydantic models may declare fields of this type. They validate from a
    version number string and serialize back to the full ``"M.m.p"`` form.
    """

    @classmethod
    def from_number(cls, text: str) -> "Version":
        """
        Parse a version number, see :func:`parse_version_number`.
        """

        return parse_version_number(text)


    @classmethod
    def __get_pydantic_core_schema__(
            cls,
            _source_type: Any,
            _handler: Callable[[Any], core_schema.CoreSchema]) -> core_schema.CoreSchema:

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(_ensure_version),
            ],
        )

        from_semver_schema = core_schema.chain_schema(
            [
                core_schema.is_instance_schema(SemVersion),
                core_schema.no_info_plain_validator_function(_ensure_version),
            ],
        )

        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(Version),
                    from_semver_schema,
                    from_str_schema,
                ]
            ),
            serialization=core_schema.to_string_ser_schema(),
        )


    @classmethod
    def __get_pydantic_json_schema__(
            cls,
            _core_schema: core_schema.CoreSchema,
            handler: GetJsonSchemaHandler) -> JsonSchemaValue:

        return handler(core_schema.str_schema())


# The end.
