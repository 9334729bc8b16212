"""
tests.test_extractions
Unit tests for ordered extraction collections.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import pytest

from preoccupied.bucket.versions import (
    Extractions, InvalidVersionNumber, PatternError,
    extract_all, list_versions, parse_version_number)


def V(text):
    return parse_version_number(text)


@pytest.fixture
def sample():
    """
    Provide Extractions built from an unordered listing.
    """

    paths = [
        "abc-2.tgz",
        "abc-1.2.tgz",
        "readme.txt",
        "abc-1.tgz",
        "abc-1.10.tgz",
    ]
    return extract_all(paths, r"abc-(.*)\.tgz")


def test_extract_all_orders_by_version(sample):
    """
    Entries are sorted numerically, and unmatched paths are dropped.
    """

    assert sample.paths() == [
        "abc-1.tgz", "abc-1.2.tgz", "abc-1.10.tgz", "abc-2.tgz"]
    assert len(sample) == 4
    assert sample[0].version_number == "1"
    assert sample.versions() == [V("1"), V("1.2"), V("1.10"), V("2")]


def test_extract_all_skips_versionless_matches():
    """
    Paths matching without a version group participating are dropped.
    """

    found = extract_all(["abc-latest", "abc-3"], r"abc-(?:latest|(\d+))")
    assert found.paths() == ["abc-3"]


def test_extract_all_anchoring():
    """
    Anchoring follows the unanchored flag.
    """

    paths = ["abc-1.tgz", "old/abc-0.tgz"]

    assert extract_all(paths, r"abc-(.*)\.tgz").paths() == ["abc-1.tgz"]
    assert extract_all(paths, r"abc-(.*)\.tgz", unanchored=True).paths() == [
        "old/abc-0.tgz", "abc-1.tgz"]


def test_extract_all_reads_the_whole_path_match():
    """
    When anchored, the version comes from the match spanning the whole path.
    """

    found = extract_all(["app-1.2.3.tgz"], r"app-(.+?)(\.tgz)?")

    assert len(found) == 1
    assert found[0].version_number == "1.2.3"
    assert found[0].version == V("1.2.3")


def test_extract_all_bad_pattern():
    """
    Invalid patterns raise PatternError.
    """

    with pytest.raises(PatternError):
        extract_all(["abc"], "a(c")


def test_ties_keep_input_order():
    """
    Paths sharing a version keep their listing order, and the last wins.
    """

    found = extract_all(["abc-1.0.tgz", "abc-1.tgz"], r"abc-(.*)\.tgz")

    assert found.paths() == ["abc-1.0.tgz", "abc-1.tgz"]
    assert found.versions() == [V("1")]
    assert found.get("1").path == "abc-1.tgz"


def test_latest(sample):
    """
    latest() exposes the highest entry, or None when empty.
    """

    assert sample.latest().path == "abc-2.tgz"
    assert Extractions().latest() is None


def test_contains(sample):
    """
    Membership accepts entries, versions, and version number strings.
    """

    assert sample.latest() in sample
    assert V("1.10") in sample
    assert "1.2" in sample
    assert "3" not in sample
    assert 3 not in sample


def test_contains_unparseable_string(sample):
    """
    A string which is not a version number is simply not a member.
    """

    assert "foo" not in sample
    assert "" not in sample


def test_since(sample):
    """
    since() yields entries at or above a version, or only the latest.
    """

    assert sample.since("1.2").paths() == [
        "abc-1.2.tgz", "abc-1.10.tgz", "abc-2.tgz"]
    assert sample.since(V("1.5")).paths() == ["abc-1.10.tgz", "abc-2.tgz"]
    assert sample.since(None).paths() == ["abc-2.tgz"]
    assert sample.since("3").paths() == []
    assert Extractions().since(None).paths() == []


def test_get(sample):
    """
    get() finds an entry by exact version.
    """

    assert sample.get("1.2").path == "abc-1.2.tgz"
    assert sample.get("1.2.0").path == "abc-1.2.tgz"
    assert sample.get(V("2")).path == "abc-2.tgz"
    assert sample.get("1.5") is None
    assert sample.get("1.5", sample[0]) is sample[0]


def test_get_bad_version_number(sample):
    """
    get() refuses strings which are not version numbers.
    """

    with pytest.raises(InvalidVersionNumber):
        sample.get("latest")


def test_equality(sample):
    """
    Extractions compare by their entries.
    """

    assert sample == Extractions(list(sample))
    assert sample != sample[1:]
    assert isinstance(sample[1:], Extractions)


def test_list_versions():
    """
    list_versions lists with the derived prefix before extracting.
    """

    seen = []

    def lister(prefix):
        seen.append(prefix)
        return ["releases/app-1.tgz", "releases/app-0.9.tgz", "releases/notes"]

    found = list_versions(lister, r"releases/app-(.*)\.tgz")

    assert seen == ["releases/"]
    assert found.paths() == ["releases/app-0.9.tgz", "releases/app-1.tgz"]


def test_list_versions_bad_pattern():
    """
    The lister is not called for an invalid pattern.
    """

    def lister(prefix):
        raise AssertionError("lister should not be called")

    with pytest.raises(PatternError):
        list_versions(lister, "releases/a(c")


# The end.
