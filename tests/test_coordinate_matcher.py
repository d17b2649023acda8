from doclinks.modules.javadoc.domain import coordinate_from_gav, coordinate_from_parts
from doclinks.modules.javadoc.util import CoordinateMatcher


def test_exact_pattern_matches_its_own_coordinate():
    coords = coordinate_from_parts("com.example", "lib-a", "1.2.3")
    matcher = CoordinateMatcher.parse("com.example:lib-a:1.2.3")

    assert matcher.include(coords)


def test_wildcard_segments():
    coords = coordinate_from_parts("com.example", "lib-a", "1.2.3")

    assert CoordinateMatcher.parse("com.example:*").include(coords)
    assert CoordinateMatcher.parse("*").include(coords)
    assert CoordinateMatcher.parse("com.example:lib-*:1.*").include(coords)
    assert CoordinateMatcher.parse("com.*").include(coords)
    assert not CoordinateMatcher.parse("org.example:*").include(coords)
    assert not CoordinateMatcher.parse("com.example:lib-b").include(coords)
    assert not CoordinateMatcher.parse("com.example:lib-a:2.0").include(coords)


def test_group_only_pattern_is_not_a_prefix_match():
    coords = coordinate_from_parts("com.example.sub", "lib-a", "1.0")

    assert not CoordinateMatcher.parse("com.example").include(coords)


def test_pattern_list_split_on_commas_and_whitespace():
    matcher = CoordinateMatcher.parse("org.one:*,\n   org.two:*  org.three")

    assert matcher.patterns == ["org.one:*", "org.two:*", "org.three"]
    assert matcher.include(coordinate_from_parts("org.two", "x", "1"))
    assert matcher.include(coordinate_from_parts("org.three", "y", "1"))


def test_empty_patterns_match_nothing():
    coords = coordinate_from_parts("com.example", "lib-a", "1.0")

    assert not CoordinateMatcher.parse(",").include(coords)
    assert not CoordinateMatcher([""]).include(coords)


def test_long_form_patterns_compare_type_and_classifier():
    javadoc = coordinate_from_gav("com.example:lib-a:jar:javadoc:1.0")

    assert CoordinateMatcher.parse("com.example:lib-a:jar:1.0").include(javadoc)
    assert CoordinateMatcher.parse("com.example:lib-a:jar:javadoc:1.0").include(javadoc)
    assert not CoordinateMatcher.parse("com.example:lib-a:jar:sources:1.0").include(javadoc)
    assert not CoordinateMatcher.parse("com.example:lib-a:pom:*").include(javadoc)


def test_malformed_pattern_matches_nothing():
    coords = coordinate_from_parts("a", "b", "1")

    assert not CoordinateMatcher.parse("a:b:c:d:e:f").include(coords)


def test_version_segment_matches_snapshot_base_version():
    coords = coordinate_from_parts("com.example", "lib-a", "1.0-20240101.120000-3")

    assert coords.base_version == "1.0-SNAPSHOT"
    assert CoordinateMatcher.parse("com.example:lib-a:1.0-SNAPSHOT").include(coords)
