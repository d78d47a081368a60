import logging

import pytest

from versioned.aliases import VersionAliasResolver
from versioned.errors import ConfigurationError


def test_alias_resolves_to_group_key(aliases):
    assert aliases.resolve("alpha") == "v1"
    assert aliases.resolve("a1") == "v1"
    assert aliases.resolve("beta") == "v2"


def test_alias_matching_is_case_sensitive(aliases):
    assert aliases.resolve("ALPHA") == "ALPHA"


def test_surrounding_whitespace_is_ignored(aliases):
    assert aliases.resolve(" alpha \t") == "v1"
    assert aliases.resolve("\n\x0bbeta\0\r") == "v2"


def test_unknown_label_is_returned_trimmed(aliases):
    assert aliases.resolve("unknown") == "unknown"
    assert aliases.resolve("  v3 ") == "v3"
    assert aliases.resolve("v1") == "v1"


@pytest.mark.parametrize("label", [None, "", "   ", "\t\n"])
def test_missing_version_resolves_to_empty_string(aliases, label):
    assert aliases.resolve(label) == ""


def test_empty_table_is_identity():
    assert VersionAliasResolver().resolve(" alpha ") == "alpha"


def test_labels_are_trimmed_and_deduplicated():
    aliases = VersionAliasResolver({"v1": ["alpha", " alpha ", "ALPHA", "alpha\t"]})

    assert aliases.aliases["v1"] == ("alpha", "ALPHA")
    assert aliases.resolve("ALPHA") == "v1"
    assert aliases.resolve(" ALPHA ") == "v1"


def test_first_group_wins_for_shared_alias(caplog):
    with caplog.at_level(logging.WARNING, logger="versioned.aliases"):
        aliases = VersionAliasResolver({"v1": ["shared"], "v2": ["shared", "beta"]})

    assert aliases.resolve("shared") == "v1"
    assert "shared" in caplog.text


def test_table_is_read_only(aliases):
    assert aliases.groups() == ["v1", "v2"]
    with pytest.raises(TypeError):
        aliases.aliases["v3"] = ("gamma",)


def test_contains_reports_configured_aliases(aliases):
    assert "alpha" in aliases
    assert " beta " in aliases
    assert "v1" not in aliases


def test_contains_is_false_for_non_string_labels(aliases):
    assert 5 not in aliases
    assert None not in aliases


def test_configuration_is_copied():
    table = {"v1": ["alpha"]}
    aliases = VersionAliasResolver(table)
    table["v1"].append("late")

    assert aliases.resolve("late") == "late"


@pytest.mark.parametrize(
    "table, message",
    [
        (["v1", "alpha"], "must be a mapping"),
        ([], "must be a mapping"),
        ("", "must be a mapping"),
        (0, "must be a mapping"),
        ({1: ["alpha"]}, "non-empty strings"),
        ({"": ["alpha"]}, "non-empty strings"),
        ({"v1": "alpha"}, "must be a list"),
        ({"v1": {"alpha"}}, "must be a list"),
        ({"v1": ["alpha", 2]}, 'strings \\(key "v1", index 1\\)'),
        ({"v1": ["alpha", "  "]}, 'non-empty \\(key "v1", index 1\\)'),
    ],
)
def test_invalid_table_is_rejected(table, message):
    with pytest.raises(ConfigurationError, match=message):
        VersionAliasResolver(table)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        VersionAliasResolver({"v1": [None]})
