"""Tests for resolving command-line tokens against option specs.

Covers:
- Defaults when no tokens are given
- Valid, invalid, malformed and unknown tokens
- Last-write-wins for repeated options
- The ignored-token diagnostic list
"""

from __future__ import annotations

import pytest

from psetup.parser import ArgumentSpec, process_arguments


pytestmark = pytest.mark.unit


def _process(tokens, specs):
    return process_arguments(tokens, specs, "-", "=", 3)


def _defaults(specs):
    return {spec.name: list(spec.default_values) for spec in specs}


class TestProcessArguments:
    def test_no_tokens_gives_defaults(self, option_specs):
        result = _process([], option_specs)
        assert result.values == _defaults(option_specs)
        assert result.ignored == []

    def test_every_spec_has_an_entry_in_order(self, option_specs):
        result = _process(["-lng=py"], option_specs)
        assert list(result.values) == [spec.name for spec in option_specs]

    def test_valid_tokens_are_applied(self, option_specs):
        result = _process(["-nme=demo", "-lng=py", "-lic=apache"], option_specs)
        assert result.first("-nme") == "demo"
        assert result.first("-lng") == "py"
        assert result.first("-lic") == "apache"
        assert result.first("-rte") == "./"

    def test_multi_values(self, option_specs):
        result = _process(["-dcs=readme,license,readme"], option_specs)
        assert set(result.values["-dcs"]) == {"readme", "license"}

    def test_invalid_value_falls_back_to_default(self, option_specs):
        result = _process(["-lng=cobol"], option_specs)
        assert result.values["-lng"] == ["go"]
        assert result.ignored == []

    def test_unrecognized_document_selector_restores_default(self, option_specs):
        result = _process(["-dcs=changelog"], option_specs)
        assert result.values["-dcs"] == ["all"]

    def test_empty_value_keeps_default(self, option_specs):
        result = _process(["-nme="], option_specs)
        assert result.values["-nme"] == ["new-project"]

    def test_empty_value_after_a_valid_one_restores_default(self, option_specs):
        result = _process(["-nme=first", "-nme="], option_specs)
        assert result.values["-nme"] == ["new-project"]

    def test_wildcard_keeps_empty_segments(self, option_specs):
        result = _process(["-nme=,"], option_specs)
        assert result.values["-nme"] == [""]

    def test_last_token_wins(self, option_specs):
        result = _process(["-lng=py", "-lng=java"], option_specs)
        assert result.values["-lng"] == ["java"]

    def test_invalid_later_token_resets_to_default(self, option_specs):
        result = _process(["-lng=py", "-lng=cobol"], option_specs)
        assert result.values["-lng"] == ["go"]

    @pytest.mark.parametrize(
        "token, reason",
        [
            ("-ln", "insufficient argument length"),
            ("lng=py", "missing required prefix"),
            ("-lngpy", "separator in incorrect position"),
            ("--lng=py", "separator in incorrect position"),
        ],
    )
    def test_malformed_tokens_are_ignored(self, option_specs, token, reason):
        result = _process([token], option_specs)
        assert result.values == _defaults(option_specs)
        assert len(result.ignored) == 1
        assert result.ignored[0].token == token
        assert result.ignored[0].reason == reason

    def test_unknown_option_is_ignored(self, option_specs):
        result = _process(["-xyz=1", "-lng=c"], option_specs)
        assert result.first("-lng") == "c"
        assert [i.token for i in result.ignored] == ["-xyz=1"]
        assert "unknown argument" in result.ignored[0].reason

    def test_ignored_tokens_keep_input_order(self, option_specs):
        result = _process(["bad", "-abc=1", "-lng=py", "-x"], option_specs)
        assert [i.token for i in result.ignored] == ["bad", "-abc=1", "-x"]

    def test_specs_are_not_mutated(self, option_specs):
        before = [spec.model_dump() for spec in option_specs]
        _process(["-lng=py", "-nme=other"], option_specs)
        assert [spec.model_dump() for spec in option_specs] == before

    def test_spec_separator_is_used(self):
        spec = ArgumentSpec(
            name="-tag", default_values=("x",), allowed_values={"any"}, separator=";"
        )
        result = _process(["-tag=a;b,c"], [spec])
        assert result.values["-tag"] == ["a", "b,c"]

    def test_duplicate_spec_names_rejected(self, language_spec):
        with pytest.raises(ValueError, match="Duplicate"):
            _process([], [language_spec, language_spec])

    def test_first_raises_for_unknown_name(self, option_specs):
        result = _process([], option_specs)
        with pytest.raises(KeyError):
            result.first("-zzz")
