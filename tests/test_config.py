"""Unit tests for Config (psetup.config).

Tests cover:
- Defaults and validation
- Option definitions built from the config
- from_env
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from psetup.config import DOCUMENT_SELECTORS, LANGUAGES, LICENSES, Config
from psetup.parser import WILDCARD


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.option_prefix == "-"
        assert config.option_size == 3
        assert config.option_sign == "="
        assert config.multi_separator == ","
        assert config.template_dir is None
        assert config.author == ""
        assert config.verbose is False

    @pytest.mark.unit
    def test_option_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(option_size=0)

    @pytest.mark.unit
    def test_empty_sign_rejected(self):
        with pytest.raises(ValidationError):
            Config(option_sign="")


class TestOptionSpecs:
    @pytest.mark.unit
    def test_names(self, option_specs):
        assert [spec.name for spec in option_specs] == ["-nme", "-rte", "-lng", "-lic", "-dcs"]

    @pytest.mark.unit
    def test_defaults_and_allow_lists(self, option_specs):
        by_name = {spec.name: spec for spec in option_specs}
        assert by_name["-nme"].default_values == ("new-project",)
        assert by_name["-nme"].allowed_values == {WILDCARD}
        assert by_name["-rte"].default_values == ("./",)
        assert by_name["-rte"].accepts_any
        assert by_name["-lng"].default_values == ("go",)
        assert by_name["-lng"].allowed_values == set(LANGUAGES)
        assert by_name["-lic"].default_values == ("mit",)
        assert by_name["-lic"].allowed_values == set(LICENSES)
        assert by_name["-dcs"].default_values == ("all",)
        assert by_name["-dcs"].allowed_values == set(DOCUMENT_SELECTORS)

    @pytest.mark.unit
    def test_defaults_are_allowed(self, option_specs):
        for spec in option_specs:
            assert spec.accepts_any or set(spec.default_values) <= spec.allowed_values

    @pytest.mark.unit
    def test_custom_prefix_and_separator(self):
        config = Config(option_prefix="--", multi_separator=";")
        specs = config.option_specs()
        assert specs[0].name == "--nme"
        assert all(spec.multi_separator == ";" for spec in specs)

    @pytest.mark.unit
    def test_every_spec_has_a_description(self, option_specs):
        assert all(spec.description for spec in option_specs)


class TestFromEnv:
    @pytest.mark.unit
    def test_empty_environment(self, monkeypatch):
        for var in ("PSETUP_TEMPLATE_DIR", "PSETUP_AUTHOR", "PSETUP_VERBOSE"):
            monkeypatch.delenv(var, raising=False)
        assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_reads_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PSETUP_TEMPLATE_DIR", str(tmp_path))
        monkeypatch.setenv("PSETUP_AUTHOR", "Grace Hopper")
        monkeypatch.setenv("PSETUP_VERBOSE", "yes")
        config = Config.from_env()
        assert config.template_dir == Path(tmp_path)
        assert config.author == "Grace Hopper"
        assert config.verbose is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "no", "off"])
    def test_falsy_verbose(self, monkeypatch, value):
        monkeypatch.setenv("PSETUP_VERBOSE", value)
        assert Config.from_env().verbose is False
