# tests/test_config.py
"""
Tests для webi18n/config.py

Покрывает:
- I18nConfig.merge() - поверхностное слияние, camelCase, ошибки
- load_yaml_config() / I18nConfig.from_yaml()
"""

import pytest

from webi18n.config import I18nConfig, load_yaml_config
from webi18n.exceptions import ConfigError


class TestMerge:

    def test_defaults(self):
        config = I18nConfig()
        assert config.default_lang == "en"
        assert config.current_lang == "en"
        assert config.supported_langs == ["en"]
        assert config.use_url_lang is True

    def test_omitted_fields_keep_previous_values(self):
        """Поля, которых нет в partial, не меняются."""
        config = I18nConfig().merge({"default_lang": "fr"})
        assert config.default_lang == "fr"
        assert config.supported_langs == ["en"]
        assert config.locales_path == "src/locales"

    def test_merge_returns_new_instance(self):
        base = I18nConfig()
        merged = base.merge(current_lang="de")
        assert base.current_lang == "en"
        assert merged.current_lang == "de"

    def test_camel_case_names_are_accepted(self):
        config = I18nConfig().merge({
            "defaultLang": "fr",
            "supportedLangs": ["fr", "en"],
            "useUrlLang": False,
            "localesPath": "/srv/locales",
        })
        assert config.default_lang == "fr"
        assert config.supported_langs == ["fr", "en"]
        assert config.use_url_lang is False
        assert config.locales_path == "/srv/locales"

    def test_disjoint_merges_accumulate(self):
        """Два частичных слияния = оба поверх значений по умолчанию."""
        first = {"supportedLangs": ["en", "fr"]}
        second = {"localesPath": "public/locales"}
        merged = I18nConfig().merge(first).merge(second)
        expected = I18nConfig().merge({**first, **second})
        assert merged == expected

    def test_supported_langs_are_deduplicated_in_order(self):
        config = I18nConfig().merge(supported_langs=["fr", "en", "fr"])
        assert config.supported_langs == ["fr", "en"]

    def test_supported_langs_from_comma_string(self):
        config = I18nConfig().merge(supported_langs="en, de")
        assert config.supported_langs == ["en", "de"]

    def test_unknown_field_raises(self):
        with pytest.raises(ConfigError):
            I18nConfig().merge({"fallbackLang": "en"})

    def test_non_bool_use_url_lang_raises(self):
        with pytest.raises(ConfigError):
            I18nConfig().merge(use_url_lang="yes")

    def test_none_use_url_lang_keeps_previous_value(self):
        assert I18nConfig(use_url_lang=False).merge({"useUrlLang": None}).use_url_lang is False
        assert I18nConfig().merge(use_url_lang=None).use_url_lang is True

    def test_non_string_language_raises(self):
        with pytest.raises(ConfigError):
            I18nConfig().merge(supported_langs=["en", 7])


class TestEffectiveLang:

    def test_current_lang_wins(self):
        assert I18nConfig(default_lang="en", current_lang="fr").effective_lang == "fr"

    def test_default_lang_when_current_unset(self):
        assert I18nConfig(default_lang="de", current_lang=None).effective_lang == "de"

    def test_fallback_to_en(self):
        assert I18nConfig(default_lang=None, current_lang=None).effective_lang == "en"


class TestYamlConfig:

    def test_missing_file_returns_empty_partial(self, tmp_path):
        assert load_yaml_config(tmp_path / "absent.yaml") == {}

    def test_flat_file(self, tmp_path):
        path = tmp_path / "i18n.yaml"
        path.write_text("defaultLang: fr\nsupportedLangs: [fr, en]\n", encoding="utf-8")
        config = I18nConfig.from_yaml(path)
        assert config.default_lang == "fr"
        assert config.supported_langs == ["fr", "en"]

    def test_i18n_section(self, tmp_path):
        path = tmp_path / "app.yaml"
        path.write_text("i18n:\n  locales_path: public/locales\nother: 1\n", encoding="utf-8")
        assert load_yaml_config(path) == {"locales_path": "public/locales"}

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("defaultLang: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_yaml_config(path)

    def test_non_mapping_yaml_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- en\n- fr\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_yaml_config(path)


def test_to_dict():
    data = I18nConfig().merge(supported_langs=["en", "fr"]).to_dict()
    assert data["supported_langs"] == ["en", "fr"]
    assert data["locales_path"] == "src/locales"
