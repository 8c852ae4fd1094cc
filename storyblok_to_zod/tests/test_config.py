"""
Tests for CodeGeneratorConfig.
"""

from __future__ import annotations

from storyblok_to_zod.pipeline.config import CodeGeneratorConfig, FormatterConfig, OutputConfig


def test_defaults():
    config = CodeGeneratorConfig()
    assert config.validator_namespace == "z"
    assert config.validator_import_module == "astro/zod"
    assert config.ignored_component_files == ["groups.json", "tags.json"]
    assert config.array_extension_bypass is True
    assert config.formatter.enabled is False
    assert config.output.atomic_write is True


def test_from_dict_nested_and_unknown_keys():
    config = CodeGeneratorConfig.from_dict(
        {
            "validator_import_module": "zod",
            "array_extension_bypass": False,
            "formatter": {"enabled": True, "line_length": 80},
            "output": {"atomic_write": False},
            "not_an_option": 1,
        }
    )
    assert config.validator_import_module == "zod"
    assert config.array_extension_bypass is False
    assert config.formatter == FormatterConfig(enabled=True, line_length=80)
    assert config.output == OutputConfig(atomic_write=False)
    assert not hasattr(config, "not_an_option")


def test_to_dict_round_trip():
    config = CodeGeneratorConfig.from_dict({"types_import_module": "~/types/sb", "converter_timeout": 5})
    assert CodeGeneratorConfig.from_dict(config.to_dict()) == config


def test_import_path_for_type():
    config = CodeGeneratorConfig()
    assert config.import_path_for_type("ISbStoryData") == "storyblok-js-client"
    assert config.import_path_for_type("StoryblokRichtext") == "~/types/storyblok.d"
    assert config.import_path_for_type("StoryblokAsset") == "~/types/storyblok.d"
