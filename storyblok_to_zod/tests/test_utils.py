#!/usr/bin/env python3

import pytest

from storyblok_to_zod.utils import (
    component_schema_name,
    component_story_schema_name,
    interface_schema_name,
    is_identifier,
    is_kebab_case,
    kebab_to_camel_case,
)


class TestNaming:
    """Test cases for generated symbol names"""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("button", "button"),
            ("article-page", "articlePage"),
            ("call-to-action", "callToAction"),
            ("text-block-2", "textBlock2"),
        ],
    )
    def test_kebab_to_camel_case(self, name, expected):
        assert kebab_to_camel_case(name) == expected

    def test_component_schema_names(self):
        assert component_schema_name("call-to-action") == "callToActionSchema"
        assert component_story_schema_name("call-to-action") == "callToActionStorySchema"

    def test_interface_schema_name(self):
        assert interface_schema_name("StoryblokAsset") == "storyblokAssetSchema"
        assert interface_schema_name("ISbStoryData") == "iSbStoryDataSchema"


class TestValidation:
    """Test cases for name checks"""

    @pytest.mark.parametrize("name", ["button", "article-page", "hero2", "a-b-c", "section-1"])
    def test_valid_kebab_case(self, name):
        assert is_kebab_case(name)

    @pytest.mark.parametrize("name", ["Button", "article_page", "-page", "page-", "article--page", "2col", ""])
    def test_invalid_kebab_case(self, name):
        assert not is_kebab_case(name)

    def test_is_identifier(self):
        assert is_identifier("published_at")
        assert is_identifier("$ref")
        assert not is_identifier("data-id")
        assert not is_identifier("1st")
