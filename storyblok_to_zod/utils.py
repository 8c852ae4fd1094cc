"""
Utility functions for the Storyblok to Zod generator.
"""

import re

# Characters allowed in a bare JavaScript object key / identifier
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Valid Storyblok component technical names
_KEBAB_CASE_PATTERN = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


def kebab_to_camel_case(text: str) -> str:
    """Convert kebab-case text to camelCase.

    Examples:
        "article-page" -> "articlePage"
        "text-block-2" -> "textBlock2"
        "button" -> "button"
    """
    return re.sub(r"-(\w)", lambda m: m.group(1).upper(), text)


def pascal_to_camel_case(text: str) -> str:
    """Lower-case the first character ("StoryblokAsset" -> "storyblokAsset")."""
    return text[:1].lower() + text[1:]


def component_schema_name(component_name: str) -> str:
    """Symbol of the schema generated for a component ("call-to-action" -> "callToActionSchema")."""
    return kebab_to_camel_case(component_name) + "Schema"


def component_story_schema_name(component_name: str) -> str:
    """Symbol of the story wrapper variant of a component schema."""
    return kebab_to_camel_case(component_name) + "StorySchema"


def interface_schema_name(interface_name: str) -> str:
    """Symbol of the schema generated for an interface ("StoryblokAsset" -> "storyblokAssetSchema")."""
    return pascal_to_camel_case(interface_name) + "Schema"


def is_identifier(text: str) -> bool:
    """Check whether text can be used unquoted as a JavaScript identifier."""
    return bool(_IDENTIFIER_PATTERN.match(text))


def is_kebab_case(text: str) -> bool:
    return bool(_KEBAB_CASE_PATTERN.match(text))
