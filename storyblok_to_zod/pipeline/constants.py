"""
Names shared across the pipeline.
"""

# First line of every generated module
FILE_HEADER = "// Generated by storyblok_to_zod"

# Interface whose presence enables the story wrapper variants
STORY_DATA_INTERFACE = "ISbStoryData"

# Symbols of the shared schemas the field mapper refers to
ASSET_SCHEMA = "storyblokAssetSchema"
MULTILINK_SCHEMA = "storyblokMultilinkSchema"
RICHTEXT_SCHEMA = "storyblokRichtextSchema"
