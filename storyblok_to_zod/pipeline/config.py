"""
Configuration for the Storyblok to Zod pipeline.

A config file is a JSON object whose keys match the attributes of
CodeGeneratorConfig; unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        validate_before_write: Whether to check the generated text before writing
        atomic_write: Whether to write through a temporary file
    """

    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the post-processing formatter (prettier)."""

    # Whether formatting is enabled
    enabled: bool = False

    # Line length for the formatter
    line_length: int = 120

    # Indentation width
    tab_width: int = 2

    # Use single quotes for strings
    single_quote: bool = True

    # Command used to run prettier
    command: list[str] = field(default_factory=lambda: ["npx", "--yes", "prettier"])


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Identifier every validator call is prefixed with ("z" -> "z.string()")
    validator_namespace: str = "z"

    # Module the validator namespace is imported from
    validator_import_module: str = "astro/zod"

    # Name of the interface definitions file inside <folder>/types
    types_file_name: str = "storyblok.d.ts"

    # Files in the components folder that are not components
    ignored_component_files: list[str] = field(default_factory=lambda: ["groups.json", "tags.json"])

    # Emit array(<T>Schema) for interfaces that only extend Array<T> / T[]
    array_extension_bypass: bool = True

    # Add hand-written asset/multilink/richtext schemas missing from the types file
    include_standard_schemas: bool = True

    # Add the ISbStoryData schema so every component gets a story wrapper variant
    include_story_data: bool = True

    # Drop native schemas that no component references
    exclude_unused_native_schemas: bool = True

    # Module to import each referenced TypeScript type from
    type_import_paths: dict[str, str] = field(
        default_factory=lambda: {
            "ISbStoryData": "storyblok-js-client",
            "ISbMultipleStoriesData": "storyblok-js-client",
            "StoryblokRichtext": "~/types/storyblok.d",
        }
    )

    # Module for referenced types missing from type_import_paths
    types_import_module: str = "~/types/storyblok.d"

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Command running ts-to-zod; receives <input.ts> <output.ts>
    converter_command: list[str] = field(default_factory=lambda: ["npx", "--yes", "ts-to-zod", "--skipValidation"])

    # Seconds before an external converter call is abandoned
    converter_timeout: float = 60.0

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    def import_path_for_type(self, type_name: str) -> str:
        """Module a TypeScript type is imported from."""
        return self.type_import_paths.get(type_name, self.types_import_module)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "validator_namespace": self.validator_namespace,
            "validator_import_module": self.validator_import_module,
            "types_file_name": self.types_file_name,
            "ignored_component_files": self.ignored_component_files,
            "array_extension_bypass": self.array_extension_bypass,
            "include_standard_schemas": self.include_standard_schemas,
            "include_story_data": self.include_story_data,
            "exclude_unused_native_schemas": self.exclude_unused_native_schemas,
            "type_import_paths": self.type_import_paths,
            "types_import_module": self.types_import_module,
            "add_generation_comment": self.add_generation_comment,
            "converter_command": self.converter_command,
            "converter_timeout": self.converter_timeout,
            "formatter": {
                "enabled": self.formatter.enabled,
                "line_length": self.formatter.line_length,
                "tab_width": self.formatter.tab_width,
                "single_quote": self.formatter.single_quote,
                "command": self.formatter.command,
            },
            "output": {
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
