"""
End-to-end tests for the pipeline generator using the fixtures under
test_data/storyblok.
"""

from __future__ import annotations

import pytest

from storyblok_to_zod.pipeline import CodeGeneratorConfig, PipelineGenerator
from storyblok_to_zod.pipeline.errors import ConfigurationError, CyclicDependencyError, FileOperationError

BUTTON_SCHEMA = """export const buttonSchema = z.object({
  label: z.string(),
  link: storyblokMultilinkSchema.optional(),
  variant: z.union([z.number(), z.string()]).optional(),
});"""

CARD_SCHEMA = """export const cardSchema = z.object({
  title: z.string(),
  image: storyblokAssetSchema.optional(),
  body: storyblokRichtextSchema.optional(),
  tags: z.array(z.union([z.number(), z.string()])).optional(),
  published_at: z.string().datetime().optional(),
  featured: z.boolean().optional(),
  rating: z.number().optional(),
});"""

TEXT_BLOCK_SCHEMA = """export const textBlockSchema = z.object({
  text: z.string(),
  "data-id": z.string().optional(),
  embed: z.any().optional() /* Unknown type: custom */,
  notes: z.any().optional(),
});"""

ARTICLE_PAGE_SCHEMA = """export const articlePageSchema = z.object({
  title: z.string(),
  hero: cardSchema.optional(),
  body: z.union([cardSchema, buttonSchema, textBlockSchema]).optional(),
  legacy: z.any().optional(),
  anything: z.any().optional(),
});"""


def generate(storyblok_folder, converter, space="testspace123", **config_values):
    config = CodeGeneratorConfig.from_dict(config_values)
    return PipelineGenerator(space, storyblok_folder, config, converter=converter).run()


class TestEndToEnd:
    def test_conversion_order(self, storyblok_folder, fake_converter):
        result = generate(storyblok_folder, fake_converter)
        assert result.order == ["card", "button", "text-block", "article-page"]
        assert result.converted.names() == result.order
        assert result.skipped == []

    def test_component_schemas(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter).text
        for expected in (BUTTON_SCHEMA, CARD_SCHEMA, TEXT_BLOCK_SCHEMA, ARTICLE_PAGE_SCHEMA):
            assert expected in text

    def test_output_order(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter).text
        assert text.startswith("// Generated by storyblok_to_zod\n\n")
        positions = [
            text.index("import { z } from 'astro/zod';"),
            text.index("export const storyblokAssetSchema"),
            text.index("export const iSbAlternateObjectSchema"),
            text.index("export const iSbStoryDataSchema"),
            text.index("export const cardSchema"),
            text.index("export const cardStorySchema"),
            text.index("export const buttonSchema"),
            text.index("export const articlePageSchema"),
            text.index("export const articlePageStorySchema"),
        ]
        assert positions == sorted(positions)

    def test_imports_are_merged(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter).text
        assert text.count("from 'storyblok-js-client';") == 1
        assert "import { type ISbStoryData } from 'storyblok-js-client';" in text
        assert "from 'zod'" not in text

    def test_story_variants(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter).text
        assert (
            "export const textBlockStorySchema: z.ZodSchema<ISbStoryData & "
            "{ content: z.infer<typeof textBlockSchema> }> = z.lazy(() => z.object({"
        ) in text
        assert "  content: textBlockSchema,\n" in text

    def test_no_story_variants_without_story_data(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter, include_story_data=False).text
        assert "StorySchema" not in text
        assert "storyblok-js-client" not in text
        assert "iSbStoryDataSchema" not in text

    def test_unused_native_schemas_are_excluded(self, storyblok_folder, fake_converter):
        result = generate(storyblok_folder, fake_converter)
        for symbol in ("storyblokTableSchema", "storyblokTableRowSchema", "storyblokMultiassetSchema"):
            assert symbol not in result.text
        assert result.natives.has("StoryblokTable")
        assert not result.natives.is_used("StoryblokTable")
        assert "export const storyblokMultilinkSchema" in result.text
        assert "export const previewTokenSchema" in result.text
        assert "export const iSbMultipleStoriesDataSchema" not in result.text

    def test_unused_native_schemas_can_be_kept(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter, exclude_unused_native_schemas=False).text
        assert "export const storyblokTableSchema" in text
        assert "export const storyblokMultiassetSchema = z.array(storyblokAssetSchema);" in text
        # Referenced schemas come first
        assert text.index("export const storyblokTableRowSchema") < text.index("export const storyblokTableSchema")
        assert text.index("export const storyblokAssetSchema") < text.index("export const storyblokMultiassetSchema")

    def test_each_symbol_declared_once(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter, exclude_unused_native_schemas=False).text
        for line in text.splitlines():
            if line.startswith("export const "):
                symbol = line.split()[2].rstrip(":")
                assert text.count(f"export const {symbol} ") + text.count(f"export const {symbol}:") == 1

    def test_idempotent(self, storyblok_folder, converter_factory):
        first = generate(storyblok_folder, converter_factory()).text
        second = generate(storyblok_folder, converter_factory()).text
        assert first == second

    def test_without_namespace(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter, validator_namespace="", include_story_data=False).text
        assert "  label: string(),\n" in text
        assert "export const buttonSchema = object({" in text
        assert "astro/zod" not in text

    def test_without_generation_comment(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter, add_generation_comment=False).text
        assert text.startswith("import ")

    def test_output_ends_with_one_newline(self, storyblok_folder, fake_converter):
        text = generate(storyblok_folder, fake_converter).text
        assert text.endswith(";\n")
        assert not text.endswith("\n\n")


class TestSkipsOnError:
    def test_malformed_file_is_skipped(self, storyblok_folder, fake_converter):
        result = generate(storyblok_folder, fake_converter, space="brokenspace")
        assert sorted(result.converted.names()) == ["button", "card", "text-block"]
        assert "heroBanner" not in result.text
        assert BUTTON_SCHEMA in result.text

    def test_malformed_documents_are_reported(self, fake_converter):
        generator = PipelineGenerator("inline", converter=fake_converter)
        result = generator.run_from_documents(
            {
                "card": {"schema": {"title": {"type": "text"}}},
                "no-schema": {"name": "no-schema"},
                "Bad_Name": {"schema": {}},
                "page": {"schema": {"body": {"type": "bloks", "component_whitelist": ["Bad_Name", "card"]}}},
            },
            "",
        )
        assert result.converted.names() == ["card", "page"]
        assert set(result.skipped) == {"no-schema", "Bad_Name"}
        # Skipped components count as unresolved
        assert "  body: z.any().optional(),\n" in result.text

    @pytest.mark.parametrize(
        "names, skipped",
        [
            (["card", "card-story"], "card-story"),
            (["card-story", "card"], "card"),
        ],
    )
    def test_component_clashing_with_story_variant(self, fake_converter, names, skipped):
        documents = {name: {"schema": {"title": {"type": "text"}}} for name in names}
        result = PipelineGenerator("inline", converter=fake_converter).run_from_documents(documents, "")
        assert result.skipped == [skipped]
        assert result.converted.names() == [n for n in names if n != skipped]
        assert result.text.count("export const cardStorySchema") == 1

    def test_component_clashing_with_native_schema(self, fake_converter):
        documents = {
            "preview-token": {"schema": {"value": {"type": "number"}}},
            "page": {"schema": {"token": {"type": "bloks", "component_whitelist": ["preview-token"]}}},
        }
        result = PipelineGenerator("inline", converter=fake_converter).run_from_documents(documents, "")
        assert result.skipped == ["preview-token"]
        assert "value: z.number()" not in result.text
        assert "  token: z.any().optional(),\n" in result.text
        assert result.text.count("export const previewTokenSchema") <= 1

    def test_empty_component(self, fake_converter):
        result = PipelineGenerator("inline", converter=fake_converter).run_from_documents({"spacer": {"schema": {}}}, "")
        assert "export const spacerSchema = z.object({});" in result.text


class TestFatalErrors:
    def test_cycle(self, fake_converter):
        documents = {
            "a": {"schema": {"x": {"type": "bloks", "component_whitelist": ["b"]}}},
            "b": {"schema": {"y": {"type": "bloks", "component_whitelist": ["a"]}}},
        }
        with pytest.raises(CyclicDependencyError):
            PipelineGenerator("inline", converter=fake_converter).run_from_documents(documents, "")

    def test_missing_space(self, storyblok_folder, fake_converter):
        with pytest.raises(ConfigurationError, match="components"):
            generate(storyblok_folder, fake_converter, space="no-such-space")

    def test_missing_folder(self, tmp_path, fake_converter):
        with pytest.raises(ConfigurationError):
            PipelineGenerator("testspace123", tmp_path / "missing", converter=fake_converter).run()

    def test_empty_types_file(self, tmp_path, fake_converter):
        (tmp_path / "components" / "space").mkdir(parents=True)
        (tmp_path / "types").mkdir()
        (tmp_path / "types" / "storyblok.d.ts").write_text("  \n", encoding="utf-8")
        with pytest.raises(FileOperationError, match="empty"):
            PipelineGenerator("space", tmp_path, converter=fake_converter).run()


class TestWrite:
    def test_write_creates_file(self, tmp_path, storyblok_folder, fake_converter):
        generator = PipelineGenerator("testspace123", storyblok_folder, converter=fake_converter)
        output = tmp_path / "src" / "schemas" / "storyblok.zod.ts"
        generator.write(generator.generate(), output)
        content = output.read_text(encoding="utf-8")
        assert content.endswith("}));\n")
        assert CARD_SCHEMA in content

    def test_plain_write(self, tmp_path, storyblok_folder, fake_converter):
        config = CodeGeneratorConfig.from_dict({"output": {"atomic_write": False}})
        generator = PipelineGenerator("testspace123", storyblok_folder, config, converter=fake_converter)
        output = tmp_path / "schemas.ts"
        generator.write("export const a = z.string();\n\n\n", output)
        assert output.read_text(encoding="utf-8") == "export const a = z.string();\n"

    def test_formatter_is_applied_when_enabled(self, storyblok_folder, fake_converter):
        class UpperFormatter:
            def format(self, code, config):
                return code.upper()

        config = CodeGeneratorConfig.from_dict({"formatter": {"enabled": True}})
        generator = PipelineGenerator(
            "testspace123", storyblok_folder, config, converter=fake_converter, formatter=UpperFormatter()
        )
        assert "EXPORT CONST BUTTONSCHEMA" in generator.generate()
