"""
Tests for import parsing and merging.
"""

from __future__ import annotations

import pytest

from storyblok_to_zod.pipeline.ast_backends.zod_nodes import ImportStatement
from storyblok_to_zod.pipeline.ast_backends.zod_serializer import ZodSerializer
from storyblok_to_zod.pipeline.output.imports import merge_imports, parse_import


@pytest.mark.parametrize(
    "line,expected",
    [
        ('import { z } from "zod";', ImportStatement(module="zod", names=["z"])),
        (
            "import { type ISbStoryData, ISbAlternateObject } from 'storyblok-js-client'",
            ImportStatement(module="storyblok-js-client", names=["type ISbStoryData", "ISbAlternateObject"]),
        ),
        (
            "import type { StoryblokAsset } from './interface';",
            ImportStatement(module="./interface", names=["StoryblokAsset"], type_only=True),
        ),
        ("import React from 'react';", ImportStatement(module="react", default="React")),
        ("import * as z from 'zod';", ImportStatement(module="zod", namespace="z")),
        ("import React, * as R from 'react';", ImportStatement(module="react", default="React", namespace="R")),
        (
            "import React, { useState } from 'react';",
            ImportStatement(module="react", names=["useState"], default="React"),
        ),
        ("import './styles.css';", ImportStatement(module="./styles.css")),
    ],
)
def test_parse_import(line, expected):
    assert parse_import(line) == expected


def test_parse_import_rejects_other_statements():
    assert parse_import("export const x = 1;") is None


def render(statements):
    serializer = ZodSerializer()
    return [serializer.serialize_import(s) for s in statements]


class TestMergeImports:
    def test_one_statement_per_module_sorted_by_module(self):
        merged = merge_imports(
            [
                ImportStatement(module="storyblok-js-client", names=["type ISbStoryData"]),
                ImportStatement(module="astro/zod", names=["z"]),
                ImportStatement(module="storyblok-js-client", names=["type ISbStoryData"]),
                ImportStatement(module="storyblok-js-client", names=["type ISbMultipleStoriesData"]),
            ]
        )
        assert render(merged) == [
            "import { z } from 'astro/zod';",
            "import { type ISbMultipleStoriesData, type ISbStoryData } from 'storyblok-js-client';",
        ]

    def test_value_import_wins_over_type_import(self):
        merged = merge_imports(
            [
                ImportStatement(module="m", names=["type A"]),
                ImportStatement(module="m", names=["A"]),
                ImportStatement(module="m", names=["B"], type_only=True),
            ]
        )
        assert render(merged) == ["import { A, type B } from 'm';"]

    def test_namespace_import_stays_separate(self):
        merged = merge_imports(
            [
                ImportStatement(module="zod", names=["ZodType"]),
                ImportStatement(module="zod", namespace="z"),
            ]
        )
        assert render(merged) == ["import { ZodType } from 'zod';", "import * as z from 'zod';"]

    def test_default_import_is_combined_with_names(self):
        merged = merge_imports(
            [
                ImportStatement(module="react", default="React"),
                ImportStatement(module="react", names=["useState"]),
            ]
        )
        assert render(merged) == ["import React, { useState } from 'react';"]

    def test_side_effect_import_kept_once(self):
        merged = merge_imports([ImportStatement(module="./setup"), ImportStatement(module="./setup")])
        assert render(merged) == ["import './setup';"]

    def test_merge_is_order_independent(self):
        statements = [
            ImportStatement(module="b", names=["y", "x"]),
            ImportStatement(module="a", names=["type T"]),
            ImportStatement(module="b", names=["w"]),
        ]
        assert merge_imports(statements) == merge_imports(list(reversed(statements)))
