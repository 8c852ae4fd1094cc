"""
Shared fixtures for the storyblok_to_zod tests.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from storyblok_to_zod.pipeline.errors import InterfaceConversionError
from storyblok_to_zod.utils import interface_schema_name, pascal_to_camel_case

TEST_DATA = Path(__file__).parent / "test_data"
STORYBLOK_FOLDER = TEST_DATA / "storyblok"


class FakeConverter:
    """Stands in for ts-to-zod: one object schema per interface.

    Every other Storyblok* interface named in the body becomes a member
    referencing that interface's schema, so native-to-native references can
    be followed.
    """

    def __init__(self, fail: tuple[str, ...] = (), available: bool = True):
        self.fail = set(fail)
        self.available = available
        self.calls: list[str] = []

    def is_available(self) -> bool:
        return self.available

    def convert(self, source: str) -> str:
        name = re.search(r"interface\s+(\w+)", source).group(1)
        self.calls.append(name)
        if name in self.fail:
            raise InterfaceConversionError(f"cannot convert {name}")

        body = source[source.index("{") + 1 : source.rindex("}")]
        members = [f'  kind: z.literal("{name}"),']
        for ref in sorted(set(re.findall(r"\b(Storyblok\w+)", body)) - {name}):
            members.append(f"  {pascal_to_camel_case(ref)}: z.array({interface_schema_name(ref)}),")

        schema = "export const {} = z.object({{\n{}\n}});\n".format(interface_schema_name(name), "\n".join(members))
        return '// Generated by ts-to-zod\nimport { z } from "zod";\n\n' + schema


@pytest.fixture
def fake_converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def converter_factory():
    return FakeConverter


@pytest.fixture
def storyblok_folder() -> Path:
    return STORYBLOK_FOLDER


@pytest.fixture
def types_source() -> str:
    return (STORYBLOK_FOLDER / "types" / "storyblok.d.ts").read_text(encoding="utf-8")
