"""
Interface extraction from TypeScript declaration files.

Locates ``interface`` declarations in the source text and splits them into
name, extends clause and body. This is a scanner for declaration files,
not a TypeScript parser: it only tracks braces, comments and string
literals well enough to find where each interface ends.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_INTERFACE_START = re.compile(
    r"(?<![\w$.])(?:export\s+)?(?:declare\s+)?interface\s+(?P<name>[A-Za-z_$][\w$]*)"
    r"(?P<generics>\s*<[^{]*?>)?"
    r"(?:\s+extends\s+(?P<extends>[^{]+?))?\s*\{"
)

_ARRAY_GENERIC = re.compile(r"^(?:Readonly)?Array\s*<\s*(?P<item>.+)\s*>$")
_ARRAY_SUFFIX = re.compile(r"^(?P<item>.+?)\s*\[\s*\]$")


@dataclass
class InterfaceDefinition:
    """One interface declaration found in a types file."""

    name: str = ""

    # Declaration text from the interface keyword to the closing brace
    source: str = ""

    # Extended types, in declaration order
    extends: list[str] = field(default_factory=list)

    # Text between the braces
    body: str = ""

    @property
    def has_own_members(self) -> bool:
        return bool(strip_comments(self.body).strip(" \t\r\n;,"))

    @property
    def array_element_type(self) -> str | None:
        """
        Element type when the interface is nothing but an array.

        Returns:
            T for ``interface X extends Array<T> {}`` or ``interface X extends T[] {}``,
            None otherwise
        """
        if self.has_own_members or len(self.extends) != 1:
            return None
        base = self.extends[0].strip()
        match = _ARRAY_GENERIC.match(base) or _ARRAY_SUFFIX.match(base)
        if match is None:
            return None
        return match.group("item").strip()


class InterfaceExtractor:
    """Finds interface declarations in TypeScript source text."""

    def extract(self, source: str) -> list[InterfaceDefinition]:
        """
        Extract every interface declared in the source.

        Args:
            source: Content of a .d.ts / .ts file

        Returns:
            Interfaces in the order they are declared
        """
        interfaces = []
        masked = mask_comments_and_strings(source)
        position = 0
        while True:
            match = _INTERFACE_START.search(masked, position)
            if match is None:
                break

            open_brace = match.end() - 1
            close_brace = find_closing_brace(masked, open_brace)
            if close_brace is None:
                break

            # The declaration starts at "interface", without export/declare
            start = masked.index("interface", match.start())
            extends = match.group("extends")
            interfaces.append(
                InterfaceDefinition(
                    name=match.group("name"),
                    source=source[start : close_brace + 1],
                    extends=split_type_list(source[match.start("extends") : match.end("extends")]) if extends else [],
                    body=source[open_brace + 1 : close_brace],
                )
            )
            position = close_brace + 1
        return interfaces

    def interface_names(self, source: str) -> list[str]:
        return [i.name for i in self.extract(source)]


def mask_comments_and_strings(text: str) -> str:
    """
    Replace comment and string literal contents with spaces.

    Offsets are preserved, so positions found in the masked text index
    the original text.
    """
    out = list(text)
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if text.startswith("//", i):
            end = text.find("\n", i)
            end = length if end == -1 else end
            _blank(out, i, end)
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = length if end == -1 else end + 2
            _blank(out, i, end)
            i = end
        elif char in "'\"`":
            end = i + 1
            while end < length and text[end] != char:
                end += 2 if text[end] == "\\" else 1
            end = min(end + 1, length)
            _blank(out, i + 1, end - 1)
            i = end
        else:
            i += 1
    return "".join(out)


def _blank(chars: list[str], start: int, end: int) -> None:
    for j in range(start, end):
        if chars[j] != "\n":
            chars[j] = " "


def strip_comments(text: str) -> str:
    text = re.sub(r"/\*.*?\*/", "", text, flags=re.DOTALL)
    return re.sub(r"//[^\n]*", "", text)


def find_closing_brace(text: str, open_index: int) -> int | None:
    """Index of the brace closing the one at open_index, in masked text."""
    depth = 0
    for index in range(open_index, len(text)):
        if text[index] == "{":
            depth += 1
        elif text[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def split_type_list(text: str) -> list[str]:
    """Split "A, B<C, D>, E[]" on top-level commas."""
    parts = []
    depth = 0
    current = []
    for char in text:
        if char in "<([{":
            depth += 1
        elif char in ">)]}":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts
