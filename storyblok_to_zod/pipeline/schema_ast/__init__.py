"""
Schema AST module.

Contains the descriptor node definitions and the parser for Storyblok
component documents.
"""

from __future__ import annotations

from .nodes import (
    AssetField,
    BloksField,
    BooleanField,
    ComponentDescriptor,
    DatetimeField,
    FieldDescriptor,
    InvalidField,
    LayoutField,
    MissingTypeField,
    MultilinkField,
    NumberField,
    OptionField,
    OptionsField,
    RichtextField,
    StringField,
    UnknownField,
)
from .parser import ComponentParser

__all__ = [
    "FieldDescriptor",
    "StringField",
    "NumberField",
    "BooleanField",
    "DatetimeField",
    "OptionField",
    "OptionsField",
    "AssetField",
    "MultilinkField",
    "RichtextField",
    "BloksField",
    "LayoutField",
    "MissingTypeField",
    "UnknownField",
    "InvalidField",
    "ComponentDescriptor",
    "ComponentParser",
]
