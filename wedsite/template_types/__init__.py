"""
Template type registry

A template's ``template_key`` selects one of these types, which supplies
the default configuration its tenant JSON is merged onto.
"""

import copy
from typing import Any

from wedsite.exceptions import UnsupportedTemplateTypeError
from wedsite.template_types import classic, elegant, nature, pro, romantic
from wedsite.template_types.base import NEUTRAL_PALETTE, TemplateType

TEMPLATE_TYPES: dict[str, TemplateType] = {
    module.TEMPLATE_TYPE.key: module.TEMPLATE_TYPE for module in (pro, classic, elegant, romantic, nature)
}


def get_template_type(key: str) -> TemplateType | None:
    return TEMPLATE_TYPES.get(key)


def list_template_types() -> list[TemplateType]:
    return list(TEMPLATE_TYPES.values())


def get_default_config(key: str) -> dict[str, Any]:
    """Fresh copy of a type's defaults; unknown keys raise."""
    template_type = TEMPLATE_TYPES.get(key)
    if template_type is None:
        raise UnsupportedTemplateTypeError(key)
    return copy.deepcopy(template_type.defaults)


__all__ = [
    "NEUTRAL_PALETTE",
    "TEMPLATE_TYPES",
    "TemplateType",
    "get_default_config",
    "get_template_type",
    "list_template_types",
]
