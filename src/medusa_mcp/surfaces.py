"""Store and admin surface definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .schema import FieldRule, optional_rule


@dataclass(frozen=True)
class Surface:
    name: str
    body_vocabulary: Dict[str, FieldRule]
    tool_prefix: str = ""
    description_prefix: str = ""

    def tool_name(self, operation_id: str) -> str:
        return f"{self.tool_prefix}{operation_id}"

    def tool_description(self, description: Optional[str]) -> str:
        if not self.description_prefix:
            return description or ""
        return f"{self.description_prefix}{description or ''}".rstrip()


def _strings(*names: str) -> Dict[str, FieldRule]:
    return {name: optional_rule(Optional[str]) for name in names}


def _unknown(*names: str) -> Dict[str, FieldRule]:
    return {name: optional_rule(Optional[Any]) for name in names}


STORE_BODY_VOCABULARY: Dict[str, FieldRule] = {
    **_strings(
        "email",
        "password",
        "first_name",
        "last_name",
        "phone",
        "company",
        "address_1",
        "address_2",
        "city",
        "country_code",
        "province",
        "postal_code",
    ),
    "metadata": optional_rule(Optional[Dict[str, Any]]),
    **_unknown("items", "shipping_address", "billing_address", "context", "region_id"),
}

# Shapes differ between admin endpoints, so most entries accept anything.
ADMIN_BODY_VOCABULARY: Dict[str, FieldRule] = {
    **_strings("title", "description", "subtitle", "handle", "status", "sku"),
    **_unknown(
        "options", "variants", "images", "prices", "metadata", "tags", "type"
    ),
    "collection_id": optional_rule(Optional[str]),
    "categories": optional_rule(Optional[Any]),
    "manage_inventory": optional_rule(Optional[bool]),
    "allow_backorder": optional_rule(Optional[bool]),
    **_unknown(
        "weight",
        "length",
        "height",
        "width",
        "hs_code",
        "mid_code",
        "material",
        "origin_country",
        "discountable",
        "is_giftcard",
        "thumbnail",
        "external_id",
    ),
}


STORE_SURFACE = Surface(name="store", body_vocabulary=STORE_BODY_VOCABULARY)

ADMIN_SURFACE = Surface(
    name="admin",
    body_vocabulary=ADMIN_BODY_VOCABULARY,
    tool_prefix="Admin",
    description_prefix="This tool helps store administrators. ",
)
