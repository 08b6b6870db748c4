"""Canonical display rendering of a Broker as JSON text.

Rendering is driven by a field table (output key, attribute, kind) and a
RenderOptions value that carries the formatting rules:
  - money fields: fixed decimal places and rounding mode (2, half-up)
  - collections: keyed by symbol, sorted, and written as `{}` when empty

Money is emitted as a number literal with trailing zeros (`1000.00`), which
json.dumps cannot express, so only keys and strings go through json.dumps.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP
from enum import Enum
from typing import Any

from src.bq_broker.domain.models import Broker, Stock
from src.bq_common.currency import format_currency


class FieldKind(Enum):
    TEXT = "text"
    MONEY = "money"
    COUNT = "count"
    COLLECTION = "collection"


@dataclass(frozen=True)
class FieldSpec:
    key: str
    attr: str
    kind: FieldKind
    item_fields: Sequence["FieldSpec"] = ()


@dataclass(frozen=True)
class RenderOptions:
    places: int = 2
    rounding: str = ROUND_HALF_UP
    empty_collection: str = "{}"
    sort_collections: bool = True


DISPLAY = RenderOptions()

STOCK_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("symbol", "symbol", FieldKind.TEXT),
    FieldSpec("shares", "shares", FieldKind.COUNT),
    FieldSpec("price", "price", FieldKind.MONEY),
    FieldSpec("date", "date", FieldKind.TEXT),
    FieldSpec("total", "total", FieldKind.MONEY),
    FieldSpec("commission", "commission", FieldKind.MONEY),
)

BROKER_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("owner", "owner", FieldKind.TEXT),
    FieldSpec("total", "total", FieldKind.MONEY),
    FieldSpec("loyalty", "loyalty", FieldKind.TEXT),
    FieldSpec("balance", "balance", FieldKind.MONEY),
    FieldSpec("commissions", "commissions", FieldKind.MONEY),
    FieldSpec("free", "free", FieldKind.COUNT),
    FieldSpec("nextCommission", "next_commission", FieldKind.MONEY),
    FieldSpec("sentiment", "sentiment", FieldKind.TEXT),
    FieldSpec("stocks", "stocks", FieldKind.COLLECTION, STOCK_FIELDS),
)


def _render_value(value: Any, spec: FieldSpec, options: RenderOptions) -> str:
    if spec.kind is FieldKind.TEXT:
        return json.dumps(value)
    if spec.kind is FieldKind.MONEY:
        return format_currency(value, options.places, options.rounding)
    if spec.kind is FieldKind.COUNT:
        return str(int(value))
    return render_collection(value, spec.item_fields, options)


def render_record(record: Any, fields: Sequence[FieldSpec], options: RenderOptions = DISPLAY) -> str:
    pairs = (
        f"{json.dumps(spec.key)}: {_render_value(getattr(record, spec.attr), spec, options)}"
        for spec in fields
    )
    return "{" + ", ".join(pairs) + "}"


def render_collection(
    items: dict[str, Any] | None,
    fields: Sequence[FieldSpec],
    options: RenderOptions = DISPLAY,
) -> str:
    """Object keyed by item key; options.empty_collection when there are none (never null)."""
    if not items:
        return options.empty_collection
    keys = sorted(items) if options.sort_collections else list(items)
    pairs = (f"{json.dumps(k)}: {render_record(items[k], fields, options)}" for k in keys)
    return "{" + ", ".join(pairs) + "}"


def render_stocks(stocks: dict[str, Stock] | None, options: RenderOptions = DISPLAY) -> str:
    return render_collection(stocks, STOCK_FIELDS, options)


def render_broker(broker: Broker, options: RenderOptions = DISPLAY) -> str:
    return render_record(broker, BROKER_FIELDS, options)
