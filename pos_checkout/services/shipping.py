"""
Shipping cost and shipment notice.

Everything here is a pure function of its arguments so the notice can be
built and tested without running a checkout.
"""

import math
from typing import Mapping, Optional, Sequence

from ..core.config import Settings, get_settings
from ..models.checkout import ShippingNotice, ShippingNoticeLine
from ..models.item import ShippingUnit


def shipping_cost(total_weight: float, settings: Optional[Settings] = None) -> float:
    """
    Price a package by weight.

    Every started increment (100 g by default) costs the configured rate,
    so partial increments always round up: 0.35 kg -> 4 increments -> 12.

    Args:
        total_weight: Package weight in kg
        settings: Shipping rate configuration, defaults to the app settings

    Returns:
        Shipping cost in currency units
    """
    settings = settings or get_settings()
    increments = total_weight * 1000 / settings.shipping_increment_grams
    # ceil(weight * 10) at the default 100 g; float noise (0.1 + 0.2 kg) is dropped first
    return math.ceil(round(increments, 9)) * settings.shipping_rate_per_increment


def build_shipping_notice(
    units: Sequence[ShippingUnit],
    counts: Mapping[str, int],
) -> ShippingNotice:
    """
    Build the manifest for an order's shippable units.

    Args:
        units: One entry per physical unit, items possibly repeated
        counts: Ordered quantity per item name

    Returns:
        Notice listing each distinct item once (first-seen order) with its
        count, every unit's weight, and the summed weight
    """
    if not units:
        raise ValueError("Shipping notice requires at least one shippable unit")

    lines: list[ShippingNoticeLine] = []
    seen: set[str] = set()
    for unit in units:
        if unit.name in seen:
            continue
        seen.add(unit.name)
        lines.append(ShippingNoticeLine(item_name=unit.name, count=counts[unit.name]))

    unit_weights = [unit.weight for unit in units]
    return ShippingNotice(
        lines=lines,
        unit_weights=unit_weights,
        total_weight=sum(unit_weights),
    )


def render_shipping_notice(notice: ShippingNotice) -> str:
    output = ["** Shipment notice **"]
    output.extend(f"{line.count}x {line.item_name}" for line in notice.lines)
    output.extend(f"{weight * 1000:.0f}g" for weight in notice.unit_weights)
    output.append(f"Total package weight {notice.total_weight:.1f}kg")
    return "\n".join(output)
