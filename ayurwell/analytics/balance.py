# -*- coding: utf-8 -*-
"""
Food dosha balance

Aggregates the dosha effect of logged foods into a percentage balance and
maps an elevated dosha to dietary suggestions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..prakriti.classifier import percent_half_up, rank_doshas
from ..prakriti.tables import Dosha, DoshaVector


@dataclass
class FoodItem:
    """A logged food; ``effect`` is signed (negative pacifies a dosha)."""
    name: str
    effect: Optional[DoshaVector] = None


@dataclass(frozen=True)
class DoshaBalance:
    """Signed percentage share per dosha"""
    vata: int = 0
    pitta: int = 0
    kapha: int = 0

    def get(self, dosha: Dosha) -> int:
        return getattr(self, dosha.value)


@dataclass(frozen=True)
class DietarySuggestion:
    id: str
    title: str
    description: str
    dosha: Dosha
    category: str  # food | lifestyle
    priority: str  # high | medium | low
    actionable_steps: Tuple[str, ...] = field(default_factory=tuple)
    alternatives: Tuple[str, ...] = field(default_factory=tuple)


_PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

SUGGESTIONS: Tuple[DietarySuggestion, ...] = (
    DietarySuggestion(
        id="vata-warm-meals",
        title="Favor Warm, Grounding Meals",
        description="Your Vata is elevated. Choose warm, moist and lightly oily foods.",
        dosha=Dosha.VATA,
        category="food",
        priority="high",
        actionable_steps=("Have soups and stews", "Cook vegetables with ghee"),
        alternatives=("Warm milk with spices", "Soaked nuts"),
    ),
    DietarySuggestion(
        id="vata-regular-times",
        title="Keep Regular Meal Times",
        description="Irregular eating aggravates Vata. Eat at the same times each day.",
        dosha=Dosha.VATA,
        category="lifestyle",
        priority="medium",
        actionable_steps=("Set fixed times for breakfast, lunch and dinner",),
        alternatives=("Small warm snacks between meals",),
    ),
    DietarySuggestion(
        id="pitta-cooling-foods",
        title="Increase Cooling Foods",
        description="Your Pitta is elevated. Include more cooling foods.",
        dosha=Dosha.PITTA,
        category="food",
        priority="high",
        actionable_steps=("Add more salads", "Use coconut oil"),
        alternatives=("Cooling herbs", "Water-rich fruits"),
    ),
    DietarySuggestion(
        id="pitta-less-spice",
        title="Reduce Spicy and Fried Foods",
        description="Hot, sour and fried foods feed Pitta. Balance them with sweet and bitter tastes.",
        dosha=Dosha.PITTA,
        category="food",
        priority="medium",
        actionable_steps=("Swap chillies for coriander and fennel", "Limit fried snacks"),
        alternatives=("Cucumber raita", "Steamed greens"),
    ),
    DietarySuggestion(
        id="kapha-light-meals",
        title="Choose Lighter, Spiced Meals",
        description="Your Kapha is elevated. Prefer light, warm and well-spiced food.",
        dosha=Dosha.KAPHA,
        category="food",
        priority="high",
        actionable_steps=("Use ginger and black pepper", "Eat smaller portions at dinner"),
        alternatives=("Steamed vegetables", "Lentil soup"),
    ),
    DietarySuggestion(
        id="kapha-move-more",
        title="Add Daily Movement",
        description="Heavy, sedentary days build Kapha. Move after meals.",
        dosha=Dosha.KAPHA,
        category="lifestyle",
        priority="medium",
        actionable_steps=("Walk for 15 minutes after lunch",),
        alternatives=("Brisk yoga flow",),
    ),
)


def calculate_dosha_balance(foods: Iterable[FoodItem]) -> DoshaBalance:
    """
    Sum food effects and express each axis as a share of the absolute total.

    Foods without an effect are skipped. With nothing to sum the balance is
    all zeros rather than an error: an empty food log is a valid day.
    """
    acc = DoshaVector()
    for food in foods:
        if food.effect is not None:
            acc = acc + food.effect

    total = abs(acc.vata) + abs(acc.pitta) + abs(acc.kapha)
    if total == 0:
        return DoshaBalance()
    return DoshaBalance(
        vata=percent_half_up(acc.vata, total),
        pitta=percent_half_up(acc.pitta, total),
        kapha=percent_half_up(acc.kapha, total),
    )


def dominant_dosha(balance: DoshaBalance) -> Optional[Dosha]:
    top = rank_doshas({d: balance.get(d) for d in Dosha})[0]
    if balance.get(top) <= 0:
        return None
    return top


def suggestions_for(dosha: Dosha, priority: Optional[str] = None) -> List[DietarySuggestion]:
    items = [s for s in SUGGESTIONS if s.dosha == dosha]
    if priority:
        items = [s for s in items if s.priority == priority]
    return sorted(items, key=lambda s: _PRIORITY_ORDER.get(s.priority, len(_PRIORITY_ORDER)))


def suggest_for_balance(balance: DoshaBalance, *, threshold: int) -> List[DietarySuggestion]:
    """Suggestions for the dominant dosha once its share reaches ``threshold`` percent."""
    dosha = dominant_dosha(balance)
    if dosha is None or balance.get(dosha) < threshold:
        return []
    return suggestions_for(dosha)
