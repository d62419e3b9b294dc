# -*- coding: utf-8 -*-
"""Dosha analytics (food dosha balance and dietary suggestions)."""

from .balance import (
    DietarySuggestion,
    DoshaBalance,
    FoodItem,
    calculate_dosha_balance,
    dominant_dosha,
    suggest_for_balance,
    suggestions_for,
)

__all__ = [
    "DietarySuggestion",
    "DoshaBalance",
    "FoodItem",
    "calculate_dosha_balance",
    "dominant_dosha",
    "suggest_for_balance",
    "suggestions_for",
]
