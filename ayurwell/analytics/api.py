# -*- coding: utf-8 -*-
"""Analytics: API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ..config import settings
from ..prakriti.tables import Dosha, DoshaVector
from .balance import (
    DietarySuggestion,
    FoodItem,
    calculate_dosha_balance,
    dominant_dosha,
    suggest_for_balance,
    suggestions_for,
)
from .models import (
    DietarySuggestionModel,
    DoshaBalanceModel,
    DoshaBalanceRequest,
    DoshaBalanceResponse,
    SuggestionListResponse,
)

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


def _suggestion_models(items: List[DietarySuggestion]) -> List[DietarySuggestionModel]:
    return [
        DietarySuggestionModel(
            id=s.id,
            title=s.title,
            description=s.description,
            dosha=s.dosha.value,
            category=s.category,
            priority=s.priority,
            actionable_steps=list(s.actionable_steps),
            alternatives=list(s.alternatives),
        )
        for s in items
    ]


@router.post("/dosha-balance", response_model=DoshaBalanceResponse, summary="Dosha balance of logged foods")
def dosha_balance(request: DoshaBalanceRequest):
    foods = [
        FoodItem(
            name=f.name,
            effect=DoshaVector(vata=f.dosha.vata, pitta=f.dosha.pitta, kapha=f.dosha.kapha) if f.dosha else None,
        )
        for f in request.foods
    ]
    balance = calculate_dosha_balance(foods)
    dominant = dominant_dosha(balance)
    suggestions = suggest_for_balance(balance, threshold=settings.elevated_dosha_pct)
    return DoshaBalanceResponse(
        balance=DoshaBalanceModel(vata=balance.vata, pitta=balance.pitta, kapha=balance.kapha),
        dominant_dosha=dominant.value if dominant else None,
        food_count=len(foods),
        suggestions=_suggestion_models(suggestions),
    )


@router.get("/suggestions/{dosha}", response_model=SuggestionListResponse, summary="Dietary suggestions for a dosha")
def dosha_suggestions(
    dosha: str,
    priority: Optional[str] = Query(default=None, pattern="^(high|medium|low)$"),
):
    try:
        key = Dosha(dosha.lower().strip())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown dosha: {dosha}")
    items = _suggestion_models(suggestions_for(key, priority=priority))
    return SuggestionListResponse(dosha=key.value, count=len(items), items=items)
