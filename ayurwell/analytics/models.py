# -*- coding: utf-8 -*-
"""Analytics: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class DoshaEffect(BaseModel):
    vata: int = 0
    pitta: int = 0
    kapha: int = 0


class FoodItemModel(BaseModel):
    name: str = Field(..., min_length=1)
    dosha: Optional[DoshaEffect] = Field(None, description="signed effect; omit when unknown")


class DoshaBalanceRequest(BaseModel):
    foods: List[FoodItemModel] = Field(default_factory=list)


class DoshaBalanceModel(BaseModel):
    vata: int = Field(0, ge=-100, le=100)
    pitta: int = Field(0, ge=-100, le=100)
    kapha: int = Field(0, ge=-100, le=100)


class DietarySuggestionModel(BaseModel):
    id: str
    title: str
    description: str
    dosha: str
    category: str
    priority: str
    actionable_steps: List[str] = Field(default_factory=list)
    alternatives: List[str] = Field(default_factory=list)


class DoshaBalanceResponse(BaseModel):
    balance: DoshaBalanceModel
    dominant_dosha: Optional[str] = None
    food_count: int = Field(0, ge=0)
    suggestions: List[DietarySuggestionModel] = Field(default_factory=list)


class SuggestionListResponse(BaseModel):
    dosha: str
    count: int
    items: List[DietarySuggestionModel]
