# -*- coding: utf-8 -*-
"""Prakriti: Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .classifier import ClassificationResult


class DoshaScoreModel(BaseModel):
    vata: int = Field(0, ge=0, le=100)
    pitta: int = Field(0, ge=0, le=100)
    kapha: int = Field(0, ge=0, le=100)


class AnswerOptionModel(BaseModel):
    key: str
    label: str
    leaning: str = Field(..., description="vata | pitta | kapha")


class DimensionModel(BaseModel):
    name: str
    label: str
    options: List[AnswerOptionModel]


class QuestionnaireResponse(BaseModel):
    count: int
    dimensions: List[DimensionModel]


class ClassifyRequest(BaseModel):
    answers: Dict[str, Optional[str]] = Field(..., description="dimension name -> answer key")


class ClassificationModel(BaseModel):
    primary_dosha: str
    secondary_dosha: str
    scores: DoshaScoreModel
    characteristics: List[str]
    recommendations: List[str]
    feeding_habits: List[str]

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassificationModel":
        return cls(
            primary_dosha=result.primary_dosha.value,
            secondary_dosha=result.secondary_dosha.value,
            scores=DoshaScoreModel(**result.scores.as_dict()),
            characteristics=list(result.characteristics),
            recommendations=list(result.recommendations),
            feeding_habits=list(result.feeding_habits),
        )


class ClassifyResponse(BaseModel):
    result: ClassificationModel
    unmatched: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class AssessmentResponse(BaseModel):
    id: str
    user_id: str
    created_at: str
    answers: Dict[str, Optional[str]]
    result: ClassificationModel
    unmatched: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class AssessmentListItem(BaseModel):
    id: str
    user_id: str
    created_at: str
    primary_dosha: str
    secondary_dosha: str
    scores: DoshaScoreModel


class AssessmentListResponse(BaseModel):
    count: int
    items: List[AssessmentListItem]
