# -*- coding: utf-8 -*-
"""Prakriti: API endpoints (questionnaire, classification, assessments)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from .classifier import ClassificationResult, InvalidInput, default_classifier
from .models import (
    AnswerOptionModel,
    AssessmentListItem,
    AssessmentListResponse,
    AssessmentResponse,
    ClassificationModel,
    ClassifyRequest,
    ClassifyResponse,
    DimensionModel,
    DoshaScoreModel,
    QuestionnaireResponse,
)
from .storage import get_assessment, get_latest_assessment, list_assessments, save_assessment
from .tables import DIMENSIONS, Dosha

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Prakriti"])


def _warnings(unmatched: List[str]) -> List[str]:
    return [f"Unrecognized answer for '{name}' was ignored" for name in unmatched]


def _run_classifier(answers: Dict[str, Any]) -> ClassificationResult:
    try:
        result = default_classifier.classify(answers)
    except InvalidInput as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if result.unmatched:
        logger.warning("Ignoring unrecognized prakriti answers for: %s", ", ".join(result.unmatched))
    return result


def _classification_from_record(record: Dict[str, Any]) -> ClassificationModel:
    primary = Dosha(record["primary_dosha"])
    return ClassificationModel(
        primary_dosha=primary.value,
        secondary_dosha=record["secondary_dosha"],
        scores=DoshaScoreModel.model_validate(record["scores"]),
        **default_classifier.texts_for(primary),
    )


def _assessment_response(record: Dict[str, Any]) -> AssessmentResponse:
    return AssessmentResponse(
        id=record["id"],
        user_id=record["user_id"],
        created_at=record["created_at"],
        answers=record["answers"],
        result=_classification_from_record(record),
        unmatched=record["unmatched"],
        warnings=_warnings(record["unmatched"]),
    )


@router.get("/prakriti/questionnaire", response_model=QuestionnaireResponse, summary="Prakriti questionnaire catalogue")
def questionnaire():
    dims = [
        DimensionModel(
            name=d.name,
            label=d.label,
            options=[AnswerOptionModel(key=o.key, label=o.label, leaning=o.leaning.value) for o in d.options],
        )
        for d in DIMENSIONS
    ]
    return QuestionnaireResponse(count=len(dims), dimensions=dims)


@router.post("/prakriti/classify", response_model=ClassifyResponse, summary="Classify answers without saving")
def classify_answers(request: ClassifyRequest):
    result = _run_classifier(request.answers)
    return ClassifyResponse(
        result=ClassificationModel.from_result(result),
        unmatched=list(result.unmatched),
        warnings=_warnings(list(result.unmatched)),
    )


@router.post(
    "/users/{user_id}/prakriti-assessments",
    response_model=AssessmentResponse,
    summary="Classify and store a prakriti assessment",
)
def create_assessment(user_id: str, request: ClassifyRequest):
    result = _run_classifier(request.answers)
    record = save_assessment(user_id=user_id, answers=request.answers, result=result)
    logger.info(
        "Stored prakriti assessment %s for user %s (primary=%s)",
        record["id"],
        user_id,
        record["primary_dosha"],
    )
    return _assessment_response(record)


@router.get(
    "/users/{user_id}/prakriti-assessments",
    response_model=AssessmentListResponse,
    summary="List a user's prakriti assessments (newest first)",
)
def list_user_assessments(user_id: str):
    items = [
        AssessmentListItem(
            id=r["id"],
            user_id=r["user_id"],
            created_at=r["created_at"],
            primary_dosha=r["primary_dosha"],
            secondary_dosha=r["secondary_dosha"],
            scores=DoshaScoreModel.model_validate(r["scores"]),
        )
        for r in list_assessments(user_id=user_id)
    ]
    return AssessmentListResponse(count=len(items), items=items)


@router.get("/users/{user_id}/dosha-profile", response_model=AssessmentResponse, summary="Latest prakriti assessment")
def dosha_profile(user_id: str):
    record = get_latest_assessment(user_id=user_id)
    if not record:
        raise HTTPException(status_code=404, detail="No prakriti assessment for user")
    return _assessment_response(record)


@router.get("/prakriti/assessments/{assessment_id}", response_model=AssessmentResponse, summary="Fetch one assessment")
def fetch_assessment(assessment_id: str):
    record = get_assessment(assessment_id)
    if not record:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return _assessment_response(record)
