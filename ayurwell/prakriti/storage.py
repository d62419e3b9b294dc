# -*- coding: utf-8 -*-
"""Prakriti assessments: DB storage helpers."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from .classifier import ClassificationResult

_COLUMNS = "id, user_id, answers_json, primary_dosha, secondary_dosha, scores_json, unmatched_json, created_at"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_record(row: Any) -> Dict[str, Any]:
    data = dict(row)
    return {
        "id": data["id"],
        "user_id": data["user_id"],
        "answers": json.loads(data["answers_json"] or "{}"),
        "primary_dosha": data["primary_dosha"],
        "secondary_dosha": data["secondary_dosha"],
        "scores": json.loads(data["scores_json"] or "{}"),
        "unmatched": json.loads(data["unmatched_json"] or "[]"),
        "created_at": data["created_at"],
    }


def save_assessment(
    *,
    user_id: str,
    answers: Mapping[str, Optional[str]],
    result: ClassificationResult,
) -> Dict[str, Any]:
    assessment_id = str(uuid4())
    now = _utc_now()
    record = {
        "id": assessment_id,
        "user_id": user_id,
        "answers": dict(answers),
        "primary_dosha": result.primary_dosha.value,
        "secondary_dosha": result.secondary_dosha.value,
        "scores": result.scores.as_dict(),
        "unmatched": list(result.unmatched),
        "created_at": now,
    }
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"""
            INSERT INTO prakriti_assessments ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                assessment_id,
                user_id,
                json.dumps(record["answers"], ensure_ascii=False),
                record["primary_dosha"],
                record["secondary_dosha"],
                json.dumps(record["scores"]),
                json.dumps(record["unmatched"], ensure_ascii=False),
                now,
            ),
        )
    return record


def list_assessments(*, user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            f"""
            SELECT {_COLUMNS}
            FROM prakriti_assessments
            WHERE user_id = ?
            ORDER BY created_at DESC, rowid DESC
            """,
            (user_id,),
        ).fetchall()
        return [_row_to_record(r) for r in rows]


def get_latest_assessment(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            f"""
            SELECT {_COLUMNS}
            FROM prakriti_assessments
            WHERE user_id = ?
            ORDER BY created_at DESC, rowid DESC
            LIMIT 1
            """,
            (user_id,),
        ).fetchone()
        return _row_to_record(row) if row else None


def get_assessment(assessment_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM prakriti_assessments WHERE id = ?",
            (assessment_id,),
        ).fetchone()
        return _row_to_record(row) if row else None
