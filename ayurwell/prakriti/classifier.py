# -*- coding: utf-8 -*-
"""
Prakriti classifier

Maps questionnaire answers to a normalized vata/pitta/kapha score and the
primary/secondary dosha. Pure: the classifier only reads the tables it was
constructed with and allocates a fresh result per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from .tables import (
    DOSHA_CHARACTERISTICS,
    DOSHA_FEEDING_HABITS,
    DOSHA_PRIORITY,
    DOSHA_RECOMMENDATIONS,
    DOSHA_VECTORS,
    Dosha,
    DoshaVector,
)


class InvalidInput(ValueError):
    """Answers carry no usable vote (empty mapping or nothing matched)."""


@dataclass(frozen=True)
class DoshaScore:
    """Per-axis percentage, each rounded independently (sum may be 100 +/- 2)."""
    vata: int
    pitta: int
    kapha: int

    def get(self, dosha: Dosha) -> int:
        return getattr(self, dosha.value)

    def as_dict(self) -> dict:
        return {"vata": self.vata, "pitta": self.pitta, "kapha": self.kapha}


@dataclass(frozen=True)
class ClassificationResult:
    """Classifier output"""
    primary_dosha: Dosha
    secondary_dosha: Dosha
    scores: DoshaScore
    raw: DoshaVector
    characteristics: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    feeding_habits: Tuple[str, ...]
    # Dimensions whose non-blank answer is not a known key
    unmatched: Tuple[str, ...] = field(default_factory=tuple)


def percent_half_up(part: int, total: int) -> int:
    """
    ``part / total * 100`` rounded to the nearest int, ties toward +infinity.

    Computed in integers, so exact halves (1/8 -> 12.5 -> 13) are exact.
    ``total`` must be positive.
    """
    return (200 * part + total) // (2 * total)


def rank_doshas(values: Mapping[Dosha, int]) -> List[Dosha]:
    """Doshas ordered by value descending; equal values keep vata > pitta > kapha."""
    return sorted(DOSHA_PRIORITY, key=lambda d: (-values[d], DOSHA_PRIORITY.index(d)))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class DoshaClassifier:
    """
    Prakriti classifier

    Lookup tables are constructor arguments; the defaults are the module
    constants in ``tables``. Vectors must be non-negative.
    """

    def __init__(
        self,
        vectors: Mapping[str, DoshaVector] = DOSHA_VECTORS,
        characteristics: Mapping[Dosha, Tuple[str, ...]] = DOSHA_CHARACTERISTICS,
        recommendations: Mapping[Dosha, Tuple[str, ...]] = DOSHA_RECOMMENDATIONS,
        feeding_habits: Mapping[Dosha, Tuple[str, ...]] = DOSHA_FEEDING_HABITS,
    ):
        for key, vec in vectors.items():
            if min(vec.vata, vec.pitta, vec.kapha) < 0:
                raise ValueError(f"dosha vector for {key!r} has a negative component")
        for name, table in (
            ("characteristics", characteristics),
            ("recommendations", recommendations),
            ("feeding_habits", feeding_habits),
        ):
            missing = [d.value for d in Dosha if not table.get(d)]
            if missing:
                raise ValueError(f"{name} table has no text for: {', '.join(missing)}")
        self._vectors = vectors
        self._characteristics = characteristics
        self._recommendations = recommendations
        self._feeding_habits = feeding_habits

    def lookup(self, answer: Any) -> Optional[DoshaVector]:
        if not isinstance(answer, str):
            return None
        return self._vectors.get(answer)

    def accumulate(self, answers: Mapping[str, Any]) -> Tuple[DoshaVector, Tuple[str, ...]]:
        """Sum the vectors of known answers; return the total and unmatched dimensions."""
        acc = DoshaVector()
        unmatched: List[str] = []
        for dimension, answer in answers.items():
            if _is_blank(answer):
                continue
            vec = self.lookup(answer)
            if vec is None:
                unmatched.append(str(dimension))
                continue
            acc = acc + vec
        return acc, tuple(unmatched)

    def classify(self, answers: Mapping[str, Any]) -> ClassificationResult:
        """
        Classify a completed questionnaire.

        Args:
            answers: dimension name -> answer key

        Raises:
            InvalidInput: ``answers`` is empty or no answer matched a known key.
        """
        if not answers:
            raise InvalidInput("answers must not be empty")

        raw, unmatched = self.accumulate(answers)
        total = raw.total
        if total == 0:
            raise InvalidInput("no answer matched a known prakriti option")

        scores = DoshaScore(
            vata=percent_half_up(raw.vata, total),
            pitta=percent_half_up(raw.pitta, total),
            kapha=percent_half_up(raw.kapha, total),
        )
        ranked = rank_doshas({d: scores.get(d) for d in Dosha})
        primary, secondary = ranked[0], ranked[1]

        return ClassificationResult(
            primary_dosha=primary,
            secondary_dosha=secondary,
            scores=scores,
            raw=raw,
            characteristics=tuple(self._characteristics[primary]),
            recommendations=tuple(self._recommendations[primary]),
            feeding_habits=tuple(self._feeding_habits[primary]),
            unmatched=unmatched,
        )

    def texts_for(self, dosha: Dosha) -> dict:
        return {
            "characteristics": list(self._characteristics[dosha]),
            "recommendations": list(self._recommendations[dosha]),
            "feeding_habits": list(self._feeding_habits[dosha]),
        }


default_classifier = DoshaClassifier()


def classify(answers: Mapping[str, Any]) -> ClassificationResult:
    """Classify with the built-in questionnaire tables."""
    return default_classifier.classify(answers)
