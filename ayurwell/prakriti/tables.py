# -*- coding: utf-8 -*-
"""
Prakriti questionnaire tables

Static lookup data shared by the classifier and the questionnaire endpoint:
per-answer dosha vectors, the dimension catalogue and the text attached to
each primary dosha. Everything here is read-only after import.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Dosha(Enum):
    """Constitutional axes, in tie-break priority order."""
    VATA = "vata"
    PITTA = "pitta"
    KAPHA = "kapha"


# Declaration order of the enum doubles as the tie-break order.
DOSHA_PRIORITY: Tuple[Dosha, ...] = tuple(Dosha)


@dataclass(frozen=True)
class DoshaVector:
    """Weight one answer contributes to each axis."""
    vata: int = 0
    pitta: int = 0
    kapha: int = 0

    def __add__(self, other: "DoshaVector") -> "DoshaVector":
        return DoshaVector(
            vata=self.vata + other.vata,
            pitta=self.pitta + other.pitta,
            kapha=self.kapha + other.kapha,
        )

    def get(self, dosha: Dosha) -> int:
        return getattr(self, dosha.value)

    @property
    def total(self) -> int:
        return self.vata + self.pitta + self.kapha


@dataclass(frozen=True)
class AnswerOption:
    key: str
    label: str
    leaning: Dosha


@dataclass(frozen=True)
class Dimension:
    name: str
    label: str
    options: Tuple[AnswerOption, ...]


def _v(vata: int = 0, pitta: int = 0, kapha: int = 0) -> DoshaVector:
    return DoshaVector(vata=vata, pitta=pitta, kapha=kapha)


DOSHA_VECTORS: Mapping[str, DoshaVector] = MappingProxyType({
    # body frame
    "lightSlim": _v(vata=3),
    "mediumMusclular": _v(pitta=3),
    "heavyRobust": _v(kapha=3),
    # skin
    "drySensitive": _v(vata=2, pitta=1),
    "fairReddish": _v(pitta=3),
    "paleWhitish": _v(kapha=2),
    # hair
    "thinDryWiry": _v(vata=3),
    "fairFineStraight": _v(pitta=3),
    "thickCurlyOily": _v(kapha=3),
    # appetite
    "variableIrregular": _v(vata=3),
    "sharpIncreased": _v(pitta=3),
    "lowOozing": _v(kapha=3),
    # digestion
    "delicateIrregular": _v(vata=3),
    "efficient": _v(pitta=3),
    "slowGravy": _v(kapha=3),
    # sleep
    "lightRestless": _v(vata=3),
    "fitfulInterrupted": _v(pitta=3),
    "heavyHeavy": _v(kapha=3),
    # muscle tone
    "poorlyDefined": _v(vata=3),
    "mediumDefined": _v(pitta=3),
    "largeWellDefined": _v(kapha=3),
    # mind
    "quickChanging": _v(vata=3),
    "focusedIntense": _v(pitta=3),
    "calm": _v(kapha=3),
    # stress response
    "anxiousNervous": _v(vata=3),
    "irritableImpatient": _v(pitta=3),
    "stable": _v(kapha=3),
    # weather aversion
    "coldWind": _v(vata=3),
    "hotSun": _v(pitta=3),
    "coldDamp": _v(kapha=3),
    # activity
    "irregularsporadic": _v(vata=3),
    "moderate": _v(pitta=3),
    "minimalsedentary": _v(kapha=3),
    # flexibility
    "looseflexible": _v(vata=3),
    "moderate_flex": _v(pitta=3),
    "stiffrigid": _v(kapha=3),
})


def _dim(name: str, label: str, *options: Tuple[str, str, Dosha]) -> Dimension:
    return Dimension(
        name=name,
        label=label,
        options=tuple(AnswerOption(key=k, label=l, leaning=d) for k, l, d in options),
    )


DIMENSIONS: Tuple[Dimension, ...] = (
    _dim(
        "body_frame", "Body Frame",
        ("lightSlim", "Light and slim", Dosha.VATA),
        ("mediumMusclular", "Medium and muscular", Dosha.PITTA),
        ("heavyRobust", "Heavy and robust", Dosha.KAPHA),
    ),
    _dim(
        "skin_type", "Skin Type",
        ("drySensitive", "Dry and sensitive", Dosha.VATA),
        ("fairReddish", "Fair or reddish", Dosha.PITTA),
        ("paleWhitish", "Pale or whitish", Dosha.KAPHA),
    ),
    _dim(
        "hair_type", "Hair Type",
        ("thinDryWiry", "Thin, dry, wiry", Dosha.VATA),
        ("fairFineStraight", "Fine and straight", Dosha.PITTA),
        ("thickCurlyOily", "Thick, curly, oily", Dosha.KAPHA),
    ),
    _dim(
        "appetite", "Appetite",
        ("variableIrregular", "Variable, irregular", Dosha.VATA),
        ("sharpIncreased", "Sharp, strong", Dosha.PITTA),
        ("lowOozing", "Low but steady", Dosha.KAPHA),
    ),
    _dim(
        "digestion", "Digestion",
        ("delicateIrregular", "Delicate, irregular", Dosha.VATA),
        ("efficient", "Quick and efficient", Dosha.PITTA),
        ("slowGravy", "Slow, heavy", Dosha.KAPHA),
    ),
    _dim(
        "sleep_pattern", "Sleep Pattern",
        ("lightRestless", "Light and restless", Dosha.VATA),
        ("fitfulInterrupted", "Moderate, sometimes interrupted", Dosha.PITTA),
        ("heavyHeavy", "Deep and long", Dosha.KAPHA),
    ),
    _dim(
        "muscle_tone", "Muscle Tone",
        ("poorlyDefined", "Poorly defined", Dosha.VATA),
        ("mediumDefined", "Medium, defined", Dosha.PITTA),
        ("largeWellDefined", "Large, well defined", Dosha.KAPHA),
    ),
    _dim(
        "mental_nature", "Mental Nature",
        ("quickChanging", "Quick, changing", Dosha.VATA),
        ("focusedIntense", "Focused, intense", Dosha.PITTA),
        ("calm", "Calm, steady", Dosha.KAPHA),
    ),
    _dim(
        "stress_response", "Response to Stress",
        ("anxiousNervous", "Anxious, nervous", Dosha.VATA),
        ("irritableImpatient", "Irritable, impatient", Dosha.PITTA),
        ("stable", "Stable, withdrawn", Dosha.KAPHA),
    ),
    _dim(
        "weather_preference", "Weather Aversion",
        ("coldWind", "Cold and wind", Dosha.VATA),
        ("hotSun", "Heat and sun", Dosha.PITTA),
        ("coldDamp", "Cold and damp", Dosha.KAPHA),
    ),
    _dim(
        "activity_level", "Activity Level",
        ("irregularsporadic", "Irregular, sporadic", Dosha.VATA),
        ("moderate", "Moderate, regular", Dosha.PITTA),
        ("minimalsedentary", "Minimal, sedentary", Dosha.KAPHA),
    ),
    _dim(
        "flexibility", "Flexibility",
        ("looseflexible", "Loose, very flexible", Dosha.VATA),
        ("moderate_flex", "Moderately flexible", Dosha.PITTA),
        ("stiffrigid", "Stiff, rigid", Dosha.KAPHA),
    ),
)


DOSHA_CHARACTERISTICS: Mapping[Dosha, Tuple[str, ...]] = MappingProxyType({
    Dosha.VATA: (
        "Creative and imaginative",
        "Quick thinking and learning",
        "Tendency toward anxiety",
        "Active and energetic",
        "Enjoys variety and change",
        "Prone to dry skin and hair",
        "Light sleeper",
        "Irregular eating patterns",
        "Quick to react",
        "Excellent at communication",
    ),
    Dosha.PITTA: (
        "Sharp intellect and focus",
        "Strong digestion and metabolism",
        "Leadership qualities",
        "Perfectionistic tendencies",
        "Tendency toward irritability",
        "Ambitious and driven",
        "Good complexion",
        "Sensitive to heat",
        "Strong willpower",
        "Enjoys challenges",
    ),
    Dosha.KAPHA: (
        "Calm and stable nature",
        "Strong immune system",
        "Good memory",
        "Loving and compassionate",
        "Slow to anger",
        "Tendency toward heaviness",
        "Oily and smooth skin",
        "Sound sleeper",
        "Strong physical frame",
        "Steady and reliable",
    ),
})

DOSHA_RECOMMENDATIONS: Mapping[Dosha, Tuple[str, ...]] = MappingProxyType({
    Dosha.VATA: (
        "Establish regular meal times",
        "Eat warm, nourishing foods",
        "Include more healthy fats and oils",
        "Avoid excessive raw foods",
        "Practice grounding activities like yoga and meditation",
        "Ensure adequate rest and sleep",
        "Stay warm during cold seasons",
    ),
    Dosha.PITTA: (
        "Cool foods and drinks recommended",
        "Avoid very spicy foods",
        "Include bitter and sweet tastes",
        "Practice calming activities",
        "Take breaks from intense activities",
        "Avoid excessive heat exposure",
        "Balance work with relaxation",
    ),
    Dosha.KAPHA: (
        "Stimulating and warming foods",
        "Regular physical exercise",
        "Avoid heavy and oily foods",
        "Eat lighter portions",
        "Vary your routine regularly",
        "Include spices in meals",
        "Stay mentally stimulated",
    ),
})

DOSHA_FEEDING_HABITS: Mapping[Dosha, Tuple[str, ...]] = MappingProxyType({
    Dosha.VATA: (
        "Eat at regular times to balance irregular digestion",
        "Warm liquids improve nutrient absorption",
        "Sesame oil and ghee are beneficial",
        "Slow, mindful eating promotes better digestion",
        "Avoid eating on the run or standing",
    ),
    Dosha.PITTA: (
        "Eat moderate portions at moderate temperatures",
        "Cooling herbs like cilantro and mint are beneficial",
        "Coconut oil supports digestion",
        "Avoid excessive salt and fried foods",
        "Take breaks between intense activities and meals",
    ),
    Dosha.KAPHA: (
        "Lighter meals and smaller portions recommended",
        "Stimulating spices aid digestion",
        "Mustard oil and other warming oils beneficial",
        "Regular exercise improves digestion",
        "Variety in foods prevents boredom and stagnation",
    ),
})
