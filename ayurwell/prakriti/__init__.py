# -*- coding: utf-8 -*-
"""
Prakriti assessment module

Questionnaire-based vata/pitta/kapha classification plus assessment storage.
"""

from .classifier import ClassificationResult, DoshaClassifier, DoshaScore, InvalidInput, classify
from .tables import DIMENSIONS, DOSHA_VECTORS, Dosha, DoshaVector

__all__ = [
    'ClassificationResult',
    'DoshaClassifier',
    'DoshaScore',
    'InvalidInput',
    'classify',
    'DIMENSIONS',
    'DOSHA_VECTORS',
    'Dosha',
    'DoshaVector',
]
