"""
Arrhythmia Classification Rules

Inherited arrhythmia syndromes (LQTS, CPVT, Brugada) are split into a
low- and a high-risk question; the clinician makes that call.
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass, evaluate_guards, guard

ARRHYTHMIA_RULES = [
    guard("IsolatedEctopy", "yes", MWHOClass.I),
    guard("SVTorPacemaker", "yes", MWHOClass.II),
    guard("InheritedLowRisk", "yes", MWHOClass.II_III),
    guard("InheritedHighRisk", "yes", MWHOClass.III),
    guard("SustainedVT", "yes", MWHOClass.III),
]


def classify_arrhythmia(answers: Mapping[str, str]) -> ClassificationResult:
    return evaluate_guards(answers, ARRHYTHMIA_RULES)
