"""
Congenital Heart Disease Classification Rules
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass, evaluate_guards, guard

CONGENITAL_RULES = [
    # Repaired / simple lesions
    guard("SimpleRepaired", "yes", MWHOClass.I),
    guard("ASDVSDunoperated", "yes", MWHOClass.II),
    guard("ToFgood", "yes", MWHOClass.II),
    guard("TGAarterialSwitchGood", "yes", MWHOClass.II),
    guard("AVSDrepairedGood", "yes", MWHOClass.II_III),
    # Ebstein anomaly
    guard("Ebstein", "uncomplicated", MWHOClass.II_III),
    guard("Ebstein", "complicated", MWHOClass.III),
    # Systemic right ventricle
    guard("SystemicRV", "good/mildly↓", MWHOClass.III),
    guard("SystemicRV", "moderate/severely↓", MWHOClass.IV),
    # Fontan circulation
    guard("Fontan", "uncomplicated", MWHOClass.III),
    guard("Fontan", "complicated", MWHOClass.IV),
    # Cyanotic disease
    guard("Cyanotic", "unrepaired-non-eisenmenger", MWHOClass.III),
    guard("Cyanotic", "eisenmenger", MWHOClass.IV),
]


def classify_congenital(answers: Mapping[str, str]) -> ClassificationResult:
    return evaluate_guards(answers, CONGENITAL_RULES)
