"""
Cardiomyopathy Classification Rules

Covers hypertrophic (HCM), dilated / non-dilated LV (DCM/NDLVC) and
arrhythmogenic right ventricular (ARVC) cardiomyopathy.  Every guard is
independent; when several apply the highest class wins.
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass, evaluate_guards, guard

CARDIOMYOPATHY_RULES = [
    # HCM
    guard("HCMgenoPheno", "+/−", MWHOClass.I),
    guard("HCMcomp", "arrhythmic/moderate-hemodynamic", MWHOClass.III),
    guard("HCMcomp", "severe-LVOT>=50-or-EF<50%", MWHOClass.IV),
    # DCM / NDLVC
    guard("DCM_EF", ">45%", MWHOClass.II_III),
    guard("DCM_EF", "30–45%", MWHOClass.III),
    guard("DCM_EF", "<30%/NYHAIII-IV", MWHOClass.IV),
    # ARVC
    guard("ARVC", "low-risk", MWHOClass.II_III),
    guard("ARVC", "moderate/severe", MWHOClass.III),
]


def classify_cardiomyopathy(answers: Mapping[str, str]) -> ClassificationResult:
    return evaluate_guards(answers, CARDIOMYOPATHY_RULES)
