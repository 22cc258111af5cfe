"""
Ventricular / Pulmonary Hypertension / PPCM Classification Rules

Unlike the other groups this one is a strict decision tree: pulmonary
arterial hypertension or severe LV dysfunction yields mWHO IV
immediately, and weaker signals further down are never consulted.

Decision order:
    1. PAH                           → IV (+ note)
    2. LVEF < 30 % or NYHA III/IV    → IV
    3. LVEF 30–45 %                  → III
    4. LVEF > 45 %
         significant RV impairment   → II–III
         PPCM, > mild residual       → IV (+ note)
         PPCM, ≤ mild residual       → III (+ note)
         otherwise                   → II–III
    5. anything else                 → no class
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass

NOTE_PAH = "Pulmonary arterial hypertension"
NOTE_PPCM_SEVERE = "PPCM with > mild residual LV impairment"
NOTE_PPCM_MILD = "PPCM with ≤ mild residual LV impairment"


def classify_ventricular(answers: Mapping[str, str]) -> ClassificationResult:
    """Walk the ventricular/PH/PPCM decision tree, returning at the first hit."""
    if answers.get("PAH") == "yes":
        return ClassificationResult(MWHOClass.IV, [NOTE_PAH])

    lvef = answers.get("LVEF")
    if lvef == "<30%" or answers.get("NYHA") == "III/IV":
        return ClassificationResult(MWHOClass.IV, [])
    if lvef == "30–45%":
        return ClassificationResult(MWHOClass.III, [])

    if lvef == ">45%":
        if answers.get("RVfunction") == "significant":
            return ClassificationResult(MWHOClass.II_III, [])
        ppcm = answers.get("PPCM")
        if ppcm == "> mild residual":
            return ClassificationResult(MWHOClass.IV, [NOTE_PPCM_SEVERE])
        if ppcm == "≤ mild residual":
            return ClassificationResult(MWHOClass.III, [NOTE_PPCM_MILD])
        return ClassificationResult(MWHOClass.II_III, [])

    return ClassificationResult(None, [])
