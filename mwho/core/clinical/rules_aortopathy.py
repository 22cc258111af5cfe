"""
Aortopathy Classification Rules

Thresholds are expressed as yes/no questions on measured aortic diameter
(mm) or aortic size index (ASI, mm²/m).  Marfan/HTAD, bicuspid aortic
valve (BAV) and Turner syndrome each have their own cut-offs, so they
are asked separately rather than derived from a single diameter.

Every severe (mWHO IV) branch carries a note so the reason shows up in
the exported summary.
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass, evaluate_guards, guard

NOTE_MARFAN_GT45 = "Severe Marfan/HTAD aortic dilation >45 mm"
NOTE_BAV_GT50 = "Severe BAV aortic dilation >50 mm"
NOTE_TURNER_ASI_GT25 = "Turner ASI >25 mm²/m"
NOTE_SEVERE_COA_VEDS = "Severe (re)CoA / vascular EDS / prior dissection with growth"

AORTOPATHY_RULES = [
    guard("NonHTADlt40", "yes", MWHOClass.I),
    guard("TurnerNoCVfeatures", "yes", MWHOClass.II),
    guard("HTADnoDilation_or_BAVlt45_or_repairedCoA", "yes", MWHOClass.II_III),
    guard("Marfan40to45", "yes", MWHOClass.III),
    guard("BAV45to50", "yes", MWHOClass.III),
    guard("TurnerASI20to25", "yes", MWHOClass.III),
    guard("OtherAortaLt50", "yes", MWHOClass.III),
    # Severe / high-risk features
    guard("MarfanGt45", "yes", MWHOClass.IV, NOTE_MARFAN_GT45),
    guard("BAVGt50", "yes", MWHOClass.IV, NOTE_BAV_GT50),
    guard("TurnerASIgt25", "yes", MWHOClass.IV, NOTE_TURNER_ASI_GT25),
    guard("SevereRecoA_or_vEDS_or_PriorDissectionGrowing", "yes", MWHOClass.IV, NOTE_SEVERE_COA_VEDS),
    guard("PriorDissectionStable", "yes", MWHOClass.III),
]


def classify_aortopathy(answers: Mapping[str, str]) -> ClassificationResult:
    """
    Evaluate all aortopathy guards.

    Returns:
        ClassificationResult with the highest matching class, and one
        note per severe feature answered "yes".
    """
    return evaluate_guards(answers, AORTOPATHY_RULES)
