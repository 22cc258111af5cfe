"""
Coronary / Other Classification Rules

SCAD, prior ischaemic events, adverse pregnancy outcomes and
cancer-therapy cardiotoxicity.  Any of them places the patient in
mWHO III; there is no lower or higher tier in this group.
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass, evaluate_guards, guard

CORONARY_OTHER_RULES = [
    guard("SCAD", "yes", MWHOClass.III),
    guard("PriorIschaemia", "yes", MWHOClass.III),
    guard("PriorAPOhosp", "yes", MWHOClass.III),
    guard("CancerTherapyCVtox", "yes", MWHOClass.III),
]


def classify_coronary_other(answers: Mapping[str, str]) -> ClassificationResult:
    return evaluate_guards(answers, CORONARY_OTHER_RULES)
