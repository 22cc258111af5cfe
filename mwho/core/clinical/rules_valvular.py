"""
Valvular Heart Disease Classification Rules

Stenosis and regurgitation severities are graded independently; mitral
valve prolapse only maps to mWHO I when mitral regurgitation is at most
mild.  Mechanical valves are always mWHO III and always flagged, since
the anticoagulation plan dominates management.
"""
from __future__ import annotations

from typing import Mapping

from .base import ClassificationResult, MWHOClass, evaluate_guards, guard

NOTE_PS = "Moderate/severe PS — confirm gradients & RV pressure"
NOTE_MVP_MR_UNKNOWN = "MVP present but MR severity unknown — cannot assume class I"
NOTE_MECH_STABLE = "Mechanical valve on stable anticoagulation"
NOTE_MECH_UNSTABLE = "Mechanical valve with complications/unstable anticoagulation"

# MR grades that still allow MVP to be classed as mWHO I
MVP_BENIGN_MR = ("none/trace", "mild")
# MR left unanswered (None / "") or explicitly unknown
MR_UNKNOWN = (None, "", "unknown")

VALVULAR_RULES = [
    # Pulmonary stenosis
    guard("PS_sev", "mild", MWHOClass.I),
    guard("PS_sev", "moderate/severe", MWHOClass.II_III, NOTE_PS),
    # Mitral stenosis
    guard("MS", "moderate", MWHOClass.III),
    guard("MS", "severe", MWHOClass.IV),
    # Aortic stenosis
    guard("AS", "severe-asymptomatic", MWHOClass.III),
    guard("AS", "severe-symptomatic", MWHOClass.IV),
    # Regurgitation, independent of MVP
    guard("MR_sev", "severe", MWHOClass.III),
    guard("AR_sev", "severe", MWHOClass.III),
    guard("MR_sev", "moderate", MWHOClass.II_III),
    guard("AR_sev", "moderate", MWHOClass.II_III),
    # Mitral valve prolapse
    guard("MVP_present", "yes", MWHOClass.I, MR_sev=MVP_BENIGN_MR),
    guard("MVP_present", "yes", None, NOTE_MVP_MR_UNKNOWN, MR_sev=MR_UNKNOWN),
    # Mechanical valve
    guard("MechanicalValve", "well-controlled", MWHOClass.III, NOTE_MECH_STABLE),
    guard("MechanicalValve", "unstable/complicated", MWHOClass.III, NOTE_MECH_UNSTABLE),
]


def classify_valvular(answers: Mapping[str, str]) -> ClassificationResult:
    """
    Evaluate all valvular guards and keep the highest class.

    MVP with moderate/severe MR is not special-cased: the regurgitation
    guards above already drive the class.
    """
    return evaluate_guards(answers, VALVULAR_RULES)
