"""
Question Catalogue & Answer Sets

Each disease group has a fixed, ordered set of questions, and each
question a closed list of options.  The catalogue serves two purposes:

  - it is what a client renders as the group's form;
  - it is the schema `AnswerSet.for_group` validates against, so an
    out-of-catalogue key or value is rejected when the answers are
    built rather than silently ignored by the rule functions.

`AnswerSet` is an immutable mapping.  Updating an answer produces a new
AnswerSet; selecting a group starts again from `AnswerSet.empty()`.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from mwho.utils.exceptions import InvalidAnswerError
from .base import DiseaseGroup


@dataclass(frozen=True)
class Option:
    label: str
    value: str


@dataclass(frozen=True)
class Question:
    key: str
    label: str
    options: Tuple[Option, ...]

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(o.value for o in self.options)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "options": [{"label": o.label, "value": o.value} for o in self.options],
        }


@dataclass(frozen=True)
class Questionnaire:
    """The full question set of one disease group."""
    group: DiseaseGroup
    description: str
    questions: Tuple[Question, ...]
    hint: str = ""

    def get(self, key: str) -> Optional[Question]:
        for q in self.questions:
            if q.key == key:
                return q
        return None

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(q.key for q in self.questions)

    def to_dict(self) -> dict:
        return {
            "group": self.group.value,
            "description": self.description,
            "hint": self.hint,
            "questions": [q.to_dict() for q in self.questions],
        }


# ── Option helpers ────────────────────────────────────────────────────────────

def _opts(*pairs: Tuple[str, str]) -> Tuple[Option, ...]:
    return tuple(Option(label=label, value=value) for label, value in pairs)


YES_NO_UNKNOWN = _opts(("Yes", "yes"), ("No", "no"), ("Unknown", "unknown"))

REGURGITATION = _opts(
    ("None/Trace", "none/trace"),
    ("Mild", "mild"),
    ("Moderate", "moderate"),
    ("Severe", "severe"),
    ("Unknown", "unknown"),
)


def _yn(key: str, label: str) -> Question:
    return Question(key=key, label=label, options=YES_NO_UNKNOWN)


# ── Catalogue ─────────────────────────────────────────────────────────────────

QUESTIONNAIRES: Dict[DiseaseGroup, Questionnaire] = {
    DiseaseGroup.VENTRICULAR: Questionnaire(
        group=DiseaseGroup.VENTRICULAR,
        description="LV/RV, PAH, PPCM",
        questions=(
            _yn("PAH", "Pulmonary arterial hypertension (PAH)?"),
            Question("LVEF", "Left ventricular EF", _opts(
                ("< 30%", "<30%"),
                ("30–45%", "30–45%"),
                ("> 45%", ">45%"),
                ("Unknown", "unknown"),
            )),
            Question("NYHA", "NYHA class", _opts(
                ("I/II", "I/II"),
                ("III/IV", "III/IV"),
                ("Unknown", "unknown"),
            )),
            Question("RVfunction", "Right ventricle (sub‑pulmonary) function", _opts(
                ("Normal/mild impairment", "none/mild"),
                ("Significantly impaired", "significant"),
                ("Unknown", "unknown"),
            )),
            Question("PPCM", "Peripartum cardiomyopathy (history)", _opts(
                ("No", "no"),
                ("≤ mild residual LV impairment", "≤ mild residual"),
                ("> mild residual LV impairment", "> mild residual"),
                ("Unknown", "unknown"),
            )),
        ),
    ),
    DiseaseGroup.CARDIOMYOPATHY: Questionnaire(
        group=DiseaseGroup.CARDIOMYOPATHY,
        description="HCM, DCM/NDLVC, ARVC",
        questions=(
            Question("HCMgenoPheno", "HCM genotype+/phenotype− present?", _opts(
                ("Yes", "+/−"),
                ("No", "other"),
                ("Unknown", "unknown"),
            )),
            Question("HCMcomp", "HCM complications", _opts(
                ("None of the below", "none"),
                ("Arrhythmic and/or moderate haemodynamic complications",
                 "arrhythmic/moderate-hemodynamic"),
                ("Severe LVOT obstruction (≥50 mmHg) or EF <50% with symptoms",
                 "severe-LVOT>=50-or-EF<50%"),
                ("Unknown", "unknown"),
            )),
            Question("DCM_EF", "DCM/NDLVC — LV function", _opts(
                ("> 45% (normal/mild impairment)", ">45%"),
                ("30–45% (moderate)", "30–45%"),
                ("< 30% or NYHA III/IV", "<30%/NYHAIII-IV"),
                ("Unknown", "unknown"),
            )),
            Question("ARVC", "ARVC severity", _opts(
                ("Genotype+ with no/mild phenotype (low risk)", "low-risk"),
                ("Moderate/severe disease", "moderate/severe"),
                ("Not applicable", "na"),
                ("Unknown", "unknown"),
            )),
        ),
    ),
    DiseaseGroup.VALVULAR: Questionnaire(
        group=DiseaseGroup.VALVULAR,
        description="Stenosis/regurgitation, MVP, mechanical valve",
        hint=(
            "If MVP is present and MR is none/trace or mild, this maps to mWHO I. "
            "If MR is moderate/severe, the regurgitation severity drives the class."
        ),
        questions=(
            Question("PS_sev", "Pulmonary stenosis severity", _opts(
                ("None", "none"),
                ("Mild", "mild"),
                ("Moderate/Severe", "moderate/severe"),
                ("Unknown", "unknown"),
            )),
            _yn("MVP_present", "Mitral valve prolapse present?"),
            Question("MR_sev", "Mitral regurgitation severity", REGURGITATION),
            Question("AR_sev", "Aortic regurgitation severity", REGURGITATION),
            Question("MS", "Mitral stenosis severity", _opts(
                ("None/Mild", "none/mild"),
                ("Moderate", "moderate"),
                ("Severe", "severe"),
                ("Unknown", "unknown"),
            )),
            Question("AS", "Aortic stenosis severity", _opts(
                ("None/Mild/Moderate", "none/mild/moderate"),
                ("Severe asymptomatic", "severe-asymptomatic"),
                ("Severe symptomatic", "severe-symptomatic"),
                ("Unknown", "unknown"),
            )),
            Question("MechanicalValve", "Mechanical valve", _opts(
                ("Uncomplicated & well‑controlled anticoagulation", "well-controlled"),
                ("Complicated/unstable", "unstable/complicated"),
                ("No", "no"),
                ("Unknown", "unknown"),
            )),
        ),
    ),
    DiseaseGroup.CONGENITAL: Questionnaire(
        group=DiseaseGroup.CONGENITAL,
        description="Repaired/unrepaired, Fontan, systemic RV",
        questions=(
            _yn("SimpleRepaired",
                "Repaired simple lesions (ASD/VSD/PDA/APVD) without significant residual"),
            _yn("ASDVSDunoperated", "Unoperated uncomplicated ASD/VSD"),
            _yn("ToFgood", "Repaired Tetralogy of Fallot — no significant residual/arrhythmias"),
            _yn("TGAarterialSwitchGood", "TGA with arterial switch — no significant residual"),
            _yn("AVSDrepairedGood", "Repaired AVSD without significant residual"),
            Question("Ebstein", "Ebstein anomaly", _opts(
                ("Uncomplicated (mild–moderate TR; no TS/AP)", "uncomplicated"),
                ("Any complication", "complicated"),
                ("Not applicable", "na"),
                ("Unknown", "unknown"),
            )),
            Question("SystemicRV", "Systemic RV function", _opts(
                ("Good/mildly decreased", "good/mildly↓"),
                ("Moderate/severely decreased", "moderate/severely↓"),
                ("Not applicable", "na"),
                ("Unknown", "unknown"),
            )),
            Question("Fontan", "Fontan circulation", _opts(
                ("Uncomplicated", "uncomplicated"),
                ("Any complication", "complicated"),
                ("Not applicable", "na"),
                ("Unknown", "unknown"),
            )),
            Question("Cyanotic", "Cyanotic CHD", _opts(
                ("Unrepaired (not Eisenmenger)", "unrepaired-non-eisenmenger"),
                ("Eisenmenger", "eisenmenger"),
                ("No", "no"),
                ("Unknown", "unknown"),
            )),
        ),
    ),
    DiseaseGroup.AORTOPATHY: Questionnaire(
        group=DiseaseGroup.AORTOPATHY,
        description="Marfan/HTAD, BAV, Turner",
        questions=(
            _yn("NonHTADlt40", "Non‑HTAD mild aortic dilation < 40 mm"),
            _yn("TurnerNoCVfeatures", "Turner syndrome without CV features (BAV/CoA/HTN/dilation)"),
            _yn("HTADnoDilation_or_BAVlt45_or_repairedCoA",
                "HTAD no dilation OR BAV <45 mm OR repaired CoA"),
            _yn("Marfan40to45", "Marfan/HTAD 40–45 mm"),
            _yn("BAV45to50", "BAV 45–50 mm"),
            _yn("TurnerASI20to25", "Turner ASI 20–25 mm²/m"),
            _yn("OtherAortaLt50", "Other aortic dilation < 50 mm"),
            # Severe / high-risk features
            _yn("MarfanGt45", "> 45 mm in Marfan/HTAD"),
            _yn("BAVGt50", "> 50 mm in BAV"),
            _yn("TurnerASIgt25", "Turner ASI > 25 mm²/m"),
            _yn("SevereRecoA_or_vEDS_or_PriorDissectionGrowing",
                "Severe (re)CoA / vEDS / prior dissection with growing diameter"),
            _yn("PriorDissectionStable", "Prior dissection with stable diameter"),
        ),
    ),
    DiseaseGroup.ARRHYTHMIA: Questionnaire(
        group=DiseaseGroup.ARRHYTHMIA,
        description="SVT, LQTS/CPVT, VT",
        questions=(
            _yn("IsolatedEctopy", "Isolated atrial/ventricular ectopy"),
            _yn("SVTorPacemaker", "SVT or bradycardia requiring pacemaker"),
            _yn("InheritedLowRisk",
                "Inherited arrhythmia — low risk (e.g., LQTS no prior events on full‑dose "
                "β‑blocker; well‑controlled CPVT; Brugada no events)"),
            _yn("InheritedHighRisk",
                "Inherited arrhythmia — high risk (e.g., LQT2 postpartum; symptomatic "
                "CPVT/LQTS not controlled; Brugada/prior events)"),
            _yn("SustainedVT", "Sustained VT of any aetiology"),
        ),
    ),
    DiseaseGroup.CORONARY_OTHER: Questionnaire(
        group=DiseaseGroup.CORONARY_OTHER,
        description="SCAD, prior MI, APO, cardiotox",
        questions=(
            _yn("SCAD", "Prior SCAD"),
            _yn("PriorIschaemia", "Prior ischaemic cardiac event (STEMI/NSTE‑ACS)"),
            _yn("PriorAPOhosp", "Prior adverse pregnancy outcome requiring hospitalization"),
            _yn("CancerTherapyCVtox", "Prior adverse cardiovascular effects of cancer therapy"),
        ),
    ),
}


def questionnaire_for(group: DiseaseGroup) -> Questionnaire:
    return QUESTIONNAIRES[group]


# ── Answer sets ───────────────────────────────────────────────────────────────

class AnswerSet(Mapping):
    """
    Immutable question-key → option-value mapping.

    Construct with `AnswerSet(...)` for unchecked answers (anything a
    rule function would simply ignore is kept), or `AnswerSet.for_group`
    to validate every key and value against the catalogue.
    """

    __slots__ = ("_answers",)

    def __init__(self, answers: Optional[Mapping[str, str]] = None):
        self._answers: Dict[str, str] = dict(answers or {})

    @classmethod
    def empty(cls) -> "AnswerSet":
        return cls()

    @classmethod
    def for_group(cls, group: DiseaseGroup, answers: Mapping[str, str]) -> "AnswerSet":
        """
        Build a validated AnswerSet.

        Raises:
            InvalidAnswerError: for a key not asked in this group, or a
                value not among that question's options.
        """
        questionnaire = QUESTIONNAIRES[group]
        for key, value in answers.items():
            question = questionnaire.get(key)
            if question is None:
                raise InvalidAnswerError(
                    f"{group.value} has no question '{key}'",
                    group=group.value, key=key, value=value,
                    details={"valid_keys": list(questionnaire.keys)},
                )
            if value not in question.values:
                raise InvalidAnswerError(
                    f"'{value}' is not a valid answer to {group.value} question '{key}'",
                    group=group.value, key=key, value=value,
                    details={"valid_values": list(question.values)},
                )
        return cls(answers)

    def with_answer(self, key: str, value: str) -> "AnswerSet":
        """Return a new AnswerSet with one answer set or replaced."""
        updated = dict(self._answers)
        updated[key] = value
        return AnswerSet(updated)

    def without(self, key: str) -> "AnswerSet":
        """Return a new AnswerSet with one answer cleared."""
        updated = {k: v for k, v in self._answers.items() if k != key}
        return AnswerSet(updated)

    def __getitem__(self, key: str) -> str:
        return self._answers[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __repr__(self) -> str:
        return f"AnswerSet({self._answers!r})"

    def to_dict(self) -> Dict[str, str]:
        return dict(self._answers)
