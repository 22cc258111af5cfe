"""
Clinical Classification Layer — Base Types

Defines the data contracts shared by every disease-group rule module:
the mWHO severity classes and their fixed order, the disease groups,
and the classification result.  These are group-agnostic and consumed
by the engine, the summary export and the API.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from mwho.utils.exceptions import UnknownClassError, UnknownGroupError


class MWHOClass(str, Enum):
    """
    Modified WHO risk class for cardiovascular disease in pregnancy.

    I       – no detectable increase in maternal mortality
    II      – small increase in maternal mortality
    II–III  – intermediate band, depends on lesion severity
    III     – significantly increased maternal mortality
    IV      – extremely high risk, pregnancy not recommended
    """
    I      = "I"
    II     = "II"
    II_III = "II–III"
    III    = "III"
    IV     = "IV"

    @property
    def rank(self) -> int:
        """Position in SEVERITY_ORDER (0 = least severe)."""
        return SEVERITY_ORDER.index(self)

    @property
    def label(self) -> str:
        return f"mWHO {self.value}"


# Canonical increasing order.  Never reorder: "highest" means last.
SEVERITY_ORDER = (
    MWHOClass.I,
    MWHOClass.II,
    MWHOClass.II_III,
    MWHOClass.III,
    MWHOClass.IV,
)


class DiseaseGroup(str, Enum):
    """The seven clinical categories, each with its own question set and rules."""
    VENTRICULAR    = "Ventricular/PH/PPCM"
    CARDIOMYOPATHY = "Cardiomyopathy"
    VALVULAR       = "Valvular"
    CONGENITAL     = "Congenital"
    AORTOPATHY     = "Aortopathy"
    ARRHYTHMIA     = "Arrhythmia"
    CORONARY_OTHER = "Coronary/Other"


def combine(a: Optional[MWHOClass], b: Optional[MWHOClass]) -> Optional[MWHOClass]:
    """
    Return the more severe of two classes.

    None is the identity element, so folding starts from None and an
    empty fold stays None.
    """
    if a is None:
        return b
    if b is None:
        return a
    return a if a.rank >= b.rank else b


def highest(classes: Iterable[Optional[MWHOClass]]) -> Optional[MWHOClass]:
    """Fold any number of candidate classes with `combine`."""
    result: Optional[MWHOClass] = None
    for candidate in classes:
        result = combine(result, candidate)
    return result


def display_label(mwho_class: Optional[MWHOClass]) -> str:
    """'mWHO III' for a class, '–' when no class could be reached."""
    return mwho_class.label if mwho_class is not None else "–"


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of one rule-function evaluation.

    `mwho_class` is None when the answers are insufficient to reach any
    rule conclusion.  That is a valid terminal state, not an error.
    """
    mwho_class: Optional[MWHOClass] = None
    notes: List[str] = field(default_factory=list)

    @property
    def is_conclusive(self) -> bool:
        return self.mwho_class is not None

    def to_dict(self) -> dict:
        return {
            "mwho_class": self.mwho_class.value if self.mwho_class else None,
            "label": display_label(self.mwho_class),
            "notes": list(self.notes),
        }


# ── Guard clauses ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GuardClause:
    """
    One independent "if answer K is V, candidate class is C" check.

    `values` may contain None to match an unanswered question.  `also`
    holds extra (key, accepted values) conditions that must hold at the
    same time.  A guard may carry only a note (mwho_class=None), in which
    case it flags the answers without contributing a class.
    """
    key: str
    values: FrozenSet[Optional[str]]
    mwho_class: Optional[MWHOClass] = None
    note: Optional[str] = None
    also: Tuple[Tuple[str, FrozenSet[Optional[str]]], ...] = ()

    def matches(self, answers: Mapping[str, str]) -> bool:
        if answers.get(self.key) not in self.values:
            return False
        return all(answers.get(key) in accepted for key, accepted in self.also)


def guard(
    key: str,
    value,
    mwho_class: Optional[MWHOClass] = None,
    note: Optional[str] = None,
    **also,
) -> GuardClause:
    """
    Shorthand constructor.  `value` and each keyword in `also` accept a
    single answer value or a collection of accepted values.
    """
    def _accepted(v) -> FrozenSet[Optional[str]]:
        if v is None or isinstance(v, str):
            return frozenset({v})
        return frozenset(v)

    return GuardClause(
        key=key,
        values=_accepted(value),
        mwho_class=mwho_class,
        note=note,
        also=tuple((k, _accepted(v)) for k, v in also.items()),
    )


def evaluate_guards(
    answers: Mapping[str, str],
    guards: Sequence[GuardClause],
) -> ClassificationResult:
    """
    Apply every guard independently and keep the highest class.

    Notes are collected in guard order.  Unanswered or unrecognised
    values simply match nothing.
    """
    mwho_class: Optional[MWHOClass] = None
    notes: List[str] = []
    for clause in guards:
        if not clause.matches(answers):
            continue
        mwho_class = combine(mwho_class, clause.mwho_class)
        if clause.note:
            notes.append(clause.note)
    return ClassificationResult(mwho_class=mwho_class, notes=notes)


# ── Parsing from raw labels ───────────────────────────────────────────────────

_GROUP_ALIASES = {
    "ventricular": DiseaseGroup.VENTRICULAR,
    "ventricular_ph_ppcm": DiseaseGroup.VENTRICULAR,
    "ph": DiseaseGroup.VENTRICULAR,
    "ppcm": DiseaseGroup.VENTRICULAR,
    "cardiomyopathy": DiseaseGroup.CARDIOMYOPATHY,
    "cmp": DiseaseGroup.CARDIOMYOPATHY,
    "valvular": DiseaseGroup.VALVULAR,
    "valve": DiseaseGroup.VALVULAR,
    "congenital": DiseaseGroup.CONGENITAL,
    "chd": DiseaseGroup.CONGENITAL,
    "aortopathy": DiseaseGroup.AORTOPATHY,
    "aorta": DiseaseGroup.AORTOPATHY,
    "arrhythmia": DiseaseGroup.ARRHYTHMIA,
    "coronary": DiseaseGroup.CORONARY_OTHER,
    "coronary_other": DiseaseGroup.CORONARY_OTHER,
    "other": DiseaseGroup.CORONARY_OTHER,
}


def parse_group(name: str) -> DiseaseGroup:
    """
    Parse a group label ("Valvular") or slug alias ("valvular", "coronary").

    Raises:
        UnknownGroupError: if the name matches no group.
    """
    if isinstance(name, DiseaseGroup):
        return name
    try:
        return DiseaseGroup(name)
    except ValueError:
        pass

    slug = name.strip().lower().replace("/", "_").replace("-", "_").replace(" ", "_")
    if slug in _GROUP_ALIASES:
        return _GROUP_ALIASES[slug]

    raise UnknownGroupError(
        f"Unknown disease group: {name}. Valid: {[g.value for g in DiseaseGroup]}",
        group=name,
    )


def parse_class(label: str) -> MWHOClass:
    """
    Parse a class label.  Accepts an optional "mWHO " prefix and an ASCII
    hyphen in place of the en dash ("II-III").

    Raises:
        UnknownClassError: if the label is not one of the five classes.
    """
    if isinstance(label, MWHOClass):
        return label
    text = label.strip()
    if text.lower().startswith("mwho"):
        text = text[4:].strip()
    text = text.upper().replace("-", "–")
    try:
        return MWHOClass(text)
    except ValueError:
        raise UnknownClassError(
            f"Unknown mWHO class: {label}. Valid: {[c.value for c in SEVERITY_ORDER]}",
            label=label,
        )
