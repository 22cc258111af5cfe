"""
Classification Engine

Central dispatcher.  Takes a disease group and an answer set and returns
the group's ClassificationResult, plus guidance when a class was reached.

Usage:
    from mwho.core.clinical import ClassificationEngine, DiseaseGroup

    engine = ClassificationEngine()
    result = engine.classify(DiseaseGroup.VALVULAR, {"MS": "severe"})
    print(result.mwho_class, result.notes)

Adding a disease group:
    1. Create  mwho/core/clinical/rules_<group>.py
    2. Implement classify_<group>(Mapping[str, str]) -> ClassificationResult
    3. Add its questions to questions.QUESTIONNAIRES
    4. Register it in _GROUP_CLASSIFIERS below.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional, Union

from mwho.utils import get_logger
from .base import ClassificationResult, DiseaseGroup, parse_group
from .guidance import GuidanceRecord, lookup
from .questions import AnswerSet, Questionnaire, QUESTIONNAIRES
from .rules_ventricular import classify_ventricular
from .rules_cardiomyopathy import classify_cardiomyopathy
from .rules_valvular import classify_valvular
from .rules_congenital import classify_congenital
from .rules_aortopathy import classify_aortopathy
from .rules_arrhythmia import classify_arrhythmia
from .rules_coronary import classify_coronary_other

logger = get_logger(__name__)

Classifier = Callable[[Mapping[str, str]], ClassificationResult]

# ── Registry: group → rule function ──────────────────────────────────────────
_GROUP_CLASSIFIERS: Dict[DiseaseGroup, Classifier] = {
    DiseaseGroup.VENTRICULAR:    classify_ventricular,
    DiseaseGroup.CARDIOMYOPATHY: classify_cardiomyopathy,
    DiseaseGroup.VALVULAR:       classify_valvular,
    DiseaseGroup.CONGENITAL:     classify_congenital,
    DiseaseGroup.AORTOPATHY:     classify_aortopathy,
    DiseaseGroup.ARRHYTHMIA:     classify_arrhythmia,
    DiseaseGroup.CORONARY_OTHER: classify_coronary_other,
}


class ClassificationEngine:
    """
    Maps (disease group, answers) to an mWHO class and notes.

    Stateless: every call is a pure evaluation, safe from concurrent requests.
    """

    def classify(
        self,
        group: Union[DiseaseGroup, str],
        answers: Mapping[str, str],
        strict: bool = False,
    ) -> ClassificationResult:
        """
        Evaluate the group's rule function against the answers.

        Args:
            group: DiseaseGroup or a label/alias accepted by parse_group.
            answers: question key → option value.  Unanswered keys are
                simply absent.
            strict: validate answers against the question catalogue first.

        Returns:
            ClassificationResult.  A None class means the answers were
            insufficient, which is the expected state for a fresh form.

        Raises:
            UnknownGroupError: unrecognised group name.
            InvalidAnswerError: only when strict and an answer is off-catalogue.
        """
        group = parse_group(group)
        if strict:
            answers = AnswerSet.for_group(group, answers)

        result = _GROUP_CLASSIFIERS[group](answers)

        if result.is_conclusive:
            logger.info(
                f"ClassificationEngine [{group.value}]: mWHO {result.mwho_class.value}"
                + (f" (flags: {'; '.join(result.notes)})" if result.notes else "")
            )
        else:
            logger.debug(
                f"ClassificationEngine [{group.value}]: insufficient answers "
                f"({len(answers)} given)"
            )
        return result

    @staticmethod
    def guidance_for(result: ClassificationResult) -> Optional[GuidanceRecord]:
        """Guidance for a result's class, or None when no class was reached."""
        if result.mwho_class is None:
            return None
        return lookup(result.mwho_class)

    @staticmethod
    def questionnaire(group: Union[DiseaseGroup, str]) -> Questionnaire:
        return QUESTIONNAIRES[parse_group(group)]

    @staticmethod
    def registered_groups() -> List[DiseaseGroup]:
        """Return the disease groups with active rule modules, in display order."""
        return list(_GROUP_CLASSIFIERS.keys())

    @staticmethod
    def summarise(group: DiseaseGroup, result: ClassificationResult) -> Dict:
        """
        Build a compact dict suitable for JSON API responses.

        Example output:
        {
            "group": "Valvular",
            "mwho_class": "III",
            "label": "mWHO III",
            "notes": ["Mechanical valve on stable anticoagulation"],
            "guidance": {"maternal": ..., "fetal": ..., "care": ..., "delivery": ...}
        }
        """
        guidance = ClassificationEngine.guidance_for(result)
        return {
            "group": group.value,
            **result.to_dict(),
            "guidance": guidance.to_dict() if guidance else None,
        }
