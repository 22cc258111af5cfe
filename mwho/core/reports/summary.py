"""
Plain-text assessment summary.

The export format is a fixed sequence of labelled lines:

    Group: Valvular
    Result: mWHO III
    Maternal risk: ...
    Fetal risk: ...
    Care level: ...
    Delivery guidance: ...
    Flags: note one; note two

The Flags line is present only when the result carries notes.  Without a
class the Result is '–' and the four guidance fields are left empty.
"""
from __future__ import annotations

from typing import Optional

from mwho.core.clinical.base import ClassificationResult, DiseaseGroup, display_label
from mwho.core.clinical.guidance import lookup


def build_summary(group: Optional[DiseaseGroup], result: ClassificationResult) -> str:
    """Render the plain-text summary for a (group, result) pair."""
    if result.mwho_class is not None:
        guidance = lookup(result.mwho_class)
        maternal, fetal = guidance.maternal, guidance.fetal
        care, delivery = guidance.care, guidance.delivery
    else:
        maternal = fetal = care = delivery = ""

    lines = [
        f"Group: {group.value if group is not None else '–'}",
        f"Result: {display_label(result.mwho_class)}",
        f"Maternal risk: {maternal}",
        f"Fetal risk: {fetal}",
        f"Care level: {care}",
        f"Delivery guidance: {delivery}",
    ]
    if result.notes:
        lines.append(f"Flags: {'; '.join(result.notes)}")

    return "\n".join(lines).strip()
