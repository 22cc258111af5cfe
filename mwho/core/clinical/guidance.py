"""
Class-indexed guidance texts (ESC 2025 pregnancy & CVD guideline, mWHO 2.0).

Static data: built once at import, never mutated.  `lookup` is total over
the five classes; callers must handle a None class themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

from .base import MWHOClass


@dataclass(frozen=True)
class GuidanceRecord:
    """What a given mWHO class means for mother, fetus, care setting and delivery."""
    maternal: str   # maternal risk meaning
    fetal: str      # fetal / obstetric risk
    care: str       # care level / management
    delivery: str   # mode of delivery guidance

    def to_dict(self) -> Dict[str, str]:
        return {
            "maternal": self.maternal,
            "fetal": self.fetal,
            "care": self.care,
            "delivery": self.delivery,
        }


GUIDANCE: Mapping[MWHOClass, GuidanceRecord] = MappingProxyType({
    MWHOClass.I: GuidanceRecord(
        maternal="No detectable ↑ mortality; no/mild ↑ morbidity vs general population.",
        fetal="Baseline obstetric/fetal risk.",
        care="Routine antenatal care; cardiology as needed.",
        delivery="Vaginal birth usually appropriate; neuraxial anesthesia as per obstetric plan.",
    ),
    MWHOClass.II: GuidanceRecord(
        maternal="Small ↑ maternal mortality or moderate ↑ morbidity.",
        fetal="Slight ↑ preterm/low‑birth‑weight/perinatal complications.",
        care="Shared care with cardiology; define follow‑up plan.",
        delivery="Vaginal birth preferred; consider assisted 2nd stage if hemodynamics warrant.",
    ),
    MWHOClass.II_III: GuidanceRecord(
        maternal="Intermediate between II and III; morbidity can be important depending on lesion severity.",
        fetal="Moderate ↑ fetal complications (preterm, growth restriction) depending on condition.",
        care=(
            "Shared care with a Pregnancy Heart Team; deliver in hospital with "
            "cardiology & anesthesia on site."
        ),
        delivery="Vaginal birth usually preferred; individualized plan; early anesthesia review.",
    ),
    MWHOClass.III: GuidanceRecord(
        maternal="Significantly ↑ maternal mortality or severe morbidity.",
        fetal="High ↑ fetal complications (preterm, growth, neonatal ICU).",
        care=(
            "Care led by a Pregnancy Heart Team at an expert centre; close surveillance; "
            "multidisciplinary birth plan."
        ),
        delivery=(
            "Vaginal birth often preferred with assisted 2nd stage; Caesarean for "
            "specific cardiac/obstetric indications."
        ),
    ),
    MWHOClass.IV: GuidanceRecord(
        maternal="Extremely high risk; pregnancy is not recommended (contraindicated).",
        fetal="Very high fetal/neonatal risk given maternal instability/therapy constraints.",
        care=(
            "Pre‑pregnancy counselling to avoid pregnancy. If pregnant and continuing, "
            "manage in expert centre."
        ),
        delivery=(
            "Mode individualized by expert team; Caesarean may be preferred in select "
            "scenarios (e.g., severe PH)."
        ),
    ),
})

DISCLAIMER = (
    "This decision aid summarizes the ESC 2025 pregnancy & CVD guideline (mWHO 2.0 "
    "examples). It is not a substitute for clinical judgement. Thresholds and special "
    "situations (e.g., anticoagulation for mechanical valves, severe aortopathy sizes, "
    "pulmonary hypertension phenotypes) require guideline consultation and expert input. "
    "If multiple criteria apply, the highest class should be used."
)


def lookup(mwho_class: MWHOClass) -> GuidanceRecord:
    """Return the guidance record for a class."""
    return GUIDANCE[mwho_class]
