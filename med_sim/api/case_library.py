"""
MedSim — Бібліотека шаблонних випадків (sandbox)

Детерміновані випадки замість AI-генератора: сценарій, очікуваний
діагноз, доречні обстеження та їх результати. Вибір шаблону —
за ключовими словами у введеній спеціальності.
"""

from dataclasses import dataclass, field
from typing import Dict, List


# Ціни обстежень ($)
TEST_PRICES: Dict[str, float] = {
    "x-ray": 150,
    "mri": 1200,
    "ct_scan": 800,
    "blood_test": 60,
    "ultrasound": 300,
    "ecg": 90,
    "echo": 500,
}
DEFAULT_TEST_PRICE = 200.0


@dataclass
class CaseTemplate:
    """Шаблон клінічного випадку"""
    key: str
    triggers: List[str]
    scenario: str
    diagnosis_keywords: List[str]
    diagnosis_name: str
    appropriate_tests: List[str]
    findings: Dict[str, str] = field(default_factory=dict)
    clues: Dict[str, str] = field(default_factory=dict)  # ключове слово → відповідь лікаря

    def price(self, test_type: str) -> float:
        return TEST_PRICES.get(test_type, DEFAULT_TEST_PRICE)

    def finding(self, test_type: str) -> str:
        return self.findings.get(test_type, "No significant abnormalities detected.")

    def answer(self, message: str) -> str:
        """Відповідь лікаря: перша підказка, чиє ключове слово є в питанні"""
        lowered = message.lower()
        for keyword, reply in self.clues.items():
            if keyword in lowered:
                return reply
        return ""

    def is_correct(self, diagnosis: str) -> bool:
        lowered = diagnosis.lower()
        return any(keyword in lowered for keyword in self.diagnosis_keywords)


ORTHOPEDICS = CaseTemplate(
    key="orthopedics",
    triggers=["ortho", "bone", "joint", "sport", "knee"],
    scenario=(
        "## Patient Presentation\n\n"
        "A **24-year-old** amateur football player presents with right knee pain "
        "after a twisting injury two days ago. He reports a *popping* sensation, "
        "swelling the next morning and episodes of the knee 'locking'.\n\n"
        "**Vitals:** BP 122/78, HR 72, T 36.8 °C"
    ),
    diagnosis_keywords=["meniscus", "meniscal"],
    diagnosis_name="Medial meniscus tear",
    appropriate_tests=["mri", "x-ray"],
    findings={
        "mri": "**MRI right knee:** horizontal tear of the posterior horn of the medial meniscus. ACL intact.",
        "x-ray": "**X-ray right knee:** no fracture, mild joint effusion.",
    },
    clues={
        "pain": "He rates the pain **6/10**, worse on squatting and twisting.",
        "lock": "Yes, the knee intermittently locks and he has to wiggle it free.",
        "swelling": "Moderate effusion, developed over 12–24 hours.",
        "mcmurray": "McMurray test is **positive** on the medial side.",
    },
)

CARDIOLOGY = CaseTemplate(
    key="cardiology",
    triggers=["cardio", "heart", "chest"],
    scenario=(
        "## Patient Presentation\n\n"
        "A **58-year-old** man with hypertension and a 30 pack-year smoking history "
        "presents with crushing retrosternal chest pain for 40 minutes, radiating "
        "to the left arm, with diaphoresis.\n\n"
        "**Vitals:** BP 150/95, HR 98, SpO₂ 95%"
    ),
    diagnosis_keywords=["myocardial infarction", "stemi", "heart attack"],
    diagnosis_name="Acute inferior STEMI",
    appropriate_tests=["ecg", "blood_test", "echo"],
    findings={
        "ecg": "**ECG:** ST elevation in II, III, aVF with reciprocal changes in I, aVL.",
        "blood_test": "**Troponin I:** 4.8 ng/mL (elevated). CK-MB elevated.",
        "echo": "**Echo:** inferior wall hypokinesis, EF 45%.",
    },
    clues={
        "pain": "Pressure-like pain, **9/10**, not relieved by rest.",
        "radiat": "Radiates to the left arm and jaw.",
        "history": "Hypertension for 10 years, smoker, father had an MI at 60.",
        "breath": "Mild shortness of breath since the onset of pain.",
    },
)

GENERAL = CaseTemplate(
    key="general",
    triggers=[],
    scenario=(
        "## Patient Presentation\n\n"
        "A **35-year-old** woman presents with fatigue, weight gain and cold "
        "intolerance over the last six months. She also reports constipation "
        "and dry skin.\n\n"
        "**Vitals:** BP 118/76, HR 56, T 36.2 °C"
    ),
    diagnosis_keywords=["hypothyroid", "hashimoto"],
    diagnosis_name="Primary hypothyroidism (Hashimoto thyroiditis)",
    appropriate_tests=["blood_test", "ultrasound"],
    findings={
        "blood_test": "**TSH:** 14.2 mIU/L (high), **free T4:** 0.6 ng/dL (low), anti-TPO positive.",
        "ultrasound": "**Thyroid ultrasound:** diffusely heterogeneous, hypoechoic gland.",
    },
    clues={
        "weight": "She gained about 6 kg without changes in diet.",
        "period": "Menses have become heavier and irregular.",
        "family": "Her mother takes levothyroxine.",
        "tired": "Fatigue is constant, she sleeps 10 hours a night.",
    },
)

CASE_TEMPLATES: List[CaseTemplate] = [ORTHOPEDICS, CARDIOLOGY, GENERAL]


def pick_template(specialty: str) -> CaseTemplate:
    """Шаблон за спеціальністю (GENERAL за замовчуванням)"""
    lowered = specialty.lower()
    for template in CASE_TEMPLATES:
        if any(trigger in lowered for trigger in template.triggers):
            return template
    return GENERAL
