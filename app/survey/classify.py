"""
Risk Classifier & Advisor

Maps a percentage and the population thresholds to one of three tiers and
assembles the bilingual guidance text.

RULES (LOCKED):
1. percentage <  p33          -> Low Risk
2. p33 <= percentage < p66    -> Moderate Risk
3. percentage >= p66          -> High Risk
4. 0 < questions answered < 70 -> preliminary note appended
5. questions answered == 70    -> full survey note appended

Same input always produces the same AssessmentResult.
"""

import math
from typing import Dict, Tuple

from .errors import PreconditionViolation
from .models import AssessmentResult, RiskLevel, ThresholdSnapshot
from .weights import FULL_SURVEY_QUESTIONS

# (english, hindi)
RISK_MESSAGES: Dict[RiskLevel, Tuple[str, str]] = {
    RiskLevel.LOW: (
        "Your digital habits look balanced. Keep protecting your offline time, "
        "your sleep and your in-person connections.",
        "आपकी डिजिटल आदतें संतुलित लगती हैं। ऑफलाइन समय, नींद और लोगों से "
        "मिलने-जुलने को ऐसे ही बनाए रखें।",
    ),
    RiskLevel.MODERATE: (
        "Some of your screen habits are starting to affect your focus and mood. "
        "Try app timers, phone-free meals and a screen-free hour before bed.",
        "आपकी कुछ स्क्रीन आदतें ध्यान और मूड पर असर डालने लगी हैं। ऐप टाइमर, "
        "बिना फोन के भोजन और सोने से पहले एक घंटा स्क्रीन-मुक्त समय आज़माएँ।",
    ),
    RiskLevel.HIGH: (
        "Your answers show a strong dependency on digital devices. Plan a gradual "
        "digital detox, switch off non-essential notifications and consider talking "
        "to someone you trust or a counsellor.",
        "आपके उत्तर डिजिटल उपकरणों पर गहरी निर्भरता दिखाते हैं। धीरे-धीरे डिजिटल "
        "डिटॉक्स की योजना बनाएँ, गैर-ज़रूरी नोटिफिकेशन बंद करें और किसी भरोसेमंद "
        "व्यक्ति या काउंसलर से बात करने पर विचार करें।",
    ),
}

PRELIMINARY_NOTE: Tuple[str, str] = (
    "Note: this is a preliminary assessment based on {answered} of {total} questions. "
    "Consider completing the remaining sets for a more accurate result.",
    "नोट: यह {total} में से {answered} प्रश्नों पर आधारित प्रारंभिक आकलन है। "
    "अधिक सटीक परिणाम के लिए शेष सेट पूरे करने पर विचार करें।",
)

FULL_SURVEY_NOTE: Tuple[str, str] = (
    "Full survey completed: this assessment covers all {total} questions.",
    "पूरा सर्वे पूरा हुआ: यह आकलन सभी {total} प्रश्नों पर आधारित है।",
)


def risk_level_for(percentage: float, thresholds: ThresholdSnapshot) -> RiskLevel:
    if percentage < thresholds.p33:
        return RiskLevel.LOW
    if percentage < thresholds.p66:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def build_suggestions(risk_level: RiskLevel, questions_answered: int) -> str:
    """English then Hindi guidance, followed by the completeness note."""
    parts = list(RISK_MESSAGES[risk_level])

    note = None
    if 0 < questions_answered < FULL_SURVEY_QUESTIONS:
        note = PRELIMINARY_NOTE
    elif questions_answered == FULL_SURVEY_QUESTIONS:
        note = FULL_SURVEY_NOTE

    if note:
        parts.extend(
            text.format(answered=questions_answered, total=FULL_SURVEY_QUESTIONS)
            for text in note
        )
    return "\n\n".join(parts)


def classify(
    percentage: float,
    thresholds: ThresholdSnapshot,
    questions_answered: int,
    *,
    total_score: float,
) -> AssessmentResult:
    """
    Classify a normalized percentage against the population thresholds.

    Raises:
        PreconditionViolation: percentage is NaN or outside [0, 100]
    """
    if percentage is None or math.isnan(percentage) or not 0 <= percentage <= 100:
        raise PreconditionViolation(f"percentage must be within [0, 100], got {percentage!r}")

    risk_level = risk_level_for(percentage, thresholds)
    return AssessmentResult(
        riskLevel=risk_level,
        suggestions=build_suggestions(risk_level, questions_answered),
        totalScore=total_score,
        questionsAnswered=questions_answered,
        percentage=percentage,
    )
