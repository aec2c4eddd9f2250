"""
Gap Classifier - Infers knowledge gaps from free-text diagnostic answers.

Every answer gets exactly one label from an ordered rule table; the first
rule that matches wins. The table is the precedence:

    1. very short answer        -> terminology
    2. usage / example keywords -> application
    3. reasoning keywords       -> conceptual
    4. anything else            -> unknown

Matching is plain substring containment over the lowercased answer.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple


GAP_TYPES = ("terminology", "conceptual", "application", "unknown")


@dataclass
class AnswerAnalysis:
    """Classification of a single diagnostic answer."""
    question_id: int  # 1-based position in the answer list
    gap: str
    reasoning: str

    def to_dict(self) -> Dict:
        return {
            "questionId": self.question_id,
            "gap": self.gap,
            "reasoning": self.reasoning,
        }


@dataclass
class AssessmentAnalysisResult:
    """Per-answer analyses plus a summary across all of them."""
    topic: str
    analyses: List[AnswerAnalysis]
    primary_gap: str
    confidence: str  # "low", "medium", "high"

    @property
    def summary(self) -> Dict:
        return {"primaryGap": self.primary_gap, "confidence": self.confidence}

    def to_dict(self) -> Dict:
        return {
            "topic": self.topic,
            "analyses": [a.to_dict() for a in self.analyses],
            "summary": self.summary,
        }


@dataclass(frozen=True)
class GapRule:
    """One row of the decision list: predicate -> label."""
    gap: str
    matches: Callable[[str], bool]
    reasoning: str


def contains_any(text: str, words: Tuple[str, ...]) -> bool:
    return any(w in text for w in words)


class GapClassifier:
    """
    Heuristic answer classifier.

    The constants below are tuning knobs, not derived values; change them
    here rather than inside the rules.
    """

    SHORT_ANSWER_LENGTH = 15
    APPLICATION_KEYWORDS = ("use", "example", "when", "how")
    CONCEPTUAL_KEYWORDS = ("why", "because", "difference", "purpose")

    FALLBACK_REASONING = "Answer was too short or vague to classify."

    def __init__(self):
        self.rules: Tuple[GapRule, ...] = (
            GapRule(
                gap="terminology",
                matches=lambda text: len(text) < self.SHORT_ANSWER_LENGTH,
                reasoning="Very short answer suggests missing definitions or vocabulary.",
            ),
            GapRule(
                gap="application",
                matches=lambda text: contains_any(text, self.APPLICATION_KEYWORDS),
                reasoning="Answer references usage or examples but may lack structure.",
            ),
            GapRule(
                gap="conceptual",
                matches=lambda text: contains_any(text, self.CONCEPTUAL_KEYWORDS),
                reasoning="Answer discusses relationships or reasoning but may miss clarity.",
            ),
        )

    # ==================== Classification ====================

    def classify(self, answer: str, question_id: int) -> AnswerAnalysis:
        """Run one answer through the rule table."""
        normalized = answer.lower()
        for rule in self.rules:
            if rule.matches(normalized):
                return AnswerAnalysis(question_id=question_id, gap=rule.gap, reasoning=rule.reasoning)
        return AnswerAnalysis(question_id=question_id, gap="unknown", reasoning=self.FALLBACK_REASONING)

    def analyze(self, topic: str, answers: List[str]) -> AssessmentAnalysisResult:
        """
        Classify every answer and summarize the set.

        Args:
            topic: Curriculum topic the answers belong to
            answers: Learner responses, in question order

        Returns:
            AssessmentAnalysisResult with per-answer analyses and summary

        Raises:
            ValueError: if `answers` is empty; callers reject that case first
        """
        if not answers:
            raise ValueError("no answers provided")

        analyses = [self.classify(answer, idx + 1) for idx, answer in enumerate(answers)]

        return AssessmentAnalysisResult(
            topic=topic,
            analyses=analyses,
            primary_gap=self.pick_primary_gap(analyses),
            confidence=self.estimate_confidence(analyses),
        )

    # ==================== Summary ====================

    @staticmethod
    def pick_primary_gap(analyses: List[AnswerAnalysis]) -> str:
        """Most frequent gap; ties go to the earlier entry of GAP_TYPES."""
        counts = {gap: 0 for gap in GAP_TYPES}
        for a in analyses:
            counts[a.gap] += 1
        # max() keeps the first of equal maxima
        return max(counts, key=counts.get)

    @staticmethod
    def estimate_confidence(analyses: List[AnswerAnalysis]) -> str:
        unknowns = sum(1 for a in analyses if a.gap == "unknown")

        if unknowns > len(analyses) / 2:
            return "low"
        if unknowns > 0:
            return "medium"
        return "high"
