"""
analyze_assessment - Classifies diagnostic answers and recommends a next step.

The recommendation depends only on the primary gap:
    terminology -> explain_concept (hint level 1)
    conceptual  -> explain_concept (hint level 2)
    application -> practice_task
    unknown     -> next_topic
"""

from typing import Dict, Optional

from core.gap_classifier import GapClassifier
from core.knowledge_graph import KnowledgeGraph, get_knowledge_graph

from ..registry import ToolContext, TutorTool
from ..schemas import AnalyzeAssessmentInput, ToolResponse


def build_recommendation(gap: str, topic: str) -> Dict:
    if gap == "terminology":
        return {
            "nextStep": "explain_concept",
            "hintLevel": 1,
            "reason": "You need clearer definitions before applying the concept.",
            "payload": {"concept": topic},
        }
    if gap == "conceptual":
        return {
            "nextStep": "explain_concept",
            "hintLevel": 2,
            "reason": "You understand the words but need a clearer mental model.",
            "payload": {"concept": topic, "hintLevel": 2},
        }
    if gap == "application":
        return {
            "nextStep": "practice_task",
            "reason": "You need hands-on usage to solidify understanding.",
            "suggestion": "Ask for a small practice task next.",
        }
    return {
        "nextStep": "next_topic",
        "reason": "Let's move forward and revisit this later.",
    }


class AnalyzeAssessmentTool(TutorTool):
    name = "analyze_assessment"

    def __init__(self, classifier: Optional[GapClassifier] = None, knowledge_graph: Optional[KnowledgeGraph] = None):
        self.classifier = classifier or GapClassifier()
        self.kg = knowledge_graph or get_knowledge_graph()

    async def execute(self, tool_input: AnalyzeAssessmentInput, ctx: ToolContext) -> ToolResponse:
        topic_id = tool_input.topic
        node = self.kg.get_topic(topic_id)

        if node is None:
            return ToolResponse(
                output={"message": f"Unknown topic \"{topic_id}\"."},
                checkpoints=["Use assess_knowledge to pick a valid topic first."],
            )

        if not tool_input.answers:
            return ToolResponse(
                output={"message": "No answers provided to analyze."},
                checkpoints=["Paste your answers as an array of strings."],
            )

        result = self.classifier.analyze(topic_id, tool_input.answers)

        return ToolResponse(
            output={
                "topic": node.title,
                "analysis": [a.to_dict() for a in result.analyses],
                "summary": result.summary,
                "recommendation": build_recommendation(result.primary_gap, topic_id),
            },
            checkpoints=[
                "Do you agree with where the gaps are?",
                "Which question felt hardest to answer?",
            ],
            tutor_notes="If this looks right, follow the recommendation. If not, tell me where it feels off.",
        )
