"""
assess_knowledge - Hands out the diagnostic questions for a topic.
"""

from typing import Optional

from core.diagnostics import DiagnosticBank
from core.knowledge_graph import KnowledgeGraph, get_knowledge_graph

from ..registry import ToolContext, TutorTool
from ..schemas import AssessKnowledgeInput, ToolResponse


class AssessKnowledgeTool(TutorTool):
    name = "assess_knowledge"

    def __init__(self, diagnostics: Optional[DiagnosticBank] = None, knowledge_graph: Optional[KnowledgeGraph] = None):
        self.diagnostics = diagnostics or DiagnosticBank()
        self.kg = knowledge_graph or get_knowledge_graph()

    async def execute(self, tool_input: AssessKnowledgeInput, ctx: ToolContext) -> ToolResponse:
        topic_id = tool_input.topic
        node = self.kg.get_topic(topic_id)

        if node is None:
            return ToolResponse(
                output={
                    "message": f"I don't recognize \"{topic_id}\" as a curriculum topic.",
                    "suggestion": "Ask for next_topic to see valid topics.",
                },
                checkpoints=[
                    "Which topic are you trying to assess?",
                    "Is this frontend, backend, or fullstack?",
                ],
                tutor_notes="Use next_topic if you're unsure what to study next.",
            )

        diagnostic = self.diagnostics.get(topic_id)
        if diagnostic is None:
            return ToolResponse(
                output={
                    "topic": node.title,
                    "message": "I don't have diagnostic questions for this topic yet.",
                    "suggestion": "We can still proceed by explaining the concept or doing a practice task.",
                },
                checkpoints=[
                    f"What do you already know about \"{node.title}\"?",
                    "What feels confusing or unclear?",
                ],
                tutor_notes="Answer these and I'll tailor the next step.",
            )

        return ToolResponse(
            output={
                "topic": node.title,
                "description": node.description,
                "instructions": (
                    "Answer these questions honestly without looking anything up. "
                    "This is about finding gaps, not passing."
                ),
                "questions": diagnostic.numbered_questions(),
                "howToAnswer": "Short bullet points or 1-2 sentences per question is enough.",
            },
            checkpoints=[
                "Answer all questions before asking for feedback.",
                "Mark any question you feel unsure about.",
            ],
            tutor_notes=(
                "After you answer, paste your responses and I'll analyze gaps "
                "and recommend the next topic or practice task."
            ),
        )
