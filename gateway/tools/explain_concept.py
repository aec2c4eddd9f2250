"""
explain_concept - Plain-language explanation of a glossary concept.

Hint level 1 gives the definition, motivation, common mistakes and a mini
exercise. The worked example is held back until hint level 2.
"""

from typing import Optional

from core.glossary import Glossary, GlossaryEntry
from core.knowledge_graph import KnowledgeGraph, get_knowledge_graph

from ..registry import ToolContext, TutorTool
from ..schemas import ExplainConceptInput, HintLadder, ToolResponse


class ExplainConceptTool(TutorTool):
    name = "explain_concept"

    def __init__(self, glossary: Optional[Glossary] = None, knowledge_graph: Optional[KnowledgeGraph] = None):
        self.glossary = glossary or Glossary()
        self.kg = knowledge_graph or get_knowledge_graph()

    async def execute(self, tool_input: ExplainConceptInput, ctx: ToolContext) -> ToolResponse:
        entry = self.glossary.lookup(tool_input.concept)
        if entry is None:
            return self._unknown_concept(tool_input.concept)
        return self._explain(entry, tool_input.hint_level, ctx)

    def _explain(self, entry: GlossaryEntry, hint_level: int, ctx: ToolContext) -> ToolResponse:
        output = {
            "concept": entry.concept,
            "definition": entry.short_definition,
            "whyItMatters": entry.why_it_matters,
            "commonMistakes": list(entry.common_mistakes),
            "miniExercise": entry.mini_exercise,
        }
        checkpoints = [
            f"In your own words: what is {entry.concept}? (1-2 sentences)",
            f"Which of the common mistakes do you think you'd make with {entry.concept}?",
            "Try the mini exercise before asking for the example.",
        ]

        if ctx.learner_level == "intermediate":
            tutor_notes = "Skim the definition, then go straight to the exercise."
        else:
            tutor_notes = (
                "Read the definition slowly, then answer the checkpoints. "
                "Ask for Hint 2 if you want a concrete example."
            )

        hint_ladder = None
        if hint_level == 2:
            output["beginnerExample"] = entry.beginner_example
            checkpoints[2] = f"Where does the example show the idea behind {entry.concept}?"
            hint_ladder = HintLadder(
                level=2,
                guidance="Example included. Map each part of it back to the definition.",
            )

        return ToolResponse(
            output=output,
            checkpoints=checkpoints,
            tutor_notes=tutor_notes,
            hint_ladder=hint_ladder,
        )

    def _unknown_concept(self, concept: str) -> ToolResponse:
        key = self.glossary.resolve(concept)
        topic = self.kg.get_topic(key)
        if topic is not None:
            return ToolResponse(
                output={
                    "concept": topic.title,
                    "definition": topic.description,
                    "message": "I don't have a full glossary entry for this yet, so here's the topic summary.",
                },
                checkpoints=[
                    f"Which part of \"{topic.title}\" is least clear to you?",
                    "What do you already know that this might build on?",
                ],
            )

        return ToolResponse(
            output={
                "message": f"I don't have an explanation for \"{concept}\" yet.",
                "knownConcepts": self.glossary.concepts(),
            },
            checkpoints=[
                "Can you rephrase the concept using one of the known names?",
                "Where did you run into this term?",
            ],
        )
