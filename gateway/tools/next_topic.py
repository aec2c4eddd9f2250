"""
next_topic - Guides learners through a structured curriculum track.

How it works:
    1. Learner picks a track (foundation/frontend/backend/fullstack)
    2. Completed topics come from the request context, plus an optional
       "I just finished X" topic
    3. The first uncompleted topic on the track is returned with a study plan

Prerequisites are reported, not enforced: learners can skip ahead.
"""

from typing import Optional

from core.knowledge_graph import KnowledgeGraph, get_knowledge_graph
from core.sequencer import DEFAULT_TRACK, TopicSequencer

from ..registry import ToolContext, TutorTool
from ..schemas import NextTopicInput, ToolResponse


STUDY_PLAN = [
    "Define the concept in your own words (no googling first).",
    "Find 1 real example in a codebase or docs.",
    "Build a tiny demo (smallest possible).",
    "Write down 2 mistakes beginners make and how to avoid them.",
]


class NextTopicTool(TutorTool):
    name = "next_topic"

    def __init__(self, knowledge_graph: Optional[KnowledgeGraph] = None):
        self.kg = knowledge_graph or get_knowledge_graph()
        self.sequencer = TopicSequencer(self.kg)

    async def execute(self, tool_input: NextTopicInput, ctx: ToolContext) -> ToolResponse:
        track = tool_input.track or DEFAULT_TRACK
        completed = self.sequencer.completed_set(ctx.previous_topics, tool_input.current_topic)

        next_id = self.sequencer.next_topic(track, completed)

        if next_id is None:
            return ToolResponse(
                output={
                    "message": f"Nice, you've completed the {track} track topics we currently have.",
                    "suggestion": "Ask for a practice project next, or switch tracks.",
                },
                checkpoints=[
                    "Which of these do you feel weakest on: HTTP, APIs, SQL, or debugging?",
                    "Do you want a small practice task (30-60 min) or a mini project (2-4 hrs)?",
                ],
                tutor_notes="We can generate a practice task next once you pick a focus area.",
            )

        node = self.kg.get_topic(next_id)
        placement = self.sequencer.explain_placement(next_id, completed)
        prerequisites = self.kg.get_prerequisites(next_id)
        fuzzy = ", ".join(prerequisites) if prerequisites else "none"

        return ToolResponse(
            output={
                "track": track,
                "nextTopic": node.to_dict(),
                "whyThisNext": placement.message,
                "studyPlan": list(STUDY_PLAN),
            },
            checkpoints=[
                f"What do you already know about \"{node.title}\"? (2-3 sentences)",
                f"Which prerequisite feels fuzzy: {fuzzy}?",
                "What tiny demo could you build in 15 minutes to prove you understand it?",
            ],
            tutor_notes=(
                "Don't jump to tutorials yet. Answer these checkpoints first, "
                "then I'll give Hint 2 (a demo outline)."
            ),
        )
