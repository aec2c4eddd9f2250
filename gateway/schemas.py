"""
Schemas - Request envelope, tool inputs and the tool response shape.

The envelope schema only checks the outer request. Each tool's input is
checked separately against its entry in TOOL_INPUT_SCHEMAS, so adding a tool
never touches envelope validation.
"""

from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


LearnerLevel = Literal["beginner", "intermediate"]
TrackName = Literal["foundation", "frontend", "backend", "fullstack"]


class CamelModel(BaseModel):
    """Accepts camelCase keys on the wire and snake_case in Python."""
    model_config = ConfigDict(populate_by_name=True)


# ==================== Envelope ====================

class UserContext(CamelModel):
    learner_level: Optional[LearnerLevel] = Field(default=None, alias="learnerLevel")
    previous_topics: Optional[List[str]] = Field(default=None, alias="previousTopics")


class RequestEnvelope(CamelModel):
    """Body of POST /mcp."""
    tool_name: str = Field(alias="toolName", min_length=1)
    input: Any = None
    user_context: Optional[UserContext] = Field(default=None, alias="userContext")


# ==================== Tool Inputs ====================

class ExplainConceptInput(CamelModel):
    concept: str = Field(min_length=1)
    hint_level: Literal[1, 2] = Field(default=1, alias="hintLevel")


class NextTopicInput(CamelModel):
    track: Optional[TrackName] = None
    current_topic: Optional[str] = Field(default=None, alias="currentTopic")


class AssessKnowledgeInput(CamelModel):
    topic: str = Field(min_length=1)


class AnalyzeAssessmentInput(CamelModel):
    topic: str = Field(min_length=1)
    answers: List[str]


TOOL_INPUT_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "explain_concept": ExplainConceptInput,
    "next_topic": NextTopicInput,
    "assess_knowledge": AssessKnowledgeInput,
    "analyze_assessment": AnalyzeAssessmentInput,
}


# ==================== Response ====================

class HintLadder(BaseModel):
    level: Literal[1, 2]
    guidance: str


class ToolResponse(CamelModel):
    """
    What every tool returns.

    After tutor policy runs, checkpoints is never empty and hint_ladder is
    always set.
    """
    output: Any = None
    checkpoints: List[str] = Field(default_factory=list)
    tutor_notes: Optional[str] = Field(default=None, alias="tutorNotes")
    hint_ladder: Optional[HintLadder] = Field(default=None, alias="hintLadder")

    def to_payload(self) -> Dict[str, Any]:
        """Wire format: camelCase keys, absent optional fields omitted."""
        payload: Dict[str, Any] = {
            "output": self.output,
            "checkpoints": list(self.checkpoints),
        }
        if self.tutor_notes is not None:
            payload["tutorNotes"] = self.tutor_notes
        if self.hint_ladder is not None:
            payload["hintLadder"] = self.hint_ladder.model_dump()
        return payload
