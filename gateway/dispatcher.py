"""
Dispatcher - Routes a validated request to its tool and finalizes the answer.

Pipeline for one request, strictly in order:
    validate envelope -> validate tool input -> execute tool -> apply policy

dispatch() covers the last two steps; process_request() runs all four.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from teaching.tutor_policy import GuardrailThresholds, PolicyContext, apply_policy, policy_summary

from .registry import ToolContext, ToolRegistry, default_registry
from .schemas import RequestEnvelope, ToolResponse
from .validation import validate_envelope, validate_tool_input

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Either a finalized response or an error code with issues."""
    response: Optional[ToolResponse] = None
    error: Optional[str] = None
    issues: List[Dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def build_context(envelope: RequestEnvelope) -> ToolContext:
    """Normalize the optional user context; tools can rely on every field."""
    user_context = envelope.user_context
    learner_level = (user_context.learner_level if user_context else None) or "beginner"
    previous_topics = (user_context.previous_topics if user_context else None) or []
    return ToolContext(learner_level=learner_level, previous_topics=set(previous_topics))


def unknown_tool_response(tool_name: str) -> ToolResponse:
    return ToolResponse(output=None, checkpoints=[], tutor_notes=f"Unknown tool: {tool_name}")


async def dispatch(
    envelope: RequestEnvelope,
    registry: Optional[ToolRegistry] = None,
    thresholds: Optional[GuardrailThresholds] = None
) -> ToolResponse:
    """
    Run the envelope's tool and apply tutor policy to its response.

    `envelope.input` is handed to the tool as-is; callers validate it first
    (process_request does).
    """
    registry = registry if registry is not None else default_registry
    thresholds = thresholds or GuardrailThresholds.from_config()

    tool = registry.lookup(envelope.tool_name)
    if tool is None:
        logger.warning("Dispatch to unknown tool %s", envelope.tool_name)
        return unknown_tool_response(envelope.tool_name)

    ctx = build_context(envelope)
    raw = await tool.execute(envelope.input, ctx)

    final = apply_policy(
        raw,
        PolicyContext(tool_name=envelope.tool_name, learner_level=ctx.learner_level),
        thresholds,
    )
    logger.info("Tool %s finished: %s", envelope.tool_name, policy_summary(final))
    return final


async def process_request(
    raw: Any,
    registry: Optional[ToolRegistry] = None,
    thresholds: Optional[GuardrailThresholds] = None
) -> PipelineResult:
    """Validate a raw request body and dispatch it."""
    envelope_result = validate_envelope(raw)
    if not envelope_result.ok:
        return PipelineResult(error=envelope_result.error, issues=envelope_result.issues_as_dicts())

    envelope = envelope_result.data
    input_result = validate_tool_input(envelope.tool_name, envelope.input)
    if not input_result.ok:
        return PipelineResult(error=input_result.error, issues=input_result.issues_as_dicts())

    typed = envelope.model_copy(update={"input": input_result.data})
    response = await dispatch(typed, registry, thresholds)
    return PipelineResult(response=response)
