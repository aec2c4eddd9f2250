"""
Tutor Policy - The rules every tool response passes through.

Philosophy:
    - Default to checkpoints and reflection questions, not solutions
    - Detect "solution dumps" (large code blocks) and redirect to a hint ladder
    - Warm but firm: help them learn, don't do the work for them

Stages, always in this order:
    1. Ensure defaults   - checkpoints and tutor notes are never missing
    2. Guardrail         - a response that looks like a code dump is replaced
    3. Hint ladder       - attach a level-1 ladder if the response has none

apply_policy() is a pure function of (response, context).
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from gateway.schemas import HintLadder, ToolResponse

logger = logging.getLogger(__name__)


@dataclass
class PolicyContext:
    """Context the policy engine needs about the request."""
    tool_name: str
    learner_level: str = "beginner"


@dataclass(frozen=True)
class GuardrailThresholds:
    """
    Trigger when (fences >= min_code_fences and lines > fenced_line_limit)
    or (lines > long_line_limit and code ratio > code_ratio).
    """
    min_code_fences: int = 2
    fenced_line_limit: int = 60
    long_line_limit: int = 120
    code_ratio: float = 0.35

    @classmethod
    def from_config(cls) -> "GuardrailThresholds":
        import config
        return cls(
            min_code_fences=config.GUARDRAIL_MIN_CODE_FENCES,
            fenced_line_limit=config.GUARDRAIL_FENCED_LINE_LIMIT,
            long_line_limit=config.GUARDRAIL_LONG_LINE_LIMIT,
            code_ratio=config.GUARDRAIL_CODE_RATIO,
        )


@dataclass
class GuardrailReport:
    code_block_count: int
    line_count: int
    code_like_ratio: float
    triggered: bool


# ==================== Fixed Texts ====================

DEFAULT_CHECKPOINTS = [
    "Before you continue: what is the input and output of what you're building?",
    "What is the smallest next step you can take to verify you're on the right track?",
    "What edge case could break your approach?",
]

DEFAULT_TUTOR_NOTES = (
    "Answer the checkpoints first. If you want more help, tell me what you tried and what happened."
)

DEFAULT_HINT_GUIDANCE = (
    "High-level guidance only. Ask for Hint 2/3 if you get stuck and share your attempt."
)

SOLUTION_DUMP_MESSAGE = (
    "I'm not going to dump a full solution. Let's break this into smaller steps "
    "so you learn it instead of copy/paste."
)

REDIRECT_NEXT_STEPS = [
    "Tell me what you're building (inputs/outputs).",
    "Show me your current attempt (even if it's messy).",
    "I'll give Hint 2 (pseudocode) based on your attempt.",
]

REDIRECT_CHECKPOINTS = [
    "What have you tried so far? Paste the smallest relevant snippet.",
    "What do you expect to happen, and what actually happened?",
    "What part feels confusing: setup, logic, or debugging?",
]

REDIRECT_TUTOR_NOTES = (
    "This guardrail kicked in because the response looked like a large solution dump. "
    "We'll proceed with a hint ladder instead."
)

REDIRECT_HINT_GUIDANCE = "Start with a plan + checkpoints. Ask for Hint 2 with your attempt."

TOOL_SUMMARIES = {
    "explain_concept": (
        "Concept explanations should be short, with checkpoints and examples only after you answer."
    ),
    "next_topic": "Topic plans stay small: one topic, a short study plan, and checkpoints.",
    "assess_knowledge": "Diagnostics are a handful of questions, not a full lesson.",
    "analyze_assessment": "Assessment feedback points at gaps; it doesn't hand over the answers.",
}

GENERIC_SUMMARY = "We'll proceed step-by-step with checkpoints before code."

CODE_LINE_PREFIXES = ("import ", "export ", "const ", "let ", "function ")


# ==================== Stage 1: Defaults ====================

def ensure_defaults(res: ToolResponse) -> ToolResponse:
    """Fill in generic checkpoints and tutor notes when a tool left them out."""
    checkpoints = res.checkpoints if res.checkpoints else list(DEFAULT_CHECKPOINTS)
    tutor_notes = res.tutor_notes if res.tutor_notes and res.tutor_notes.strip() else DEFAULT_TUTOR_NOTES

    return res.model_copy(update={"checkpoints": checkpoints, "tutor_notes": tutor_notes})


# ==================== Stage 2: Guardrail ====================

def stringify_output(output: Any) -> str:
    """Render tool output as text for the guardrail heuristics."""
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    try:
        return json.dumps(output, indent=2)
    except (TypeError, ValueError):
        return str(output)


def is_code_like(line: str) -> bool:
    """Rough per-line code signal. Blank lines never count."""
    stripped = line.strip()
    if not stripped:
        return False
    return (
        stripped.startswith(CODE_LINE_PREFIXES)
        or "=>" in stripped
        or stripped.endswith("{")
        or stripped.endswith("};")
        or ";" in stripped
    )


def inspect_output(text: str, thresholds: Optional[GuardrailThresholds] = None) -> GuardrailReport:
    """Measure a rendered output against the solution-dump heuristics."""
    thresholds = thresholds or GuardrailThresholds()

    lines = text.split("\n")
    code_block_count = text.count("```")
    line_count = len(lines)
    code_like_ratio = sum(1 for line in lines if is_code_like(line)) / max(1, line_count)

    triggered = (
        (code_block_count >= thresholds.min_code_fences and line_count > thresholds.fenced_line_limit)
        or (line_count > thresholds.long_line_limit and code_like_ratio > thresholds.code_ratio)
    )

    return GuardrailReport(
        code_block_count=code_block_count,
        line_count=line_count,
        code_like_ratio=code_like_ratio,
        triggered=triggered,
    )


def summarize_for_learner(tool_name: str) -> str:
    return TOOL_SUMMARIES.get(tool_name, GENERIC_SUMMARY)


def build_redirect(ctx: PolicyContext) -> ToolResponse:
    """The fixed response that replaces a solution dump."""
    return ToolResponse(
        output={
            "message": SOLUTION_DUMP_MESSAGE,
            "nextSteps": list(REDIRECT_NEXT_STEPS),
            "originalSummary": summarize_for_learner(ctx.tool_name),
        },
        checkpoints=list(REDIRECT_CHECKPOINTS),
        tutor_notes=REDIRECT_TUTOR_NOTES,
        hint_ladder=HintLadder(level=1, guidance=REDIRECT_HINT_GUIDANCE),
    )


def apply_guardrails(
    res: ToolResponse,
    ctx: PolicyContext,
    thresholds: Optional[GuardrailThresholds] = None
) -> ToolResponse:
    report = inspect_output(stringify_output(res.output), thresholds)
    if not report.triggered:
        return res
    logger.info(
        "Guardrail redirect for %s: %d fences, %d lines, code ratio %.2f",
        ctx.tool_name, report.code_block_count, report.line_count, report.code_like_ratio,
    )
    return build_redirect(ctx)


# ==================== Stage 3: Hint Ladder ====================

def attach_hint_ladder(res: ToolResponse) -> ToolResponse:
    if res.hint_ladder is not None:
        return res
    return res.model_copy(update={"hint_ladder": HintLadder(level=1, guidance=DEFAULT_HINT_GUIDANCE)})


# ==================== Entry Point ====================

def apply_policy(
    raw: ToolResponse,
    ctx: PolicyContext,
    thresholds: Optional[GuardrailThresholds] = None
) -> ToolResponse:
    """
    Apply the tutor policy to a raw tool response.

    Args:
        raw: Response as the tool produced it
        ctx: Tool name and learner level of the request
        thresholds: Guardrail limits; the built-in defaults if omitted

    Returns:
        A response with non-empty checkpoints, tutor notes and a hint ladder
    """
    with_defaults = ensure_defaults(raw)
    with_guardrails = apply_guardrails(with_defaults, ctx, thresholds)
    return attach_hint_ladder(with_guardrails)


def policy_summary(res: ToolResponse) -> Dict[str, Any]:
    """Compact description of a finalized response, for logs."""
    return {
        "checkpoints": len(res.checkpoints),
        "hint_level": res.hint_ladder.level if res.hint_ladder else None,
        "redirected": isinstance(res.output, dict) and res.output.get("message") == SOLUTION_DUMP_MESSAGE,
    }
