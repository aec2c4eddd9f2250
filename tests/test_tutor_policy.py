"""Tests for teaching/tutor_policy.py"""

from gateway.schemas import HintLadder, ToolResponse
from teaching.tutor_policy import (
    DEFAULT_CHECKPOINTS,
    DEFAULT_HINT_GUIDANCE,
    DEFAULT_TUTOR_NOTES,
    REDIRECT_CHECKPOINTS,
    SOLUTION_DUMP_MESSAGE,
    GuardrailThresholds,
    PolicyContext,
    apply_policy,
    ensure_defaults,
    inspect_output,
    is_code_like,
    stringify_output,
)

CTX = PolicyContext(tool_name="explain_concept")


def fenced_text(fences: int, total_lines: int = 70) -> str:
    body = ["step"] * (total_lines - 2)
    first = "```" if fences >= 1 else "start"
    last = "```" if fences >= 2 else "end"
    return "\n".join([first] + body + [last])


# ==================== Defaults ====================

def test_defaults_fill_missing_fields():
    res = apply_policy(ToolResponse(output={"a": 1}), CTX)
    assert res.checkpoints == DEFAULT_CHECKPOINTS
    assert res.tutor_notes == DEFAULT_TUTOR_NOTES
    assert res.hint_ladder == HintLadder(level=1, guidance=DEFAULT_HINT_GUIDANCE)
    assert res.output == {"a": 1}


def test_blank_tutor_notes_are_replaced():
    res = ensure_defaults(ToolResponse(output="x", checkpoints=["q?"], tutor_notes="   "))
    assert res.tutor_notes == DEFAULT_TUTOR_NOTES
    assert res.checkpoints == ["q?"]


def test_custom_checkpoints_pass_unchanged():
    custom = [f"Question {i}?" for i in range(5)]
    raw = ToolResponse(output="short", checkpoints=custom, tutor_notes="My notes")
    res = ensure_defaults(raw)
    assert res.checkpoints == custom
    assert res.tutor_notes == "My notes"


def test_existing_hint_ladder_is_kept():
    ladder = HintLadder(level=2, guidance="Example included.")
    res = apply_policy(ToolResponse(output="x", hint_ladder=ladder), CTX)
    assert res.hint_ladder == ladder


def test_policy_is_idempotent():
    once = apply_policy(ToolResponse(output={"message": "hi"}), CTX)
    assert apply_policy(once, CTX) == once

    redirected = apply_policy(ToolResponse(output=fenced_text(2)), CTX)
    assert apply_policy(redirected, CTX) == redirected


def test_raw_response_not_mutated():
    raw = ToolResponse(output="x")
    apply_policy(raw, CTX)
    assert raw.checkpoints == []
    assert raw.hint_ladder is None


# ==================== Guardrail ====================

def test_two_fences_and_seventy_lines_trigger_redirect():
    raw = ToolResponse(output=fenced_text(2), checkpoints=["mine"], tutor_notes="mine")
    res = apply_policy(raw, CTX)
    assert res.output["message"] == SOLUTION_DUMP_MESSAGE
    assert res.output["originalSummary"].startswith("Concept explanations")
    assert res.checkpoints == REDIRECT_CHECKPOINTS
    assert res.hint_ladder.level == 1


def test_single_fence_does_not_trigger():
    text = fenced_text(1)
    res = apply_policy(ToolResponse(output=text), CTX)
    assert res.output == text


def test_long_code_like_output_triggers():
    text = "\n".join(["const x = 1;"] * 130)
    report = inspect_output(text)
    assert report.code_block_count == 0
    assert report.line_count == 130
    assert report.triggered


def test_long_prose_does_not_trigger():
    text = "\n".join(["just a sentence about HTTP"] * 130)
    assert not inspect_output(text).triggered


def test_thresholds_are_adjustable():
    strict = GuardrailThresholds(min_code_fences=1, fenced_line_limit=5)
    assert inspect_output(fenced_text(1, total_lines=10), strict).triggered
    assert not inspect_output(fenced_text(1, total_lines=10)).triggered


def test_unknown_tool_name_gets_generic_summary():
    res = apply_policy(ToolResponse(output=fenced_text(2)), PolicyContext(tool_name="mystery"))
    assert res.output["originalSummary"] == "We'll proceed step-by-step with checkpoints before code."


def test_code_like_lines():
    assert is_code_like("import os")
    assert is_code_like("  const f = () => 1")
    assert is_code_like("if (x) {")
    assert is_code_like("a = b;")
    assert not is_code_like("   ")
    assert not is_code_like("plain words")


def test_stringify_output():
    assert stringify_output(None) == ""
    assert stringify_output("raw") == "raw"
    assert stringify_output({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'


# ==================== Guardrail limits ====================

def test_fenced_line_limit_is_exclusive():
    assert not inspect_output(fenced_text(2, total_lines=60)).triggered
    assert inspect_output(fenced_text(2, total_lines=61)).triggered


def test_long_line_limit_is_exclusive():
    assert not inspect_output("\n".join(["a;"] * 120)).triggered
    assert inspect_output("\n".join(["a;"] * 121)).triggered


def test_code_ratio_limit_is_exclusive():
    at_limit = "\n".join(["a;"] * 49 + ["plain words"] * 91)
    report = inspect_output(at_limit)
    assert report.line_count == 140
    assert report.code_like_ratio == 0.35
    assert not report.triggered

    over_limit = "\n".join(["a;"] * 50 + ["plain words"] * 90)
    assert inspect_output(over_limit).triggered
