"""
Teaching module - The tutor policy every tool response passes through.

Components:
    - tutor_policy: defaults, solution-dump guardrail, hint ladder
"""

from .tutor_policy import PolicyContext, GuardrailThresholds, apply_policy

__all__ = [
    "PolicyContext",
    "GuardrailThresholds",
    "apply_policy",
]
