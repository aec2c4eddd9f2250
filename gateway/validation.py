"""
Validation - Turn raw request data into typed models without raising.

Every failure comes back as a ValidationResult carrying an error code and a
flat list of {path, message} issues the caller can send straight to a client.

Error codes:
    invalid_request     - the envelope itself is malformed
    unknown_tool        - no input schema exists for the tool name
    invalid_tool_input  - the tool input does not match its schema
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .schemas import RequestEnvelope, TOOL_INPUT_SCHEMAS

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_REQUEST = "invalid_request"
UNKNOWN_TOOL = "unknown_tool"
INVALID_TOOL_INPUT = "invalid_tool_input"


@dataclass
class Issue:
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message}


@dataclass
class ValidationResult(Generic[T]):
    """Success with typed data, or failure with an error code and issues."""
    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None
    issues: List[Issue] = field(default_factory=list)

    @classmethod
    def success(cls, data: T) -> "ValidationResult[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str, issues: List[Issue]) -> "ValidationResult[T]":
        return cls(ok=False, error=error, issues=issues)

    def issues_as_dicts(self) -> List[Dict[str, str]]:
        return [issue.to_dict() for issue in self.issues]


def format_issues(error: ValidationError) -> List[Issue]:
    """Flatten pydantic's error tree into path/message pairs."""
    return [
        Issue(
            path=".".join(str(part) for part in err["loc"]) if err["loc"] else "(root)",
            message=err["msg"],
        )
        for err in error.errors()
    ]


def validate(schema: Type[BaseModel], value: Any, error_code: str) -> ValidationResult:
    """Validate `value` against `schema`, reporting failures under `error_code`."""
    try:
        return ValidationResult.success(schema.model_validate(value))
    except ValidationError as e:
        return ValidationResult.failure(error_code, format_issues(e))


def validate_envelope(raw: Any) -> ValidationResult[RequestEnvelope]:
    result = validate(RequestEnvelope, raw, INVALID_REQUEST)
    if not result.ok:
        logger.info("Rejected request envelope: %s", result.issues_as_dicts())
    return result


def validate_tool_input(tool_name: str, raw_input: Any) -> ValidationResult[BaseModel]:
    schema = TOOL_INPUT_SCHEMAS.get(tool_name)
    if schema is None:
        return ValidationResult.failure(
            UNKNOWN_TOOL,
            [Issue(path="toolName", message=f"Unknown tool: {tool_name}")],
        )

    result = validate(schema, raw_input, INVALID_TOOL_INPUT)
    if not result.ok:
        logger.info("Rejected input for tool %s: %s", tool_name, result.issues_as_dicts())
    return result
