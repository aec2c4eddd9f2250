"""
FastAPI Backend for the Tutor Gateway

"Checkpoints before code."

Endpoints:
    GET  /health    - Liveness check
    POST /mcp       - Run one tutor tool: {toolName, input, userContext?}

Every successful /mcp response passes through the tutor policy, so it always
carries checkpoints, tutor notes and a hint ladder.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from core.knowledge_graph import get_knowledge_graph
from gateway.dispatcher import process_request
from gateway.registry import default_registry
from gateway.tools import register_default_tools
from gateway.validation import INVALID_REQUEST, INVALID_TOOL_INPUT, UNKNOWN_TOOL

config.configure_logging()
logger = logging.getLogger(__name__)

# ==================== Initialize ====================

app = FastAPI(
    title="Tutor Gateway API",
    description="Tool gateway for a learning assistant that guides instead of solving",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register tools once, then serve read-only
register_default_tools(default_registry)
default_registry.seal()
logger.info("Curriculum loaded: %s", get_knowledge_graph().get_stats())

ERROR_STATUS = {
    INVALID_REQUEST: 400,
    UNKNOWN_TOOL: 404,
    INVALID_TOOL_INPUT: 400,
}

ERROR_MESSAGES = {
    INVALID_REQUEST: "Request body is not a valid tool request.",
    UNKNOWN_TOOL: "No tool is registered under that name.",
    INVALID_TOOL_INPUT: "Tool input does not match the tool's schema.",
}


def error_response(error: str, issues: list) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(error, 400),
        content={
            "error": error,
            "message": ERROR_MESSAGES.get(error, "Request rejected."),
            "issues": issues,
        },
    )


# ==================== Middleware & Handlers ====================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("HTTP request %s %s", request.method, request.url.path)
    return await call_next(request)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url)
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "message": "Something went wrong."},
    )


# ==================== Endpoints ====================

@app.get("/health")
def health():
    return {"ok": True}


@app.post("/mcp")
async def mcp(request: Request):
    """
    Validate the envelope and tool input, run the tool, apply tutor policy.

    Errors:
        400 invalid_request      - body is not JSON or not a valid envelope
        404 unknown_tool         - toolName has no input schema
        400 invalid_tool_input   - input fails the tool's schema
    """
    try:
        body = await request.json()
    except ValueError:
        return error_response(
            INVALID_REQUEST,
            [{"path": "(root)", "message": "Request body must be valid JSON"}],
        )

    result = await process_request(body)
    if not result.ok:
        return error_response(result.error, result.issues)

    return result.response.to_payload()


# ==================== Run Server ====================

if __name__ == "__main__":
    import uvicorn
    logger.info("Server listening on http://%s:%d", config.HOST, config.PORT)
    uvicorn.run("main:app", host=config.HOST, port=config.PORT)
