"""
End-to-end flow against a running tutor gateway.

    1. assess_knowledge(topic)
    2. analyze_assessment(topic, answers)
    3. follow the recommendation (explain_concept / next_topic)

Usage:
    python scripts/e2e_flow.py
    TOPIC=cors_basics python scripts/e2e_flow.py
    python scripts/e2e_flow.py --topic http_basics --answers '["a1", "a2", "a3"]'
"""

import argparse
import json
import os
import sys
from typing import Dict, List, Optional

import httpx


DEFAULT_ANSWERS = [
    "GET is used to retrieve data; POST is used to send data to create something.",
    "404 means the resource wasn't found on the server.",
    "Headers are key/value metadata sent with the request and response.",
]


class FlowError(Exception):
    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = details


def divider(title: str):
    print("\n" + "-" * 80)
    print(title)
    print("-" * 80)


def pretty(obj):
    print(json.dumps(obj, indent=2))


def post_mcp(client: httpx.Client, request: Dict) -> Dict:
    res = client.post("/mcp", json=request)
    if res.status_code >= 400:
        try:
            body = res.json()
            reason = body.get("message") or body.get("error") or "Unknown error"
        except ValueError:
            body = res.text
            reason = body
        raise FlowError(f"HTTP {res.status_code} calling {res.url}: {reason}", details=body)
    return res.json()


def show(resp: Dict):
    pretty({
        "output": resp.get("output"),
        "checkpoints": resp.get("checkpoints"),
        "tutorNotes": resp.get("tutorNotes"),
        "hintLadder": resp.get("hintLadder"),
    })


def extract_recommendation(resp: Dict) -> Optional[Dict]:
    output = resp.get("output")
    if isinstance(output, dict):
        return output.get("recommendation")
    return None


def run_flow(host: str, topic: str, answers: List[str], previous_topics: List[str], learner_level: str = "beginner"):
    user_context = {"learnerLevel": learner_level, "previousTopics": previous_topics}

    with httpx.Client(base_url=host, timeout=10.0) as client:
        divider("0) Server sanity check: GET /health")
        pretty(client.get("/health").json())

        divider(f"1) assess_knowledge(topic={topic})")
        show(post_mcp(client, {
            "toolName": "assess_knowledge",
            "input": {"topic": topic},
            "userContext": user_context,
        }))

        divider(f"2) analyze_assessment(topic={topic})")
        analyze_resp = post_mcp(client, {
            "toolName": "analyze_assessment",
            "input": {"topic": topic, "answers": answers},
            "userContext": user_context,
        })
        show(analyze_resp)

        divider("3) Follow recommendation")
        recommendation = extract_recommendation(analyze_resp)
        if not recommendation:
            print("No recommendation found in analyze_assessment response. Stopping.")
            return

        print("Recommendation:")
        pretty(recommendation)

        next_step = recommendation.get("nextStep")
        if not next_step:
            print("Recommendation missing nextStep. Stopping.")
            return
        if next_step == "practice_task":
            print("practice_task recommended, but there is no practice_task tool yet.")
            return

        show(post_mcp(client, {
            "toolName": next_step,
            "input": recommendation.get("payload") or {},
            "userContext": user_context,
        }))

    divider("Done")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the assess -> analyze -> follow-up flow")
    parser.add_argument("--host", default=os.getenv("MCP_HOST", "http://127.0.0.1:3333"))
    parser.add_argument("--topic", default=os.getenv("TOPIC", "http_basics"))
    parser.add_argument(
        "--answers",
        default=os.getenv("ANSWERS_JSON"),
        help="JSON array of answer strings, in question order",
    )
    parser.add_argument(
        "--previous-topics",
        default=os.getenv("PREVIOUS_TOPICS", ""),
        help="Comma-separated topic IDs already completed",
    )
    parser.add_argument("--learner-level", default="beginner", choices=["beginner", "intermediate"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    answers = json.loads(args.answers) if args.answers else list(DEFAULT_ANSWERS)
    previous_topics = [t.strip() for t in args.previous_topics.split(",") if t.strip()]

    try:
        run_flow(args.host, args.topic, answers, previous_topics, args.learner_level)
    except (FlowError, httpx.HTTPError) as e:
        print("\nE2E flow failed", file=sys.stderr)
        print(str(e), file=sys.stderr)
        details = getattr(e, "details", None)
        if details:
            print("\nDetails:", file=sys.stderr)
            pretty(details)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
