"""
Diagnostics - Question bank used to probe what a learner already knows.

At most one diagnostic set per curriculum topic.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


DEFAULT_DIAGNOSTICS_PATH = Path(__file__).resolve().parent / "data" / "diagnostics.json"


@dataclass
class DiagnosticQuestion:
    question: str
    what_it_tests: str


@dataclass
class DiagnosticSet:
    topic: str
    questions: List[DiagnosticQuestion] = field(default_factory=list)

    def numbered_questions(self) -> List[Dict]:
        """Questions as shown to the learner, with 1-based ids."""
        return [
            {"id": idx + 1, "question": q.question}
            for idx, q in enumerate(self.questions)
        ]


class DiagnosticBank:
    def __init__(self, data_path: Optional[str] = None):
        path = Path(data_path) if data_path else DEFAULT_DIAGNOSTICS_PATH
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self.sets: Dict[str, DiagnosticSet] = {}
        for topic_id, raw in data.items():
            self.sets[topic_id] = DiagnosticSet(
                topic=raw.get("topic", topic_id),
                questions=[
                    DiagnosticQuestion(question=q["question"], what_it_tests=q.get("whatItTests", ""))
                    for q in raw.get("questions", [])
                ],
            )

    def get(self, topic_id: str) -> Optional[DiagnosticSet]:
        return self.sets.get(topic_id)
