"""
Glossary - Curated plain-language explanations of core web dev concepts.

Entries are keyed by normalized concept name (trimmed, lowercased). A small
alias table maps curriculum topic IDs and long-form names onto those keys so
that "http_basics" or "Hypertext Transfer Protocol" find the HTTP entry.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


DEFAULT_GLOSSARY_PATH = Path(__file__).resolve().parent / "data" / "glossary.json"


@dataclass
class GlossaryEntry:
    concept: str
    short_definition: str
    why_it_matters: str
    common_mistakes: List[str] = field(default_factory=list)
    beginner_example: str = ""  # plain language, no big code dumps
    mini_exercise: str = ""


def normalize_concept(concept: str) -> str:
    """Lowercase and trim so lookups are forgiving (" HTTP " -> "http")."""
    return concept.strip().lower()


class Glossary:
    """Read-only lookup over the glossary table."""

    ALIASES = {
        "http_basics": "http",
        "hypertext transfer protocol": "http",
        "api_rest_basics": "rest",
        "rest api": "rest",
        "restful": "rest",
        "cors_basics": "cors",
        "cross-origin resource sharing": "cors",
        "sql_basics": "sql",
        "structured query language": "sql",
        "json web token": "jwt",
        "json web tokens": "jwt",
    }

    def __init__(self, data_path: Optional[str] = None):
        path = Path(data_path) if data_path else DEFAULT_GLOSSARY_PATH
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self.entries: Dict[str, GlossaryEntry] = {}
        for key, raw in data.items():
            self.entries[normalize_concept(key)] = GlossaryEntry(
                concept=raw["concept"],
                short_definition=raw["shortDefinition"],
                why_it_matters=raw["whyItMatters"],
                common_mistakes=list(raw.get("commonMistakes", [])),
                beginner_example=raw.get("beginnerExample", ""),
                mini_exercise=raw.get("miniExercise", ""),
            )

    def resolve(self, concept: str) -> str:
        """Normalized key for a concept, after alias substitution."""
        key = normalize_concept(concept)
        return self.ALIASES.get(key, key)

    def lookup(self, concept: str) -> Optional[GlossaryEntry]:
        return self.entries.get(self.resolve(concept))

    def concepts(self) -> List[str]:
        """Display names of every entry, in table order."""
        return [entry.concept for entry in self.entries.values()]
