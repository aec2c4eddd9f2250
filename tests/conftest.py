"""Shared fixtures for the tutor gateway tests."""

import sys
from pathlib import Path

import pytest

# Repository root on sys.path so `core`, `gateway`, `teaching` import without installing
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.diagnostics import DiagnosticBank
from core.gap_classifier import GapClassifier
from core.glossary import Glossary
from core.knowledge_graph import KnowledgeGraph
from core.sequencer import TopicSequencer
from gateway.registry import ToolRegistry
from gateway.tools import (
    AnalyzeAssessmentTool,
    AssessKnowledgeTool,
    ExplainConceptTool,
    NextTopicTool,
)


@pytest.fixture(scope="session")
def kg():
    return KnowledgeGraph()


@pytest.fixture(scope="session")
def glossary():
    return Glossary()


@pytest.fixture(scope="session")
def diagnostics():
    return DiagnosticBank()


@pytest.fixture
def classifier():
    return GapClassifier()


@pytest.fixture
def sequencer(kg):
    return TopicSequencer(kg)


@pytest.fixture
def abc_graph():
    """Three-topic chain A -> B -> C on a single track."""
    return KnowledgeGraph.from_dict({
        "topics": [
            {"id": "A", "title": "Topic A", "description": "first"},
            {"id": "B", "title": "Topic B", "description": "second", "prerequisites": ["A"]},
            {"id": "C", "title": "Topic C", "description": "third", "prerequisites": ["B"]},
        ],
        "tracks": {"abc": ["A", "B", "C"]},
    })


@pytest.fixture
def registry(kg, glossary, diagnostics):
    """A fresh registry with every built-in tool, sealed."""
    reg = ToolRegistry()
    reg.register(ExplainConceptTool(glossary, kg))
    reg.register(NextTopicTool(kg))
    reg.register(AssessKnowledgeTool(diagnostics, kg))
    reg.register(AnalyzeAssessmentTool(knowledge_graph=kg))
    reg.seal()
    return reg
