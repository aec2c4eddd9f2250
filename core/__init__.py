"""
Core module - Curriculum modeling, sequencing, and gap analysis.

Components:
    - knowledge_graph: Topic prerequisite DAG and learning tracks
    - sequencer: Next-topic selection with advisory prerequisites
    - gap_classifier: Heuristic classification of diagnostic answers
    - glossary: Plain-language concept explanations
    - diagnostics: Diagnostic question bank per topic
"""

from .knowledge_graph import KnowledgeGraph, TopicNode, CurriculumError, get_knowledge_graph
from .sequencer import TopicSequencer, Placement, next_topic, explain_placement
from .gap_classifier import GapClassifier, AnswerAnalysis, AssessmentAnalysisResult
from .glossary import Glossary, GlossaryEntry
from .diagnostics import DiagnosticBank, DiagnosticSet

__all__ = [
    "KnowledgeGraph",
    "TopicNode",
    "CurriculumError",
    "get_knowledge_graph",
    "TopicSequencer",
    "Placement",
    "next_topic",
    "explain_placement",
    "GapClassifier",
    "AnswerAnalysis",
    "AssessmentAnalysisResult",
    "Glossary",
    "GlossaryEntry",
    "DiagnosticBank",
    "DiagnosticSet",
]
