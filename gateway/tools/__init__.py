"""
Tools - The content-producing handlers behind the gateway.

    - explain_concept: glossary explanations with a two-level hint ladder
    - next_topic: next topic on a curriculum track
    - assess_knowledge: diagnostic questions for a topic
    - analyze_assessment: gap analysis of diagnostic answers
"""

from core.diagnostics import DiagnosticBank
from core.glossary import Glossary
from core.knowledge_graph import get_knowledge_graph

from ..registry import ToolRegistry
from .analyze_assessment import AnalyzeAssessmentTool
from .assess_knowledge import AssessKnowledgeTool
from .explain_concept import ExplainConceptTool
from .next_topic import NextTopicTool


def register_default_tools(registry: ToolRegistry) -> ToolRegistry:
    """Register every built-in tool. Does not seal the registry."""
    import config

    kg = get_knowledge_graph()
    glossary = Glossary(str(config.DATA_DIR / "glossary.json"))
    diagnostics = DiagnosticBank(str(config.DATA_DIR / "diagnostics.json"))

    registry.register(ExplainConceptTool(glossary, kg))
    registry.register(NextTopicTool(kg))
    registry.register(AssessKnowledgeTool(diagnostics, kg))
    registry.register(AnalyzeAssessmentTool(knowledge_graph=kg))
    return registry


__all__ = [
    "ExplainConceptTool",
    "NextTopicTool",
    "AssessKnowledgeTool",
    "AnalyzeAssessmentTool",
    "register_default_tools",
]
