"""
Knowledge Graph - Curriculum topics, prerequisite DAG and learning tracks.

Features:
    - Topic nodes loaded from a static JSON table
    - Prerequisite relationships as directed edges (prerequisite -> topic)
    - Named tracks: ordered topic lists, one linear path each
    - Load-time integrity checks (no cycles, no dangling references)
"""

import json
import networkx as nx
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Optional


DEFAULT_CURRICULUM_PATH = Path(__file__).resolve().parent / "data" / "curriculum.json"


class CurriculumError(Exception):
    """Raised when the static curriculum data breaks a graph invariant."""
    pass


@dataclass
class TopicNode:
    """A single learning topic in the curriculum graph."""
    id: str
    title: str
    description: str
    prerequisites: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "prerequisites": list(self.prerequisites),
        }


class KnowledgeGraph:
    """
    Directed Acyclic Graph of curriculum topics with prerequisites.

    The graph is read-only once loaded. Tracks are kept beside it as
    plain ordered lists because sequencing walks them linearly.
    """

    def __init__(self, data_path: Optional[str] = None):
        """Load the curriculum file and build the graph."""
        self.data_path = Path(data_path) if data_path else DEFAULT_CURRICULUM_PATH
        self.graph = nx.DiGraph()
        self.topics: Dict[str, TopicNode] = {}
        self.tracks: Dict[str, List[str]] = {}

        with open(self.data_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self._build_graph(data)
        self._check_integrity()

    @classmethod
    def from_dict(cls, data: Dict) -> "KnowledgeGraph":
        """Build a graph from an in-memory table (same shape as the JSON file)."""
        kg = cls.__new__(cls)
        kg.data_path = None
        kg.graph = nx.DiGraph()
        kg.topics = {}
        kg.tracks = {}
        kg._build_graph(data)
        kg._check_integrity()
        return kg

    def _build_graph(self, data: Dict):
        """Create nodes and edges from topic data."""
        for raw in data.get("topics", []):
            node = TopicNode(
                id=raw["id"],
                title=raw["title"],
                description=raw.get("description", ""),
                prerequisites=list(raw.get("prerequisites", [])),
                tags=list(raw.get("tags", [])),
            )
            self.topics[node.id] = node
            self.graph.add_node(node.id)

            # Add edges FROM prerequisites TO this topic
            for prereq in node.prerequisites:
                self.graph.add_edge(prereq, node.id)

        for name, topic_ids in data.get("tracks", {}).items():
            self.tracks[name] = list(topic_ids)

    def _check_integrity(self):
        dangling = sorted(n for n in self.graph.nodes if n not in self.topics)
        if dangling:
            raise CurriculumError(f"Unknown prerequisite topics: {', '.join(dangling)}")

        if not nx.is_directed_acyclic_graph(self.graph):
            cycle = nx.find_cycle(self.graph)
            path = " -> ".join(edge[0] for edge in cycle)
            raise CurriculumError(f"Prerequisite cycle detected: {path}")

        for name, topic_ids in self.tracks.items():
            unknown = [t for t in topic_ids if t not in self.topics]
            if unknown:
                raise CurriculumError(f"Track '{name}' references unknown topics: {', '.join(unknown)}")

    # ==================== Query Methods ====================

    def is_topic_id(self, value: str) -> bool:
        """True if the string names a topic in the graph."""
        return value in self.topics

    def get_topic(self, topic_id: str) -> Optional[TopicNode]:
        """Get full topic data by ID."""
        return self.topics.get(topic_id)

    def get_prerequisites(self, topic_id: str) -> List[str]:
        """Immediate prerequisites, in the order the topic declares them."""
        node = self.topics.get(topic_id)
        return list(node.prerequisites) if node else []

    # ==================== Tracks ====================

    def track_names(self) -> List[str]:
        return list(self.tracks.keys())

    def get_track(self, name: str) -> List[str]:
        """Ordered topic IDs of a track (empty if the track is unknown)."""
        return list(self.tracks.get(name, []))

    # ==================== Statistics ====================

    def get_stats(self) -> dict:
        """Get graph statistics."""
        return {
            "total_topics": len(self.topics),
            "total_edges": self.graph.number_of_edges(),
            "tracks": {name: len(ids) for name, ids in self.tracks.items()},
            "max_depth": nx.dag_longest_path_length(self.graph) if self.topics else 0
        }


_default_graph: Optional[KnowledgeGraph] = None


def get_knowledge_graph() -> KnowledgeGraph:
    """Process-wide curriculum graph, loaded on first use."""
    global _default_graph
    if _default_graph is None:
        import config
        _default_graph = KnowledgeGraph(str(config.DATA_DIR / "curriculum.json"))
    return _default_graph
