"""Tests for core/knowledge_graph.py"""

import networkx as nx
import pytest

from core.knowledge_graph import CurriculumError, KnowledgeGraph


def test_curriculum_structure(kg):
    stats = kg.get_stats()
    assert stats["total_topics"] == 28
    assert set(kg.track_names()) == {"foundation", "frontend", "backend", "fullstack"}
    assert nx.is_directed_acyclic_graph(kg.graph)


def test_tracks_only_reference_known_topics(kg):
    for name in kg.track_names():
        for topic_id in kg.get_track(name):
            assert kg.is_topic_id(topic_id), f"{name} -> {topic_id}"


def test_prerequisites(kg):
    assert kg.get_prerequisites("browser_request_lifecycle") == ["http_basics", "dns_hosting"]
    assert kg.get_prerequisites("internet_basics") == []
    assert kg.get_prerequisites("not_a_topic") == []


def test_stats_on_small_graph(abc_graph):
    assert abc_graph.get_stats() == {
        "total_topics": 3,
        "total_edges": 2,
        "tracks": {"abc": 3},
        "max_depth": 2,
    }


def test_get_track_returns_copy(kg):
    track = kg.get_track("fullstack")
    track.append("something_else")
    assert "something_else" not in kg.get_track("fullstack")
    assert kg.get_track("no_such_track") == []


def test_topic_to_dict(kg):
    node = kg.get_topic("http_basics")
    assert node.to_dict() == {
        "id": "http_basics",
        "title": "HTTP Basics",
        "description": node.description,
        "prerequisites": ["internet_basics"],
    }


def test_cycle_is_rejected():
    with pytest.raises(CurriculumError, match="cycle"):
        KnowledgeGraph.from_dict({
            "topics": [
                {"id": "A", "title": "A", "prerequisites": ["B"]},
                {"id": "B", "title": "B", "prerequisites": ["A"]},
            ],
        })


def test_dangling_prerequisite_is_rejected():
    with pytest.raises(CurriculumError, match="ghost"):
        KnowledgeGraph.from_dict({
            "topics": [{"id": "A", "title": "A", "prerequisites": ["ghost"]}],
        })


def test_unknown_track_topic_is_rejected():
    with pytest.raises(CurriculumError, match="Track 'x'"):
        KnowledgeGraph.from_dict({
            "topics": [{"id": "A", "title": "A"}],
            "tracks": {"x": ["A", "B"]},
        })
