"""
Topic Sequencer - Picks the next topic on a learning track.

Policy:
    - Walk the track left to right, first uncompleted topic wins
    - Prerequisites are advisory: missing ones are reported, never enforced
    - "Just finished X" is self-reported and unioned into the completed set
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from .knowledge_graph import KnowledgeGraph, TopicNode


DEFAULT_TRACK = "fullstack"

IN_SEQUENCE_MESSAGE = "This is the next topic in the track sequence and unlocks later concepts."


@dataclass
class Placement:
    """Why a topic is placed where it is."""
    missing_prerequisites: List[str] = field(default_factory=list)
    message: str = IN_SEQUENCE_MESSAGE

    @property
    def prerequisites_met(self) -> bool:
        return not self.missing_prerequisites


def next_topic(track: Iterable[str], completed: Set[str]) -> Optional[str]:
    """
    Return the first topic in `track` not in `completed`.

    Returns None when every topic on the track is completed.
    """
    for topic_id in track:
        if topic_id not in completed:
            return topic_id
    return None


def explain_placement(node: TopicNode, completed: Set[str]) -> Placement:
    """Report unmet prerequisites for a topic without blocking it."""
    missing = [p for p in node.prerequisites if p not in completed]
    if missing:
        return Placement(
            missing_prerequisites=missing,
            message=(
                f"You asked for this next, but you're missing prerequisites: {', '.join(missing)}. "
                "We can either backfill those or proceed carefully."
            ),
        )
    return Placement()


class TopicSequencer:
    """Sequencing over a KnowledgeGraph's tracks."""

    def __init__(self, knowledge_graph: KnowledgeGraph):
        self.kg = knowledge_graph

    def completed_set(self, previous_topics: Iterable[str], just_completed: Optional[str] = None) -> Set[str]:
        """
        Known topic IDs the learner reports as done.

        Unknown identifiers are dropped rather than rejected.
        """
        completed = {t for t in previous_topics if self.kg.is_topic_id(t)}
        return self.mark_completed(completed, just_completed)

    def mark_completed(self, completed: Set[str], just_completed: Optional[str]) -> Set[str]:
        if just_completed and self.kg.is_topic_id(just_completed):
            return completed | {just_completed}
        return set(completed)

    def next_topic(self, track_name: str, completed: Set[str]) -> Optional[str]:
        return next_topic(self.kg.get_track(track_name), completed)

    def explain_placement(self, topic_id: str, completed: Set[str]) -> Placement:
        return explain_placement(self.kg.get_topic(topic_id), completed)
