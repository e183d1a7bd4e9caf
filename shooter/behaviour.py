"""Behaviour-tree nodes: the status they report and the composites that combine them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, TypeVar


class Status(Enum):
    """The outcome of processing a node."""

    SUCCESS = "success"
    FAILURE = "failure"
    RUNNING = "running"


NodeT = TypeVar("NodeT", bound="Node")


class Node(ABC):
    """A behaviour-tree node."""

    @abstractmethod
    def process(self) -> Status:
        """Run the node once and report its status."""


class CompositeNode(Node):
    """A node with an ordered list of children."""

    def __init__(self) -> None:
        self._children: list[Node] = []

    def add_child_node(self, node_type: type[NodeT], *args: Any, **kwargs: Any) -> NodeT:
        """Create a child of ``node_type`` from the arguments, append it and return it."""
        node = node_type(*args, **kwargs)
        self._children.append(node)
        return node

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)


class DecoratorNode(Node):
    """A node wrapping a single child."""

    def __init__(self) -> None:
        self._child: Node | None = None

    def set_child_node(self, node_type: type[NodeT], *args: Any, **kwargs: Any) -> NodeT:
        """Create a child of ``node_type`` from the arguments, replacing any previous one."""
        node = node_type(*args, **kwargs)
        self._child = node
        return node

    @property
    def child(self) -> Node | None:
        return self._child


class Selector(CompositeNode):
    """Runs children in order until one does not fail."""

    def process(self) -> Status:
        for child in self._children:
            status = child.process()
            if status is not Status.FAILURE:
                return status
        return Status.FAILURE


class Sequence(CompositeNode):
    """Runs children in order until one does not succeed."""

    def process(self) -> Status:
        for child in self._children:
            status = child.process()
            if status is not Status.SUCCESS:
                return status
        return Status.SUCCESS