"""
Graph: an owning registry of vertices keyed by name, with edge mutations.

Vertices are not checked for reachability on entry or removal. In
particular remove_vertex() leaves other vertices' edges to the removed
vertex in place; use remove() for a full disconnect-and-delete.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from route_planner.graph.vertex import Vertex

logger = logging.getLogger(__name__)


class Graph:
    """
    A set of named vertices with convenience operations for adding and
    removing them and the directed, weighted edges between them.

    Mutations are not synchronized. Read-only path queries may run
    concurrently with each other but not with mutations.
    """

    def __init__(self, *vertices: Vertex) -> None:
        """
        Build a graph from pre-existing vertices.

        Connections of the given vertices are kept as-is.
        """
        self._vertices: dict[str, Vertex] = {}
        self.add_all(*vertices)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, name: str) -> Vertex | None:
        """Return the vertex registered under name, or None."""
        return self._vertices.get(name)

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    @property
    def names(self) -> list[str]:
        return list(self._vertices.keys())

    def contains(self, vertex: Vertex | None) -> bool:
        """Whether this exact vertex object is registered."""
        if vertex is None:
            return False
        return self._vertices.get(vertex.name) is vertex

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._vertices
        if isinstance(item, Vertex):
            return self.contains(item)
        return False

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices.values()))

    def edge_count(self) -> int:
        """Number of directed edges held by registered vertices."""
        return sum(v.degree for v in self._vertices.values())

    def adjacent(self, a: Vertex | None, b: Vertex | None) -> bool:
        """True iff a has a directed edge to b."""
        if a is None or b is None:
            return False
        return b in a.connections

    def neighbors(self, vertex: Vertex) -> set[Vertex]:
        """Vertices that vertex points to."""
        return set(vertex.connections)

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def add_vertex(self, vertex: Vertex | None) -> bool:
        """
        Insert or replace a vertex by name.

        Returns:
            True if the object registered under the name changed. Vertices
            with an empty name are ignored.
        """
        if vertex is None or not vertex.name:
            return False
        previous = self._vertices.get(vertex.name)
        self._vertices[vertex.name] = vertex
        return previous is not vertex

    def add_all(self, *vertices: Vertex) -> bool:
        """Add several vertices without touching their connections."""
        changed = False
        for vertex in vertices:
            changed = self.add_vertex(vertex) or changed
        return changed

    def add(self, a: Vertex, b: Vertex, weight: float) -> bool:
        """
        Add both vertices if needed and an undirected connection of the
        given weight between them.

        Returns:
            True if any vertex or edge was added or updated
        """
        return self.add_directed(a, weight, b, weight)

    def add_directed(self, a: Vertex, a_to_b: float, b: Vertex, b_to_a: float) -> bool:
        """
        Add both vertices if needed and a directed edge each way.

        Args:
            a: First vertex
            a_to_b: Weight of the edge a -> b
            b: Second vertex
            b_to_a: Weight of the edge b -> a

        Returns:
            True if any vertex or edge was added or updated
        """
        if a is None or b is None:
            return False
        # Evaluate every step; no short-circuiting
        changed = self.add_vertex(a)
        changed = self.add_vertex(b) or changed
        changed = self.add_edges(a, a_to_b, b, b_to_a) or changed
        return changed

    def add_edges(self, a: Vertex, a_to_b: float, b: Vertex, b_to_a: float) -> bool:
        """Set directed weights between two vertices without registering them."""
        changed = a.add_edge(b, a_to_b)
        changed = b.add_edge(a, b_to_a) or changed
        return changed

    # -------------------------------------------------------------------------
    # Removal
    # -------------------------------------------------------------------------

    def remove(self, vertex: Vertex | None) -> bool:
        """
        Disconnect a vertex from all of its neighbors, then delete it.

        Returns:
            True if the vertex or any connection was removed
        """
        if vertex is None:
            return False
        registered = self._vertices.get(vertex.name, vertex)
        changed = self.remove_edges_to(registered)
        return self.remove_vertex(registered) or changed

    def remove_vertex(self, vertex: Vertex | None) -> bool:
        """
        Delete the vertex registered under vertex.name.

        Connections from other vertices to it are NOT removed.
        """
        if vertex is None:
            return False
        if self._vertices.pop(vertex.name, None) is None:
            return False
        logger.debug(f"Removed vertex '{vertex.name}' from registry")
        return True

    def remove_edges(self, a: Vertex | None, b: Vertex | None) -> bool:
        """Remove the connections in both directions between a and b."""
        if a is None or b is None:
            return False
        changed = a.remove_edge(b)
        changed = b.remove_edge(a) or changed
        return changed

    def remove_edges_to(self, vertex: Vertex) -> bool:
        """Remove the bidirectional edge between vertex and each of its neighbors."""
        changed = False
        for neighbor in list(vertex.connections):
            changed = self.remove_edges(neighbor, vertex) or changed
        return changed

    # -------------------------------------------------------------------------
    # Debugging
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """Multi-line dump of every vertex and its outgoing edges."""
        lines = [f"Graph with {len(self)} vertices, {self.edge_count()} edges:"]
        for vertex in self._vertices.values():
            edges = ", ".join(
                f"{other.name}={weight:.1f}" for other, weight in vertex.connections.items()
            )
            lines.append(f"  {vertex} -> [{edges}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count()})"
