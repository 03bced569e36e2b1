"""
Layout analysis - Summarize the structure and footprint of a layout.

Provides read-only metrics a caller can check after arranging elements.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import Optional

from .models import (
    DrawingElement,
    ShapeElement,
    active_relationships,
    drawing_elements,
    relationship_elements,
)
from .overlap import count_overlaps


@dataclass
class ConnectedComponent:
    """A connected component in the element graph."""
    node_ids: list[str] = field(default_factory=list)
    edge_count: int = 0

    @property
    def size(self) -> int:
        return len(self.node_ids)


@dataclass
class BoundingBox:
    """Axis-aligned box enclosing all placed nodes."""
    x: float
    y: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.x

    @property
    def height(self) -> float:
        return self.bottom - self.y

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class LayoutSummary:
    """Summary of a laid-out element list."""
    total_nodes: int
    total_edges: int
    inert_edges: int
    nodes_by_shape: dict[str, int]
    connected_components: int
    orphan_count: int
    overlap_count: int
    bounding_box: Optional[BoundingBox]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "total_nodes": self.total_nodes,
            "total_edges": self.total_edges,
            "inert_edges": self.inert_edges,
            "nodes_by_shape": self.nodes_by_shape,
            "connected_components": self.connected_components,
            "orphan_count": self.orphan_count,
            "overlap_count": self.overlap_count,
        }
        if self.bounding_box is not None:
            box = self.bounding_box
            result["bounding_box"] = {
                "x": box.x,
                "y": box.y,
                "width": box.width,
                "height": box.height,
            }
        return result


def bounding_box(nodes: list[DrawingElement]) -> Optional[BoundingBox]:
    """Get the box enclosing all nodes, or None when there are none."""
    if not nodes:
        return None
    boxes = [n.bounds() for n in nodes]
    return BoundingBox(
        x=min(b[0] for b in boxes),
        y=min(b[1] for b in boxes),
        right=max(b[2] for b in boxes),
        bottom=max(b[3] for b in boxes),
    )


def find_connected_components(elements: list[ShapeElement]) -> list[ConnectedComponent]:
    """
    Find all connected components using BFS.

    Edges are treated as undirected; edges pointing outside the list are
    ignored, the same way the layout strategies ignore them.

    Args:
        elements: Mixed nodes and edges

    Returns:
        List of ConnectedComponent objects, in first-node order
    """
    nodes = drawing_elements(elements)
    if not nodes:
        return []

    edges = active_relationships(relationship_elements(elements), nodes)

    # Build adjacency list (undirected)
    adjacency: dict[int, set[int]] = {id(n): set() for n in nodes}
    edge_counts: dict[int, int] = defaultdict(int)
    for edge in edges:
        a, b = id(edge.connector1), id(edge.connector2)
        adjacency[a].add(b)
        adjacency[b].add(a)
        edge_counts[a] += 1

    by_key = {id(n): n for n in nodes}
    visited: set[int] = set()
    components: list[ConnectedComponent] = []

    for node in nodes:
        start = id(node)
        if start in visited:
            continue

        component = ConnectedComponent()
        queue = deque([start])
        visited.add(start)

        while queue:
            current = queue.popleft()
            component.node_ids.append(by_key[current].id)
            component.edge_count += edge_counts[current]
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        components.append(component)

    return components


def summarize_layout(elements: list[ShapeElement], padding: float = 0.0) -> LayoutSummary:
    """
    Generate a summary of an element list's current layout.

    Args:
        elements: Mixed nodes and edges, typically after arrange_elements
        padding: Clearance used when counting overlaps

    Returns:
        LayoutSummary object with all analysis results
    """
    nodes = drawing_elements(elements)
    edges = relationship_elements(elements)
    active = active_relationships(edges, nodes)

    shape_counts: dict[str, int] = defaultdict(int)
    for node in nodes:
        shape_counts[node.shape_type] += 1

    connected: set[int] = set()
    for edge in active:
        connected.add(id(edge.connector1))
        connected.add(id(edge.connector2))

    return LayoutSummary(
        total_nodes=len(nodes),
        total_edges=len(edges),
        inert_edges=len(edges) - len(active),
        nodes_by_shape=dict(shape_counts),
        connected_components=len(find_connected_components(elements)),
        orphan_count=sum(1 for n in nodes if id(n) not in connected),
        overlap_count=count_overlaps(nodes, padding),
        bounding_box=bounding_box(nodes),
    )
