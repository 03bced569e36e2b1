"""
Core data models for laid-out diagrams.

These models define the geometry the layout engine works on:
- Position and Size value types (canvas space, origin top-left, y down)
- Drawing elements (nodes) that get positioned
- Relationship elements (edges) that reference two drawing elements

Ownership Convention:
- Edges hold the very same DrawingElement instances as the element list,
  never copies, so a position written by the engine is visible through
  every reference.
- Nodes are compared by identity, not by field values, throughout the
  engine (two nodes with equal fields are still two nodes).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator
import uuid


class ElementType(str, Enum):
    """Discriminator for the two element kinds."""
    DRAWING = "drawing"
    RELATIONSHIP = "relationship"


class NodeShape(str, Enum):
    """Common shape kinds. DrawingElement.shape_type stays free-form."""
    RECTANGLE = "rectangle"
    CLASS = "class"
    ENTITY = "entity"
    INTERFACE = "interface"
    ELLIPSE = "ellipse"


class RelationshipType(str, Enum):
    """Common relationship kinds. RelationshipElement.relationship_type stays free-form."""
    ASSOCIATION = "association"
    INHERITANCE = "inheritance"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    DEPENDENCY = "dependency"


# Defaults for new drawing elements
DEFAULT_NODE_WIDTH = 100.0
DEFAULT_NODE_HEIGHT = 60.0
DEFAULT_NODE_COLOR = "#FFFFFF"


def generate_node_id() -> str:
    """Generate a unique node ID."""
    return f"n{uuid.uuid4().hex[:8]}"


def generate_edge_id() -> str:
    """Generate a unique edge ID."""
    return f"e{uuid.uuid4().hex[:8]}"


class Position(BaseModel):
    """A point in canvas space."""
    x: float = 0.0
    y: float = 0.0


class Size(BaseModel):
    """Width and height of an element's bounding box."""
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)


class ShapeElement(BaseModel, ABC):
    """
    Anything with identity, a position, a size and an element-type tag.

    Not instantiated directly; see DrawingElement and RelationshipElement.
    """
    id: str = ""
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)

    @property
    @abstractmethod
    def element_type(self) -> ElementType:
        """The kind of element (drawing or relationship)."""

    @property
    def is_node(self) -> bool:
        return self.element_type == ElementType.DRAWING

    def set_position(self, x: Union[Position, float], y: Optional[float] = None) -> None:
        """Set the position from a Position or from two coordinates."""
        if isinstance(x, Position):
            self.position = Position(x=x.x, y=x.y)
        else:
            self.position = Position(x=x, y=y if y is not None else 0.0)

    def set_size(self, width: Union[Size, float], height: Optional[float] = None) -> None:
        """Set the size from a Size or from two dimensions."""
        if isinstance(width, Size):
            self.size = Size(width=width.width, height=width.height)
        else:
            self.size = Size(width=width, height=height if height is not None else 0.0)

    def center(self) -> tuple[float, float]:
        """Get the center point of the element."""
        return (
            self.position.x + self.size.width / 2,
            self.position.y + self.size.height / 2,
        )

    def bounds(self) -> tuple[float, float, float, float]:
        """Get the bounding box (x, y, right, bottom)."""
        return (
            self.position.x,
            self.position.y,
            self.position.x + self.size.width,
            self.position.y + self.size.height,
        )


class DrawingElement(ShapeElement):
    """A node in the diagram; the only kind of element the engine moves."""
    id: str = Field(default_factory=generate_node_id)
    name: str = ""
    shape_type: str = NodeShape.RECTANGLE.value
    color: str = DEFAULT_NODE_COLOR
    size: Size = Field(
        default_factory=lambda: Size(width=DEFAULT_NODE_WIDTH, height=DEFAULT_NODE_HEIGHT)
    )

    @property
    def element_type(self) -> ElementType:
        return ElementType.DRAWING

    def __repr__(self) -> str:
        return f"DrawingElement(id={self.id!r}, name={self.name!r})"

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "type": self.element_type.value,
            "name": self.name,
            "shape": self.shape_type,
            "color": self.color,
            "x": self.position.x,
            "y": self.position.y,
            "width": self.size.width,
            "height": self.size.height,
        }


class RelationshipElement(ShapeElement):
    """
    A directed edge from connector1 to connector2.

    The size is always zero: an edge's visual path is derived from its
    endpoints by whoever renders it, so the engine never positions edges.
    Either connector may be None, which makes the edge inert for layout.
    """
    id: str = Field(default_factory=generate_edge_id)
    connector1: Optional[DrawingElement] = None
    connector2: Optional[DrawingElement] = None
    relationship_type: str = RelationshipType.ASSOCIATION.value
    label: str = ""

    @field_validator("size", mode="after")
    @classmethod
    def zero_size(cls, value: Size) -> Size:
        """Edges never occupy space."""
        return Size()

    @property
    def element_type(self) -> ElementType:
        return ElementType.RELATIONSHIP

    def set_size(self, width: Union[Size, float], height: Optional[float] = None) -> None:
        """Edges stay zero-sized; the call is accepted and ignored."""
        self.size = Size()

    def __repr__(self) -> str:
        return (
            f"RelationshipElement(id={self.id!r}, "
            f"{self._connector_id(self.connector1)!r} -> {self._connector_id(self.connector2)!r})"
        )

    @staticmethod
    def _connector_id(connector: Optional[DrawingElement]) -> Optional[str]:
        return connector.id if connector is not None else None

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dict (connectors as node IDs)."""
        return {
            "id": self.id,
            "type": self.element_type.value,
            "source": self._connector_id(self.connector1),
            "target": self._connector_id(self.connector2),
            "relationship": self.relationship_type,
            "label": self.label,
        }


# --- Element list helpers ---

def drawing_elements(elements: list[ShapeElement]) -> list[DrawingElement]:
    """Get only the drawing elements (nodes), in input order."""
    return [e for e in elements if e is not None and e.element_type == ElementType.DRAWING]


def relationship_elements(elements: list[ShapeElement]) -> list[RelationshipElement]:
    """Get only the relationship elements (edges), in input order."""
    return [e for e in elements if e is not None and e.element_type == ElementType.RELATIONSHIP]


def active_relationships(
    relationships: list[RelationshipElement],
    nodes: list[DrawingElement]
) -> list[RelationshipElement]:
    """
    Get the edges whose both connectors are among the given nodes.

    Membership is by identity: an edge pointing at a node that is not in
    the list being laid out is inert, even if an equal-looking node is.
    """
    present = {id(n) for n in nodes}
    return [
        rel for rel in relationships
        if rel.connector1 is not None
        and rel.connector2 is not None
        and id(rel.connector1) in present
        and id(rel.connector2) in present
    ]
