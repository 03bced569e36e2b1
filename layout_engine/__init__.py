"""
Diagram Layout Engine - Element models, layout strategies and overlap checks.

Callers build DrawingElement/RelationshipElement graphs, hand them to a
LayoutEngine with a LayoutConfig, and read back node positions and a
LayoutResult.
"""

from .models import (
    # Enums
    ElementType,
    NodeShape,
    RelationshipType,
    # Geometry
    Position,
    Size,
    # Elements
    ShapeElement,
    DrawingElement,
    RelationshipElement,
)

from .config import CanvasSize, LayoutConfig, LayoutResult, LayoutStrategy, ForceParameters
from .engine import LayoutEngine
from .layout import grid_layout, hierarchical_layout, circular_layout, force_layout, assign_levels
from .overlap import check_overlap, count_overlaps, find_overlaps
from .validation import validate_elements, validation_summary, ValidationIssue, IssueSeverity
from .analysis import summarize_layout, find_connected_components, LayoutSummary

__all__ = [
    # Enums
    "ElementType",
    "NodeShape",
    "RelationshipType",
    "LayoutStrategy",
    # Geometry
    "Position",
    "Size",
    # Elements
    "ShapeElement",
    "DrawingElement",
    "RelationshipElement",
    # Configuration
    "CanvasSize",
    "LayoutConfig",
    "ForceParameters",
    "LayoutResult",
    # Engine
    "LayoutEngine",
    # Strategies
    "grid_layout",
    "hierarchical_layout",
    "circular_layout",
    "force_layout",
    "assign_levels",
    # Overlap
    "check_overlap",
    "count_overlaps",
    "find_overlaps",
    # Validation
    "validate_elements",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
    # Analysis
    "summarize_layout",
    "find_connected_components",
    "LayoutSummary",
]
