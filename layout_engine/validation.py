"""
Element graph validation - Check an element list for structural issues.

None of these issues stop a layout: the engine tolerates all of them.
Validation tells the caller which edges will be ignored and why.
"""

from dataclasses import dataclass
from enum import Enum

from .models import ShapeElement, drawing_elements, relationship_elements


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    ERROR = "error"      # Invalid state, must be fixed
    WARNING = "warning"  # Potential problem, should review
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in an element list."""
    severity: IssueSeverity
    message: str
    node_id: str | None = None
    edge_id: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.node_id:
            result["node_id"] = self.node_id
        if self.edge_id:
            result["edge_id"] = self.edge_id
        return result


def validate_elements(elements: list[ShapeElement]) -> list[ValidationIssue]:
    """
    Validate an element list and return a list of issues.

    Checks for:
    - Empty layout (no nodes) - INFO
    - Orphan nodes (no connections) - WARNING
    - Edges with a missing connector - ERROR
    - Edges referencing a node that is not in the list - WARNING
    - Self-referencing edges - WARNING
    - Duplicate edges (same connector1->connector2) - WARNING

    Args:
        elements: Mixed nodes and edges

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    nodes = drawing_elements(elements)
    edges = relationship_elements(elements)

    if not nodes:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Layout has no nodes"
        ))
        return issues

    present = {id(n) for n in nodes}

    # Find connected nodes
    connected: set[int] = set()
    for edge in edges:
        for connector in (edge.connector1, edge.connector2):
            if connector is not None:
                connected.add(id(connector))

    # Check for orphan nodes (no connections)
    orphans = [n for n in nodes if id(n) not in connected]
    if orphans:
        labels = [f"{n.name or '(unnamed)'} ({n.id})" for n in orphans]
        issues.append(ValidationIssue(
            severity=IssueSeverity.WARNING,
            message=f"Orphan nodes (no connections): {', '.join(labels)}"
        ))

    # Check connector references
    for edge in edges:
        for end, connector in (("connector1", edge.connector1), ("connector2", edge.connector2)):
            if connector is None:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.ERROR,
                    message=f"Edge has no {end}",
                    edge_id=edge.id
                ))
            elif id(connector) not in present:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Edge {end} references a node outside the layout: {connector.id}",
                    edge_id=edge.id,
                    node_id=connector.id
                ))

    # Check for self-referencing edges
    for edge in edges:
        if edge.connector1 is not None and edge.connector1 is edge.connector2:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message="Self-referencing edge (node points to itself)",
                edge_id=edge.id,
                node_id=edge.connector1.id
            ))

    # Check for duplicate edges (same connector1->connector2)
    seen_pairs: set[tuple[int, int]] = set()
    for edge in edges:
        if edge.connector1 is None or edge.connector2 is None:
            continue
        pair = (id(edge.connector1), id(edge.connector2))
        if pair in seen_pairs:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate edge from {edge.connector1.id} to {edge.connector2.id}",
                edge_id=edge.id
            ))
        else:
            seen_pairs.add(pair)

    return issues


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """
    Create a summary of validation issues.

    Args:
        issues: List of validation issues

    Returns:
        Dictionary with counts by severity
    """
    errors = sum(1 for i in issues if i.severity == IssueSeverity.ERROR)
    return {
        "total": len(issues),
        "errors": errors,
        "warnings": sum(1 for i in issues if i.severity == IssueSeverity.WARNING),
        "info": sum(1 for i in issues if i.severity == IssueSeverity.INFO),
        "valid": errors == 0
    }
