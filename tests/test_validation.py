"""Tests for element graph validation."""

from layout_engine import (
    DrawingElement,
    IssueSeverity,
    RelationshipElement,
    validate_elements,
    validation_summary,
)

from conftest import connect, make_nodes


def _by_severity(issues, severity):
    return [i for i in issues if i.severity == severity]


def test_empty_layout_is_info():
    issues = validate_elements([RelationshipElement()])
    assert len(issues) == 1
    assert issues[0].severity == IssueSeverity.INFO


def test_clean_graph_has_no_issues(class_diagram):
    assert validate_elements(class_diagram) == []


def test_orphan_nodes_reported():
    a, b, c = make_nodes(3)
    issues = validate_elements([a, b, c, connect(a, b)])
    warnings = _by_severity(issues, IssueSeverity.WARNING)
    assert len(warnings) == 1
    assert "Node2" in warnings[0].message


def test_missing_connector_is_error():
    a, b = make_nodes(2)
    dangling = RelationshipElement(connector1=a)
    issues = validate_elements([a, b, connect(a, b), dangling])
    errors = _by_severity(issues, IssueSeverity.ERROR)
    assert len(errors) == 1
    assert errors[0].edge_id == dangling.id
    assert "connector2" in errors[0].message


def test_outside_node_is_warning():
    a, b = make_nodes(2)
    outsider = DrawingElement(name="Outside")
    rel = connect(a, outsider)
    issues = validate_elements([a, b, connect(a, b), rel])
    outside = [i for i in issues if i.edge_id == rel.id]
    assert len(outside) == 1
    assert outside[0].severity == IssueSeverity.WARNING
    assert outside[0].node_id == outsider.id


def test_self_loop_and_duplicates():
    a, b = make_nodes(2)
    loop = connect(a, a)
    dup = connect(a, b)
    issues = validate_elements([a, b, connect(a, b), dup, loop])
    edge_ids = {i.edge_id for i in issues}
    assert loop.id in edge_ids
    assert dup.id in edge_ids


def test_equal_looking_nodes_are_distinct():
    a = DrawingElement(id="same", name="Same")
    b = DrawingElement(id="same", name="Same")
    issues = validate_elements([a, b, connect(a, b)])
    assert not any("Duplicate" in i.message for i in issues)
    assert not any("Self-referencing" in i.message for i in issues)


def test_summary_counts():
    a, b = make_nodes(2)
    issues = validate_elements([a, b, RelationshipElement(connector1=a)])
    summary = validation_summary(issues)
    assert summary["errors"] == 1
    assert summary["valid"] is False
    assert summary["total"] == summary["errors"] + summary["warnings"] + summary["info"]


def test_issue_to_dict():
    a, b = make_nodes(2)
    loop = connect(a, a)
    issues = validate_elements([a, b, connect(a, b), loop])
    data = [i.to_dict() for i in issues if i.edge_id == loop.id][0]
    assert data["type"] == "warning"
    assert data["edge_id"] == loop.id
    assert data["node_id"] == a.id
