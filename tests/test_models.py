"""Tests for the element and configuration models."""

import pytest
from pydantic import ValidationError

from layout_engine import (
    CanvasSize,
    DrawingElement,
    ElementType,
    LayoutConfig,
    LayoutStrategy,
    Position,
    RelationshipElement,
    Size,
)
from layout_engine.config import LayoutResult
from layout_engine.models import active_relationships, drawing_elements, relationship_elements

from conftest import connect, make_nodes


def test_drawing_element_defaults():
    node = DrawingElement(name="UserClass")
    assert node.element_type == ElementType.DRAWING
    assert node.is_node
    assert node.size.width == 100
    assert node.size.height == 60
    assert node.position.x == 0
    assert node.position.y == 0
    assert node.shape_type == "rectangle"
    assert node.color == "#FFFFFF"
    assert node.id.startswith("n")


def test_generated_ids_are_unique():
    ids = {DrawingElement().id for _ in range(50)}
    assert len(ids) == 50


def test_set_position_accepts_value_or_coordinates():
    node = DrawingElement()
    node.set_position(10, 20)
    assert (node.position.x, node.position.y) == (10, 20)
    node.set_position(Position(x=3.5, y=-1))
    assert (node.position.x, node.position.y) == (3.5, -1)


def test_center_and_bounds():
    node = DrawingElement()
    node.set_position(10, 20)
    node.set_size(Size(width=40, height=30))
    assert node.center() == (30, 35)
    assert node.bounds() == (10, 20, 50, 50)


def test_negative_size_rejected():
    with pytest.raises(ValidationError):
        Size(width=-1, height=10)


def test_relationship_is_zero_sized():
    a, b = make_nodes(2)
    rel = RelationshipElement(connector1=a, connector2=b, size=Size(width=50, height=50))
    assert rel.element_type == ElementType.RELATIONSHIP
    assert not rel.is_node
    assert rel.size == Size()
    rel.set_size(10, 10)
    assert rel.size == Size()
    assert rel.relationship_type == "association"


def test_relationship_shares_node_instances():
    a, b = make_nodes(2)
    rel = connect(a, b)
    assert rel.connector1 is a
    assert rel.connector2 is b
    a.set_position(123, 456)
    assert rel.connector1.position.x == 123


def test_relationship_to_json_uses_node_ids():
    a, b = make_nodes(2)
    rel = RelationshipElement(connector1=a, connector2=b, relationship_type="inheritance", label="is a")
    data = rel.to_json_dict()
    assert data["source"] == a.id
    assert data["target"] == b.id
    assert data["relationship"] == "inheritance"
    assert data["label"] == "is a"
    assert RelationshipElement().to_json_dict()["source"] is None


def test_element_classification_keeps_order():
    a, b, c = make_nodes(3)
    r1, r2 = connect(a, b), connect(b, c)
    elements = [r1, a, r2, b, c]
    assert drawing_elements(elements) == [a, b, c]
    assert relationship_elements(elements) == [r1, r2]


def test_active_relationships_ignore_outside_nodes():
    a, b = make_nodes(2)
    outsider = DrawingElement(name="Outside")
    dangling = RelationshipElement(connector1=a)
    active = active_relationships([connect(a, b), connect(a, outsider), dangling], [a, b])
    assert len(active) == 1
    assert active[0].connector2 is b


def test_canvas_defaults_and_validation():
    canvas = CanvasSize()
    assert (canvas.width, canvas.height) == (1920, 1080)
    assert canvas.center == (960, 540)
    with pytest.raises(ValidationError):
        CanvasSize(width=0, height=100)


def test_layout_config_defaults():
    config = LayoutConfig()
    assert config.strategy == LayoutStrategy.GRID
    assert config.padding == 20
    assert config.margin_top == config.margin_bottom == config.margin_left == config.margin_right == 50
    assert config.respect_connections is True
    assert config.force.iterations == 50
    assert config.available_width(CanvasSize()) == 1820
    assert config.available_height(CanvasSize()) == 980


def test_layout_config_rejects_negative_padding():
    with pytest.raises(ValidationError):
        LayoutConfig(padding=-5)


@pytest.mark.parametrize("value,expected", [
    ("circular", LayoutStrategy.CIRCULAR),
    ("FORCE", LayoutStrategy.FORCE),
    (LayoutStrategy.HIERARCHICAL, LayoutStrategy.HIERARCHICAL),
    ("spiral", LayoutStrategy.GRID),
    (42, LayoutStrategy.GRID),
])
def test_strategy_coercion(value, expected):
    assert LayoutConfig(strategy=value).strategy == expected


def test_layout_config_from_json_margin_shorthand():
    config = LayoutConfig.from_json_dict({"strategy": "circular", "margin": 10, "margin_top": 5})
    assert config.strategy == LayoutStrategy.CIRCULAR
    assert config.margin_top == 5
    assert config.margin_left == config.margin_right == config.margin_bottom == 10


def test_layout_config_json_round_trip():
    config = LayoutConfig(strategy="force", padding=7)
    data = config.to_json_dict()
    assert data["strategy"] == "force"
    assert LayoutConfig.from_json_dict(data) == config


def test_layout_result_is_read_only():
    result = LayoutResult(success=True, elements_arranged=3, total_area=10.0)
    with pytest.raises(AttributeError):
        result.success = False
    assert result.to_dict() == {"success": True, "elements_arranged": 3, "total_area": 10.0}
    assert LayoutResult.failure("boom").to_dict()["error"] == "boom"
