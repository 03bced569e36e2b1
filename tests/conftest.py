"""Shared builders for layout tests."""

import pytest

from layout_engine import DrawingElement, LayoutEngine, RelationshipElement


def make_nodes(count: int, width: float = 100, height: float = 60) -> list[DrawingElement]:
    nodes = []
    for i in range(count):
        node = DrawingElement(name=f"Node{i}", shape_type="class")
        node.set_size(width, height)
        nodes.append(node)
    return nodes


def connect(parent: DrawingElement, child: DrawingElement, label: str = "") -> RelationshipElement:
    return RelationshipElement(connector1=parent, connector2=child, label=label)


@pytest.fixture
def engine():
    return LayoutEngine()


@pytest.fixture
def class_diagram():
    """Five classes: User -> Order -> {Product, Payment}, Order -> Shipping."""
    user, order, product, payment, shipping = make_nodes(5, 120, 80)
    edges = [
        connect(user, order, "places"),
        connect(order, product, "contains"),
        connect(order, payment, "paid by"),
        connect(order, shipping, "shipped via"),
    ]
    return [user, order, product, payment, shipping, *edges]
