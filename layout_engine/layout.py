"""
Layout algorithms for diagram nodes.

Provides the placement strategies the engine dispatches to:
- Grid: Uniform cells packed into the available area
- Hierarchical: Levels inferred from edge directions
- Circular: Nodes evenly spaced on a circle around the canvas center
- Force: Force-directed layout using spring physics

All layout functions modify node positions in-place and return a
LayoutResult. Edges are never moved.
"""

import logging
import math
from collections import defaultdict

from .config import CanvasSize, LayoutConfig, LayoutResult
from .models import DrawingElement, RelationshipElement, active_relationships

logger = logging.getLogger(__name__)


# Fixed layout parameters
DEFAULT_LEVEL_SPACING = 150.0  # Vertical distance between hierarchy levels
CIRCLE_INSET = 100.0           # Circle radius is reduced by this much to keep nodes on canvas


def grid_layout(
    nodes: list[DrawingElement],
    canvas: CanvasSize,
    config: LayoutConfig
) -> LayoutResult:
    """
    Arrange nodes in a uniform grid that fits the available area.

    Every cell is sized to the largest node plus padding. Columns are
    chosen to fill the available width; if the rows then overflow the
    available height, a single corrective pass caps the rows and widens
    the grid instead. A single huge node may still overflow the canvas.

    Args:
        nodes: Nodes to arrange, placed row-major in list order
        canvas: Canvas dimensions
        config: Padding and margins

    Returns:
        LayoutResult with the nominal available area as total_area
    """
    if not nodes:
        return LayoutResult.empty()

    available_width = config.available_width(canvas)
    available_height = config.available_height(canvas)

    max_width = max(n.size.width for n in nodes)
    max_height = max(n.size.height for n in nodes)

    cell_width = max_width + config.padding
    cell_height = max_height + config.padding

    count = len(nodes)
    cols = max(1, math.floor(available_width / cell_width)) if cell_width > 0 else 1
    rows = math.ceil(count / cols)

    # Doesn't fit vertically: trade rows for columns
    if rows * cell_height > available_height:
        rows = max(1, math.floor(available_height / cell_height)) if cell_height > 0 else 1
        cols = math.ceil(count / rows)

    logger.debug(
        "Grid layout: %d nodes in %dx%d cells of %.1fx%.1f",
        count, cols, rows, cell_width, cell_height
    )

    for i, node in enumerate(nodes):
        row = i // cols
        col = i % cols
        node.set_position(
            config.margin_left + col * cell_width,
            config.margin_top + row * cell_height
        )

    return LayoutResult(
        success=True,
        elements_arranged=count,
        total_area=available_width * available_height
    )


def assign_levels(
    nodes: list[DrawingElement],
    relationships: list[RelationshipElement]
) -> dict[int, int]:
    """
    Assign a hierarchy level to every node from edge directions.

    Nodes that are never the target (connector2) of an edge are roots at
    level 0; when there are none (a pure cycle), every node is a root.
    A single pass over the edges in input order then sets
    level(child) = level(parent) + 1 whenever the parent already has a
    level, so a child reachable through several parents keeps the level
    from the last such edge. Nodes still without a level end up at 0.

    Args:
        nodes: Nodes to level
        relationships: Active edges (both connectors among nodes)

    Returns:
        Dictionary mapping id(node) to its level
    """
    targets = {id(rel.connector2) for rel in relationships}
    roots = [n for n in nodes if id(n) not in targets]
    if not roots:
        logger.debug("No root nodes (cyclic hierarchy), treating all %d nodes as roots", len(nodes))
        roots = nodes

    levels: dict[int, int] = {id(n): 0 for n in roots}

    for rel in relationships:
        parent_level = levels.get(id(rel.connector1))
        if parent_level is not None:
            levels[id(rel.connector2)] = parent_level + 1

    for node in nodes:
        levels.setdefault(id(node), 0)

    return levels


def hierarchical_layout(
    nodes: list[DrawingElement],
    relationships: list[RelationshipElement],
    canvas: CanvasSize,
    config: LayoutConfig,
    level_spacing: float = DEFAULT_LEVEL_SPACING
) -> LayoutResult:
    """
    Arrange nodes in horizontal levels based on edge directions.

    Each level is a row at margin_top + level * level_spacing; the nodes of
    a level are centered on evenly spaced slots across the available width.

    Args:
        nodes: Nodes to arrange
        relationships: Edges defining the hierarchy (inert edges are ignored)
        canvas: Canvas dimensions
        config: Margins
        level_spacing: Vertical spacing between levels

    Returns:
        LayoutResult with the available area as total_area
    """
    if not nodes:
        return LayoutResult.empty()

    edges = active_relationships(relationships, nodes)
    levels = assign_levels(nodes, edges)

    # Group by level, keeping input order inside each level
    by_level: dict[int, list[DrawingElement]] = defaultdict(list)
    for node in nodes:
        by_level[levels[id(node)]].append(node)

    available_width = config.available_width(canvas)
    max_level = max(by_level)

    logger.debug("Hierarchical layout: %d nodes on %d levels", len(nodes), max_level + 1)

    for level in range(max_level + 1):
        row = by_level.get(level, [])
        if not row:
            continue

        horizontal_spacing = available_width / (len(row) + 1)
        y = config.margin_top + level * level_spacing

        for i, node in enumerate(row):
            slot = config.margin_left + (i + 1) * horizontal_spacing
            node.set_position(slot - node.size.width / 2, y)

    return LayoutResult(
        success=True,
        elements_arranged=len(nodes),
        total_area=available_width * config.available_height(canvas)
    )


def circular_layout(
    nodes: list[DrawingElement],
    canvas: CanvasSize,
    config: LayoutConfig
) -> LayoutResult:
    """
    Arrange node centers evenly on a circle around the canvas center.

    The radius is half the smaller available dimension minus a fixed
    inset. Node i sits at angle 2*pi*i/n.

    Args:
        nodes: Nodes to arrange
        canvas: Canvas dimensions
        config: Margins

    Returns:
        LayoutResult with the circle's area as total_area
    """
    if not nodes:
        return LayoutResult.empty()

    center_x, center_y = canvas.center
    radius = min(config.available_width(canvas), config.available_height(canvas)) / 2 - CIRCLE_INSET

    logger.debug("Circular layout: %d nodes, radius %.1f", len(nodes), radius)

    for i, node in enumerate(nodes):
        angle = 2 * math.pi * i / len(nodes)
        node.set_position(
            center_x + radius * math.cos(angle) - node.size.width / 2,
            center_y + radius * math.sin(angle) - node.size.height / 2
        )

    return LayoutResult(
        success=True,
        elements_arranged=len(nodes),
        total_area=math.pi * radius * radius
    )


def force_layout(
    nodes: list[DrawingElement],
    relationships: list[RelationshipElement],
    canvas: CanvasSize,
    config: LayoutConfig
) -> LayoutResult:
    """
    Arrange nodes using a force-directed layout algorithm.

    Simulates physical forces for a fixed number of iterations:
    - All nodes repel each other (like charged particles)
    - Connected nodes are pulled toward a target separation (like springs)

    Forces are recomputed every iteration and applied as a damped position
    step; no velocity carries over. After each step a node is clamped to
    the canvas minus margins, which can flatten nodes against an edge.

    Args:
        nodes: Nodes to arrange
        relationships: Edges (ignored unless config.respect_connections)
        canvas: Canvas dimensions
        config: Margins and force parameters

    Returns:
        LayoutResult with the full canvas area as total_area
    """
    if not nodes:
        return LayoutResult.empty()

    params = config.force
    index = {id(n): i for i, n in enumerate(nodes)}
    edges = active_relationships(relationships, nodes) if config.respect_connections else []

    # Start on a circle so no two nodes share a position
    center_x, center_y = canvas.center
    for i, node in enumerate(nodes):
        angle = 2 * math.pi * i / len(nodes)
        node.set_position(
            center_x + params.initial_radius * math.cos(angle),
            center_y + params.initial_radius * math.sin(angle)
        )

    logger.debug(
        "Force layout: %d nodes, %d edges, %d iterations",
        len(nodes), len(edges), params.iterations
    )

    for _ in range(params.iterations):
        forces = [[0.0, 0.0] for _ in nodes]

        # Repulsion between all node pairs (Coulomb's law: F = k / r^2)
        for i, n1 in enumerate(nodes):
            for j in range(i + 1, len(nodes)):
                n2 = nodes[j]
                dx = n1.position.x - n2.position.x
                dy = n1.position.y - n2.position.y
                dist = max(params.min_distance, math.hypot(dx, dy))

                force = params.repulsion / (dist * dist)
                fx = force * dx / dist
                fy = force * dy / dist

                forces[i][0] += fx
                forces[i][1] += fy
                forces[j][0] -= fx
                forces[j][1] -= fy

        # Attraction along edges (Hooke's law around the target distance)
        for rel in edges:
            i = index[id(rel.connector1)]
            j = index[id(rel.connector2)]
            if i == j:
                continue

            dx = rel.connector2.position.x - rel.connector1.position.x
            dy = rel.connector2.position.y - rel.connector1.position.y
            dist = max(params.min_distance, math.hypot(dx, dy))

            force = params.spring_constant * (dist - params.target_distance) / dist
            fx = force * dx / dist
            fy = force * dy / dist

            forces[i][0] += fx
            forces[i][1] += fy
            forces[j][0] -= fx
            forces[j][1] -= fy

        # Apply forces with damping, then keep within bounds
        for node, (fx, fy) in zip(nodes, forces):
            x = node.position.x + fx * params.damping
            y = node.position.y + fy * params.damping
            x = max(config.margin_left, min(x, canvas.width - config.margin_right - node.size.width))
            y = max(config.margin_top, min(y, canvas.height - config.margin_bottom - node.size.height))
            node.set_position(x, y)

    return LayoutResult(
        success=True,
        elements_arranged=len(nodes),
        total_area=canvas.width * canvas.height
    )
