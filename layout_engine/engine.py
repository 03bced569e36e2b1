"""
Layout Engine - Entry point for arranging diagram elements.

This module implements:
- Canvas and configuration state (last-used config is remembered)
- Classification of a mixed element list into nodes and edges
- Dispatch to one of the layout strategies in layout.py
- Overlap checks against the current padding

A layout call either completes, or fails with every node put back where it
was before the call. The engine is not thread-safe.
"""

import logging
from typing import Callable, Optional, Union

from .config import CanvasSize, LayoutConfig, LayoutResult, LayoutStrategy
from .layout import circular_layout, force_layout, grid_layout, hierarchical_layout
from .models import (
    DrawingElement,
    Position,
    RelationshipElement,
    ShapeElement,
    drawing_elements,
    relationship_elements,
)
from . import overlap

logger = logging.getLogger(__name__)

StrategyFn = Callable[
    [list[DrawingElement], list[RelationshipElement], CanvasSize, LayoutConfig],
    LayoutResult
]


# --- Strategy adapters (uniform signature for dispatch) ---

def _arrange_grid(nodes, relationships, canvas, config):
    return grid_layout(nodes, canvas, config)


def _arrange_hierarchical(nodes, relationships, canvas, config):
    return hierarchical_layout(nodes, relationships, canvas, config)


def _arrange_force(nodes, relationships, canvas, config):
    return force_layout(nodes, relationships, canvas, config)


def _arrange_circular(nodes, relationships, canvas, config):
    return circular_layout(nodes, canvas, config)


STRATEGIES: dict[LayoutStrategy, StrategyFn] = {
    LayoutStrategy.GRID: _arrange_grid,
    LayoutStrategy.HIERARCHICAL: _arrange_hierarchical,
    LayoutStrategy.FORCE: _arrange_force,
    LayoutStrategy.CIRCULAR: _arrange_circular,
}


class LayoutEngine:
    """
    Positions drawing elements on a bounded canvas.

    Usage:
        engine = LayoutEngine(CanvasSize(width=1600, height=900))
        result = engine.arrange_elements(elements, LayoutConfig(strategy="circular"))
        overlaps = engine.count_overlaps(elements)

    The element list is borrowed for the duration of a call and not kept.
    Only node positions are written; edges are never moved.
    """

    def __init__(self, canvas_size: Optional[CanvasSize] = None):
        self._canvas = canvas_size if canvas_size is not None else CanvasSize()
        self._config = LayoutConfig()

    # --- Configuration ---

    @property
    def canvas_size(self) -> CanvasSize:
        return self._canvas

    def set_canvas_size(self, width: Union[CanvasSize, float], height: Optional[float] = None) -> None:
        """Set the canvas from a CanvasSize or from two dimensions."""
        if isinstance(width, CanvasSize):
            self._canvas = width
        else:
            self._canvas = CanvasSize(width=width, height=height)

    @property
    def layout_config(self) -> LayoutConfig:
        return self._config

    def set_layout_config(self, config: LayoutConfig) -> None:
        self._config = config

    @property
    def strategy(self) -> LayoutStrategy:
        return self._config.strategy

    def set_layout_strategy(self, strategy: Union[LayoutStrategy, str]) -> None:
        """Change only the strategy of the current configuration."""
        self._config = LayoutConfig.model_validate(
            {**self._config.model_dump(), "strategy": strategy}
        )

    # --- Layout ---

    def arrange_elements(
        self,
        elements: list[ShapeElement],
        config: Optional[LayoutConfig] = None
    ) -> LayoutResult:
        """
        Position every drawing element in `elements` in-place.

        Args:
            elements: Mixed nodes and edges, any order
            config: Options for this call; also becomes the engine's
                current configuration. Defaults to the current one.

        Returns:
            LayoutResult; success is False only on an internal failure,
            in which case no node has moved.
        """
        if config is not None:
            self._config = config
        config = self._config

        nodes = drawing_elements(elements)
        relationships = relationship_elements(elements)

        arrange = STRATEGIES.get(config.strategy)
        if arrange is None:
            logger.warning("Unknown layout strategy %r, falling back to grid", config.strategy)
            arrange = _arrange_grid

        logger.debug(
            "Arranging %d nodes and %d edges with %s on %.0fx%.0f canvas",
            len(nodes), len(relationships), getattr(config.strategy, "value", config.strategy),
            self._canvas.width, self._canvas.height
        )

        snapshot = [Position(x=n.position.x, y=n.position.y) for n in nodes]
        try:
            result = arrange(nodes, relationships, self._canvas, config)
        except Exception as e:
            logger.exception("Layout failed, restoring %d node positions", len(nodes))
            for node, position in zip(nodes, snapshot):
                node.set_position(position)
            return LayoutResult.failure(f"Layout failed: {e}")

        logger.info(
            "Arranged %d elements (total area %.1f)",
            result.elements_arranged, result.total_area
        )
        return result

    # --- Overlap ---

    def check_overlap(self, elem1: Optional[ShapeElement], elem2: Optional[ShapeElement]) -> bool:
        """Check two elements for overlap using the current padding."""
        return overlap.check_overlap(elem1, elem2, self._config.padding)

    def count_overlaps(self, elements: list[ShapeElement]) -> int:
        """Count overlapping node pairs using the current padding."""
        return overlap.count_overlaps(elements, self._config.padding)
