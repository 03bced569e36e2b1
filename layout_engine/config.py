"""
Layout configuration and result types.

Configuration is plain pydantic models so callers can build it in code or
load it from JSON:
- CanvasSize: the bounded drawing area before margins
- LayoutConfig: strategy, padding, margins, connection handling
- ForceParameters: tuning for the force-directed strategy
- LayoutResult: the read-only report of one arrange call
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class LayoutStrategy(str, Enum):
    """Available placement algorithms."""
    GRID = "grid"
    HIERARCHICAL = "hierarchical"
    FORCE = "force"
    CIRCULAR = "circular"


# Default canvas (full HD)
DEFAULT_CANVAS_WIDTH = 1920.0
DEFAULT_CANVAS_HEIGHT = 1080.0

# Default layout spacing
DEFAULT_PADDING = 20.0
DEFAULT_MARGIN = 50.0


class CanvasSize(BaseModel):
    """Dimensions of the usable drawing area before margins are subtracted."""
    width: float = Field(default=DEFAULT_CANVAS_WIDTH, gt=0)
    height: float = Field(default=DEFAULT_CANVAS_HEIGHT, gt=0)

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


class ForceParameters(BaseModel):
    """
    Tuning for the force-directed strategy.

    The defaults reproduce the engine's historical behaviour; changing them
    changes the resulting layouts.
    """
    iterations: int = Field(default=50, ge=0)
    repulsion: float = 5000.0        # Coulomb-like constant between every pair
    spring_constant: float = 100.0   # Hooke-like constant along edges
    target_distance: float = 200.0   # Rest length of an edge spring
    damping: float = 0.8             # Fraction of the force applied per step
    initial_radius: float = 200.0    # Radius of the starting circle
    min_distance: float = Field(default=1.0, gt=0)  # Distance clamp for force terms


class LayoutConfig(BaseModel):
    """
    Options for a single arrange call.

    Available space may go negative for degenerate configs; the algorithms
    then produce poor layouts instead of failing.
    """
    strategy: LayoutStrategy = LayoutStrategy.GRID
    padding: float = Field(default=DEFAULT_PADDING, ge=0)   # Minimum space between elements
    margin_top: float = Field(default=DEFAULT_MARGIN, ge=0)
    margin_bottom: float = Field(default=DEFAULT_MARGIN, ge=0)
    margin_left: float = Field(default=DEFAULT_MARGIN, ge=0)
    margin_right: float = Field(default=DEFAULT_MARGIN, ge=0)
    respect_connections: bool = True  # Let edges pull nodes in the force strategy
    force: ForceParameters = Field(default_factory=ForceParameters)

    @field_validator("strategy", mode="before")
    @classmethod
    def coerce_strategy(cls, value: Any) -> Any:
        """Unknown strategy names fall back to grid instead of failing."""
        if isinstance(value, LayoutStrategy):
            return value
        try:
            return LayoutStrategy(str(value).lower())
        except ValueError:
            logger.warning("Unknown layout strategy %r, falling back to grid", value)
            return LayoutStrategy.GRID

    def available_width(self, canvas: CanvasSize) -> float:
        return canvas.width - self.margin_left - self.margin_right

    def available_height(self, canvas: CanvasSize) -> float:
        return canvas.height - self.margin_top - self.margin_bottom

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return self.model_dump(mode="json")

    @classmethod
    def from_json_dict(cls, data: dict) -> "LayoutConfig":
        """
        Create a LayoutConfig from a JSON dict.

        Accepts a single `margin` key as shorthand for all four margins;
        explicit per-side keys win over it.
        """
        data = dict(data)
        margin = data.pop("margin", None)
        if margin is not None:
            for side in ("margin_top", "margin_bottom", "margin_left", "margin_right"):
                data.setdefault(side, margin)
        return cls(**data)


@dataclass(frozen=True)
class LayoutResult:
    """Outcome of one arrange call. Produced fresh per call."""
    success: bool
    error_message: str = ""
    elements_arranged: int = 0
    total_area: float = 0.0

    @classmethod
    def empty(cls) -> "LayoutResult":
        """Result for a layout with no nodes (not an error)."""
        return cls(success=True)

    @classmethod
    def failure(cls, message: str) -> "LayoutResult":
        return cls(success=False, error_message=message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "success": self.success,
            "elements_arranged": self.elements_arranged,
            "total_area": self.total_area,
        }
        if self.error_message:
            result["error"] = self.error_message
        return result
