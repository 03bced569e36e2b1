"""
Overlap detection between laid-out nodes.

Used after a layout to measure its quality. Only drawing elements occupy
space; relationships never overlap anything.
"""

from typing import Optional

from .models import ElementType, ShapeElement


def check_overlap(
    elem1: Optional[ShapeElement],
    elem2: Optional[ShapeElement],
    padding: float = 0.0
) -> bool:
    """
    Check whether two nodes' padded bounding boxes intersect.

    Padding is the minimum clearance: boxes closer than `padding` on both
    axes count as overlapping.

    Args:
        elem1: First element
        elem2: Second element
        padding: Required clearance between the boxes

    Returns:
        True if both are drawing elements and they overlap
    """
    if elem1 is None or elem2 is None:
        return False
    if elem1.element_type != ElementType.DRAWING or elem2.element_type != ElementType.DRAWING:
        return False

    pos1, size1 = elem1.position, elem1.size
    pos2, size2 = elem2.position, elem2.size

    overlap_x = (pos1.x + size1.width + padding > pos2.x) and (pos2.x + size2.width + padding > pos1.x)
    overlap_y = (pos1.y + size1.height + padding > pos2.y) and (pos2.y + size2.height + padding > pos1.y)

    return overlap_x and overlap_y


def find_overlaps(
    elements: list[ShapeElement],
    padding: float = 0.0
) -> list[tuple[ShapeElement, ShapeElement]]:
    """Get every unordered pair of overlapping elements, in input order."""
    pairs = []
    for i, elem1 in enumerate(elements):
        for elem2 in elements[i + 1:]:
            if check_overlap(elem1, elem2, padding):
                pairs.append((elem1, elem2))
    return pairs


def count_overlaps(elements: list[ShapeElement], padding: float = 0.0) -> int:
    """Count unordered overlapping pairs. Quadratic in the element count."""
    return len(find_overlaps(elements, padding))
