"""Composition validation — containment and overlap checks with shapely."""

from __future__ import annotations

from shapely.geometry import Polygon, box as shapely_box

from bentogrid.pipeline.geometry.models import ContainerBounds

from .models import PlacedRectangle


# Float slack for edges that land exactly on the container boundary
EPSILON_PX = 1e-6


def container_polygon(container: ContainerBounds, slack: float = 0.0) -> Polygon:
    return shapely_box(
        container.origin_x - slack,
        container.origin_y - container.height - slack,
        container.origin_x + container.width + slack,
        container.origin_y + slack,
    )


def rect_polygon(rect: PlacedRectangle) -> Polygon:
    return shapely_box(*rect.bounds)


def validate_composition(
    rects: list[PlacedRectangle], container: ContainerBounds,
) -> list[str]:
    """Check rectangles against the container. Returns error messages (empty = valid).

    Every rectangle must have positive size, lie inside the container,
    and not overlap any other rectangle (shared edges are fine).
    """
    errors: list[str] = []
    outer = container_polygon(container, slack=EPSILON_PX)
    polys: list[Polygon | None] = []

    for i, rect in enumerate(rects):
        if rect.width <= 0 or rect.height <= 0:
            errors.append(
                f"Rectangle {i}: non-positive size {rect.width:.2f} x {rect.height:.2f}"
            )
            polys.append(None)
            continue
        poly = rect_polygon(rect)
        if not outer.contains(poly):
            errors.append(f"Rectangle {i}: extends outside the container")
        polys.append(poly)

    for i in range(len(polys)):
        if polys[i] is None:
            continue
        for j in range(i + 1, len(polys)):
            if polys[j] is None:
                continue
            overlap = polys[i].intersection(polys[j]).area
            if overlap > EPSILON_PX:
                errors.append(f"Rectangles {i} and {j} overlap ({overlap:.2f} px²)")

    return errors
