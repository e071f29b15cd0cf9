"""Mirror images of points across lines and planes.

Both reflections go through the foot of the perpendicular ``F`` and
return `2F - P`, so reflecting twice gives back the original point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from spacegeom.lines import LineRepresentation, as_line
from spacegeom.planes import PlaneRepresentation
from spacegeom.relations import distance_point_line, distance_point_plane
from spacegeom.vector import Point3D, PointLike, as_point


@dataclass(frozen=True)
class ImagePointResult:
    point: Point3D
    image: Point3D
    foot: Point3D
    line: Optional[LineRepresentation] = None
    plane: Optional[PlaneRepresentation] = None


def _mirror(p: Point3D, foot: Point3D) -> Point3D:
    return Point3D.from_vector(foot.to_vector().scale(2.0).sub(p.to_vector()))


def image_of_point_in_line(point: PointLike, line) -> ImagePointResult:
    """Image of ``point`` in ``line`` (a ``LineRepresentation`` or a
    ``(point, direction)`` pair).  Fails like ``distance_point_line`` on a
    zero direction.
    """
    p = as_point(point)
    ln = as_line(line)
    foot = distance_point_line(p, ln.point, ln.direction).foot
    return ImagePointResult(p, _mirror(p, foot), foot, line=ln)


def image_of_point_in_plane(point: PointLike, plane) -> ImagePointResult:
    """Image of ``point`` in a plane given by coefficients."""
    p = as_point(point)
    res = distance_point_plane(p, plane)
    return ImagePointResult(p, _mirror(p, res.foot), res.foot, plane=res.plane)


__all__ = [
    'ImagePointResult',
    'image_of_point_in_line',
    'image_of_point_in_plane',
]
