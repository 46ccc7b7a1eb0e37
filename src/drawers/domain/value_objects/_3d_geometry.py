"""3D geometry value objects for the drawer scene."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position3D:
    """Point in world space (Y-up, X right, Z toward the back of the drawer)."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class BoundingBox3D:
    """Axis-aligned box in world space.

    ``origin`` is the minimum corner. World space is Y-up, matching the
    convention of most mesh viewers, so ``size_y`` is the vertical extent.
    """

    origin: Position3D
    size_x: float  # Width (left to right)
    size_y: float  # Height (bottom to top)
    size_z: float  # Depth (front to back)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0 or self.size_z <= 0:
            raise ValueError("Bounding box dimensions must be positive")

    @classmethod
    def from_center(
        cls, center: Position3D, size_x: float, size_y: float, size_z: float
    ) -> BoundingBox3D:
        """Build a box from its center point and extents."""
        return cls(
            origin=Position3D(
                center.x - size_x / 2,
                center.y - size_y / 2,
                center.z - size_z / 2,
            ),
            size_x=size_x,
            size_y=size_y,
            size_z=size_z,
        )

    @property
    def center(self) -> Position3D:
        """Center point of the box."""
        return Position3D(
            self.origin.x + self.size_x / 2,
            self.origin.y + self.size_y / 2,
            self.origin.z + self.size_z / 2,
        )

    @property
    def top(self) -> float:
        """Y coordinate of the top face."""
        return self.origin.y + self.size_y

    def get_vertices(self) -> list[tuple[float, float, float]]:
        """Return 8 corner vertices of the box."""
        x0, y0, z0 = self.origin.x, self.origin.y, self.origin.z
        x1, y1, z1 = x0 + self.size_x, y0 + self.size_y, z0 + self.size_z
        return [
            (x0, y0, z0),  # 0: bottom-front-left
            (x1, y0, z0),  # 1: bottom-front-right
            (x1, y0, z1),  # 2: bottom-back-right
            (x0, y0, z1),  # 3: bottom-back-left
            (x0, y1, z0),  # 4: top-front-left
            (x1, y1, z0),  # 5: top-front-right
            (x1, y1, z1),  # 6: top-back-right
            (x0, y1, z1),  # 7: top-back-left
        ]

    def get_triangles(self) -> list[tuple[int, int, int]]:
        """Return 12 triangles (as vertex indices) forming the 6 box faces.

        Winding is counter-clockwise seen from outside, so normals point
        outward.
        """
        return [
            # Bottom face (y=min)
            (0, 1, 2),
            (0, 2, 3),
            # Top face (y=max)
            (4, 6, 5),
            (4, 7, 6),
            # Front face (z=min)
            (0, 5, 1),
            (0, 4, 5),
            # Back face (z=max)
            (2, 7, 3),
            (2, 6, 7),
            # Left face (x=min)
            (0, 7, 4),
            (0, 3, 7),
            # Right face (x=max)
            (1, 6, 2),
            (1, 5, 6),
        ]
