"""STL export functionality using numpy-stl."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np
from stl import mesh

from drawers.domain.entities import Bin
from drawers.domain.services import DEFAULT_CELL_PX, DrawerScene, DrawerSceneBuilder
from drawers.domain.value_objects import BoundingBox3D, GridSpec

logger = logging.getLogger(__name__)


class StlMeshBuilder:
    """Builds STL meshes from 3D bounding boxes.

    The scene is already Y-up (X=width, Y=height, Z=depth), which is what
    most STL viewers expect, so vertices are written unchanged.
    """

    def build_box_mesh(self, box: BoundingBox3D) -> mesh.Mesh:
        """Create an STL mesh for a single bounding box.

        Args:
            box: The 3D bounding box to convert to a mesh.

        Returns:
            A numpy-stl Mesh object with 12 triangles (2 per face).
        """
        vertices = np.array(box.get_vertices())
        triangles = box.get_triangles()

        box_mesh = mesh.Mesh(np.zeros(len(triangles), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(triangles):
            box_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]

        return box_mesh

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        """Combine multiple meshes into a single mesh.

        Args:
            meshes: List of meshes to combine.

        Returns:
            A single combined mesh containing all faces.
        """
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))

        total_faces = sum(m.vectors.shape[0] for m in meshes)
        combined = mesh.Mesh(np.zeros(total_faces, dtype=mesh.Mesh.dtype))

        offset = 0
        for m in meshes:
            num_faces = m.vectors.shape[0]
            combined.vectors[offset : offset + num_faces] = m.vectors
            offset += num_faces

        return combined


class StlExporter:
    """Exports a drawer scene (baseplate, walls and bins) to STL."""

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        cell_px: float = DEFAULT_CELL_PX,
    ) -> None:
        """Initialize the exporter.

        Args:
            mesh_builder: Optional mesh builder instance for dependency injection.
            cell_px: World units per grid cell.
        """
        self.mesh_builder = mesh_builder or StlMeshBuilder()
        self.scene_builder = DrawerSceneBuilder(cell_px=cell_px)

    def export_scene(self, scene: DrawerScene, include_drawer: bool = True) -> mesh.Mesh:
        """Convert a prepared scene to a single mesh.

        Args:
            scene: Scene to convert.
            include_drawer: Whether to include the baseplate and walls.

        Returns:
            Combined mesh, drawer boxes first, then bins in layout order.
        """
        boxes = scene.all_boxes if include_drawer else tuple(s.box for s in scene.bins)
        meshes = [self.mesh_builder.build_box_mesh(box) for box in boxes]
        return self.mesh_builder.combine_meshes(meshes)

    def export(
        self,
        grid: GridSpec,
        bins: Sequence[Bin],
        include_drawer: bool = True,
    ) -> mesh.Mesh:
        """Build the scene for a layout and convert it to a mesh."""
        scene = self.scene_builder.build(grid, bins)
        return self.export_scene(scene, include_drawer=include_drawer)

    def export_to_file(
        self,
        grid: GridSpec,
        bins: Sequence[Bin],
        filepath: Path | str,
        include_drawer: bool = True,
    ) -> None:
        """Export a layout to an STL file.

        Args:
            grid: Drawer and grid parameters.
            bins: Bins to include.
            filepath: Path where the STL file will be saved.
            include_drawer: Whether to include the baseplate and walls.
        """
        combined_mesh = self.export(grid, bins, include_drawer=include_drawer)
        logger.debug(
            "Writing %d triangles to %s", combined_mesh.vectors.shape[0], filepath
        )
        combined_mesh.save(str(filepath))
