from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Mesh:
    """An indexed triangle mesh accumulated from many primitives.

    Primitives are appended with :meth:`append`, which offsets their
    local face indices by the number of vertices already present.  Face
    indices are 1-based, matching the export formats.

    A mesh is owned by one export call and discarded afterwards.

    Attributes:
        sphere_count: Number of atom spheres appended so far.
        cylinder_count: Number of bond cylinders appended so far.
    """

    sphere_count: int = 0
    cylinder_count: int = 0
    _vertices: list[np.ndarray] = field(default_factory=list, repr=False)
    _normals: list[np.ndarray] = field(default_factory=list, repr=False)
    _faces: list[np.ndarray] = field(default_factory=list, repr=False)
    _n_vertices: int = field(default=0, repr=False)

    def append(
        self,
        vertices: np.ndarray,
        normals: np.ndarray,
        faces: np.ndarray,
    ) -> int:
        """Append one primitive and return the index of its first vertex.

        Args:
            vertices: Vertex positions, shape ``(n, 3)``.
            normals: Per-vertex normals, shape ``(n, 3)``.
            faces: Triangles as 0-based indices into *vertices*,
                shape ``(m, 3)``.

        Returns:
            The 1-based index the primitive's first vertex received.

        Raises:
            ValueError: If shapes are inconsistent or a face refers
                outside *vertices*.
        """
        vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
        normals = np.asarray(normals, dtype=float).reshape(-1, 3)
        faces = np.asarray(faces, dtype=int).reshape(-1, 3)
        if normals.shape != vertices.shape:
            raise ValueError(
                f"normals shape {normals.shape} does not match "
                f"vertices shape {vertices.shape}"
            )
        if faces.size and (faces.min() < 0 or faces.max() >= len(vertices)):
            raise ValueError("face index outside the primitive's vertices")

        first = self._n_vertices + 1
        self._vertices.append(vertices)
        self._normals.append(normals)
        self._faces.append(faces + first)
        self._n_vertices += len(vertices)
        return first

    @property
    def vertices(self) -> np.ndarray:
        """All vertex positions, shape ``(n_vertices, 3)``."""
        if not self._vertices:
            return np.zeros((0, 3))
        return np.concatenate(self._vertices)

    @property
    def normals(self) -> np.ndarray:
        """Per-vertex normals, shape ``(n_vertices, 3)``."""
        if not self._normals:
            return np.zeros((0, 3))
        return np.concatenate(self._normals)

    @property
    def faces(self) -> np.ndarray:
        """Triangles as 1-based vertex indices, shape ``(n_faces, 3)``."""
        if not self._faces:
            return np.zeros((0, 3), dtype=int)
        return np.concatenate(self._faces)

    @property
    def n_vertices(self) -> int:
        return self._n_vertices

    @property
    def n_faces(self) -> int:
        return sum(len(f) for f in self._faces)
