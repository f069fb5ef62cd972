# objmesh/mesh/geometry.py
import numpy as np
from typing import Iterable, List, Tuple

from objmesh.math.vec2 import Vec2
from objmesh.math.vec3 import Vec3


class Geometry:
    """
    Контейнер геометрии: параллельные списки вершинных атрибутов
    + индексный буфер треугольников.

    Заполняется парсером монотонно, после чего принадлежит вызывающему.
    """

    def __init__(self, name: str = "Geometry"):
        self.name = name
        self.positions: List[Vec3] = []
        self.texcoords: List[Vec2] = []
        self.normals: List[Vec3] = []
        self.indices: List[int] = []

    # -----------------------------------------------------------------
    def add_indices(self, indices: Iterable[int]) -> None:
        """Дописать индексы в конец индексного буфера."""
        self.indices.extend(int(i) for i in indices)

    # -----------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    # -----------------------------------------------------------------
    def validate(self) -> None:
        """Проверить инварианты: равные длины атрибутов, индексы в пределах."""
        n = len(self.positions)
        if len(self.texcoords) != n or len(self.normals) != n:
            raise ValueError(
                f"attribute length mismatch: positions={n}, "
                f"texcoords={len(self.texcoords)}, normals={len(self.normals)}"
            )
        if len(self.indices) % 3:
            raise ValueError(f"index count {len(self.indices)} is not a multiple of 3")
        for i in self.indices:
            if not 0 <= i < n:
                raise ValueError(f"index {i} out of range for {n} vertices")

    # -----------------------------------------------------------------
    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Плоские numpy‑массивы для загрузки в GPU:
        positions (N, 3), normals (N, 3), texcoords (N, 2) – float32,
        indices (M,) – uint32.
        """
        if self.positions:
            positions = np.stack([p.as_np() for p in self.positions])
            normals = np.stack([n.as_np() for n in self.normals])
            texcoords = np.stack([t.as_np() for t in self.texcoords])
        else:
            positions = np.zeros((0, 3), dtype=np.float32)
            normals = np.zeros((0, 3), dtype=np.float32)
            texcoords = np.zeros((0, 2), dtype=np.float32)
        indices = np.array(self.indices, dtype=np.uint32)
        return positions, normals, texcoords, indices

    # -----------------------------------------------------------------
    @property
    def bounding_sphere(self) -> Tuple[np.ndarray, float]:
        """(центр, радиус) в локальных координатах."""
        verts, _, _, _ = self.as_arrays()
        if not len(verts):
            return np.zeros(3, dtype=np.float32), 0.0
        centre = verts.mean(axis=0).astype(np.float32)
        radius = float(np.linalg.norm(verts - centre, axis=1).max())
        return centre, radius

    def __repr__(self) -> str:
        return (f"Geometry({self.name!r}, vertices={self.vertex_count}, "
                f"triangles={self.triangle_count})")
