# objmesh/math/vec2.py
"""
2‑мерный вектор (float32). Используется для текстурных координат:
x ≡ u, y ≡ v.
"""

import numpy as np
from typing import Tuple


class Vec2:
    """Короткий вектор‑2 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float32)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    # псевдонимы для UV
    u = x
    v = y

    def as_np(self) -> np.ndarray:
        """Копия 2‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
