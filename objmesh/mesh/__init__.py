"""Пакет mesh – контейнер геометрии, который заполняет парсер."""
from objmesh.mesh.geometry import Geometry

__all__ = ["Geometry"]
