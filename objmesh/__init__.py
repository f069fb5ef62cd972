"""
objmesh – разбор Wavefront OBJ (v / vn / vt / f) в индексированную геометрию,
готовую к загрузке в GPU.
"""

from objmesh.utils import logger, Config
from objmesh.math import Vec2, Vec3
from objmesh.mesh import Geometry
from objmesh.loaders import (
    ObjParser,
    ParseStats,
    parse,
    ObjParseError,
    MalformedAttributeLine,
    UnresolvableIndex,
    UnsupportedFaceArity,
    MalformedVertexGroupToken,
)
from objmesh.utils.loader import load_obj

__version__ = "1.0.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Geometry",
    "ObjParser",
    "ParseStats",
    "parse",
    "load_obj",
    "Config",
    "ObjParseError",
    "MalformedAttributeLine",
    "UnresolvableIndex",
    "UnsupportedFaceArity",
    "MalformedVertexGroupToken",
]
