"""Пакет loaders – разбор Wavefront OBJ в Geometry."""
from objmesh.loaders.errors import (
    ObjParseError,
    MalformedAttributeLine,
    UnresolvableIndex,
    UnsupportedFaceArity,
    MalformedVertexGroupToken,
)
from objmesh.loaders.obj_parser import ObjParser, ParseStats, parse

__all__ = [
    "ObjParser",
    "ParseStats",
    "parse",
    "ObjParseError",
    "MalformedAttributeLine",
    "UnresolvableIndex",
    "UnsupportedFaceArity",
    "MalformedVertexGroupToken",
]
