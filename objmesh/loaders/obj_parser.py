# -*- coding: utf-8 -*-
"""
Парсер Wavefront OBJ → индексированная геометрия.

Поддерживаются записи ``v``, ``vn``, ``vt`` и ``f``; всё остальное
(комментарии, mtllib/usemtl, g, s, o …) пропускается. Файлы не читаются –
на вход подаётся уже прочитанный текст.

Строка грани состоит из групп ``pos[/tex][/norm]`` с индексами от 1:

    f 16/92/11 14/101/22 1/69/1      # позиция / texcoord / нормаль
    f 1//25 18//46 12//31            # без текстуры
    f 16/92/11 40/109/40 38/114/38 14/101/22   # четырёхугольник

Каждая группа превращается в вершину Geometry (позиция + texcoord +
нормаль), полигон режется веером от первой вершины:
(0, 1, 2), (0, 2, 3), … (0, N-2, N-1).
"""
import math
import re
from typing import List

from objmesh.loaders.errors import (
    ObjParseError,
    MalformedAttributeLine,
    UnresolvableIndex,
    UnsupportedFaceArity,
    MalformedVertexGroupToken,
)
from objmesh.math.vec2 import Vec2
from objmesh.math.vec3 import Vec3
from objmesh.mesh.geometry import Geometry
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler

MISSING_ATTRIBUTE_MODES = ("zero", "nan")
INDEX_FLUSH_MODES = ("line", "end")

_INDEX_RE = re.compile(r"-?[0-9]+")


# ----------------------------------------------------------------------
class AttributePool:
    """Плоский пул сырых компонент одного вида атрибута (в порядке файла)."""

    def __init__(self, kind: str, components: int):
        self.kind = kind
        self.components = components
        self.values: List[float] = []

    def __len__(self) -> int:
        return len(self.values) // self.components

    def extend(self, tokens: List[str]) -> None:
        if len(tokens) < self.components:
            raise MalformedAttributeLine(
                f"'{self.kind}' needs {self.components} values, got {len(tokens)}"
            )
        values = tokens[:self.components]
        try:
            parsed = [float(t) for t in values if t.isascii() and "_" not in t]
        except ValueError:
            parsed = []
        if len(parsed) != self.components or not all(map(math.isfinite, parsed)):
            raise MalformedAttributeLine(
                f"'{self.kind}' values must be finite numbers: {values}"
            )
        self.values.extend(parsed)

    def group(self, index: int) -> tuple:
        """Компоненты по индексу OBJ (с 1)."""
        if index < 1:
            raise UnresolvableIndex(
                f"'{self.kind}' index {index} is not supported (indices start at 1)"
            )
        if index > len(self):
            raise UnresolvableIndex(
                f"'{self.kind}' index {index} out of range ({len(self)} defined)"
            )
        start = (index - 1) * self.components
        return tuple(self.values[start:start + self.components])


# ----------------------------------------------------------------------
class ParseStats:
    """Сводка по одному разбору (логируется на уровне DEBUG)."""

    def __init__(self):
        self.lines = 0
        self.positions = 0
        self.normals = 0
        self.texcoords = 0
        self.faces = 0
        self.triangles = 0
        self.vertices = 0
        self.skipped = 0

    def __repr__(self) -> str:
        return (f"ParseStats(lines={self.lines}, v={self.positions}, "
                f"vn={self.normals}, vt={self.texcoords}, f={self.faces}, "
                f"triangles={self.triangles}, vertices={self.vertices}, "
                f"skipped={self.skipped})")


# ----------------------------------------------------------------------
def parse_vertex_group(token: str) -> tuple:
    """
    '16/92/11' → (16, 92, 11); '16//11' → (16, None, 11);
    '16/92' → (16, 92, None); '16' → (16, None, None).
    """
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise MalformedVertexGroupToken(f"bad vertex group {token!r}")
    for p in parts:
        if p and not _INDEX_RE.fullmatch(p):
            raise MalformedVertexGroupToken(
                f"vertex group {token!r} has a non-integer index"
            )
    indices = [int(p) if p else None for p in parts]
    indices += [None] * (3 - len(indices))
    return tuple(indices)


def fan_triangles(count: int):
    """Веер от первой вершины: (0, k-1, k) для k = 2 … count-1."""
    for k in range(2, count):
        yield 0, k - 1, k


# ----------------------------------------------------------------------
class _ParsePass:
    """Состояние одного прохода по документу: пулы, счётчик, кэш."""

    def __init__(self, parser: "ObjParser", geometry):
        self.parser = parser
        self.geometry = geometry
        self.positions = AttributePool("v", 3)
        self.normals = AttributePool("vn", 3)
        self.texcoords = AttributePool("vt", 2)
        self.next_index = len(geometry.positions)
        self.cache = {}
        self.pending: List[int] = []
        self.stats = ParseStats()
        self.handlers = {
            "vn": self._normal,
            "vt": self._texcoord,
            "v": self._position,
            "f": self._face,
        }

    # -----------------------------------------------------------------
    def feed(self, line_number: int, raw: str) -> None:
        self.stats.lines += 1
        parts = raw.strip().split(None, 1)
        handler = self.handlers.get(parts[0]) if len(parts) == 2 else None
        if handler is None:
            self.stats.skipped += 1
            return
        try:
            handler(parts[1].split())
        except ObjParseError as exc:
            exc.locate(line_number, raw.rstrip("\r"))
            raise

    def finish(self) -> None:
        if self.pending:
            self.geometry.add_indices(self.pending)
            self.pending = []

    # -----------------------------------------------------------------
    # атрибуты
    # -----------------------------------------------------------------
    def _position(self, tokens):
        self.positions.extend(tokens)
        self.stats.positions += 1

    def _normal(self, tokens):
        self.normals.extend(tokens)
        self.stats.normals += 1

    def _texcoord(self, tokens):
        self.texcoords.extend(tokens)
        self.stats.texcoords += 1

    # -----------------------------------------------------------------
    # грани
    # -----------------------------------------------------------------
    def _face(self, tokens):
        if len(tokens) < 3:
            raise UnsupportedFaceArity(
                f"face needs at least 3 vertex groups, got {len(tokens)}"
            )
        # сначала разрешаем все группы – при ошибке геометрия не тронута
        resolved = [self._resolve(parse_vertex_group(t)) for t in tokens]
        slots = [self._emit(key, attrs) for key, attrs in resolved]

        line_indices = []
        for a, b, c in fan_triangles(len(slots)):
            line_indices.extend((slots[a], slots[b], slots[c]))

        self.stats.faces += 1
        self.stats.triangles += len(slots) - 2
        if self.parser.index_flush == "line":
            self.geometry.add_indices(line_indices)
        else:
            self.pending.extend(line_indices)

    def _resolve(self, key):
        pos_idx, tex_idx, norm_idx = key
        position = self.positions.group(pos_idx)
        texcoord = (self.texcoords.group(tex_idx) if tex_idx is not None
                    else self.parser.placeholder(2))
        normal = (self.normals.group(norm_idx) if norm_idx is not None
                  else self.parser.placeholder(3))
        return key, (position, texcoord, normal)

    def _emit(self, key, attrs) -> int:
        if self.parser.deduplicate and key in self.cache:
            return self.cache[key]

        position, texcoord, normal = attrs
        self.geometry.positions.append(Vec3(*position))
        self.geometry.texcoords.append(Vec2(*texcoord))
        self.geometry.normals.append(Vec3(*normal))

        index = self.next_index
        self.next_index += 1
        self.stats.vertices += 1
        if self.parser.deduplicate:
            self.cache[key] = index
        return index


# ----------------------------------------------------------------------
class ObjParser:
    """
    Однопроходный парсер OBJ‑текста.

    :param deduplicate: повторная группа (v, vt, vn) переиспользует
                        уже выпущенную вершину (только индекс).
    :param missing_attribute: заглушка для отсутствующих texcoord/нормали –
                        ``"zero"`` или ``"nan"``.
    :param index_flush: ``"line"`` – индексы дописываются в Geometry после
                        каждой строки грани, ``"end"`` – одним вызовом в конце.
    """

    def __init__(self,
                 deduplicate: bool = False,
                 missing_attribute: str = "zero",
                 index_flush: str = "line"):
        if missing_attribute not in MISSING_ATTRIBUTE_MODES:
            raise ValueError(
                f"missing_attribute must be one of {MISSING_ATTRIBUTE_MODES}, "
                f"got {missing_attribute!r}"
            )
        if index_flush not in INDEX_FLUSH_MODES:
            raise ValueError(
                f"index_flush must be one of {INDEX_FLUSH_MODES}, got {index_flush!r}"
            )
        self.deduplicate = bool(deduplicate)
        self.missing_attribute = missing_attribute
        self.index_flush = index_flush
        self.last_stats = None

    @classmethod
    def from_config(cls, config) -> "ObjParser":
        return cls(**config.parser_options())

    def placeholder(self, components: int) -> tuple:
        value = math.nan if self.missing_attribute == "nan" else 0.0
        return (value,) * components

    # -----------------------------------------------------------------
    def parse(self, text: str, geometry=None):
        """Разобрать OBJ‑текст и вернуть заполненную геометрию."""
        if geometry is None:
            geometry = Geometry()
        state = _ParsePass(self, geometry)

        with Profiler("ObjParser.parse"):
            try:
                for line_number, raw in enumerate(text.split("\n"), start=1):
                    state.feed(line_number, raw)
            except ObjParseError as exc:
                logger.error(f"[ObjParser] {type(exc).__name__}: {exc}")
                raise
            state.finish()

        self.last_stats = state.stats
        logger.debug(f"[ObjParser] {state.stats}")
        return geometry


# ----------------------------------------------------------------------
def parse(text: str, *, geometry=None, config=None, **options):
    """
    Удобная обёртка: ``parse(text)`` → Geometry.

    Опции берутся из ``config`` (objmesh.utils.Config), затем
    перекрываются явными keyword‑аргументами.
    """
    kwargs = config.parser_options() if config is not None else {}
    kwargs.update(options)
    return ObjParser(**kwargs).parse(text, geometry=geometry)
