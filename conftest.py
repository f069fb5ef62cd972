# -*- coding: utf-8 -*-
"""
conftest.py – общие OBJ‑документы для тестов парсера.
"""

import pytest

from objmesh.mesh.geometry import Geometry


TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
vn 0 0 1
f 1//1 2//1 3//1
"""

# куб 2x2x2: 8 позиций, 6 нормалей, 4 texcoord, 6 квадов
CUBE_OBJ = """\
# cube
mtllib cube.mtl
o Cube
v -1 -1  1
v  1 -1  1
v  1  1  1
v -1  1  1
v -1 -1 -1
v  1 -1 -1
v  1  1 -1
v -1  1 -1
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn  0  0  1
vn  0  0 -1
vn  0 -1  0
vn  0  1  0
vn -1  0  0
vn  1  0  0
usemtl Material
s off
f 1/1/1 2/2/1 3/3/1 4/4/1
f 6/1/2 5/2/2 8/3/2 7/4/2
f 5/1/3 6/2/3 2/3/3 1/4/3
f 4/1/4 3/2/4 7/3/4 8/4/4
f 5/1/5 1/2/5 4/3/5 8/4/5
f 2/1/6 6/2/6 7/3/6 3/4/6
"""


class RecordingGeometry(Geometry):
    """Geometry, запоминающая каждый вызов add_indices."""

    def __init__(self):
        super().__init__()
        self.index_calls = []

    def add_indices(self, indices):
        self.index_calls.append(list(indices))
        super().add_indices(indices)


@pytest.fixture
def triangle_obj():
    return TRIANGLE_OBJ


@pytest.fixture
def cube_obj():
    return CUBE_OBJ


@pytest.fixture
def recording_geometry():
    return RecordingGeometry()
