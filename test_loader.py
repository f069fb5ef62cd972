# -*- coding: utf-8 -*-
import logging

from objmesh import load_obj, Config
from objmesh.utils.logger import logger, set_level
from objmesh.utils.profiler import Profiler

def test_load_obj_from_disk(tmp_path, triangle_obj):
    path = tmp_path / "tri.obj"
    path.write_text(triangle_obj, encoding="utf-8")
    g = load_obj(path)
    assert g.name == "tri"
    assert g.indices == [0, 1, 2]

def test_load_obj_with_config(tmp_path, cube_obj):
    path = tmp_path / "cube.obj"
    path.write_text(cube_obj, encoding="utf-8")
    cfg = Config()
    cfg["parser"]["index_flush"] = "end"
    assert load_obj(path, config=cfg).triangle_count == 12

def test_set_level():
    old = logger.level
    try:
        set_level("debug")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(old)

def test_profiler_measures():
    with Profiler("block") as p:
        sum(range(1000))
    assert p.elapsed_ms >= 0.0
