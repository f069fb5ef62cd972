# -*- coding: utf-8 -*-
"""
Загрузка OBJ с диска для прикладного кода.
Сам парсер файлов не читает – здесь только чтение текста и передача в parse().
"""
from pathlib import Path

from objmesh.loaders.obj_parser import parse
from objmesh.utils.logger import logger

def load_obj(path, config=None, **options):
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    logger.info(f"[Loader] Loading {path.name}")
    geometry = parse(text, config=config, **options)
    geometry.name = path.stem
    return geometry
