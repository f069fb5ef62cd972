import sys

import objmesh as om
from objmesh.utils import logger, set_level

CUBE = """\
v -0.5 -0.5  0.5
v  0.5 -0.5  0.5
v  0.5  0.5  0.5
v -0.5  0.5  0.5
v -0.5 -0.5 -0.5
v  0.5 -0.5 -0.5
v  0.5  0.5 -0.5
v -0.5  0.5 -0.5
vn 0 0 1
vn 0 0 -1
f 1//1 2//1 3//1 4//1
f 6//2 5//2 8//2 7//2
"""


if __name__ == "__main__":
    set_level("DEBUG")

    if len(sys.argv) > 1:
        mesh = om.load_obj(sys.argv[1], deduplicate=True)
    else:
        mesh = om.parse(CUBE, deduplicate=True)

    positions, normals, texcoords, indices = mesh.as_arrays()
    logger.info(f"{mesh}: positions {positions.shape}, indices {indices.shape}")
    centre, radius = mesh.bounding_sphere
    logger.info(f"Bounding sphere: centre={centre}, radius={radius:.3f}")
