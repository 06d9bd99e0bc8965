# geometry/mesh.py
import logging
from typing import List, Optional
from core.errors import DegenerateGeometryError, SceneFormatError
from core.vector import Vector3
from geometry.triangle import Triangle

logger = logging.getLogger(__name__)

def _vertex_index(vertex_str: str, count: int) -> int:
    # "v", "v/vt", "v//vn" or "v/vt/vn"; OBJ indices are 1-based, negatives count from the end
    idx = int(vertex_str.split('/')[0])
    if idx < 0:
        idx += count
    else:
        idx -= 1
    if not 0 <= idx < count:
        raise IndexError(f"vertex index {vertex_str} out of range")
    return idx

def load_obj(filename: str, material, scale: float = 1.0,
             offset: Optional[Vector3] = None) -> List[Triangle]:
    """
    Load the faces of an OBJ file as flat-shaded triangles sharing one material.

    Vertices are scaled and then translated by `offset`. Polygons are fan
    triangulated (assuming they are convex) and degenerate faces are skipped.

    Raises:
        SceneFormatError: If a vertex or face record cannot be parsed
    """
    if offset is None:
        offset = Vector3.zero()
    vertices: List[Vector3] = []
    triangles: List[Triangle] = []
    skipped = 0

    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split()
            if not values or values[0].startswith('#'):
                continue

            try:
                if values[0] == 'v':
                    v = Vector3(float(values[1]), float(values[2]), float(values[3]))
                    vertices.append(v * scale + offset)
                elif values[0] == 'f':
                    indices = [_vertex_index(v, len(vertices)) for v in values[1:]]
                    if len(indices) < 3:
                        raise ValueError("face needs at least three vertices")
                    for i in range(1, len(indices) - 1):
                        try:
                            triangles.append(Triangle(vertices[indices[0]],
                                                      vertices[indices[i]],
                                                      vertices[indices[i + 1]],
                                                      material))
                        except DegenerateGeometryError:
                            skipped += 1
            except (ValueError, IndexError) as e:
                raise SceneFormatError(
                    f"{filename}:{line_num}: cannot parse {line.strip()!r}: {e}") from e

    if skipped:
        logger.warning("Skipped %d degenerate faces in %s", skipped, filename)
    logger.debug("Loaded %d vertices, %d triangles from %s",
                 len(vertices), len(triangles), filename)
    return triangles
