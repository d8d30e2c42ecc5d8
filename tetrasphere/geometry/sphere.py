"""
Sphere approximation by recursive tetrahedron subdivision.

Every triangle is split into four at its edge midpoints, and the midpoints are
pushed out onto the unit sphere. Output is non-indexed: each triangle brings
three fresh vertices, and a vertex's normal is its own (x, y, z).
"""
import numpy as np

from tetrasphere.geometry.vector import vec4, lerp4, normalize_to_vec4

MIN_SUBDIVISION = 0
MAX_SUBDIVISION = 6
DEFAULT_SUBDIVISION = 3

# Seed tetrahedron. Not normalized exactly on purpose; the literals are the
# reference geometry.
SEED_A = vec4(0.0, 0.0, -1.0)
SEED_B = vec4(0.0, 0.942809, 0.333333)
SEED_C = vec4(-0.816497, -0.471405, 0.333333)
SEED_D = vec4(0.816497, -0.471405, 0.333333)

SEED_FACES = (
    (SEED_A, SEED_B, SEED_C),
    (SEED_D, SEED_C, SEED_B),
    (SEED_A, SEED_D, SEED_B),
    (SEED_A, SEED_C, SEED_D),
)


def clamp_level(level: int) -> int:
    return max(MIN_SUBDIVISION, min(MAX_SUBDIVISION, int(level)))


def triangle_count(level: int) -> int:
    return len(SEED_FACES) * 4 ** level


class MeshBuffer:
    """
    Generated sphere geometry.

    positions: (N, 4) float32, w = 1
    normals  : (N, 3) float32, same order as positions
    N is 3 * triangle_count, grouped in runs of 3 per triangle.
    """

    def __init__(self, positions: np.ndarray, normals: np.ndarray, level: int):
        assert positions.shape[0] == normals.shape[0], \
            "positions/normals vertex count mismatch"
        assert positions.shape[0] % 3 == 0, "vertex count must be a multiple of 3"

        positions.setflags(write=False)
        normals.setflags(write=False)

        self.positions = positions
        self.normals = normals
        self.level = level

    @property
    def vertex_count(self) -> int:
        return self.positions.shape[0]

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    def triangles(self) -> np.ndarray:
        """Positions reshaped to (triangle_count, 3, 4)."""
        return self.positions.reshape(-1, 3, 4)


def split(tris: np.ndarray) -> np.ndarray:
    """
    Split every triangle of a (k, 3, 4) batch into four.

    Children of one parent stay next to each other in the order
    (a, ab, ac), (ab, b, bc), (bc, c, ac), (ab, bc, ac), so repeating this
    level by level gives the same row order as a depth-first recursion.

    :param tris: (k, 3, 4) corner positions
    :return: (4k, 3, 4) corner positions
    """
    a, b, c = tris[:, 0], tris[:, 1], tris[:, 2]

    ab = normalize_to_vec4(lerp4(a, b, 0.5))
    ac = normalize_to_vec4(lerp4(a, c, 0.5))
    bc = normalize_to_vec4(lerp4(b, c, 0.5))

    children = np.stack([
        np.stack([a, ab, ac], axis=1),
        np.stack([ab, b, bc], axis=1),
        np.stack([bc, c, ac], axis=1),
        np.stack([ab, bc, ac], axis=1),
    ], axis=1)
    return children.reshape(-1, 3, 4)


def divide(a, b, c, depth: int, out: np.ndarray, start: int = 0) -> int:
    """
    Subdivide triangle (a, b, c) `depth` times and write the leaf triangles
    into `out` starting at row `start`.

    Each step works on the whole level at once (see split).

    :param a: First corner (vec4)
    :param b: Second corner (vec4)
    :param c: Third corner (vec4)
    :param depth: Number of subdivision steps left
    :param out: Pre-sized (rows, 4) position buffer
    :param start: First row to write
    :return: Row index after the last written vertex
    :raises ValueError: On a negative depth
    """
    if depth < 0:
        raise ValueError(f"Subdivision depth must be >= 0, got {depth}")

    tris = np.array([[a, b, c]], dtype=np.float32)
    for _ in range(depth):
        tris = split(tris)

    rows = tris.reshape(-1, 4)
    end = start + rows.shape[0]
    out[start:end] = rows
    return end


def generate(level: int) -> MeshBuffer:
    """
    Build the sphere mesh for a subdivision level.

    :param level: Subdivision depth in [0, 6]
    :return: MeshBuffer with 12 * 4**level vertices
    :raises ValueError: If level is outside [0, 6]
    """
    if not MIN_SUBDIVISION <= level <= MAX_SUBDIVISION:
        raise ValueError(
            f"Subdivision level must be in [{MIN_SUBDIVISION}, {MAX_SUBDIVISION}], got {level}"
        )

    vcount = 3 * triangle_count(level)
    positions = np.empty((vcount, 4), dtype=np.float32)

    row = 0
    for a, b, c in SEED_FACES:
        row = divide(a, b, c, level, positions, row)

    assert row == vcount

    # point on a sphere around the origin: normal == direction
    normals = positions[:, :3].copy()

    return MeshBuffer(positions, normals, level)
