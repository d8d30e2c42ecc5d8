import numpy as np


def vec4(x: float, y: float, z: float, w: float = 1.0) -> np.ndarray:
    return np.array([x, y, z, w], dtype=np.float32)


def lerp4(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """
    Linear interpolation between 4-component vectors.

    Works on single vectors or on (..., 4) batches.

    :param a: Start vector (t = 0)
    :param b: End vector (t = 1)
    :param t: Interpolation factor
    :return: (1 - t) * a + t * b, all four components
    :rtype: np.ndarray
    """
    return ((1.0 - t) * np.asarray(a) + t * np.asarray(b)).astype(np.float32)


def normalize_to_vec4(v: np.ndarray) -> np.ndarray:
    """
    Project points onto the unit sphere.

    Only x, y, z take part in the length; the input w is discarded and the
    result always carries w = 1. Accepts a single vector or a (..., 3+) batch.

    :param v: Vector(s) with at least 3 components
    :return: Unit-length position(s) as vec4
    :raises ValueError: If any xyz part has zero length
    """
    xyz = np.asarray(v, dtype=np.float32)[..., :3]
    norm = np.linalg.norm(xyz, axis=-1, keepdims=True)
    if np.any(norm == 0):
        raise ValueError("Cannot normalize a zero-length vector")
    out = np.empty(xyz.shape[:-1] + (4,), dtype=np.float32)
    out[..., :3] = xyz / norm
    out[..., 3] = 1.0
    return out


def component_product4(a, b) -> np.ndarray:
    # light * material colour, used once at startup
    return np.asarray(a, dtype=np.float32)[:4] * np.asarray(b, dtype=np.float32)[:4]
