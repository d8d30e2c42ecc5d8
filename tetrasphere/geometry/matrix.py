"""
4x4 / 3x3 matrix helpers.

Matrices are row-major numpy arrays and act on column vectors (p' = M @ p),
so translation lives in the last column. Upload them with transpose=GL_TRUE.
"""
import math

import numpy as np


def identity() -> np.ndarray:
    return np.identity(4, dtype=np.float32)


def translation(tx: float, ty: float, tz: float) -> np.ndarray:
    m = identity()
    m[:3, 3] = (tx, ty, tz)
    return m


def rotation_y(angle_degrees: float) -> np.ndarray:
    """
    Rotation about the vertical axis.

    :param angle_degrees: Rotation angle in degrees
    :return: 4x4 rotation matrix
    """
    a = math.radians(angle_degrees)
    c, s = math.cos(a), math.sin(a)

    return np.array([[c, 0, s, 0],
                     [0, 1, 0, 0],
                     [-s, 0, c, 0],
                     [0, 0, 0, 1]], dtype=np.float32)


def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Standard matrix product, out[r][c] = sum_k a[r][k] * b[k][c].

    multiply(T, R) applies R first, then T.
    """
    return np.matmul(a, b).astype(np.float32)


def perspective(fovy_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """
    Right-handed perspective projection into GL clip space (depth -1..1).

    :param fovy_degrees: Vertical field of view in degrees
    :param aspect: Viewport width / height
    :param near: Distance to the near plane (> 0)
    :param far: Distance to the far plane
    :return: 4x4 projection matrix
    :raises ValueError: On a field of view outside (0, 180), a non-positive
        aspect or near plane, or near == far
    """
    if not 0 < fovy_degrees < 180:
        raise ValueError(f"Field of view must be in (0, 180) degrees, got {fovy_degrees}")
    if aspect <= 0:
        raise ValueError(f"Aspect ratio must be positive, got {aspect}")
    if near <= 0 or near == far:
        raise ValueError(f"Invalid clip planes: near={near}, far={far}")

    f = 1.0 / math.tan(math.radians(fovy_degrees) / 2.0)

    proj = np.zeros((4, 4), dtype=np.float32)
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = (2 * far * near) / (near - far)
    proj[3, 2] = -1.0

    return proj


def normal_matrix_from_model_view(mv: np.ndarray) -> np.ndarray:
    # Upper-left 3x3 block. Only a valid normal transform while the
    # model-view holds rotation and translation (no non-uniform scale).
    return np.array(mv[:3, :3], dtype=np.float32)
