import numpy as np

from tetrasphere.geometry.matrix import perspective, translation


class Camera:
    def __init__(self, fov=45.0, near=0.1, far=10.0, distance=3.0):
        """
        Fixed camera looking down -Z at the origin.

        :param fov: Vertical field of view in degrees, in (0, 180)
        :param near: Near clip plane (> 0)
        :param far: Far clip plane (> near)
        :param distance: How far the model is pushed away from the eye (> 0)
        :raises ValueError: On any value outside those ranges
        """
        if not 0 < fov < 180:
            raise ValueError(f"Camera fov must be in (0, 180) degrees, got {fov}")
        if not 0 < near < far:
            raise ValueError(f"Camera clip planes need 0 < near < far, got near={near}, far={far}")
        if distance <= 0:
            raise ValueError(f"Camera distance must be positive, got {distance}")

        self.fov = fov
        self.near = near
        self.far = far
        self.distance = distance

    def get_view_matrix(self) -> np.ndarray:
        # eye at the origin, model moved back instead
        return translation(0.0, 0.0, -self.distance)

    def get_projection_matrix(self, aspect: float) -> np.ndarray:
        return perspective(self.fov, aspect, self.near, self.far)
