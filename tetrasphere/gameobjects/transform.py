from typing import NamedTuple

import numpy as np

from tetrasphere.gameobjects.camera import Camera
from tetrasphere.geometry.matrix import multiply, normal_matrix_from_model_view, rotation_y

ANGULAR_SPEED = 30.0  # degrees per second


class FrameMatrices(NamedTuple):
    projection: np.ndarray
    model_view: np.ndarray
    normal_matrix: np.ndarray


class FrameState:
    def __init__(self, angle=0.0, aspect_ratio=1.0):
        """
        :param angle: Accumulated rotation in degrees
        :param aspect_ratio: Viewport width / height
        """
        self.angle = float(angle)
        self.aspect_ratio = float(aspect_ratio)


class FrameTransformBuilder:
    """
    Builds projection, model-view and normal matrices once per tick.

    The rotation angle accumulates across calls, so calling compute_frame
    twice for the same tick advances the rotation twice.
    """

    def __init__(self, camera: Camera | None = None, angular_speed: float = ANGULAR_SPEED,
                 state: FrameState | None = None):
        self.camera = camera if camera is not None else Camera()
        self.angular_speed = angular_speed
        self.state = state if state is not None else FrameState()

    @property
    def angle(self) -> float:
        return self.state.angle

    def compute_frame(self, dt: float, aspect_ratio: float) -> FrameMatrices:
        """
        Advance the rotation by dt and build the matrices for this frame.

        :param dt: Seconds since the previous tick
        :param aspect_ratio: Viewport width / height
        :return: (projection, model_view, normal_matrix)
        """
        self.state.angle += dt * self.angular_speed
        self.state.aspect_ratio = aspect_ratio

        projection = self.camera.get_projection_matrix(aspect_ratio)

        # rotate first, then push back in front of the camera
        model_view = multiply(self.camera.get_view_matrix(), rotation_y(self.state.angle))
        normal_matrix = normal_matrix_from_model_view(model_view)

        return FrameMatrices(projection, model_view, normal_matrix)
