"""
Capabilities the core needs from the graphics side.

Nothing in tetrasphere.geometry or tetrasphere.gameobjects.transform imports
OpenGL; the GL classes in gameobjects.mesh and rendering.renderer implement
these, tests use plain fakes.
"""
from typing import Protocol

from tetrasphere.gameobjects.material import LightingProducts
from tetrasphere.gameobjects.transform import FrameMatrices
from tetrasphere.geometry.sphere import MeshBuffer


class MeshUploader(Protocol):
    def upload(self, mesh: MeshBuffer) -> None: ...


class UniformUploader(Protocol):
    def upload_lighting(self, products: LightingProducts) -> None: ...
    def upload_frame(self, matrices: FrameMatrices) -> None: ...
