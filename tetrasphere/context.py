import logging

from tetrasphere.gameobjects.camera import Camera
from tetrasphere.gameobjects.material import Light, LightingProducts, Material, lighting_products
from tetrasphere.gameobjects.transform import FrameMatrices, FrameTransformBuilder
from tetrasphere.geometry.sphere import DEFAULT_SUBDIVISION, MeshBuffer, clamp_level, generate
from tetrasphere.rendering.interfaces import MeshUploader, UniformUploader

logger = logging.getLogger(__name__)


class RenderContext:
    """
    State owned by the render loop: subdivision level, the current mesh,
    the frame transform builder and the last tick timestamp.

    A level change builds the whole new MeshBuffer before it replaces the old
    one, so a draw never sees a half-built mesh.
    """

    def __init__(self, level: int = DEFAULT_SUBDIVISION, camera: Camera | None = None,
                 uploader: MeshUploader | None = None):
        """
        :param level: Initial subdivision level, clamped to [0, 6]
        :param camera: Camera parameters for the frame transform
        :param uploader: Optional MeshUploader that receives every new mesh
        """
        self.uploader = uploader
        self.frames = FrameTransformBuilder(camera)
        self.last_time: float | None = None

        self.level = clamp_level(level)
        self.mesh: MeshBuffer = generate(self.level)
        if self.uploader is not None:
            self.uploader.upload(self.mesh)

    def set_level(self, level: int) -> bool:
        """
        Rebuild the mesh for a new subdivision level.

        :param level: Requested level, clamped to [0, 6]
        :return: True if the mesh was rebuilt
        """
        level = clamp_level(level)
        if level == self.level:
            return False

        mesh = generate(level)

        self.level = level
        self.mesh = mesh
        if self.uploader is not None:
            self.uploader.upload(mesh)

        logger.info("Subdivision: %d", level)
        logger.debug("%d triangles, %d vertices", mesh.triangle_count, mesh.vertex_count)
        return True

    def step_level(self, delta: int) -> bool:
        return self.set_level(self.level + delta)

    def tick(self, now: float, aspect_ratio: float) -> FrameMatrices:
        """
        Compute this frame's matrices.

        :param now: Current time in seconds
        :param aspect_ratio: Viewport width / height
        """
        dt = 0.0 if self.last_time is None else now - self.last_time
        self.last_time = now
        return self.frames.compute_frame(dt, aspect_ratio)


def upload_lighting(uniforms: UniformUploader, light: Light, material: Material) -> LightingProducts:
    """
    Precompute the lighting products once and hand them to the uniform side.

    :param uniforms: Target implementing UniformUploader
    :param light: Scene light
    :param material: Sphere material
    :return: The uploaded products
    """
    products = lighting_products(light, material)
    uniforms.upload_lighting(products)
    return products
