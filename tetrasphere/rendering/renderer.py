import logging
from pathlib import Path

from OpenGL import GL

from tetrasphere.gameobjects.material import LightingProducts
from tetrasphere.gameobjects.transform import FrameMatrices

logger = logging.getLogger(__name__)

SHADER_DIR = Path(__file__).parent / "shader"

CLEAR_COLOR = (0.05, 0.05, 0.08, 1.0)

# =========================
# Shader Utils
# =========================

# stage -> file name inside SHADER_DIR
SPHERE_STAGES = (
    (GL.GL_VERTEX_SHADER, "sphere.vert"),
    (GL.GL_FRAGMENT_SHADER, "sphere.frag"),
)


def load_shader(name: str) -> str:
    """
    Read a GLSL source file from the packaged shader directory.

    :param name: File name inside the shader directory
    :return: The shader source
    :raises RuntimeError: If the file is missing, so startup reports it like a GL failure
    """
    path = SHADER_DIR / name
    if not path.is_file():
        raise RuntimeError(f"Shader source not found: {path}")
    return path.read_text(encoding="utf-8")


def _info_log(raw) -> str:
    if isinstance(raw, bytes):
        return raw.decode(errors="replace").strip()
    return str(raw).strip()


def compile_shader(source: str, shader_type: int, label: str = "shader") -> int:
    shader = GL.glCreateShader(shader_type)
    if not shader:
        raise RuntimeError(f"glCreateShader failed for {label}")

    GL.glShaderSource(shader, source)
    GL.glCompileShader(shader)
    if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
        log = _info_log(GL.glGetShaderInfoLog(shader))
        GL.glDeleteShader(shader)
        raise RuntimeError(f"{label} did not compile: {log}")
    return shader


def build_program(stages=SPHERE_STAGES) -> int:
    """
    Compile every stage, link them and drop the stage objects.

    :param stages: (shader type, file name) pairs
    :return: Program handle
    :raises RuntimeError: On a missing file, compile error or link error
    """
    shaders = []
    try:
        for shader_type, name in stages:
            shaders.append(compile_shader(load_shader(name), shader_type, label=name))

        program = GL.glCreateProgram()
        if not program:
            raise RuntimeError("glCreateProgram failed")
        for shader in shaders:
            GL.glAttachShader(program, shader)
        GL.glLinkProgram(program)

        if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
            log = _info_log(GL.glGetProgramInfoLog(program))
            GL.glDeleteProgram(program)
            raise RuntimeError(f"Program did not link: {log}")
    finally:
        # linked programs keep their own copy
        for shader in shaders:
            GL.glDeleteShader(shader)

    logger.debug("Built program %d from %s", program, ", ".join(name for _, name in stages))
    return program


# =========================
# Renderer
# =========================


class Renderer:
    def __init__(self, width: int, height: int):
        """
        Sphere renderer: one program, one light, one mesh.

        :param width: Viewport width in pixels
        :param height: Viewport height in pixels
        """
        self.program = build_program()
        logger.info("Linked sphere program %d", self.program)

        GL.glEnable(GL.GL_DEPTH_TEST)

        # seed faces wind clockwise seen from outside
        GL.glEnable(GL.GL_CULL_FACE)
        GL.glFrontFace(GL.GL_CW)
        GL.glCullFace(GL.GL_BACK)

        # matrix uniforms
        self.u_model_view = GL.glGetUniformLocation(self.program, "u_model_view")
        self.u_projection = GL.glGetUniformLocation(self.program, "u_projection")
        self.u_normal_matrix = GL.glGetUniformLocation(self.program, "u_normal_matrix")

        # lighting uniforms
        self.u_light_position = GL.glGetUniformLocation(self.program, "u_light_position")
        self.u_ambient_product = GL.glGetUniformLocation(self.program, "u_ambient_product")
        self.u_diffuse_product = GL.glGetUniformLocation(self.program, "u_diffuse_product")
        self.u_specular_product = GL.glGetUniformLocation(self.program, "u_specular_product")
        self.u_shininess = GL.glGetUniformLocation(self.program, "u_shininess")

        self.resize(width, height)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def resize(self, width: int, height: int):
        self.width = max(1, width)
        self.height = max(1, height)
        GL.glViewport(0, 0, self.width, self.height)

    def upload_lighting(self, products: LightingProducts) -> None:
        GL.glUseProgram(self.program)
        GL.glUniform4fv(self.u_light_position, 1, products.light_position)
        GL.glUniform4fv(self.u_ambient_product, 1, products.ambient_product)
        GL.glUniform4fv(self.u_diffuse_product, 1, products.diffuse_product)
        GL.glUniform4fv(self.u_specular_product, 1, products.specular_product)
        GL.glUniform1f(self.u_shininess, products.shininess)

    def upload_frame(self, matrices: FrameMatrices) -> None:
        # row-major numpy matrices -> transpose on upload
        GL.glUseProgram(self.program)
        GL.glUniformMatrix4fv(self.u_projection, 1, GL.GL_TRUE, matrices.projection)
        GL.glUniformMatrix4fv(self.u_model_view, 1, GL.GL_TRUE, matrices.model_view)
        GL.glUniformMatrix3fv(self.u_normal_matrix, 1, GL.GL_TRUE, matrices.normal_matrix)

    def render(self, matrices: FrameMatrices, mesh):
        """
        Clear, upload this frame's matrices and draw.

        :param matrices: Output of FrameTransformBuilder.compute_frame
        :param mesh: Anything with a draw() method (Mesh or GLMeshUploader)
        """
        GL.glClearColor(*CLEAR_COLOR)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        self.upload_frame(matrices)
        mesh.draw()
