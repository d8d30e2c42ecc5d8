import logging

import numpy as np
from OpenGL import GL

from tetrasphere.geometry.sphere import MeshBuffer

logger = logging.getLogger(__name__)

POSITION_LOCATION = 0
NORMAL_LOCATION = 1


class Mesh:
    def __init__(self, buffer: MeshBuffer):
        """
        Upload a MeshBuffer as two vertex buffers.

        position (location = 0): 4 floats
        normal   (location = 1): 3 floats
        """
        positions = np.ascontiguousarray(buffer.positions, dtype=np.float32)
        normals = np.ascontiguousarray(buffer.normals, dtype=np.float32)

        self.vertex_count = buffer.vertex_count

        self.vao = GL.glGenVertexArrays(1)
        self.position_vbo, self.normal_vbo = GL.glGenBuffers(2)

        GL.glBindVertexArray(self.vao)

        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.position_vbo)
        GL.glBufferData(GL.GL_ARRAY_BUFFER, positions.nbytes, positions, GL.GL_STATIC_DRAW)
        GL.glEnableVertexAttribArray(POSITION_LOCATION)
        GL.glVertexAttribPointer(POSITION_LOCATION, 4, GL.GL_FLOAT, GL.GL_FALSE, 0, None)

        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.normal_vbo)
        GL.glBufferData(GL.GL_ARRAY_BUFFER, normals.nbytes, normals, GL.GL_STATIC_DRAW)
        GL.glEnableVertexAttribArray(NORMAL_LOCATION)
        GL.glVertexAttribPointer(NORMAL_LOCATION, 3, GL.GL_FLOAT, GL.GL_FALSE, 0, None)

        GL.glBindVertexArray(0)

    def draw(self):
        GL.glBindVertexArray(self.vao)
        GL.glDrawArrays(GL.GL_TRIANGLES, 0, self.vertex_count)
        GL.glBindVertexArray(0)

    def release(self):
        GL.glDeleteBuffers(2, [self.position_vbo, self.normal_vbo])
        GL.glDeleteVertexArrays(1, [self.vao])


class GLMeshUploader:
    """
    MeshUploader backed by OpenGL. Keeps the one live Mesh and frees the
    previous buffers when a new MeshBuffer arrives.
    """

    def __init__(self):
        self.mesh: Mesh | None = None

    def upload(self, buffer: MeshBuffer) -> None:
        mesh = Mesh(buffer)
        if self.mesh is not None:
            self.mesh.release()
        self.mesh = mesh
        logger.debug("Uploaded %d vertices", mesh.vertex_count)

    def draw(self):
        if self.mesh is not None:
            self.mesh.draw()
