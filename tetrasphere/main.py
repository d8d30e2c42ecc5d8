import argparse
import logging
import sys

import pygame
from OpenGL import GL

from tetrasphere.context import RenderContext, upload_lighting
from tetrasphere.gameobjects.mesh import GLMeshUploader
from tetrasphere.input import InputState
from tetrasphere.logging_config import setup_logging
from tetrasphere.rendering.renderer import Renderer
from tetrasphere.scene import load_scene

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Rotating sphere built by recursive tetrahedron subdivision."
    )
    parser.add_argument(
        "--scene", dest="scene_path", default=None,
        help="Path to a scene JSON file (window, camera, light, material)."
    )
    parser.add_argument(
        "--level", type=int, default=None,
        help="Initial subdivision level, 0-6. Overrides the scene file."
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity."
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write the log to this file."
    )
    return parser.parse_args(argv)


def create_window(width, height, title):
    # ====================
    # Pygame / OpenGL init
    # ====================
    pygame.init()
    pygame.display.set_caption(title)

    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
    pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
    pygame.display.gl_set_attribute(
        pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
    )
    pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)

    try:
        pygame.display.set_mode((width, height), pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE)
    except pygame.error as e:
        raise RuntimeError(f"Could not create an OpenGL window: {e}") from e

    version = GL.glGetString(GL.GL_VERSION)
    if version:
        logger.info("OpenGL: %s", version.decode())


def run(scene, level=None):
    """
    Open the window and run the render loop until the window is closed.

    :param scene: Loaded Scene
    :param level: Optional initial subdivision level overriding the scene
    """
    create_window(scene.window.width, scene.window.height, scene.window.title)

    # ====================
    # Core objects
    # ====================
    clock = pygame.time.Clock()
    input_state = InputState()
    renderer = Renderer(scene.window.width, scene.window.height)
    uploader = GLMeshUploader()

    start_level = scene.subdivision if level is None else level
    context = RenderContext(level=start_level, camera=scene.camera, uploader=uploader)
    logger.info("Subdivision: %d", context.level)

    # fixed for the whole run
    upload_lighting(renderer, scene.light, scene.material)

    # ====================
    # Main Loop
    # ====================
    running = True
    while running:
        clock.tick(scene.window.fps)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                renderer.resize(e.w, e.h)

        actions = input_state.update()
        if actions["quit"]:
            running = False
        if actions["subdivision"]:
            context.step_level(actions["subdivision"])

        matrices = context.tick(pygame.time.get_ticks() / 1000.0, renderer.aspect)
        renderer.render(matrices, uploader)

        pygame.display.flip()

    pygame.quit()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        scene = load_scene(args.scene_path)
        run(scene, level=args.level)
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        logger.error("%s", e)
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
