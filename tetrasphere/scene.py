# scene.py
import json
import logging
from pathlib import Path

from tetrasphere.gameobjects.camera import Camera
from tetrasphere.gameobjects.material import Light, Material, MaterialRegistry
from tetrasphere.geometry.sphere import DEFAULT_SUBDIVISION, clamp_level

logger = logging.getLogger(__name__)

DEFAULT_SCENE_PATH = Path(__file__).parent / "scene.json"


def _section(data: dict, key: str) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object, got {value!r}")
    return value


def _number(value, key: str, kind=float):
    # bool is an int subclass but never a valid setting here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return kind(value)


class WindowSettings:
    def __init__(self, width=800, height=600, title="Tetrasphere", fps=60):
        self.width = _number(width, "width", int)
        self.height = _number(height, "height", int)
        self.title = str(title)
        self.fps = _number(fps, "fps", int)

        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")


class Scene:
    def __init__(self, scene_path: str | Path | None = None):
        """
        Everything the render loop is configured with.

        :param self: The object itself
        :param scene_path: Optional JSON file to load on top of the defaults
        """
        self.window = WindowSettings()
        self.subdivision = DEFAULT_SUBDIVISION
        self.camera = Camera()
        self.light = Light()
        self.material = Material()
        if scene_path:
            self.load_scene(scene_path)

    def _vec4(self, data: dict, key: str, default):
        value = data.get(key)
        if value is None:
            return default
        if not isinstance(value, (list, tuple)) or len(value) != 4:
            raise ValueError(f"'{key}' must be a list of 4 numbers, got {value!r}")
        return tuple(_number(v, key) for v in value)

    def _create_light(self, data: dict) -> Light:
        base = Light()
        return Light(
            position=self._vec4(data, "position", base.position),
            ambient=self._vec4(data, "ambient", base.ambient),
            diffuse=self._vec4(data, "diffuse", base.diffuse),
            specular=self._vec4(data, "specular", base.specular),
        )

    def _create_material(self, data) -> Material:
        # either a preset name or a dict, optionally based on a preset
        if isinstance(data, str):
            return MaterialRegistry.create(data)
        if not isinstance(data, dict):
            raise ValueError(f"'material' must be a preset name or an object, got {data!r}")

        base = MaterialRegistry.create(data.get("name", "default"))
        return Material(
            ambient=self._vec4(data, "ambient", base.ambient),
            diffuse=self._vec4(data, "diffuse", base.diffuse),
            specular=self._vec4(data, "specular", base.specular),
            shininess=_number(data.get("shininess", base.shininess), "shininess"),
        )

    def load_scene(self, scene_path: str | Path):
        """
        Load settings from a JSON file. Missing sections keep their defaults.

        :param scene_path: Path to the scene file
        :raises FileNotFoundError: If the file does not exist
        :raises ValueError: On malformed JSON or values of the wrong type or range
        """
        path = Path(scene_path)
        if not path.exists():
            raise FileNotFoundError(f"Scene file not found: {scene_path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Scene file {path} must contain a JSON object")

        window = _section(data, "window")
        self.window = WindowSettings(
            width=window.get("width", self.window.width),
            height=window.get("height", self.window.height),
            title=window.get("title", self.window.title),
            fps=window.get("fps", self.window.fps),
        )

        if "subdivision" in data:
            requested = _number(data["subdivision"], "subdivision", int)
            self.subdivision = clamp_level(requested)
            if self.subdivision != requested:
                logger.warning("Subdivision %d out of range, using %d", requested, self.subdivision)

        # Camera checks its own ranges, so a bad fov fails here and not on
        # the first frame
        camera = _section(data, "camera")
        self.camera = Camera(
            fov=_number(camera.get("fov", self.camera.fov), "fov"),
            near=_number(camera.get("near", self.camera.near), "near"),
            far=_number(camera.get("far", self.camera.far), "far"),
            distance=_number(camera.get("distance", self.camera.distance), "distance"),
        )

        if "light" in data:
            self.light = self._create_light(_section(data, "light"))
        if "material" in data:
            self.material = self._create_material(data["material"])

        logger.debug("Loaded scene %s", path)


def load_scene(scene_path: str | Path | None = None) -> Scene:
    return Scene(scene_path if scene_path is not None else DEFAULT_SCENE_PATH)
