import json

import numpy as np
import pytest

from tetrasphere.gameobjects.material import MaterialRegistry
from tetrasphere.scene import DEFAULT_SCENE_PATH, Scene, load_scene


def write_scene(tmp_path, data):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_packaged_scene_matches_defaults():
    assert DEFAULT_SCENE_PATH.exists()
    scene = load_scene()
    assert scene.subdivision == 3
    assert scene.camera.fov == 45.0
    assert scene.camera.near == pytest.approx(0.1)
    assert scene.camera.far == 10.0
    assert scene.camera.distance == 3.0
    assert np.allclose(scene.light.position, [2.0, 2.0, 2.0, 1.0])
    assert np.allclose(scene.material.diffuse, [0.2, 0.3, 0.8, 1.0])
    assert scene.material.shininess == 64.0


def test_partial_scene_keeps_defaults(tmp_path):
    path = write_scene(tmp_path, {"window": {"width": 1024}, "subdivision": 5})
    scene = load_scene(path)
    assert scene.window.width == 1024
    assert scene.window.height == 600
    assert scene.subdivision == 5
    assert scene.camera.distance == 3.0


def test_subdivision_is_clamped(tmp_path):
    scene = load_scene(write_scene(tmp_path, {"subdivision": 9}))
    assert scene.subdivision == 6


def test_material_preset_by_name(tmp_path):
    scene = load_scene(write_scene(tmp_path, {"material": "gold"}))
    assert scene.material.shininess == pytest.approx(51.2)


def test_scene_material_is_not_the_shared_preset(tmp_path):
    scene = load_scene(write_scene(tmp_path, {"material": "gold"}))
    assert scene.material is not MaterialRegistry.get("gold")

    scene.material.shininess = 1.0
    scene.material.diffuse[:] = 0.0

    assert MaterialRegistry.get("gold").shininess == pytest.approx(51.2)
    assert np.allclose(MaterialRegistry.create("gold").diffuse, [0.75, 0.61, 0.23, 1.0])
    assert load_scene(write_scene(tmp_path, {"material": "gold"})).material.shininess == pytest.approx(51.2)


def test_material_override_on_preset(tmp_path):
    scene = load_scene(write_scene(tmp_path, {"material": {"name": "gold", "shininess": 10}}))
    assert scene.material.shininess == 10.0
    assert np.allclose(scene.material.diffuse, [0.75, 0.61, 0.23, 1.0])


def test_light_override(tmp_path):
    scene = load_scene(write_scene(tmp_path, {"light": {"position": [0, 0, 1, 0]}}))
    assert np.allclose(scene.light.position, [0, 0, 1, 0])
    assert np.allclose(scene.light.ambient, [0.2, 0.2, 0.2, 1.0])


def test_bad_vector_raises(tmp_path):
    with pytest.raises(ValueError):
        load_scene(write_scene(tmp_path, {"light": {"position": [1, 2, 3]}}))


def test_bad_window_size_raises(tmp_path):
    with pytest.raises(ValueError):
        load_scene(write_scene(tmp_path, {"window": {"width": 0}}))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Scene(tmp_path / "nope.json")


@pytest.mark.parametrize("data", [
    [1, 2, 3],
    {"window": [800, 600]},
    {"window": {"width": "wide"}},
    {"subdivision": None},
    {"subdivision": "3"},
    {"camera": {"fov": 0}},
    {"camera": {"near": 5, "far": 1}},
    {"camera": {"fov": None}},
    {"light": [1, 2, 3, 4]},
    {"light": {"position": [1, 2, None, 1]}},
    {"material": 5},
    {"material": {"shininess": "shiny"}},
    {"material": "plastic"},
    {"material": {"name": ["gold"]}},
])
def test_malformed_scene_raises_value_error(tmp_path, data):
    with pytest.raises(ValueError):
        load_scene(write_scene(tmp_path, data))


def test_invalid_json_raises_value_error(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_scene(path)
