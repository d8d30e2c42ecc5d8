import numpy as np
import pytest

from tetrasphere.geometry.vector import component_product4, lerp4, normalize_to_vec4, vec4


def test_vec4_defaults_w_to_one():
    v = vec4(1.0, 2.0, 3.0)
    assert v.dtype == np.float32
    assert np.array_equal(v, [1.0, 2.0, 3.0, 1.0])


def test_lerp4_midpoint_and_ends():
    a = vec4(0.0, 0.0, -1.0)
    b = vec4(0.0, 1.0, 0.0)
    assert np.allclose(lerp4(a, b, 0.0), a)
    assert np.allclose(lerp4(a, b, 1.0), b)
    assert np.allclose(lerp4(a, b, 0.5), [0.0, 0.5, -0.5, 1.0])


def test_lerp4_interpolates_w():
    a = np.array([0, 0, 0, 0], dtype=np.float32)
    b = np.array([2, 2, 2, 2], dtype=np.float32)
    assert np.allclose(lerp4(a, b, 0.25), [0.5, 0.5, 0.5, 0.5])


def test_normalize_to_vec4_ignores_input_w():
    v = normalize_to_vec4(np.array([3.0, 0.0, 4.0, 7.0], dtype=np.float32))
    assert np.allclose(v, [0.6, 0.0, 0.8, 1.0])
    assert v[3] == 1.0


def test_normalize_to_vec4_accepts_vec3():
    v = normalize_to_vec4(np.array([0.0, 2.0, 0.0]))
    assert np.allclose(v, [0.0, 1.0, 0.0, 1.0])


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        normalize_to_vec4(vec4(0.0, 0.0, 0.0))


def test_component_product4():
    p = component_product4([0.2, 0.2, 0.2, 1.0], [0.2, 0.3, 0.8, 1.0])
    assert np.allclose(p, [0.04, 0.06, 0.16, 1.0])


def test_normalize_to_vec4_batch():
    v = np.array([[3.0, 0.0, 4.0, 0.0], [0.0, 0.0, 2.0, 5.0]], dtype=np.float32)
    out = normalize_to_vec4(v)
    assert out.shape == (2, 4)
    assert np.allclose(out, [[0.6, 0.0, 0.8, 1.0], [0.0, 0.0, 1.0, 1.0]])


def test_normalize_batch_with_zero_row_raises():
    v = np.array([[1.0, 0.0, 0.0, 1.0], [0.0, 0.0, 0.0, 1.0]], dtype=np.float32)
    with pytest.raises(ValueError):
        normalize_to_vec4(v)


def test_lerp4_batch():
    a = np.zeros((3, 4), dtype=np.float32)
    b = np.full((3, 4), 2.0, dtype=np.float32)
    assert np.allclose(lerp4(a, b, 0.5), np.ones((3, 4)))
