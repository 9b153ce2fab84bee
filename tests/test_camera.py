"""Orbit camera tests."""

import math

import numpy as np
import pytest

from config import scene as config
from core import transforms
from core.camera import CameraState, OrbitCamera


def make_camera(**overrides):
    cfg = {**config.CAMERA, **overrides}
    return OrbitCamera(camera_config=cfg)


def test_initial_state_from_config():
    camera = make_camera()
    assert camera.state.position == pytest.approx(np.array([10.0, 14.0, 10.0]))
    assert camera.state.look_at == pytest.approx(np.array([0.0, 4.0, 0.0]))
    assert camera.state.fov_y == pytest.approx(math.radians(45.0))
    assert camera.aspect == pytest.approx(1280 / 720)


def test_zoom_round_trip_restores_radius():
    camera = make_camera()
    start = camera.get_radius()
    for delta in (1.0, 2.0, -0.5, -2.5, 3.0, -3.0):
        camera.update_orbit(zoom=delta)
    assert camera.get_radius() == pytest.approx(start, abs=1e-9)


def test_positive_zoom_moves_closer():
    camera = make_camera()
    start = camera.get_radius()
    camera.update_orbit(zoom=2.0)
    assert camera.get_radius() == pytest.approx(start - 2.0 * config.CAMERA["zoom_sensitivity"])


def test_zoom_is_clamped_to_min_radius():
    camera = make_camera(min_radius=2.0)
    camera.update_orbit(zoom=1e6)
    assert camera.get_radius() == pytest.approx(2.0)
    assert np.linalg.norm(camera.state.position - camera.state.look_at) > 0.0
    assert np.all(np.isfinite(camera.view_matrix()))


def test_zoom_is_clamped_to_max_radius():
    camera = make_camera(max_radius=30.0)
    camera.update_orbit(zoom=-1e6)
    assert camera.get_radius() == pytest.approx(30.0)


def test_orbit_keeps_radius_and_look_at():
    camera = make_camera()
    radius = camera.get_radius()
    look_at = camera.state.look_at.copy()

    camera.update_orbit(drag=(120.0, -40.0))

    assert camera.get_radius() == pytest.approx(radius)
    assert camera.state.look_at == pytest.approx(look_at)


def test_horizontal_drag_changes_azimuth():
    camera = make_camera()
    _, azimuth, elevation = camera.get_spherical()
    camera.update_orbit(drag=(100.0, 0.0))
    _, new_azimuth, new_elevation = camera.get_spherical()

    assert new_azimuth == pytest.approx(azimuth - 100.0 * config.CAMERA["mouse_sensitivity"])
    assert new_elevation == pytest.approx(elevation)


def test_elevation_is_clamped():
    camera = make_camera()
    camera.update_orbit(drag=(0.0, 1e6))
    _, _, elevation = camera.get_spherical()
    assert elevation == pytest.approx(math.radians(config.CAMERA["max_elevation"]))


def test_no_input_leaves_position_untouched():
    camera = make_camera()
    before = camera.state.position.copy()
    camera.update_orbit((0.0, 0.0), 0.0)
    assert np.array_equal(camera.state.position, before)


def test_resize_changes_projection_only():
    camera = make_camera()
    position = camera.state.position.copy()
    look_at = camera.state.look_at.copy()
    view = camera.view_matrix()
    proj = camera.projection_matrix()

    camera.on_resize(800, 800)

    assert camera.aspect == pytest.approx(1.0)
    assert np.array_equal(camera.state.position, position)
    assert np.array_equal(camera.state.look_at, look_at)
    assert np.array_equal(camera.view_matrix(), view)
    assert camera.projection_matrix()[0, 0] != pytest.approx(proj[0, 0])
    assert camera.projection_matrix()[1, 1] == pytest.approx(proj[1, 1])


def test_resize_ignores_minimized_window():
    camera = make_camera()
    camera.on_resize(0, 0)
    assert (camera.state.width, camera.state.height) == (1280, 720)


def test_translate_moves_eye_and_target():
    camera = make_camera()
    radius = camera.get_radius()
    camera.translate((1.0, 0.0, -2.0))
    assert camera.state.position == pytest.approx(np.array([11.0, 14.0, 8.0]))
    assert camera.state.look_at == pytest.approx(np.array([1.0, 4.0, -2.0]))
    assert camera.get_radius() == pytest.approx(radius)


def test_view_matrix_maps_look_at_onto_view_axis():
    camera = make_camera()
    target = np.append(camera.state.look_at, 1.0)
    eye = np.append(camera.state.position, 1.0)

    in_view = camera.view_matrix() @ target
    assert in_view[0] == pytest.approx(0.0, abs=1e-5)
    assert in_view[1] == pytest.approx(0.0, abs=1e-5)
    assert in_view[2] == pytest.approx(-camera.get_radius(), rel=1e-5)
    assert (camera.view_matrix() @ eye)[0:3] == pytest.approx(np.zeros(3), abs=1e-5)


def test_projection_matrix_matches_perspective():
    camera = make_camera()
    s = camera.state
    expected = transforms.perspective(s.fov_y, s.width / s.height, s.near, s.far)
    assert np.array_equal(camera.projection_matrix(), expected)


def test_custom_state():
    state = CameraState(position=np.array([0.0, 0.0, 5.0]), look_at=np.zeros(3), width=100, height=50)
    camera = OrbitCamera(state=state)
    assert camera.state is state
    assert camera.aspect == pytest.approx(2.0)
    assert camera.get_spherical() == pytest.approx((5.0, 0.0, 0.0))


def test_invalid_radius_limits_rejected():
    with pytest.raises(ValueError):
        make_camera(min_radius=0.0)
