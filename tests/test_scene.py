"""Scene orchestration tests."""

import math

import numpy as np
import pytest

from boat.controller import AlignmentMode
from config import scene as config
from core.snapshot import InputSnapshot
from core.scene import CameraMode, RenderFrame, Scene, resolve_camera_mode, sanitize_dt


def small_scene(**simulation):
    water = {**config.WATER, "resolution": 8, "size": 10.0}
    return Scene(
        water_config=water,
        boat_config=config.BOAT,
        simulation_config={**config.SIMULATION, **simulation},
    )


def test_sanitize_dt():
    assert sanitize_dt(0.01) == 0.01
    assert sanitize_dt(0.2) == 0.2
    assert sanitize_dt(2.5) == 2.5
    assert sanitize_dt(0.0) == 0.0
    assert sanitize_dt(-0.1) == 0.0
    assert sanitize_dt(float("nan")) == 0.0
    assert sanitize_dt(float("inf")) == 0.0


def test_invalid_dt_does_not_move_anything(capsys):
    scene = small_scene()
    pose_before = (scene.boat.pose.x, scene.boat.pose.z, scene.boat.pose.heading)

    applied = scene.update(float("nan"), InputSnapshot(forward_held=True, turn_left_held=True))

    assert applied == 0.0
    assert scene.field.time == 0.0
    assert (scene.boat.pose.x, scene.boat.pose.z, scene.boat.pose.heading) == pose_before
    assert "[Scene]" in capsys.readouterr().out


def test_time_follows_raw_dt():
    """Slow frames advance the waves by the full elapsed time."""
    scene = small_scene()
    scene.update(0.02, InputSnapshot())
    scene.update(0.2, InputSnapshot())
    scene.update(1.0, InputSnapshot())
    assert scene.field.time == pytest.approx(1.22)


def test_slow_frame_moves_boat_full_distance():
    scene = small_scene()
    scene.update(0.5, InputSnapshot(forward_held=True))
    assert scene.boat.pose.z == pytest.approx(-0.5 * config.BOAT["speed"])


def test_mesh_and_boat_share_time():
    scene = small_scene()
    for _ in range(5):
        scene.update(0.03, InputSnapshot(forward_held=True))

    t = scene.field.time
    pose = scene.boat.pose
    assert pose.y == scene.field.height(pose.x, pose.z, t)

    vertices = scene.grid.vertices
    for x, y, z in vertices[::9]:
        assert y == pytest.approx(scene.field.height(float(x), float(z), t), abs=1e-6)


def test_initial_mesh_is_sampled():
    scene = small_scene()
    assert np.any(scene.grid.vertices[:, 1] != 0.0)
    assert scene.boat.pose.y == scene.field.height(0.0, 0.0, 0.0)


def test_resolve_camera_mode():
    fixed, follow = CameraMode.FIXED, CameraMode.FOLLOW
    assert resolve_camera_mode(fixed, InputSnapshot()) is fixed
    assert resolve_camera_mode(follow, InputSnapshot()) is follow
    assert resolve_camera_mode(fixed, InputSnapshot(camera_mode_2_pressed=True)) is follow
    assert resolve_camera_mode(follow, InputSnapshot(camera_mode_1_pressed=True)) is fixed
    both = InputSnapshot(camera_mode_1_pressed=True, camera_mode_2_pressed=True)
    assert resolve_camera_mode(fixed, both) is follow
    assert resolve_camera_mode(follow, both) is follow


def test_fixed_camera_ignores_boat_motion():
    scene = small_scene()
    position = scene.camera.state.position.copy()
    look_at = scene.camera.state.look_at.copy()

    scene.update(0.05, InputSnapshot(forward_held=True))

    assert np.array_equal(scene.camera.state.position, position)
    assert np.array_equal(scene.camera.state.look_at, look_at)


def test_follow_camera_tracks_boat():
    scene = small_scene()
    position = scene.camera.state.position.copy()
    look_at = scene.camera.state.look_at.copy()
    x0, z0 = scene.boat.pose.planar_position

    scene.update(0.05, InputSnapshot(forward_held=True, camera_mode_2_pressed=True))

    assert scene.camera_mode is CameraMode.FOLLOW
    moved = np.array([scene.boat.pose.x - x0, 0.0, scene.boat.pose.z - z0])
    assert np.linalg.norm(moved) > 0.0
    assert scene.camera.state.position == pytest.approx(position + moved)
    assert scene.camera.state.look_at == pytest.approx(look_at + moved)


def test_follow_mode_from_config():
    scene = small_scene(follow_camera=True)
    assert scene.camera_mode is CameraMode.FOLLOW


def test_pointer_input_reaches_camera():
    scene = small_scene()
    radius = scene.camera.get_radius()
    scene.update(0.01, InputSnapshot(scroll=2.0))
    assert scene.camera.get_radius() == pytest.approx(radius - 2.0 * config.CAMERA["zoom_sensitivity"])


def test_resize_reaches_camera():
    scene = small_scene()
    scene.on_resize(640, 640)
    assert scene.camera.aspect == pytest.approx(1.0)


def test_render_frame():
    scene = small_scene()
    scene.update(0.02, InputSnapshot())
    frame = scene.render_frame()

    assert isinstance(frame, RenderFrame)
    assert frame.time == pytest.approx(0.02)
    assert frame.vertices is scene.grid.vertices
    assert frame.indices is scene.grid.indices
    for matrix in (frame.boat_model, frame.view, frame.projection):
        assert matrix.shape == (4, 4)
        assert np.all(np.isfinite(matrix))
    assert frame.camera_mode is CameraMode.FIXED


def test_surface_alignment_scene():
    scene = Scene(
        water_config={**config.WATER, "resolution": 4},
        boat_config={**config.BOAT, "alignment": "surface"},
        simulation_config=config.SIMULATION,
    )
    assert scene.alignment is AlignmentMode.SURFACE
    for _ in range(3):
        scene.update(0.05, InputSnapshot(forward_held=True, turn_right_held=True))
    assert scene.boat.frame is not None
    assert np.all(np.isfinite(scene.render_frame().boat_model))
    assert scene.boat.pose.heading == pytest.approx(-3 * 0.05 * config.BOAT["turn_rate"])
