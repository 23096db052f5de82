import math

import pytest

from glcubes.camera import Camera


def _transform(matrix, point):
    x, y, z = point
    vec = (x, y, z, 1.0)
    return tuple(sum(matrix[col * 4 + row] * vec[col] for col in range(4)) for row in range(4))


def test_defaults():
    camera = Camera()
    assert camera.position == (0.0, 0.0, 3.0)
    assert camera.front == (0.0, 0.0, -1.0)
    assert camera.up == (0.0, 1.0, 0.0)
    assert camera.fov == 45.0
    assert camera.yaw == 90.0
    assert camera.pitch == 0.0


def test_zoom_is_not_clamped():
    camera = Camera()
    camera.zoom(100.0)
    assert camera.fov > 65.0


def test_q_clamps_at_max_fov():
    camera = Camera()
    for _ in range(50):
        camera.process_input({"Q"}, 0.0)
    assert camera.fov == 65.0


def test_e_clamps_at_min_fov():
    camera = Camera()
    for _ in range(100):
        camera.process_input({"E"}, 0.0)
    assert camera.fov == 1.0


def test_forward_then_back_returns_to_start():
    camera = Camera()
    start = camera.position
    camera.process_input({"W"}, 0.25)
    assert camera.position != start
    camera.process_input({"S"}, 0.25)
    assert camera.position == pytest.approx(start)


def test_forward_moves_along_front():
    camera = Camera()
    camera.process_input({"W"}, 0.1)
    x, y, z = camera.position
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0)
    assert z < 3.0


def test_strafe_directions():
    right = Camera()
    right.process_input({"D"}, 0.1)
    left = Camera()
    left.process_input({"A"}, 0.1)
    assert right.position[0] > 0.0
    assert left.position[0] < 0.0
    assert right.position[0] == pytest.approx(-left.position[0])


def test_vertical_movement():
    rise = Camera()
    rise.process_input({"SPACE"}, 0.1)
    sink = Camera()
    sink.process_input({"LCTRL"}, 0.1)
    assert rise.position[1] > 0.0
    assert sink.position[1] < 0.0


def test_unknown_keys_are_ignored():
    camera = Camera()
    camera.process_input({"X", "ESCAPE"}, 1.0)
    assert camera.position == (0.0, 0.0, 3.0)
    assert camera.fov == 45.0


def test_mouse_at_centre_faces_yaw():
    camera = Camera()
    camera.on_mouse_move(camera.last_x, camera.last_y)
    assert camera.front == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)


def test_pitch_is_clamped():
    camera = Camera()
    camera.on_mouse_move(camera.last_x, camera.last_y - 100000.0)
    assert camera.pitch == 89.0
    camera.on_mouse_move(camera.last_x, camera.last_y + 1000000.0)
    assert camera.pitch == -89.0


def test_first_mouse_resets_reference():
    camera = Camera(first_mouse=True)
    camera.on_mouse_move(10.0, 20.0)
    assert camera.yaw == 90.0
    assert camera.pitch == 0.0
    assert (camera.last_x, camera.last_y) == (10.0, 20.0)
    assert camera.first_mouse is False


def test_front_is_unit_length_after_moves():
    camera = Camera()
    for x, y in [(100.0, 50.0), (700.0, 300.0), (-40.0, 900.0)]:
        camera.on_mouse_move(x, y)
        assert math.sqrt(sum(c * c for c in camera.front)) == pytest.approx(1.0)


def test_view_matrix_maps_eye_to_origin():
    camera = Camera()
    camera.on_mouse_move(300.0, 200.0)
    camera.process_input({"W", "D"}, 0.3)
    view = camera.view_matrix()
    assert len(view) == 16
    assert _transform(view, camera.position) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)


def test_view_matrix_looks_down_negative_z():
    camera = Camera()
    camera.on_mouse_move(650.0, 380.0)
    target = tuple(p + f for p, f in zip(camera.position, camera.front))
    assert _transform(camera.view_matrix(), target) == pytest.approx((0.0, 0.0, -1.0, 1.0), abs=1e-9)