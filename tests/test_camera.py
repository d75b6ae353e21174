import pytest

from tlescope.camera import Camera3D, CameraController, InputState
from tlescope.vecmath import Vector2, Vector3


def test_initial_camera():
    camera = Camera3D()
    assert camera.position == Vector3(16.0, 16.0, 16.0)
    assert camera.target == Vector3()
    assert camera.up == Vector3(0.0, 1.0, 0.0)
    assert camera.fovy == 45.0


def test_idle_update_places_camera_on_z_axis():
    controller = CameraController()
    controller.update(InputState())
    position = controller.camera.position
    assert position.x == pytest.approx(0.0)
    assert position.y == pytest.approx(0.0)
    assert position.z == pytest.approx(16.0)


def test_camera_stays_at_distance_from_target():
    controller = CameraController()
    inputs = InputState(right_button_down=True, mouse_delta=Vector2(30, -20), wheel=1.0)
    for _ in range(5):
        controller.update(inputs)
        camera = controller.camera
        assert camera.position.distance_to(camera.target) == pytest.approx(controller.distance)


def test_rotation_moves_target_angles():
    controller = CameraController()
    controller.update(InputState(right_button_down=True, mouse_delta=Vector2(10, 0)))
    assert controller.target_angle_x == pytest.approx(-10 * controller.sensitivity)
    assert controller.angle_x == pytest.approx(controller.target_angle_x * 0.1)


def test_rotation_ignored_without_button():
    controller = CameraController()
    controller.update(InputState(mouse_delta=Vector2(50, 50)))
    assert controller.target_angle_x == 0.0
    assert controller.target_angle_y == 0.0


@pytest.mark.parametrize("delta_y, limit", [(1000, 1.5), (-1000, -1.5)])
def test_pitch_is_clamped(delta_y, limit):
    controller = CameraController()
    controller.update(InputState(right_button_down=True, mouse_delta=Vector2(0, delta_y)))
    assert controller.target_angle_y == limit


def test_zoom_in_is_limited_by_max_zoom():
    controller = CameraController()
    controller.update(InputState(wheel=1000.0))
    assert controller.target_distance == controller.max_zoom == 0.5


def test_zoom_out_is_limited():
    controller = CameraController()
    controller.update(InputState(wheel=-1000.0))
    assert controller.target_distance == 50.0


def test_zoom_step_is_capped():
    controller = CameraController()
    controller.update(InputState(wheel=1.0))
    assert controller.target_distance == pytest.approx(16.0 - 1.5)
    assert 14.5 < controller.distance < 16.0


def test_distance_converges_to_target():
    controller = CameraController()
    controller.update(InputState(wheel=-2.0))
    for _ in range(300):
        controller.update(InputState())
    assert controller.distance == pytest.approx(controller.target_distance)


def test_pan_moves_target_sideways():
    controller = CameraController()
    controller.update(InputState(middle_button_down=True, mouse_delta=Vector2(100, 0)))
    target = controller.camera.target
    assert target.y == pytest.approx(0.0, abs=1e-12)
    assert target.x == pytest.approx(-target.z)
    assert target.x < 0


def test_pan_without_motion_keeps_target():
    controller = CameraController()
    controller.update(InputState(middle_button_down=True))
    assert controller.camera.target == Vector3()