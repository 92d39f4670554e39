"""Tests for the pygame renderer, run against SDL's dummy video driver."""

import pytest

pygame = pytest.importorskip("pygame")

from stickcar.control.input import Axis, InputConfig, InputController, InputState
from stickcar.core.vector import Vector2
from stickcar.vehicle.car import Car
from stickcar.visualization.renderer import PygameRenderer, RenderConfig, draw_arrow


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    renderer = PygameRenderer(RenderConfig(fps=0))
    renderer.init()
    yield renderer
    renderer.quit()


@pytest.fixture
def controller():
    # Long intervals so real timer events never arrive during a test
    return InputController(InputConfig(steering_repeat_ms=60000, throttle_repeat_ms=60000))


def test_draw_arrow_skips_zero_vector(renderer):
    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    assert draw_arrow(surface, Vector2(25, 25), Vector2(0, 0), (255, 0, 0)) is False
    assert tuple(surface.get_at((25, 25)))[:3] == (255, 255, 255)


def test_draw_arrow_draws_shaft_and_head(renderer):
    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    assert draw_arrow(surface, Vector2(5, 25), Vector2(40, 0), (255, 0, 0)) is True
    assert tuple(surface.get_at((20, 25)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((43, 25)))[:3] == (255, 0, 0)


def test_render_draws_motors(renderer):
    car = Car()
    renderer.render(car, InputState())
    screen = renderer.screen
    assert screen.get_size() == (800, 1000)
    # Inside motor 0's circle, clear of the sticks leaving it
    assert tuple(screen.get_at((297, 347)))[:3] == (255, 165, 0)
    # On the S0 line between motor 0 and its label
    assert tuple(screen.get_at((340, 350)))[:3] == (0, 0, 0)
    # Background away from the car
    assert tuple(screen.get_at((100, 900)))[:3] == (255, 255, 255)


def test_arrow_keys_drive_controller(renderer, controller):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
    renderer.handle_input(controller)
    assert controller.is_repeating(Axis.STEERING)

    pygame.event.post(pygame.event.Event(pygame.USEREVENT + 1))
    renderer.handle_input(controller)
    assert controller.steering == 1

    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT))
    renderer.handle_input(controller)
    assert controller.steering == 0
    assert not controller.is_repeating(Axis.STEERING)


def test_escape_requests_quit(renderer, controller):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert renderer.handle_input(controller)['quit'] is True


WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


def pixel(screen, xy):
    return tuple(screen.get_at(xy))[:3]


def region_is_blank(screen, x_range, y_range):
    return all(pixel(screen, (x, y)) == WHITE for x in x_range for y in y_range)


def press(renderer, controller, key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))
    renderer.handle_input(controller)


def test_speed_arrow_scaled_by_ten(renderer, controller):
    car = Car()
    # Motor 0 drives up the canvas: arrow from (300, 350) to (300, 320)
    car.set_car_speed(-3, 0)
    renderer.render(car)
    assert pixel(renderer.screen, (300, 330)) == RED
    assert pixel(renderer.screen, (300, 315)) == WHITE

    press(renderer, controller, pygame.K_v)
    renderer.render(car)
    assert not renderer.config.show_speed
    assert pixel(renderer.screen, (300, 330)) == WHITE


def test_direction_arrow_at_stick_midpoint(renderer, controller):
    car = Car()
    renderer.render(car)
    # S0 arrow head runs from x=398 to its tip at (405, 350)
    assert pixel(renderer.screen, (399, 348)) == BLUE

    press(renderer, controller, pygame.K_d)
    renderer.render(car)
    assert not renderer.config.show_directions
    assert pixel(renderer.screen, (399, 348)) == WHITE


def test_label_drawn_at_rest_midpoint(renderer, controller):
    car = Car()
    renderer.render(car)
    # S1 label is blitted at its midpoint (300, 425)
    assert not region_is_blank(renderer.screen, range(306, 330), range(425, 450))

    press(renderer, controller, pygame.K_l)
    renderer.render(car)
    assert not renderer.config.show_labels
    assert region_is_blank(renderer.screen, range(306, 330), range(425, 450))


def test_telemetry_toggle(renderer, controller):
    car = Car()
    renderer.render(car, InputState(throttle=2))
    assert not region_is_blank(renderer.screen, range(10, 150), range(10, 100))

    press(renderer, controller, pygame.K_t)
    renderer.render(car)
    assert not renderer.config.show_telemetry
    assert region_is_blank(renderer.screen, range(10, 150), range(10, 100))
