"""Pygame-based real-time 2D renderer for the stick car.

Provides a canvas view of the car with:
- Motors as filled circles
- Body sticks with labels and direction arrows
- Motor velocity arrows
- Input telemetry overlay
- Arrow-key input with repeat timers
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from stickcar.control.input import Axis, InputController, InputState, Key
from stickcar.core.vector import Vector2

if TYPE_CHECKING:
    from stickcar.vehicle.car import Car

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass
class RenderConfig:
    """Renderer configuration."""
    width: int = 800
    height: int = 1000
    background_color: Color = (255, 255, 255)
    motor_color: Color = (255, 165, 0)           # orange
    stick_color: Color = (0, 0, 0)
    label_color: Color = (128, 128, 128)
    direction_color: Color = (0, 0, 255)
    speed_color: Color = (255, 0, 0)
    text_color: Color = (40, 40, 40)

    show_labels: bool = True
    show_directions: bool = True
    show_speed: bool = True
    show_telemetry: bool = True

    direction_arrow_length: float = 30.0
    speed_arrow_scale: float = 10.0
    arrow_size: float = 7.0
    arrow_width: int = 3
    fps: int = 60


def _check_pygame():
    """Check if pygame is available."""
    if not PYGAME_AVAILABLE:
        raise ImportError(
            "Pygame is required for visualization. "
            "Install it with: pip install pygame"
        )


def draw_arrow(
    surface,
    base: Vector2,
    vec: Vector2,
    color: Color,
    size: float = 7.0,
    width: int = 3
) -> bool:
    """Draw an arrow from `base` along `vec` with a triangular head.

    Returns:
        False if nothing was drawn (zero-length vector)
    """
    _check_pygame()

    length = vec.magnitude()
    if length == 0:
        return False

    tip = base + vec
    pygame.draw.line(surface, color, base.as_int_tuple(), tip.as_int_tuple(), width)

    # Head sits inside the shaft, its point on the tip
    unit = vec / length
    back = tip - unit * size
    side = unit.perpendicular() * (size / 2)
    head = [tip.as_int_tuple(), (back + side).as_int_tuple(), (back - side).as_int_tuple()]
    pygame.draw.polygon(surface, color, head)
    return True


class PygameRenderer:
    """Real-time 2D renderer using Pygame.

    Owns the window, the per-axis repeat timers and the frame clock.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize renderer.

        Args:
            config: Render configuration. Uses defaults if None.
        """
        _check_pygame()

        self.config = config or RenderConfig()
        self._initialized = False

        # Pygame surfaces
        self._screen = None
        self._clock = None
        self._font = None
        self._small_font = None

        # One custom event type per repeat timer
        self._timer_events: Dict[Axis, int] = {
            Axis.STEERING: pygame.USEREVENT + 1,
            Axis.THROTTLE: pygame.USEREVENT + 2,
        }
        self._key_map: Dict[int, Key] = {
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
        }

        self._flags = {
            'quit': False,
            'reset': False,
        }

    @property
    def screen(self):
        return self._screen

    def init(self) -> None:
        """Initialize Pygame and create window."""
        pygame.init()
        pygame.display.set_caption("stickcar")

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height)
        )
        self._clock = pygame.time.Clock()
        self._font = pygame.font.Font(None, 24)
        self._small_font = pygame.font.Font(None, 18)

        self._initialized = True
        logger.info("Renderer initialized at %dx%d", self.config.width, self.config.height)

    def quit(self) -> None:
        """Cancel timers and clean up Pygame."""
        if self._initialized:
            for event_type in self._timer_events.values():
                pygame.time.set_timer(event_type, 0)
            pygame.quit()
            self._initialized = False

    def _start_timer(self, axis: Axis, controller: InputController) -> None:
        interval = max(1, controller.repeat_interval_ms(axis))
        pygame.time.set_timer(self._timer_events[axis], interval)

    def _cancel_timer(self, axis: Axis) -> None:
        pygame.time.set_timer(self._timer_events[axis], 0)

    def handle_input(self, controller: InputController) -> Dict[str, bool]:
        """Process pending events.

        Arrow keys and timer events update `controller`; other keys toggle
        display options.

        Returns:
            Dictionary with 'quit' and 'reset' flags.
        """
        self._flags['reset'] = False
        if not self._initialized:
            return self._flags.copy()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._flags['quit'] = True
            elif event.type == pygame.KEYDOWN:
                key = self._key_map.get(event.key)
                if key is not None:
                    axis = controller.press(key)
                    if axis is not None:
                        self._start_timer(axis, controller)
                elif event.key == pygame.K_ESCAPE:
                    self._flags['quit'] = True
                elif event.key == pygame.K_r:
                    self._flags['reset'] = True
                    controller.reset()
                    for axis in Axis:
                        self._cancel_timer(axis)
                elif event.key == pygame.K_v:
                    self.config.show_speed = not self.config.show_speed
                elif event.key == pygame.K_l:
                    self.config.show_labels = not self.config.show_labels
                elif event.key == pygame.K_d:
                    self.config.show_directions = not self.config.show_directions
                elif event.key == pygame.K_t:
                    self.config.show_telemetry = not self.config.show_telemetry
            elif event.type == pygame.KEYUP:
                key = self._key_map.get(event.key)
                if key is not None:
                    self._cancel_timer(controller.release(key))
            else:
                for axis, event_type in self._timer_events.items():
                    if event.type == event_type:
                        controller.repeat(axis)

        return self._flags.copy()

    def _draw_motors(self, car: Car) -> None:
        """Draw motors and, optionally, their velocity arrows."""
        for handle in car.motors:
            point = car.system.point(handle)
            pygame.draw.circle(self._screen, self.config.motor_color,
                               point.position.as_int_tuple(), max(1, int(point.radius)))
            if self.config.show_speed:
                draw_arrow(self._screen, point.position,
                           point.velocity * self.config.speed_arrow_scale,
                           self.config.speed_color,
                           self.config.arrow_size, self.config.arrow_width)

    def _draw_stick(self, car: Car, handle: int) -> None:
        """Draw both endpoints, the segment, label and direction arrow."""
        system = car.system
        stick = system.stick(handle)
        p1 = system.point(stick.point1)
        p2 = system.point(stick.point2)

        for point in (p1, p2):
            pygame.draw.circle(self._screen, self.config.motor_color,
                               point.position.as_int_tuple(), max(1, int(point.radius)))

        pygame.draw.line(self._screen, self.config.stick_color,
                         p1.position.as_int_tuple(), p2.position.as_int_tuple())

        mid_point = system.mid_point(handle)
        if stick.label and self.config.show_labels:
            text = self._font.render(stick.label, True, self.config.label_color)
            self._screen.blit(text, mid_point.as_int_tuple())

        if self.config.show_directions:
            draw_arrow(self._screen, mid_point,
                       system.direction(handle) * self.config.direction_arrow_length,
                       self.config.direction_color,
                       self.config.arrow_size, self.config.arrow_width)

    def _draw_telemetry(self, car: Car, inputs: InputState) -> None:
        """Draw input and car telemetry overlay."""
        if not self.config.show_telemetry:
            return

        centroid = car.centroid()
        lines = [
            f"Throttle: {inputs.throttle:+.0f}",
            f"Steering: {inputs.steering:+.0f}",
            "Motors: " + " ".join(f"{s:+.0f}" for s in car.motor_speeds),
            f"Position: ({centroid.x:.0f}, {centroid.y:.0f})",
            f"FPS: {self.get_fps():.0f}",
        ]

        y = 10
        for line in lines:
            text = self._font.render(line, True, self.config.text_color)
            self._screen.blit(text, (10, y))
            y += 22

        help_lines = [
            "Controls:",
            "Up/Down - Throttle",
            "Left/Right - Steer",
            "R - Reset",
            "V - Toggle speed arrows",
            "L - Toggle labels",
            "D - Toggle directions",
            "T - Toggle telemetry",
            "Esc - Quit"
        ]

        y = 10
        for line in help_lines:
            text = self._small_font.render(line, True, (120, 120, 130))
            self._screen.blit(text, (self.config.width - 170, y))
            y += 18

    def render(self, car: Car, inputs: Optional[InputState] = None) -> None:
        """Render current frame.

        Args:
            car: Car to render
            inputs: Input snapshot shown in the telemetry overlay
        """
        if not self._initialized:
            self.init()

        self._screen.fill(self.config.background_color)

        self._draw_motors(car)
        for handle in car.body_lines:
            self._draw_stick(car, handle)

        self._draw_telemetry(car, inputs or InputState())

        pygame.display.flip()
        self._clock.tick(self.config.fps)

    def get_fps(self) -> float:
        """Get current FPS."""
        return self._clock.get_fps() if self._clock else 0.0
