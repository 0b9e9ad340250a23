"""Shape lab: hit-testing, arc tessellation and easing curves with pygame + pygame_gui."""
from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple

import pygame
import pygame_gui

from core import AppConfig, load_app_config, setup_default_logging
from motion_geometry import (
    Circle,
    LineSegment,
    Progress,
    Rectangle,
    RegularPolygon,
    Triangle,
    Vector2,
    collides,
    contains,
    get_easing,
    line_intersection,
    overlap_rectangle,
    rect_overlap,
)
from motion_geometry.easing import EASINGS
from motion_geometry.render import ShapeRenderer

logger = logging.getLogger(__name__)

ASSET_PATH = Path(__file__).parent
DEFAULT_CONFIG_PATH = ASSET_PATH / "shape_lab.json"

IDLE_COLOR = (120, 140, 170)
HOVER_COLOR = (240, 208, 140)
HIT_COLOR = (220, 70, 70)
PROBE_COLOR = (96, 210, 180)
TEXT_COLOR = (230, 234, 240)
TRACK_COLOR = (60, 66, 80)


class ShapeLabApp:
    def __init__(self, config: AppConfig) -> None:
        pygame.init()
        pygame.display.set_caption("Shape Lab")
        self.config = config
        self.window_size: Tuple[int, int] = tuple(config.window_size)  # type: ignore[assignment]
        self.window_surface = pygame.display.set_mode(self.window_size)
        self.manager = pygame_gui.UIManager(self.window_size)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(pygame.font.get_default_font(), 14)
        self.renderer = ShapeRenderer(self.window_surface, **config.tessellation.renderer_options())
        self.running = True

        self.curve_name = config.easing.curve
        self.curve = get_easing(self.curve_name)
        self.progress = Progress(0.0, config.easing.duration)

        self.shapes = self._build_scene()
        self.probe = Circle(Vector2(0.0, 0.0), 24.0)
        self._build_ui()

    def _build_scene(self) -> List[Tuple[str, object]]:
        hexagon = RegularPolygon(Vector2(560.0, 220.0), 6, 70.0, rotation=math.pi / 6)
        return [
            ("circle", Circle(Vector2(140.0, 200.0), 60.0)),
            ("rect_a", Rectangle(260.0, 140.0, 140.0, 100.0)),
            ("rect_b", Rectangle(330.0, 200.0, 110.0, 90.0)),
            ("triangle", Triangle(Vector2(700.0, 300.0), Vector2(860.0, 300.0), Vector2(780.0, 150.0))),
            ("hexagon", hexagon.to_polygon()),
            ("segment_a", LineSegment(Vector2(100.0, 360.0), Vector2(420.0, 460.0))),
            ("segment_b", LineSegment(Vector2(100.0, 460.0), Vector2(420.0, 360.0))),
        ]

    def _build_ui(self) -> None:
        self.curve_dropdown = pygame_gui.elements.UIDropDownMenu(
            options_list=list(EASINGS.keys()),
            starting_option=self.curve_name,
            relative_rect=pygame.Rect((20, 20), (200, 30)),
            manager=self.manager,
        )
        self.btn_replay = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((230, 20), (100, 30)), text="Replay", manager=self.manager
        )

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(self.config.target_fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self.running = False
                if event.type == pygame.MOUSEMOTION:
                    self.probe = Circle(Vector2(*event.pos), self.probe.radius)
                self._handle_ui_event(event)
                self.manager.process_events(event)
            self.manager.update(dt)
            self.progress = self.progress.advanced(dt)
            self._draw()
        pygame.quit()

    def _handle_ui_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame_gui.UI_DROP_DOWN_MENU_CHANGED and event.ui_element == self.curve_dropdown:
            self.curve_name = event.text
            self.curve = get_easing(self.curve_name)
            self.progress = Progress(0.0, self.progress.duration)
            logger.info("Switched easing curve to %s", self.curve_name)
        elif event.type == pygame_gui.UI_BUTTON_PRESSED and event.ui_element == self.btn_replay:
            self.progress = Progress(0.0, self.progress.duration)

    def _draw(self) -> None:
        self.window_surface.fill(self.config.background_color)
        mouse = self.probe.center
        for name, shape in self.shapes:
            if collides(self.probe, shape):
                color = HIT_COLOR
            elif contains(shape, mouse, threshold=4.0):
                color = HOVER_COLOR
            else:
                color = IDLE_COLOR
            self.renderer.draw_shape(shape, color, width=0 if name.startswith("rect") else 2)
        self._draw_overlaps()
        self.renderer.draw_circle(self.probe, PROBE_COLOR, width=2)
        self._draw_tessellation_samples()
        self._draw_easing_track()
        self.manager.draw_ui(self.window_surface)
        pygame.display.update()

    def _shape(self, name: str) -> object:
        return next(shape for shape_name, shape in self.shapes if shape_name == name)

    def _draw_overlaps(self) -> None:
        rect_a, rect_b = self._shape("rect_a"), self._shape("rect_b")
        if rect_overlap(rect_a, rect_b):
            self.renderer.draw_rectangle(overlap_rectangle(rect_a, rect_b), "yellow", 2)
        crossing = line_intersection(self._shape("segment_a"), self._shape("segment_b"))
        if crossing is not None:
            self.renderer.draw_circle(Circle(crossing, 5.0), "red")

    def _draw_tessellation_samples(self) -> None:
        # sweep follows the raw progress fraction
        sweep = 30.0 + 300.0 * self.progress.fraction
        center = Vector2(560.0, 480.0)
        self.renderer.draw_ring(center, 30.0, 70.0, -90.0, -90.0 + sweep, "blue")
        self.renderer.draw_circle_sector(Circle(Vector2(760.0, 480.0), 70.0), 0.0, sweep, "green", width=2)
        self.renderer.draw_rounded_rectangle(Rectangle(480.0, 360.0, 140.0, 40.0), 0.6, "gray")
        segments = self.renderer.segments_for_arc(70.0, 0.0, sweep)
        label = self.font.render(f"sweep={sweep:.0f}°  segments={segments}", True, TEXT_COLOR)
        self.window_surface.blit(label, (660, 570))

    def _draw_easing_track(self) -> None:
        left, right, y = 40.0, self.window_size[0] - 40.0, self.window_size[1] - 30.0
        self.renderer.draw_line(LineSegment(Vector2(left, y), Vector2(right, y)), TRACK_COLOR, 2)
        cfg = self.config.easing
        value = self.curve(self.progress, cfg.start, cfg.end)
        x = left + (right - left) * value
        self.renderer.draw_circle(Circle(Vector2(x, y), 10.0), PROBE_COLOR)
        status = f"{self.curve_name}  t={self.progress.time:.2f}/{self.progress.duration:.2f}  value={value:.3f}"
        self.window_surface.blit(self.font.render(status, True, TEXT_COLOR), (40, int(y) - 36))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="JSON settings file")
    args = parser.parse_args(argv)
    config = load_app_config(args.config)
    setup_default_logging(config.log_level, config.log_format)
    logger.info("Starting shape lab with %s", args.config if args.config.exists() else "default settings")
    app = ShapeLabApp(config)
    app.run()


if __name__ == "__main__":
    main()
