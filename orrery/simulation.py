import logging

import numpy as np
import pygame
import pygame_gui

from importlib.metadata import version, PackageNotFoundError

from . import constants as C

try:
    _PACKAGE_VERSION = version("orrery")
except PackageNotFoundError:
    _PACKAGE_VERSION = "0.0.0"
from .bodies import load_articles
from .camera import Camera
from .rendering import build_sprites, draw_orbit_trace, draw_sun, pick_sprite
from .ui_manager import TIME_SCALES, ContentDialog, ControlPanel

logger = logging.getLogger(__name__)


class Simulation:
    """Interactive orrery driven by a :class:`~orrery.context.SimulationContext`.

    Each frame runs three phases in a fixed order: :meth:`handle_events`
    (input sampling), :meth:`update` (propagation) and :meth:`draw`.
    """

    def __init__(self, context, init_pygame: bool = True, show_labels: bool = True, articles=None):
        self.context = context
        self.running = False
        self.show_labels = show_labels
        self.articles = articles if articles is not None else load_articles()
        self.selected = None
        self.focus = None

        self.camera = Camera()
        self.sprites = build_sprites(context.registry)

        if init_pygame:
            pygame.init()
            self.screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
            pygame.display.set_caption(f"Orrery v{_PACKAGE_VERSION}")
            self.frame_clock = pygame.time.Clock()
            self.manager = pygame_gui.UIManager((C.WIDTH, C.HEIGHT))
            self.control = ControlPanel(self.manager, context.clock.time_scale)
            self.dialog = ContentDialog(self.manager, self.articles)
        else:
            self.screen = None
            self.frame_clock = None
            self.manager = None
            self.control = None
            self.dialog = None

    # ------------------------------------------------------------------
    def select(self, name):
        """Select a body by name and return its content-panel identifier."""
        registry = self.context.registry
        if name is None or name not in registry:
            self.selected = None
            return None
        self.selected = registry.handle_of(name)
        content_id = registry.content_id(name)
        if self.dialog is not None and not self.dialog.open(content_id, registry.body(self.selected).name):
            logger.debug("No article for content id '%s'", content_id)
        return content_id

    def select_at(self, screen_pos):
        """Select whatever body is drawn under ``screen_pos``."""
        sprite = pick_sprite(self.sprites, screen_pos)
        if sprite is None:
            return None
        self.focus = sprite.handle
        return self.select(sprite.body.key)

    def set_time_scale(self, label):
        scale = TIME_SCALES.get(label)
        if scale is None:
            return
        self.context.clock.time_scale = scale

    def reset_view(self):
        self.focus = None
        self.camera.zoom = C.ZOOM_BASE
        self.camera.pan_offset = C.INITIAL_PAN_OFFSET.astype(float).copy()

    # ------------------------------------------------------------------
    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.context.toggle_pause()
                elif event.key == pygame.K_r:
                    self.context.resample_orbits()
                elif event.key == pygame.K_l:
                    self.show_labels = not self.show_labels
            elif event.type == pygame.MOUSEWHEEL:
                factor = C.ZOOM_STEP if event.y > 0 else 1.0 / C.ZOOM_STEP
                self.camera.zoom_at(pygame.mouse.get_pos(), factor)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.manager is None or not self.manager.get_hovering_any_element():
                    self.select_at(event.pos)

            if event.type == pygame_gui.UI_BUTTON_PRESSED:
                if event.ui_element == self.control.pause_button:
                    self.context.toggle_pause()
                elif event.ui_element == self.control.labels_button:
                    self.show_labels = not self.show_labels
                elif event.ui_element == self.control.center_button:
                    self.reset_view()
            elif event.type == pygame_gui.UI_DROP_DOWN_MENU_CHANGED:
                if event.ui_element == self.control.rate_menu:
                    self.set_time_scale(event.text)

            if self.dialog is not None:
                self.dialog.process_event(event)
            if self.manager is not None:
                self.manager.process_events(event)

    # ------------------------------------------------------------------
    def update(self) -> float:
        """Advance the clock and republish positions."""
        return self.context.step()

    # ------------------------------------------------------------------
    def draw(self, time_delta: float = 0.0) -> None:
        """Render the current frame."""
        if self.screen is None:
            return
        context = self.context
        buffer = context.buffer

        if self.focus is not None:
            center = ((C.WIDTH - C.UI_SIDEBAR_WIDTH) / 2, C.HEIGHT / 2)
            self.camera.update_focus(buffer[self.focus], center)

        self.screen.fill(C.BLACK)
        for trace in context.traces.values():
            draw_orbit_trace(self.screen, trace, self.camera)
        draw_sun(self.screen, self.camera)
        for sprite in self.sprites:
            sprite.update_screen_pos(buffer[sprite.handle], self.camera)
            sprite.draw(self.screen, self.show_labels, highlighted=sprite.handle == self.selected)

        self.control.update_clock(context.clock)
        if self.selected is not None:
            self.control.update_body_info(
                context.registry.body(self.selected),
                np.asarray(buffer[self.selected]),
                context.clock.julian_date,
            )
        else:
            self.control.update_body_info(None, None, None)
        self.manager.update(time_delta)
        self.manager.draw_ui(self.screen)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main application loop."""
        if self.screen is None or self.frame_clock is None:
            raise RuntimeError("Simulation cannot run without pygame initialized")
        self.running = True
        while self.running:
            time_delta = self.frame_clock.tick(C.FPS) / 1000.0
            self.handle_events()
            self.update()
            self.draw(time_delta)
        pygame.quit()
