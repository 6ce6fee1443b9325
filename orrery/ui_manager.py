import pygame
import pygame_gui

from . import constants as C
from .analysis import describe_body
from .utils import date_to_display

# Label -> simulated seconds per wall-clock second
TIME_SCALES = {
    "Real time": 1.0,
    "1 hour / s": 3600.0,
    "1 day / s": C.SECONDS_PER_DAY,
    "1 week / s": 7 * C.SECONDS_PER_DAY,
    "30 days / s": 30 * C.SECONDS_PER_DAY,
}


def time_scale_label(scale):
    for label, value in TIME_SCALES.items():
        if value == scale:
            return label
    return f"{scale:g}x"


class ControlPanel:
    """Sidebar with the clock readout, pause control and selected-body info."""

    def __init__(self, manager: pygame_gui.UIManager, time_scale=1.0):
        width = C.UI_SIDEBAR_WIDTH
        self.manager = manager
        self.panel = pygame_gui.elements.UIPanel(
            pygame.Rect(C.WIDTH - width, 0, width, C.HEIGHT),
            manager=manager,
            object_id="#control_panel",
        )
        y = 0
        pygame_gui.elements.UILabel(
            pygame.Rect(0, y, width, 30),
            text="Orrery",
            manager=manager,
            container=self.panel,
            object_id="#title_label",
        )
        y += 35
        self.date_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width - 20, 20),
            "",
            manager,
            container=self.panel,
        )
        y += 30
        self.pause_button = pygame_gui.elements.UIButton(
            pygame.Rect(10, y, 80, 25),
            "Pause",
            manager,
            container=self.panel,
        )
        self.labels_button = pygame_gui.elements.UIButton(
            pygame.Rect(100, y, 80, 25),
            "Labels",
            manager,
            container=self.panel,
        )
        self.center_button = pygame_gui.elements.UIButton(
            pygame.Rect(190, y, 80, 25),
            "Center",
            manager,
            container=self.panel,
        )
        y += 35
        pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width - 20, 20),
            "Time rate",
            manager,
            container=self.panel,
        )
        y += 20
        options = list(TIME_SCALES)
        current = time_scale_label(time_scale)
        if current not in options:
            options.append(current)
        self.rate_menu = pygame_gui.elements.UIDropDownMenu(
            options,
            current,
            pygame.Rect(10, y, width - 20, 25),
            manager=manager,
            container=self.panel,
        )
        y += 35
        self.info_box = pygame_gui.elements.UITextBox(
            "",
            pygame.Rect(10, y, width - 20, 170),
            manager,
            container=self.panel,
        )
        self._info_text = ""

    def update_clock(self, clock):
        self.date_label.set_text(date_to_display(clock.now))
        self.pause_button.set_text("Play" if clock.paused else "Pause")

    def update_body_info(self, body, position_km, epoch_jd):
        if body is None:
            self._set_info("")
            return
        self._set_info("<br>".join(describe_body(body, position_km, epoch_jd)))

    def _set_info(self, text):
        if text != self._info_text:
            self._info_text = text
            self.info_box.set_text(text)


class ContentDialog:
    """Window showing the article for a selected body."""

    def __init__(self, manager: pygame_gui.UIManager, articles):
        self.manager = manager
        self.articles = articles
        self.window = None
        self.content_id = None

    @property
    def is_open(self):
        return self.window is not None

    def open(self, content_id, title):
        """Show the article for ``content_id``; returns False if there is none."""
        text = self.articles.get(content_id) if content_id else None
        if text is None:
            return False
        self.close()
        width, height = 420, 260
        rect = pygame.Rect(
            (C.WIDTH - C.UI_SIDEBAR_WIDTH - width) // 2, (C.HEIGHT - height) // 2, width, height
        )
        self.window = pygame_gui.elements.UIWindow(
            rect, self.manager, window_display_title=title
        )
        pygame_gui.elements.UITextBox(
            text,
            pygame.Rect(0, 0, width - 40, height - 70),
            self.manager,
            container=self.window,
        )
        self.content_id = content_id
        return True

    def close(self):
        if self.window is not None:
            self.window.kill()
        self.window = None
        self.content_id = None

    def process_event(self, event):
        if event.type == pygame_gui.UI_WINDOW_CLOSE and event.ui_element == self.window:
            self.window = None
            self.content_id = None
