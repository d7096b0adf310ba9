import logging
import pygame
from scorekeeper import common as C
from scorekeeper import ui as UI

logger = logging.getLogger(__name__)

MODES = [
    ("new user", "Create new data."),
    ("existing user", "Select saved data."),
]


def request_quit():
    logger.info("Close the app.")
    try:
        pygame.event.post(pygame.event.Event(pygame.QUIT))
    except pygame.error:
        pygame.quit(); raise SystemExit


class MainMenuScene(C.Scene):
    def __init__(self, app, cursor=0):
        super().__init__(app)
        self.modes = UI.OptionList(MODES)
        self.modes.cursor = cursor

    def _open_mode(self):
        logger.info('Current mode is "Mode Selection".')
        if self.modes.selected() == 0:
            logger.info('"Data Generation" mode is selected.')
            from scorekeeper.scenes.name_entry import NameEntryScene
            self.next_scene = NameEntryScene(self.app)
        else:
            logger.info('"Data Selection" mode is selected.')
            from scorekeeper.scenes.record_select import RecordSelectScene
            self.next_scene = RecordSelectScene(self.app)

    def handle_event(self, e):
        if UI.UP.matches(e):
            self.modes.cursor_up()
        elif UI.DOWN.matches(e):
            self.modes.cursor_down()
        elif UI.ENTER.matches(e):
            self._open_mode()
        elif e.type == pygame.KEYDOWN and e.key in (pygame.K_ESCAPE, pygame.K_q):
            request_quit()

    def draw(self, screen):
        screen.fill(C.LANE_BG)
        self.draw_top_bar(screen, "Bowling Scorekeeper")
        y = self.modes.draw(screen, 40, 100)
        UI.draw_key_help(screen, UI.UP_DOWN_KEYS, 40, y + 20)
