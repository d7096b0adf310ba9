import logging
from scorekeeper import common as C
from scorekeeper import ui as UI
from scorekeeper.engine.keeper import ScoreKeeper
from scorekeeper.scenes.menu import MODES

logger = logging.getLogger(__name__)

NAME_CHAR_LIMIT = 37


class NameEntryScene(C.Scene):
    """Ask for the player's name and start a fresh record."""

    def __init__(self, app):
        super().__init__(app)
        self.modes = UI.OptionList(MODES)
        self.name_input = UI.TextInput("What is your name?", char_limit=NAME_CHAR_LIMIT)

    def _start(self):
        logger.info('Current mode is "Data Generation".')
        logger.info('"%s" is typed.', self.name_input.value)
        keeper = ScoreKeeper.new(self.name_input.value.strip())
        self.name_input.reset()
        from scorekeeper.scenes.score_sheet import ScoreSheetScene
        self.next_scene = ScoreSheetScene(self.app, keeper)

    def handle_event(self, e):
        if UI.ENTER.matches(e):
            self._start()
        elif UI.QUIT.matches(e):
            from scorekeeper.scenes.menu import MainMenuScene
            self.next_scene = MainMenuScene(self.app, cursor=0)
        else:
            self.name_input.handle_event(e)

    def draw(self, screen):
        screen.fill(C.LANE_BG)
        self.draw_top_bar(screen, "Bowling Scorekeeper")
        y = self.modes.draw(screen, 40, 100)
        self.name_input.draw(screen, 40, y + 10)
        UI.draw_key_help(screen, UI.INPUT_KEYS, 40, y + 70)
