import logging
import os
from scorekeeper import common as C
from scorekeeper import storage
from scorekeeper import ui as UI
from scorekeeper.engine.keeper import ScoreKeeper
from scorekeeper.scenes.menu import MODES

logger = logging.getLogger(__name__)


class RecordSelectScene(C.Scene):
    """Pick a saved record from the data directory."""

    def __init__(self, app):
        super().__init__(app)
        self.modes = UI.OptionList(MODES)
        self.modes.cursor = 1
        self.paths = storage.list_records(C.data_dir())
        self.files = UI.OptionList(
            [(os.path.basename(p), "") for p in self.paths],
            empty_text="No Files Found.",
        )
        self.error = ""

    def _open_selected(self):
        index = self.files.selected()
        if index is None:
            return
        logger.info('Current mode is "Data Selection".')
        try:
            raw = storage.read_record(self.paths[index])
        except storage.StorageError as exc:
            self.error = str(exc)
            return
        keeper = ScoreKeeper.load(raw)
        from scorekeeper.scenes.score_sheet import ScoreSheetScene
        self.next_scene = ScoreSheetScene(self.app, keeper)

    def handle_event(self, e):
        if UI.UP.matches(e):
            self.files.cursor_up()
        elif UI.DOWN.matches(e):
            self.files.cursor_down()
        elif UI.ENTER.matches(e):
            self._open_selected()
        elif UI.QUIT.matches(e):
            from scorekeeper.scenes.menu import MainMenuScene
            self.next_scene = MainMenuScene(self.app, cursor=1)

    def draw(self, screen):
        screen.fill(C.LANE_BG)
        self.draw_top_bar(screen, "Bowling Scorekeeper")
        y = self.modes.draw(screen, 40, 100)
        y = self.files.draw(screen, 40, y + 10)
        if self.error:
            screen.blit(C.render_text(C.FONT_SMALL, self.error, C.WARN), (40, y + 6))
            y += 30
        UI.draw_key_help(screen, UI.UP_DOWN_KEYS, 40, y + 20)
