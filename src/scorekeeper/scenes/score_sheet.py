"""Score sheet: throw entry, the running game and archived games."""

import logging
from typing import Optional, Sequence

import pygame

from scorekeeper import common as C
from scorekeeper import storage
from scorekeeper import ui as UI
from scorekeeper.engine.keeper import ScoreKeeper
from scorekeeper.engine.throws import SLOT_COUNT, TENTH_FRAME_SLOT, Throw

logger = logging.getLogger(__name__)

CELL = 30
THROW_CHAR_LIMIT = 2
PROMPT_THROW = "How many pins were knocked down?"
PROMPT_NEXT_GAME = "Let's go to the next game!"

SHEET_LINE = (150, 140, 170)


def _frame_spans():
    """(first slot, slot count) of each frame on the sheet."""
    spans = [(2 * i, 2) for i in range(9)]
    spans.append((TENTH_FRAME_SLOT, SLOT_COUNT - TENTH_FRAME_SLOT))
    return spans


def draw_sheet(
    surface: pygame.Surface,
    x: int,
    y: int,
    pins: Sequence[Throw],
    scores: Sequence[Optional[int]],
    side_label: str = "",
    side_value: Optional[int] = None,
) -> int:
    """Draw frame numbers, pin marks and cumulative scores; returns the bottom y."""
    rows = (y, y + CELL, y + 2 * CELL)
    for frame, (start, count) in enumerate(_frame_spans(), start=1):
        left = x + start * CELL
        width = count * CELL
        for row_y in rows:
            pygame.draw.rect(surface, SHEET_LINE, (left, row_y, width, CELL), width=1)
        label = C.render_text(C.FONT_SMALL, str(frame), C.LIGHT)
        surface.blit(label, (left + width // 2 - label.get_width() // 2, rows[0] + 5))

        for slot in range(start, start + count):
            pygame.draw.rect(surface, SHEET_LINE, (x + slot * CELL, rows[1], CELL, CELL), width=1)
            if pins[slot].thrown:
                mark = C.render_text(C.FONT_CELL, pins[slot].symbol, C.WHITE)
                surface.blit(mark, (x + slot * CELL + CELL // 2 - mark.get_width() // 2, rows[1] + 4))

        total = scores[frame]
        if total is not None:
            t = C.render_text(C.FONT_CELL, str(total), C.WHITE)
            surface.blit(t, (left + width - t.get_width() - 6, rows[2] + 4))

    if side_label:
        box = pygame.Rect(x + SLOT_COUNT * CELL + 12, y, 3 * CELL, 3 * CELL)
        pygame.draw.rect(surface, SHEET_LINE, box, width=1)
        head = C.render_text(C.FONT_SMALL, side_label, C.LIGHT)
        surface.blit(head, (box.centerx - head.get_width() // 2, box.y + 5))
        if side_value is not None:
            v = C.render_text(C.FONT_UI, str(side_value), C.GOLD)
            surface.blit(v, (box.centerx - v.get_width() // 2, box.y + CELL + 10))
    return rows[2] + CELL


def summary_line(keeper: ScoreKeeper) -> str:
    s = keeper.summary()
    if s.average is None:
        return f"Game:{s.games + 1}   Total:----  Avg:---  H/G:---  L/G:---"
    return f"Game:{s.games + 1}   Total:{s.total}  Avg:{s.average}  H/G:{s.high}  L/G:{s.low}"


class ScoreSheetScene(C.Scene):
    def __init__(self, app, keeper: ScoreKeeper):
        super().__init__(app)
        self.keeper = keeper
        self.throw_input = UI.TextInput(self._placeholder(), char_limit=THROW_CHAR_LIMIT)
        self.pages = UI.Paginator(per_page=C.archives_per_page())
        self._sync_pages(jump_to_last=True)
        self.status = ""

    def _placeholder(self) -> str:
        return PROMPT_NEXT_GAME if self.keeper.game_over else PROMPT_THROW

    def _sync_pages(self, jump_to_last=False):
        self.pages.set_total_items(len(self.keeper.game_record.archives))
        if jump_to_last:
            self.pages.last_page()

    def submit(self):
        logger.info('Current mode is "Management Score".')
        value = self.throw_input.value
        logger.info('"%s" is typed.', value)
        archived_before = len(self.keeper.game_record.archives)
        accepted = self.keeper.record(value)
        self.status = "" if accepted else "Invalid value. Type again."
        if len(self.keeper.game_record.archives) != archived_before:
            self._sync_pages(jump_to_last=True)
        self.throw_input.reset()
        self.throw_input.placeholder = self._placeholder()
        return accepted

    def save(self) -> bool:
        self.keeper.finish()
        try:
            storage.write_record(self.keeper.to_dict(), C.data_dir())
        except storage.StorageError as exc:
            self.status = str(exc)
            return False
        return True

    def handle_event(self, e):
        if UI.ENTER.matches(e):
            self.submit()
        elif UI.QUIT.matches(e):
            if self.save():
                from scorekeeper.scenes.menu import MainMenuScene
                self.next_scene = MainMenuScene(self.app)
        elif UI.LEFT.matches(e):
            self.pages.prev_page()
        elif UI.RIGHT.matches(e):
            self.pages.next_page()
        else:
            self.throw_input.handle_event(e)

    def shutdown(self):
        self.save()

    def draw(self, screen):
        screen.fill(C.LANE_BG)
        self.draw_top_bar(screen, "Bowling Scorekeeper", f"Player: {self.keeper.name}")
        x, y = 40, 76

        archives = self.keeper.game_record.archives
        if archives:
            start, end = self.pages.slice_bounds(len(archives))
            for number, archive in enumerate(archives[start:end], start=start + 1):
                head = C.render_text(C.FONT_SMALL, f"Game {number}  [{archive.time}]", C.LIGHT)
                screen.blit(head, (x, y))
                y = draw_sheet(screen, x, y + head.get_height() + 4, archive.pins, archive.scores) + 10
            self.pages.draw(screen, x + 8, y + 4)
            y += 20

        side = "RES" if self.keeper.game_over else "MAX"
        record = self.keeper.game_record
        y = draw_sheet(screen, x, y, record.pins, record.scores, side, self.keeper.max_score())
        line = C.render_text(C.FONT_SMALL, summary_line(self.keeper), C.LIGHT)
        screen.blit(line, (x + 20, y + 8))
        y += line.get_height() + 24

        self.throw_input.draw(screen, x, y)
        y += self.throw_input.rect.height + 8
        if self.status:
            screen.blit(C.render_text(C.FONT_SMALL, self.status, C.WARN), (x, y))
            y += 26
        UI.draw_key_help(screen, UI.LEFT_RIGHT_KEYS, x, y + 8)
