# ui.py
import pygame
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from scorekeeper import common as C

FIELD_BG = (40, 36, 52)
FIELD_BORDER = (120, 110, 140)
ROW_H = 30


@dataclass(frozen=True)
class KeyBinding:
    keys: Tuple[int, ...]
    label: str
    desc: str

    def matches(self, event: pygame.event.Event) -> bool:
        return event.type == pygame.KEYDOWN and event.key in self.keys


ENTER = KeyBinding((pygame.K_RETURN, pygame.K_KP_ENTER), "↵", "enter")
QUIT = KeyBinding((pygame.K_ESCAPE,), "esc", "quit")
UP = KeyBinding((pygame.K_UP, pygame.K_k), "↑", "up")
DOWN = KeyBinding((pygame.K_DOWN, pygame.K_j), "↓", "down")
LEFT = KeyBinding((pygame.K_LEFT,), "←", "left")
RIGHT = KeyBinding((pygame.K_RIGHT,), "→", "right")

INPUT_KEYS = (ENTER, QUIT)
UP_DOWN_KEYS = (UP, DOWN, ENTER, QUIT)
LEFT_RIGHT_KEYS = (LEFT, RIGHT, ENTER, QUIT)


def draw_key_help(surface: pygame.Surface, bindings: Sequence[KeyBinding], x: int, y: int) -> None:
    text = " • ".join(f"{b.label} {b.desc}" for b in bindings)
    surface.blit(C.render_text(C.FONT_SMALL, text, C.INACTIVE), (x, y))


class TextInput:
    """Single-line text field fed by KEYDOWN events."""

    def __init__(self, placeholder: str = "", char_limit: int = 0, width: int = 420):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.value = ""
        self.rect = pygame.Rect(0, 0, width, 40)

    def reset(self):
        self.value = ""

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Return True if the event edited the field."""
        if event.type != pygame.KEYDOWN:
            return False
        if event.key == pygame.K_BACKSPACE:
            self.value = self.value[:-1]
            return True
        ch = getattr(event, "unicode", "") or ""
        if len(ch) != 1 or not ch.isprintable():
            return False
        if self.char_limit and len(self.value) >= self.char_limit:
            return True
        self.value += ch
        return True

    def draw(self, surface: pygame.Surface, x: int, y: int):
        self.rect.topleft = (x, y)
        pygame.draw.rect(surface, FIELD_BG, self.rect, border_radius=6)
        pygame.draw.rect(surface, FIELD_BORDER, self.rect, width=1, border_radius=6)
        if self.value:
            t = C.render_text(C.FONT_UI, "> " + self.value, C.WHITE)
        else:
            t = C.render_text(C.FONT_UI, "> " + self.placeholder, C.INACTIVE)
        surface.blit(t, (self.rect.x + 10, self.rect.centery - t.get_height() // 2))


class OptionList:
    """Vertical list of (title, description) rows with a keyboard cursor."""

    def __init__(self, items: Sequence[Tuple[str, str]], empty_text: str = ""):
        self.items: List[Tuple[str, str]] = list(items)
        self.cursor = 0
        self.empty_text = empty_text

    def cursor_up(self):
        if self.items:
            self.cursor = max(0, self.cursor - 1)

    def cursor_down(self):
        if self.items:
            self.cursor = min(len(self.items) - 1, self.cursor + 1)

    def selected(self) -> Optional[int]:
        return self.cursor if self.items else None

    def draw(self, surface: pygame.Surface, x: int, y: int) -> int:
        """Draw the list and return the y coordinate below it."""
        if not self.items:
            surface.blit(C.render_text(C.FONT_UI, self.empty_text, C.INACTIVE), (x + 24, y))
            return y + ROW_H
        for i, (title, desc) in enumerate(self.items):
            active = i == self.cursor
            color = C.ACCENT if active else C.WHITE
            if active:
                pygame.draw.rect(surface, C.ACCENT, (x, y + 4, 4, ROW_H * 2 - 10))
            surface.blit(C.render_text(C.FONT_UI, title, color), (x + 16, y))
            if desc:
                surface.blit(C.render_text(C.FONT_SMALL, desc, C.INACTIVE), (x + 16, y + ROW_H - 4))
            y += ROW_H * 2
        return y


class Paginator:
    """Dot paginator over a list of items."""

    def __init__(self, per_page: int = 3):
        self.per_page = max(1, per_page)
        self.page = 0
        self.total_pages = 1

    def set_total_items(self, count: int):
        self.total_pages = max(1, -(-count // self.per_page))
        self.page = min(self.page, self.total_pages - 1)

    def last_page(self):
        self.page = self.total_pages - 1

    def prev_page(self):
        self.page = max(0, self.page - 1)

    def next_page(self):
        self.page = min(self.total_pages - 1, self.page + 1)

    def slice_bounds(self, count: int) -> Tuple[int, int]:
        start = self.page * self.per_page
        return min(start, count), min(start + self.per_page, count)

    def draw(self, surface: pygame.Surface, x: int, y: int, on_color=C.WHITE, off_color=(85, 85, 85)):
        for i in range(self.total_pages):
            color = on_color if i == self.page else off_color
            pygame.draw.circle(surface, color, (x + i * 14, y), 4)


def confirm_modal_rects() -> Tuple[pygame.Rect, pygame.Rect, pygame.Rect]:
    mw, mh = 460, 180
    modal = pygame.Rect(0, 0, mw, mh)
    modal.center = (C.SCREEN_W // 2, C.SCREEN_H // 2)
    bw, bh = 120, 44
    gap = 30
    yes = pygame.Rect(0, 0, bw, bh)
    no = pygame.Rect(0, 0, bw, bh)
    yes.centerx = modal.centerx - (bw // 2 + gap)
    no.centerx = modal.centerx + (bw // 2 + gap)
    yes.bottom = modal.bottom - 20
    no.bottom = modal.bottom - 20
    return modal, yes, no


def draw_confirm_quit(screen: pygame.Surface, message: str):
    overlay = pygame.Surface((C.SCREEN_W, C.SCREEN_H), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 160))
    screen.blit(overlay, (0, 0))
    modal, yes_r, no_r = confirm_modal_rects()
    pygame.draw.rect(screen, (240, 240, 240), modal, border_radius=16)
    pygame.draw.rect(screen, (80, 80, 80), modal, width=2, border_radius=16)
    title = C.render_text(C.FONT_TITLE, "Quit?", (20, 20, 20))
    screen.blit(title, (modal.centerx - title.get_width() // 2, modal.y + 20))
    msg = C.render_text(C.FONT_UI, message, (30, 30, 30))
    screen.blit(msg, (modal.centerx - msg.get_width() // 2, modal.y + 20 + title.get_height() + 8))

    def draw_btn(rect, label):
        pygame.draw.rect(screen, (230, 230, 235), rect, border_radius=10)
        pygame.draw.rect(screen, (100, 100, 110), rect, 1, border_radius=10)
        t = C.render_text(C.FONT_UI, label, (20, 20, 25))
        screen.blit(t, (rect.centerx - t.get_width() // 2, rect.centery - t.get_height() // 2))

    draw_btn(yes_r, "Yes")
    draw_btn(no_r, "No")
