# __main__.py - entry point
import logging
import os
import pygame
from scorekeeper import common as C
from scorekeeper import ui as UI
from scorekeeper.logs import setup_logging
from scorekeeper.scenes.menu import MainMenuScene

logger = logging.getLogger(__name__)


def _initial_window_size():
    info = pygame.display.Info()
    # Keep a safety margin so the window never hides under taskbar
    margin_w, margin_h = 120, 140
    w = min(C.SCREEN_W, max(640, info.current_w - margin_w))
    h = min(C.SCREEN_H, max(480, info.current_h - margin_h))
    return w, h


def _system_keys_set():
    names = [
        # Brightness / keyboard illumination
        "K_BRIGHTNESSUP", "K_BRIGHTNESSDOWN", "K_KBDILLUMUP", "K_KBDILLUMDOWN", "K_KBDILLUMTOGGLE",
        # Volume / media
        "K_VOLUMEUP", "K_VOLUMEDOWN", "K_MUTE", "K_AUDIOMUTE",
        "K_AUDIOPLAY", "K_AUDIOSTOP", "K_AUDIONEXT", "K_AUDIOPREV",
        "K_MEDIASELECT",
    ]
    out = set()
    for n in names:
        v = getattr(pygame, n, None)
        if isinstance(v, int):
            out.add(v)
    for i in range(1, 13):
        v = getattr(pygame, f"K_F{i}", None)
        if isinstance(v, int):
            out.add(v)
    return out


def main():
    settings = C.load_settings()
    log_file = setup_logging(C.log_dir(), settings["log_level"])
    logger.info("Launch the app. Logging to %s", log_file)

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()

    w, h = _initial_window_size()
    C.SCREEN_W, C.SCREEN_H = w, h
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    pygame.display.set_caption("Bowling Scorekeeper")
    C.setup_fonts()
    clock = pygame.time.Clock()

    scene = MainMenuScene(app=None)
    system_keys = _system_keys_set()

    running = True
    confirm_quit = False
    while running:
        clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                confirm_quit = True
                continue
            elif e.type == pygame.VIDEORESIZE:
                C.SCREEN_W, C.SCREEN_H = e.size
                screen = pygame.display.set_mode((C.SCREEN_W, C.SCREEN_H), pygame.RESIZABLE)
                continue
            if confirm_quit:
                # Handle confirm dialog input only
                if e.type == pygame.KEYDOWN:
                    if e.key in (pygame.K_ESCAPE, pygame.K_n):
                        confirm_quit = False
                    elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_y):
                        running = False
                elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    _modal, yes_r, no_r = UI.confirm_modal_rects()
                    if yes_r.collidepoint(e.pos):
                        running = False
                    elif no_r.collidepoint(e.pos):
                        confirm_quit = False
                continue
            # Alt+F4 asks before closing, like the window button
            if e.type == pygame.KEYDOWN and e.key == pygame.K_F4 and getattr(e, "mod", 0) & pygame.KMOD_ALT:
                confirm_quit = True
                continue
            if e.type == pygame.KEYDOWN and getattr(e, "key", None) in system_keys:
                continue
            scene.handle_event(e)
        if scene.next_scene is not None:
            scene = scene.next_scene
        scene.draw(screen)
        if confirm_quit:
            UI.draw_confirm_quit(screen, "Your score sheet will be saved.")
        pygame.display.flip()

    scene.shutdown()
    logger.info("Close the app.")
    pygame.quit()


if __name__ == "__main__":
    main()
