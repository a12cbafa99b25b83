# main.py
import argparse
import dataclasses
import os
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, CAPTION, FONT_FILE, CFG, Config
from .game import GameState, InputKind, Phase, new_game_state, handle_input, update
from .render import draw_game

KEYMAP = {
    pygame.K_UP: InputKind.UP,
    pygame.K_DOWN: InputKind.DOWN,
    pygame.K_LEFT: InputKind.LEFT,
    pygame.K_RIGHT: InputKind.RIGHT,
    pygame.K_RETURN: InputKind.CONFIRM,
}


# ---------- Font lookup ----------
def find_assets(start: str, parents: int = 3, kids: int = 3) -> Optional[str]:
    """
    Look for an `assets` folder: first in `start` and up to `parents`
    directories above it, then up to `kids` levels below `start`.
    """
    here = os.path.abspath(start)
    for _ in range(parents + 1):
        candidate = os.path.join(here, "assets")
        if os.path.isdir(candidate):
            return candidate
        parent = os.path.dirname(here)
        if parent == here:
            break
        here = parent

    root = os.path.abspath(start)
    base_depth = root.rstrip(os.sep).count(os.sep)
    for dirpath, dirnames, _files in os.walk(root):
        if "assets" in dirnames:
            return os.path.join(dirpath, "assets")
        if dirpath.rstrip(os.sep).count(os.sep) - base_depth >= kids - 1:
            dirnames[:] = []  # don't descend further
    return None


def load_font(path: Optional[str], size: int) -> pygame.font.Font:
    """
    Load the text font once. An explicit path must load; otherwise the
    assets font is used if it can be found, falling back to pygame's default font.
    """
    if path is None:
        assets = find_assets(os.getcwd()) or find_assets(os.path.dirname(__file__))
        if assets is not None and os.path.isfile(os.path.join(assets, FONT_FILE)):
            path = os.path.join(assets, FONT_FILE)

    if path is None:
        print("[GAME] No font asset found, using pygame default font")
        return pygame.font.SysFont(None, size)

    print(f"[GAME] Loading font from: {path}")
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        raise SystemExit(f"[GAME] Could not load font {path}: {exc}") from exc


# ---------- Input ----------
def handle_events(state: GameState) -> bool:
    """Process pending events. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            kind = KEYMAP.get(event.key)
            if kind is not None:
                handle_input(state, kind)
    return True


# ---------- CLI ----------
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: random)")
    parser.add_argument("--fps", type=int, default=CFG.fps,
                        help="frame rate cap")
    parser.add_argument("--font", type=str, default=None,
                        help="path to a .ttf font for the prompts")
    args = parser.parse_args(argv)
    if args.fps < 1:
        parser.error("--fps must be positive")
    return args


def config_from_args(args: argparse.Namespace) -> Config:
    return dataclasses.replace(CFG, seed=args.seed, fps=args.fps)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    cfg = config_from_args(args)

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error as exc:
        raise SystemExit(f"[GAME] Could not open window: {exc}") from exc
    pygame.display.set_caption(CAPTION)
    font = load_font(args.font, cfg.font_size)
    clock = pygame.time.Clock()

    state = new_game_state(cfg)
    running = True

    while running:
        # 1) input
        running = handle_events(state)
        if not running:
            break

        # 2) update (movement gated inside update)
        dt = clock.tick(cfg.fps) / 1000.0
        was_over = state.phase is Phase.OVER
        update(state, dt)
        if state.phase is Phase.OVER and not was_over:
            print(f"[GAME] Game over. food_eaten={state.food_eaten}")

        # 3) render
        draw_game(screen, font, state)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
