"""Command line entry point: show a height map in a window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fdfview.controls import Key, handle_key  # noqa: E402
from fdfview.heightmap import MapError, load_map  # noqa: E402
from fdfview.image import Image  # noqa: E402
from fdfview.render import (  # noqa: E402
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Renderer,
    ViewState,
    menu_lines,
)

__all__ = ["parse_args", "run", "main"]

_TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 20
_FRAME_RATE = 60


def _key_table() -> dict[int, Key]:
    table = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }
    for key in Key:
        if len(key.name) == 1:
            table[ord(key.name.lower())] = key
    return table


_KEYS = _key_table()


def parse_args(argv: Sequence[str]) -> str:
    """Return the map path from the arguments after the program name."""
    if len(argv) != 1:
        raise ValueError("argument count error")
    return argv[0]


def _to_surface(image: Image) -> pygame.Surface:
    pixels = bytes(image.data)
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = pixels[2::4]
    rgb[1::3] = pixels[1::4]
    rgb[2::3] = pixels[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")


def run(path, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
    """Open a window on the map at path and run until it is closed."""
    heightmap = load_map(path)
    state = ViewState()
    renderer = Renderer(heightmap, state, width, height)
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("FDF")
        font = pygame.font.Font(None, _FONT_SIZE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = _KEYS.get(event.key)
                    if key is not None and not handle_key(state, key):
                        running = False
            if running and state.should_render:
                screen.blit(_to_surface(renderer.render()), (0, 0))
                for x, y, text in menu_lines(state, str(path)):
                    screen.blit(font.render(text, True, _TEXT_COLOR), (x, y))
                pygame.display.flip()
                state.frames += 1
                if state.frames == 2:
                    state.should_render = False
                    state.frames = 0
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = parse_args(argv)
        run(path)
    except (ValueError, pygame.error) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())