"""Command that loads an FDF map and shows it as an isometric wireframe."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

import pygame

from fdf.display import Display, Event, EventType, Window
from fdf.parser import HeightMap, MapError, parse_map
from fdf.render import render_map

ESCAPE_KEYSYM = 65307
WINDOW_WIDTH = 1524
WINDOW_HEIGHT = 768
WINDOW_TITLE = "FDF"
USAGE = "Uso: ./fdf <mapa.fdf>\n"


@dataclass
class SurfaceCanvas:
    """Draws 0xAARRGGBB pixels onto a pygame surface, ignoring alpha."""

    surface: pygame.Surface

    def put_pixel(self, x: int, y: int, color: int) -> None:
        width, height = self.surface.get_size()
        if 0 <= x < width and 0 <= y < height:
            self.surface.set_at(
                (x, y), ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
            )


def should_quit(keycode: int) -> bool:
    """True for the Escape key."""
    return keycode == ESCAPE_KEYSYM


def _keysym(key: int) -> int:
    return ESCAPE_KEYSYM if key == pygame.K_ESCAPE else key


def _translate(window: Window, events: Iterable[pygame.event.Event]) -> Iterator[Event]:
    for ev in events:
        if ev.type == pygame.QUIT:
            yield Event(EventType.CLIENT_MESSAGE, window, close_request=True)
        elif ev.type == pygame.KEYDOWN:
            yield Event(EventType.KEY_PRESS, window, keycode=_keysym(ev.key))
        elif ev.type == pygame.KEYUP:
            yield Event(EventType.KEY_RELEASE, window, keycode=_keysym(ev.key))
        elif ev.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            kind = (
                EventType.BUTTON_PRESS
                if ev.type == pygame.MOUSEBUTTONDOWN
                else EventType.BUTTON_RELEASE
            )
            x, y = ev.pos
            yield Event(kind, window, button=ev.button, x=x, y=y)
        elif ev.type == pygame.MOUSEMOTION:
            x, y = ev.pos
            yield Event(EventType.MOTION_NOTIFY, window, x=x, y=y)
        elif ev.type == pygame.VIDEOEXPOSE:
            yield Event(EventType.EXPOSE, window)


def run(heightmap: HeightMap) -> int:
    """Open a window, draw *heightmap* and wait for Escape or a close request."""
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        display = Display()
        window = display.new_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)

        def next_events() -> List[Event]:
            events = pygame.event.get()
            if not events:
                events = [pygame.event.wait()]
            return list(_translate(window, events))

        def close_window(_param: object = None) -> None:
            if window in display.windows:
                display.destroy_window(window)
            display.loop_end()

        def key_hook(keycode: int, _param: object) -> None:
            if should_quit(keycode):
                close_window()

        display.event_source = next_events
        window.key_hook(key_hook, None)
        window.hook(EventType.DESTROY_NOTIFY, close_window, None)
        window.expose_hook(lambda _param: pygame.display.flip(), None)

        screen.fill((0, 0, 0))
        render_map(heightmap, SurfaceCanvas(screen))
        pygame.display.flip()
        return display.loop()
    finally:
        pygame.display.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: ``fdf <map.fdf>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write(USAGE)
        return 1
    try:
        heightmap = parse_map(args[0])
    except MapError as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    return run(heightmap)


if __name__ == "__main__":
    sys.exit(main())