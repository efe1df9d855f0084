from unittest.mock import patch

import pygame
import pytest

from fdf.app import SurfaceCanvas, main, run, should_quit
from fdf.parser import parse_lines


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")


def _small_map():
    return parse_lines(["0 0 0\n", "0 10 0\n", "0 0 0\n"])


def test_should_quit_on_escape_only():
    assert should_quit(65307) is True
    assert should_quit(97) is False


def test_surface_canvas_drops_alpha():
    surface = pygame.Surface((4, 4))
    canvas = SurfaceCanvas(surface)
    canvas.put_pixel(2, 3, 0xFFFF0000)
    assert surface.get_at((2, 3)) == (255, 0, 0, 255)


def test_surface_canvas_clips_outside():
    surface = pygame.Surface((4, 4))
    canvas = SurfaceCanvas(surface)
    canvas.put_pixel(-1, 0, 0xFFFFFFFF)
    canvas.put_pixel(4, 0, 0xFFFFFFFF)
    assert all(surface.get_at((x, 0)) == (0, 0, 0, 255) for x in range(4))


def test_main_without_argument_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Uso: ./fdf <mapa.fdf>\n"


def test_main_with_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Erro" in capsys.readouterr().err


def test_main_with_empty_file_fails(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1


def test_run_ends_on_close_request(dummy_video):
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert run(_small_map()) == 0


def test_run_ends_on_escape(dummy_video):
    events = [pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE)]
    with patch("pygame.event.get", return_value=events):
        assert run(_small_map()) == 0


def test_main_runs_valid_map(dummy_video, tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 0\n0 5,0xFF0000\n")
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([str(path)]) == 0