import os

import pygame

from orrery import app


def test_app_main_runs_one_frame(monkeypatch):
    monkeypatch.setitem(os.environ, "SDL_VIDEODRIVER", "dummy")
    monkeypatch.setitem(os.environ, "SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    app.main(["--date", "2020-01-01", "--paused", "--points", "16"])


def test_parser_defaults():
    args = app.build_parser().parse_args([])
    assert args.date is None
    assert args.time_scale == 1.0
    assert not args.paused
