"""
Headless tests for the pygame front end (dummy video driver).
"""

import numpy as np
import pygame
import pytest

from numbersorter import app as app_mod
from numbersorter.session import SortSession
from numbersorter.settings import defaults
from numbersorter.sorter import SortDirection


@pytest.fixture
def dialogs(monkeypatch):
    shown = []
    monkeypatch.setattr(app_mod.dialogs, "show_error",
                        lambda title, msg: shown.append(("error", title, msg)))
    monkeypatch.setattr(app_mod.dialogs, "show_warning",
                        lambda title, msg: shown.append(("warning", title, msg)))
    return shown


@pytest.fixture
def app(no_sleep):
    pygame.init()
    session = SortSession(rng=np.random.default_rng(5), delay=0, sleep=no_sleep)
    a = app_mod.App(cfg=defaults(), session=session)
    yield a
    pygame.quit()


def submit(app, text):
    app.intro.input.text = text
    app.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN, unicode="\r", mod=0))


def click(app, pos):
    app.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))


def center_of(app, btn):
    return btn.screen_rect(app.board.area.topleft, app.board.scroll).center


def labels(app):
    return [b.value for b in app.board.btns]


class TestIntro:

    def test_invalid_count_shows_error(self, app, dialogs):
        submit(app, "zero")
        assert app.page == "intro"
        assert dialogs == [("error", "Invalid Input", "Please enter a valid positive integer.")]

    def test_valid_count_opens_grid(self, app, dialogs):
        submit(app, "12")
        assert app.page == "sort"
        assert labels(app) == app.session.sequence
        assert len(app.board.btns) == 12
        assert dialogs == []


class TestNumberClicks:

    def test_large_value_warns(self, app, dialogs):
        submit(app, "5")
        app.session.sequence = [500, 10, 999, 1, 700]
        app._show_sequence()
        big = app.board.btns[0]
        assert big.value == 500
        before = app.session.sequence
        click(app, center_of(app, big))
        assert app.session.sequence is before
        assert dialogs == [("warning", "Invalid Selection",
                            "Please select a value smaller or equal to 30.")]

    def test_small_value_reseeds(self, app, dialogs):
        submit(app, "8")
        small = min(app.board.btns, key=lambda b: b.value)
        click(app, center_of(app, small))
        assert len(app.session.sequence) == small.value
        assert labels(app) == app.session.sequence
        assert dialogs == []


class TestSortFlow:

    def test_sort_animates_and_flips_direction(self, app, dialogs):
        submit(app, "15")
        click(app, app.board.sort_btn.rect.center)
        assert app.board.busy
        app.session.join(5)
        for ev in pygame.event.get():
            app.dispatch(ev)
        assert not app.board.busy
        assert labels(app) == sorted(app.session.sequence, reverse=True)
        assert app.session.direction is SortDirection.ASCENDING
        assert app.board.status == "Sorted. Next sort: ascending"

    def test_reset_returns_to_intro(self, app, dialogs):
        submit(app, "5")
        click(app, app.board.reset_btn.rect.center)
        assert app.page == "intro"
        assert app.intro.input.text == ""


class TestSettingsApplied:

    def test_log_settings_applied(self, no_sleep, tmp_path):
        from numbersorter.log import LogLevel, logger

        cfg = defaults()
        cfg.update(log_level="DEBUG", log_file=str(tmp_path / "app.log"))
        pygame.init()
        try:
            app_mod.App(cfg=cfg, session=SortSession(delay=0, sleep=no_sleep))
            assert logger.level == LogLevel.DEBUG
            assert logger.log_file == str(tmp_path / "app.log")
        finally:
            logger.disable_file_logging()
            logger.set_level(LogLevel.INFO)
            pygame.quit()

    def test_grid_rows_from_settings(self, no_sleep):
        cfg = defaults()
        cfg["grid_rows"] = 4
        pygame.init()
        try:
            a = app_mod.App(cfg=cfg, session=SortSession(delay=0, sleep=no_sleep))
            submit(a, "8")
            assert len({b.rect.y for b in a.board.btns}) == 4
        finally:
            pygame.quit()
