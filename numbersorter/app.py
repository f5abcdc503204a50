import os
import sys

import pygame

from . import dialogs
from .errors import NumberSorterError, SelectionTooLarge
from .log import configure_logging, logger
from .session import SortSession, parse_count
from .settings import (
    load_settings, UI_TEXT, UI_SUBTEXT, PAD, SIDE_W, BTN_H, SCROLL_STEP, CELL_GAP,
)
from .widgets import (
    NumberBtn, SmBtn, TextInput, grid_rects, max_scroll,
    draw_label, draw_panel, clear,
)

SWAP_EVENT = pygame.USEREVENT + 1
DONE_EVENT = pygame.USEREVENT + 2


def build_fonts():
    sans = "Segoe UI,Tahoma,Arial"
    return dict(title=pygame.font.SysFont(sans, 22), big=pygame.font.SysFont(sans, 18),
                mid=pygame.font.SysFont(sans, 15), small=pygame.font.SysFont(sans, 13))

# ============================================================
# ======================== INTRO SCREEN ======================
# ============================================================

class IntroScreen:
    def __init__(self, screen, fonts):
        self.screen, self.fonts = screen, fonts
        w, h = screen.get_size()
        cx, cy = w // 2, h // 2
        self.prompt_pos = (cx, cy - 50)
        self.input = TextInput(cx - 80, cy - 25, 160, 32)
        self.enter = SmBtn(cx - 50, cy + 20, 100, 34, "Enter")

    def reset(self):
        self.input.clear(); self.input.focus = True

    def handle(self, ev):
        if self.input.handle(ev) == "submit":
            return "submit"
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1 and self.enter.hit(ev.pos):
            return "submit"
        return None

    def draw(self):
        s = self.screen; mp = pygame.mouse.get_pos()
        clear(s)
        draw_label(s, self.fonts['big'], "How many numbers to display?",
                   self.prompt_pos, UI_TEXT, center=True)
        self.input.draw(s, self.fonts)
        self.enter.draw(s, self.fonts, self.enter.rect.collidepoint(mp))
        pygame.display.flip()

# ============================================================
# ======================== SORT SCREEN =======================
# ============================================================

class SortScreen:
    def __init__(self, screen, fonts, rows):
        self.screen, self.fonts, self.rows = screen, fonts, rows
        w, h = screen.get_size()
        self.area = pygame.Rect(PAD, PAD, w - SIDE_W - 3 * PAD, h - 2 * PAD - 24)
        bx = self.area.right + PAD * 2
        by = h // 2 - BTN_H - CELL_GAP
        self.sort_btn  = SmBtn(bx, by, SIDE_W - PAD, BTN_H, "Sort")
        self.reset_btn = SmBtn(bx, by + BTN_H + CELL_GAP * 2, SIDE_W - PAD, BTN_H, "Reset")
        self.btns   = []
        self.scroll = 0
        self.content_w = 0
        self.status = ""
        self.busy   = False

    def show(self, values):
        """Rebuild the grid for a new sequence."""
        rects, self.content_w = grid_rects(len(values), self.rows, self.area)
        self.btns   = [NumberBtn(r, i, v) for i, (r, v) in enumerate(zip(rects, values))]
        self.scroll = 0

    def update(self, values):
        for b, v in zip(self.btns, values): b.value = v

    def set_busy(self, busy):
        self.busy = busy
        self.sort_btn.enabled = self.reset_btn.enabled = not busy

    def _btn_at(self, pos):
        if not self.area.collidepoint(pos): return None
        for b in self.btns:
            if b.screen_rect(self.area.topleft, self.scroll).collidepoint(pos): return b
        return None

    def handle(self, ev):
        if ev.type == pygame.MOUSEWHEEL:
            step = -(ev.x or ev.y) * SCROLL_STEP
            self.scroll = min(max(0, self.scroll + step),
                              max_scroll(self.content_w, self.area.width))
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self.sort_btn.hit(ev.pos):  return ("sort", None)
            if self.reset_btn.hit(ev.pos): return ("reset", None)
            if not self.busy:
                b = self._btn_at(ev.pos)
                if b: return ("number", b.value)
        return None

    def draw(self):
        s = self.screen; mp = pygame.mouse.get_pos()
        clear(s)
        draw_panel(s, self.area.inflate(CELL_GAP * 2, CELL_GAP * 2))
        hov = self._btn_at(mp)
        s.set_clip(self.area)
        for b in self.btns:
            b.draw(s, self.fonts, self.area.topleft, self.scroll, b is hov, not self.busy)
        s.set_clip(None)
        self.sort_btn.draw(s, self.fonts, self.sort_btn.rect.collidepoint(mp))
        self.reset_btn.draw(s, self.fonts, self.reset_btn.rect.collidepoint(mp))
        draw_label(s, self.fonts['small'], self.status, (PAD, self.area.bottom + 12), UI_SUBTEXT)
        pygame.display.flip()

# ============================================================
# ========================= MAIN =============================
# ============================================================

class App:
    def __init__(self, cfg=None, session=None):
        self.cfg = cfg or load_settings()
        configure_logging(self.cfg)
        self.session = session or SortSession(delay=self.cfg["swap_delay_ms"] / 1000.0)
        self.screen = pygame.display.set_mode((self.cfg["window_width"], self.cfg["window_height"]))
        pygame.display.set_caption("Number Sorter App")
        self.fonts = build_fonts()
        self.intro = IntroScreen(self.screen, self.fonts)
        self.board = SortScreen(self.screen, self.fonts, self.cfg["grid_rows"])
        self.page  = "intro"

    # ---- callbacks from the sort worker thread ----

    def _on_swap(self, snapshot):
        pygame.event.post(pygame.event.Event(SWAP_EVENT, values=snapshot))

    def _on_done(self, next_direction):
        pygame.event.post(pygame.event.Event(DONE_EVENT, next_direction=next_direction))

    # ---- actions ----

    def _status(self):
        return f"Next sort: {self.session.direction.value}"

    def _show_sequence(self):
        self.board.show(self.session.sequence)
        self.board.status = self._status()

    def submit_count(self):
        count = parse_count(self.intro.input.text, self.cfg["max_count"])
        self.session.start(count)
        self._show_sequence()
        self.page = "sort"

    def click_number(self, value):
        self.session.reseed(value)
        self._show_sequence()

    def start_sort(self):
        direction = self.session.direction
        self.session.sort(self._on_swap, self._on_done)
        self.board.set_busy(True)
        self.board.status = f"Sorting {direction.value}..."

    def reset(self):
        self.intro.reset()
        self.page = "intro"

    def dispatch(self, ev):
        """Route one event. Domain errors become dialogs."""
        try:
            if ev.type == SWAP_EVENT:
                self.board.update(ev.values)
            elif ev.type == DONE_EVENT:
                self.board.set_busy(False)
                self.board.update(self.session.sequence)
                done = "Sorted" if ev.next_direction is not None else "Sort failed"
                self.board.status = f"{done}. {self._status()}"
            elif self.page == "intro":
                if self.intro.handle(ev) == "submit": self.submit_count()
            else:
                act = self.board.handle(ev)
                if act is None: return
                kind, value = act
                if   kind == "sort":   self.start_sort()
                elif kind == "reset":  self.reset()
                elif kind == "number": self.click_number(value)
        except NumberSorterError as e:
            logger.warning(e.message, component="UI")
            if isinstance(e, SelectionTooLarge):
                dialogs.show_warning(e.title, e.message)
            else:
                dialogs.show_error(e.title, e.message)

    def loop(self):
        clock = pygame.time.Clock()
        while True:
            clock.tick(self.cfg["fps"])
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT: return
                if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE and self.page == "intro":
                    return
                self.dispatch(ev)
            (self.intro if self.page == "intro" else self.board).draw()


def main():
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    logger.info("Number Sorter starting", component="UI")
    try:
        App().loop()
    finally:
        logger.disable_file_logging()
        pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
