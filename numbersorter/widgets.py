import pygame

from .settings import (
    UI_BG, UI_PANEL, UI_TEXT, UI_SUBTEXT, UI_BORDER, UI_NUMBER, UI_NUMBER_HL,
    UI_ACTION, UI_ACTION_HL, UI_DISABLED, UI_ON_FILL, UI_FOCUS,
    CELL_GAP, CELL_MIN_W,
)

# ============================================================
# ========================= LAYOUT ===========================
# ============================================================

def grid_rects(count, rows, area, gap=CELL_GAP, min_w=CELL_MIN_W):
    """
    Lay out ``count`` cells like a fixed-row grid: columns = ceil(count/rows),
    filled row by row. Cells never get narrower than ``min_w``; the grid then
    overflows ``area`` to the right and the caller scrolls it.

    Returns (rects, content_width). Rects are relative to ``area``'s origin.
    """
    if count <= 0:
        return [], 0
    cols = (count + rows - 1) // rows
    cw = max(min_w, (area.width - gap * (cols - 1)) // cols)
    ch = max(1, (area.height - gap * (rows - 1)) // rows)
    rects = []
    for i in range(count):
        r, c = divmod(i, cols)
        rects.append(pygame.Rect(c * (cw + gap), r * (ch + gap), cw, ch))
    return rects, cols * cw + (cols - 1) * gap


def max_scroll(content_width, view_width):
    return max(0, content_width - view_width)

# ============================================================
# ========================= UI WIDGETS =======================
# ============================================================

class NumberBtn:
    """One value in the grid. ``rect`` is relative to the grid origin."""
    def __init__(self, rect, idx, value):
        self.rect, self.idx, self.value = rect, idx, value

    def screen_rect(self, origin, scroll):
        return self.rect.move(origin[0] - scroll, origin[1])

    def draw(self, s, fonts, origin, scroll, hov=False, enabled=True):
        r  = self.screen_rect(origin, scroll)
        bg = UI_NUMBER_HL if (hov and enabled) else UI_NUMBER
        if not enabled: bg = tuple((a + b) // 2 for a, b in zip(UI_NUMBER, UI_DISABLED))
        pygame.draw.rect(s, bg, r, border_radius=3)
        t = fonts['mid'].render(str(self.value), True, UI_ON_FILL)
        s.blit(t, t.get_rect(center=r.center))


class SmBtn:
    def __init__(self, x, y, w, h, lbl):
        self.rect = pygame.Rect(x, y, w, h); self.label = lbl
        self.enabled = True

    def hit(self, pos):
        return self.enabled and self.rect.collidepoint(pos)

    def draw(self, s, fonts, hov=False):
        if not self.enabled: bg = UI_DISABLED
        else:                bg = UI_ACTION_HL if hov else UI_ACTION
        pygame.draw.rect(s, bg, self.rect, border_radius=5)
        t = fonts['big'].render(self.label, True, UI_ON_FILL)
        s.blit(t, t.get_rect(center=self.rect.center))


class TextInput:
    """Single-line entry. ``handle`` returns "submit" when Enter is pressed."""
    MAX_LEN = 10

    def __init__(self, x, y, w, h):
        self.rect  = pygame.Rect(x, y, w, h)
        self.text  = ""
        self.focus = True

    def clear(self):
        self.text = ""

    def handle(self, ev):
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            self.focus = self.rect.collidepoint(ev.pos)
        elif ev.type == pygame.KEYDOWN and self.focus:
            if ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return "submit"
            if ev.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif ev.unicode and ev.unicode.isprintable() and len(self.text) < self.MAX_LEN:
                self.text += ev.unicode
        return None

    def draw(self, s, fonts):
        pygame.draw.rect(s, UI_ON_FILL, self.rect)
        pygame.draw.rect(s, UI_FOCUS if self.focus else UI_BORDER, self.rect, 1)
        t = fonts['mid'].render(self.text, True, UI_TEXT)
        s.blit(t, (self.rect.x + 6, self.rect.centery - t.get_height() // 2))
        if self.focus and (pygame.time.get_ticks() // 500) % 2 == 0:
            cx = self.rect.x + 7 + t.get_width()
            pygame.draw.line(s, UI_TEXT, (cx, self.rect.y + 6), (cx, self.rect.bottom - 6), 1)


def draw_label(s, font, text, pos, color=UI_SUBTEXT, center=False):
    t = font.render(text, True, color)
    s.blit(t, t.get_rect(center=pos) if center else pos)


def draw_panel(s, rect):
    pygame.draw.rect(s, UI_PANEL,  rect, border_radius=6)
    pygame.draw.rect(s, UI_BORDER, rect, 1, border_radius=6)


def clear(s):
    s.fill(UI_BG)
