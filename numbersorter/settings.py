import os
import json

from .log import LogLevel, logger

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH  = 800
WINDOW_HEIGHT = 600
FPS           = 60

# Animation pause after every swap, in milliseconds
SWAP_DELAY_MS = 100

VALUE_MIN        = 1
VALUE_MAX        = 1000
RESEED_THRESHOLD = 30
MAX_COUNT        = 1000

# ============================================================
# ========================= UI THEME =========================
# ============================================================

UI_BG        = (238, 238, 238)
UI_PANEL     = (226, 226, 230)
UI_TEXT      = (30,  30,  36)
UI_SUBTEXT   = (105, 105, 120)
UI_BORDER    = (180, 180, 190)
UI_NUMBER    = (70,  130, 180)    # SteelBlue
UI_NUMBER_HL = (95,  155, 205)
UI_ACTION    = (60,  179, 113)    # a shade of green
UI_ACTION_HL = (80,  199, 133)
UI_DISABLED  = (160, 160, 168)
UI_ON_FILL   = (255, 255, 255)
UI_FOCUS     = (70,  130, 180)

# ============================================================
# ========================= LAYOUT ===========================
# ============================================================

GRID_ROWS  = 10
CELL_GAP   = 5
CELL_MIN_W = 56
PAD        = 10
SIDE_W     = 140
BTN_H      = 40
SCROLL_STEP = 40

# ============================================================
# =================== SETTINGS OVERRIDES =====================
# ============================================================

_PKG_DIR      = os.path.dirname(os.path.abspath(__file__))
SETTINGS_JSON = os.environ.get(
    "NUMBERSORTER_SETTINGS",
    os.path.join(os.path.dirname(_PKG_DIR), "numbersorter_settings.json"),
)

_OVERRIDABLE = {
    "swap_delay_ms": SWAP_DELAY_MS,
    "grid_rows":     GRID_ROWS,
    "fps":           FPS,
    "max_count":     MAX_COUNT,
    "window_width":  WINDOW_WIDTH,
    "window_height": WINDOW_HEIGHT,
}

# Console log level name and optional log file path
_LOGGING = {
    "log_level": "INFO",
    "log_file":  None,
}


def defaults() -> dict:
    cfg = dict(_OVERRIDABLE)
    cfg.update(_LOGGING)
    return cfg


def _valid(key, value):
    if key == "log_level":
        return isinstance(value, str) and value.upper() in LogLevel.__members__
    if key == "log_file":
        return value is None or (isinstance(value, str) and value != "")
    lowest = 0 if key == "swap_delay_ms" else 1
    return not isinstance(value, bool) and isinstance(value, int) and value >= lowest


def load_settings(path=None) -> dict:
    """
    Read user overrides from the JSON settings file.

    Only the keys in ``defaults()`` are honoured. Numeric ones must be positive
    ints (``swap_delay_ms`` may be 0), ``log_level`` a level name and
    ``log_file`` a path or null. Anything else is skipped with a warning.
    A missing file just means defaults.
    """
    path = path or SETTINGS_JSON
    cfg  = defaults()
    if not os.path.exists(path):
        return cfg
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring settings file", component="CFG", details=f"{path}: {e}")
        return cfg
    if not isinstance(data, dict):
        logger.warning("Settings file is not a JSON object", component="CFG", details=path)
        return cfg

    for key, value in data.items():
        if key not in cfg:
            logger.warning(f"Unknown setting '{key}'", component="CFG")
            continue
        if not _valid(key, value):
            logger.warning(f"Bad value for '{key}'", component="CFG", details=repr(value))
            continue
        cfg[key] = value.upper() if key == "log_level" else value
    logger.debug("Settings loaded", component="CFG", details=path)
    return cfg
