from .log import logger

try:
    import tkinter as tk
    from tkinter import messagebox
    HAS_TK = True
except ImportError:
    HAS_TK = False


def _show(kind, title, message):
    logger.info(f"{title}: {message}", component="UI")
    if not HAS_TK: return
    root = tk.Tk()
    root.withdraw()
    root.attributes("-topmost", True)
    try:
        getattr(messagebox, kind)(title, message, parent=root)
    finally:
        root.destroy()


def show_error(title, message):
    _show("showerror", title, message)


def show_warning(title, message):
    _show("showwarning", title, message)
