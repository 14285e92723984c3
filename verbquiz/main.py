# =========================
# verbquiz/main.py
# =========================
import logging
import sys
import tkinter as tk
from tkinter import messagebox

from verbquiz.config import VERBS_FILE, WINDOW_TITLE
from verbquiz.logging_config import setup_logging
from verbquiz.services.loader import LoadError, load_verbs
from verbquiz.services.questions import NoVerbsAvailable
from verbquiz.services.session import PracticeSession
from verbquiz.ui.app_window import VerbQuizApp

logger = logging.getLogger(__name__)


def show_startup_error(message: str) -> None:
    """Blocking error dialog shown before the main window exists"""
    try:
        root = tk.Tk()
    except tk.TclError as e:
        logger.warning(f"No display for the error dialog: {e}")
        return
    root.withdraw()
    messagebox.showerror(WINDOW_TITLE, message, parent=root)
    root.destroy()


def run(verbs_file=None) -> int:
    verbs_file = verbs_file or VERBS_FILE
    try:
        verbs = load_verbs(verbs_file)
        session = PracticeSession(verbs)
    except (LoadError, NoVerbsAvailable) as e:
        logger.error(f"Cannot start practice: {e}")
        show_startup_error(f"Cannot start practice:\n{e}")
        return 1

    app = VerbQuizApp(session)
    app.mainloop()
    return 0


def main():
    setup_logging()
    logger.info("Starting Danish Verbs Practice")
    sys.exit(run())


if __name__ == "__main__":
    main()
