import tkinter as tk

from verbquiz.config import WINDOW_MIN_SIZE, WINDOW_SIZE, WINDOW_TITLE
from verbquiz.services.session import PracticeSession
from verbquiz.ui.widgets.details import VerbDetails


# ===== Shared style =====
FONT_HEAD   = ("Segoe UI", 24, "bold")
FONT_TEXT   = ("Segoe UI", 15)
FONT_PROMPT = ("Segoe UI", 15, "bold")
FONT_BTN    = ("Segoe UI", 14, "bold")

ACCENT      = "#4287f5"   # blue
WINDOW_BG   = "#f0f0ff"   # light blue-grey
COLOR_TEXT  = "#28283c"   # dark blue-grey

CHECK_BG    = ACCENT
NEXT_BG     = "#4caf50"   # green
BTN_FG      = "white"

OK_FG       = "#4caf50"
WRONG_FG    = "#d32f2f"


class VerbQuizApp(tk.Tk):
    def __init__(self, session: PracticeSession):
        super().__init__()

        # ------------------------
        # Window
        # ------------------------
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_SIZE)
        self.minsize(*WINDOW_MIN_SIZE)
        self.configure(bg=WINDOW_BG)

        self.session = session

        self._build_ui()
        self._render_question()

    # ------------------------------------------------------------------
    # UI build
    # ------------------------------------------------------------------
    def _build_ui(self):
        body = tk.Frame(self, bg=WINDOW_BG)
        body.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        tk.Label(
            body,
            text=WINDOW_TITLE,
            font=FONT_HEAD,
            fg=ACCENT,
            bg=WINDOW_BG,
        ).pack(pady=(0, 30))

        self.prompt_label = tk.Label(
            body,
            text="",
            anchor="w",
            justify="left",
            wraplength=560,
            font=FONT_PROMPT,
            fg=COLOR_TEXT,
            bg=WINDOW_BG,
        )
        self.prompt_label.pack(fill=tk.X, pady=(0, 20))

        # Answer row
        row = tk.Frame(body, bg=WINDOW_BG)
        row.pack(fill=tk.X, pady=(0, 20))

        tk.Label(
            row,
            text="Your answer:",
            font=FONT_TEXT,
            fg=COLOR_TEXT,
            bg=WINDOW_BG,
        ).pack(side=tk.LEFT, padx=(0, 10))

        self.answer_var = tk.StringVar()
        self.answer_var.trace_add("write", self._on_input_change)
        self.entry = tk.Entry(
            row,
            textvariable=self.answer_var,
            font=FONT_TEXT,
            fg=COLOR_TEXT,
        )
        self.entry.pack(side=tk.LEFT, fill=tk.X, expand=True, ipady=6)
        self.entry.bind("<Return>", lambda e: self._check())

        # Buttons
        nav = tk.Frame(body, bg=WINDOW_BG)
        nav.pack(fill=tk.X)

        tk.Button(
            nav,
            text="Check",
            font=FONT_BTN,
            bg=CHECK_BG,
            fg=BTN_FG,
            width=10,
            command=self._check,
        ).pack(side=tk.LEFT, padx=(0, 20), ipady=6)

        tk.Button(
            nav,
            text="Next verb",
            font=FONT_BTN,
            bg=NEXT_BG,
            fg=BTN_FG,
            width=10,
            command=self._next,
        ).pack(side=tk.LEFT, ipady=6)

        self.result_label = tk.Label(
            body,
            text="",
            anchor="w",
            justify="left",
            wraplength=560,
            font=FONT_PROMPT,
            bg=WINDOW_BG,
        )
        self.result_label.pack(fill=tk.X, pady=20)

        self.details_panel = VerbDetails(body, self.session.details, accent=ACCENT)
        self.details_panel.pack(fill=tk.X, pady=(10, 0))

    # ------------------------------------------------------------------
    # Render
    # ------------------------------------------------------------------
    def _render_question(self):
        self.prompt_label.config(text=self.session.prompt())
        self.answer_var.set("")
        self.result_label.config(text="")
        self.entry.focus_set()
        if self.details_panel.is_open:
            self.details_panel.refresh()

    def _render_result(self):
        color = OK_FG if self.session.current.correct else WRONG_FG
        self.result_label.config(text=self.session.feedback(), fg=color)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _on_input_change(self, *args):
        self.session.set_input(self.answer_var.get())

    def _check(self):
        self.session.submit()
        self._render_result()

    def _next(self):
        self.session.next_verb()
        self._render_question()
