# verbquiz/ui/widgets/details.py
import tkinter as tk

FONT_HEAD  = ("Segoe UI", 14, "bold")
FONT_TEXT  = ("Segoe UI", 13)
COLOR_TEXT = "#28283c"
COLOR_CARD = "#e6e6fa"


class VerbDetails(tk.Frame):
    """Collapsible "Verb details" panel. Closed by default; rows come from get_rows()."""
    def __init__(self, master, get_rows, accent="#4287f5"):
        super().__init__(
            master,
            bg=COLOR_CARD,
            highlightthickness=1,
            highlightbackground=accent,
            highlightcolor=accent,
        )
        self.get_rows = get_rows
        self.is_open = False

        self.header = tk.Button(
            self,
            text="▸ Verb details",
            font=FONT_HEAD,
            fg=accent,
            bg=COLOR_CARD,
            activebackground=COLOR_CARD,
            activeforeground=accent,
            relief=tk.FLAT,
            anchor="w",
            command=self.toggle,
        )
        self.header.pack(fill=tk.X, padx=12, pady=8)

        self.body = tk.Frame(self, bg=COLOR_CARD)

    def toggle(self):
        if self.is_open:
            self.body.pack_forget()
            self.header.config(text="▸ Verb details")
            self.is_open = False
        else:
            self.body.pack(fill=tk.X, padx=16, pady=(0, 12))
            self.header.config(text="▾ Verb details")
            self.is_open = True
            self.refresh()

    def refresh(self):
        for w in list(self.body.children.values()):
            w.destroy()
        for label, value in self.get_rows():
            tk.Label(
                self.body,
                text=f"{label}: {value}",
                font=FONT_TEXT,
                fg=COLOR_TEXT,
                bg=COLOR_CARD,
                anchor="w",
            ).pack(fill=tk.X, pady=4)
