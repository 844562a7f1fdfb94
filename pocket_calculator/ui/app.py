"""tkinter window showing the display and the keypad."""
import tkinter as tk
from tkinter import font as tkfont

from pocket_calculator.common.logger import logger
from pocket_calculator.config import AppConfig
from pocket_calculator.ui.keypad import KEYPAD_COLUMNS, KEYPAD_ROWS, KeypadController, build_layout

BACKGROUND = "#000000"
FOREGROUND = "#ffffff"
SPACING = 12

# Keyboard shortcuts whose keysym differs from the button title
KEYSYM_TITLES = {
    "Return": "=",
    "KP_Enter": "=",
    "Escape": "AC",
    "Delete": "AC",
}


class CalculatorWindow:
    """Root window: right-aligned display above the button grid."""

    def __init__(self, root: tk.Tk, config: AppConfig, controller: KeypadController = None):
        self.root = root
        self.config = config
        self.controller = controller if controller is not None else KeypadController()
        self.controller.render = self._render

        self._display_var = tk.StringVar(value=self.controller.display)
        self._display_font = tkfont.Font(size=config.display_font_size)
        self._button_font = tkfont.Font(size=config.button_font_size)

        self._build()
        self.root.bind("<Key>", self._on_key)
        logger.info("🪟 Calculator window ready")

    def _build(self) -> None:
        self.root.title(self.config.window_title)
        self.root.geometry(self.config.geometry)
        self.root.configure(bg=BACKGROUND)

        frame = tk.Frame(self.root, bg=BACKGROUND)
        frame.pack(fill="both", expand=True, padx=SPACING, pady=SPACING)

        label = tk.Label(
            frame,
            textvariable=self._display_var,
            anchor="e",
            font=self._display_font,
            bg=BACKGROUND,
            fg=FOREGROUND,
        )
        label.grid(row=0, column=0, columnspan=KEYPAD_COLUMNS, sticky="nsew", pady=(0, SPACING))

        for button in build_layout():
            widget = tk.Button(
                frame,
                text=button.title,
                font=self._button_font,
                bg=button.color,
                fg=FOREGROUND,
                activebackground=button.color,
                relief="flat",
                command=lambda token=button.token: self.controller.press(token),
            )
            widget.grid(
                row=button.row + 1,
                column=button.column,
                columnspan=button.column_span,
                sticky="nsew",
                padx=SPACING // 2,
                pady=SPACING // 2,
            )

        for column in range(KEYPAD_COLUMNS):
            frame.grid_columnconfigure(column, weight=1, uniform="keys")
        for row in range(1, len(KEYPAD_ROWS) + 1):
            frame.grid_rowconfigure(row, weight=1, uniform="keys")

    def _render(self, text: str) -> None:
        self._display_var.set(text)

    def _on_key(self, event: tk.Event) -> None:
        title = KEYSYM_TITLES.get(event.keysym, event.char)
        if title:
            self.controller.press_title(title)


def run(config: AppConfig) -> None:
    """Open the calculator window and block until it is closed."""
    root = tk.Tk()
    CalculatorWindow(root, config)
    root.mainloop()
