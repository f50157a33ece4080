"""Admin console for the IconRandomizer status server."""

import logging
import threading

import customtkinter as ctk

from iconrandomizer.config import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    HOVER_COLOR,
    OTHER_COLOR,
    TEXT_COLOR,
)
from iconrandomizer.core import state

REFRESH_INTERVAL_MS = 1000


class ConsoleLogHandler(logging.Handler):
    """Mirror log records into the console's log box from any thread."""

    def __init__(self, app, log_box):
        super().__init__()
        self.app = app
        self.log_box = log_box

    def emit(self, record):
        text = self.format(record)
        self.app.after(0, self._append, text)

    def _append(self, text):
        self.log_box.configure(state="normal")
        self.log_box.insert("end", text + "\n")
        self.log_box.configure(state="disabled")
        self.log_box.see("end")


def _info_bubble(parent):
    frame = ctk.CTkFrame(
        parent, fg_color=OTHER_COLOR, corner_radius=8, border_color=ACCENT_COLOR, border_width=1
    )
    label = ctk.CTkLabel(
        frame, text="", font=("Arial", 11, "bold"), text_color=TEXT_COLOR, fg_color=OTHER_COLOR
    )
    label.pack(padx=10, pady=10)
    return frame, label


def build_console(plugin, host):
    """Create the console window. Call ``mainloop()`` on the result to run it."""
    ctk.set_appearance_mode("dark")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title("IconRandomizer")
    app.geometry("700x420")
    app.configure(fg_color=BACKGROUND_COLOR)

    frame_top = ctk.CTkFrame(app, corner_radius=15, fg_color=BACKGROUND_COLOR, border_width=0)
    frame_top.pack(fill="x", padx=10, pady=(10, 5))
    frame_top.grid_columnconfigure((0, 1), weight=1, uniform="cols")

    host_frame, host_label = _info_bubble(frame_top)
    port_frame, port_label = _info_bubble(frame_top)
    icons_frame, icons_label = _info_bubble(frame_top)
    served_frame, served_label = _info_bubble(frame_top)

    # host | port on top, icons | served below
    for idx, frame in enumerate([host_frame, port_frame, icons_frame, served_frame]):
        frame.grid(row=idx // 2, column=idx % 2, padx=5, pady=5, sticky="nsew")

    frame_log = ctk.CTkFrame(
        app, corner_radius=15, fg_color=OTHER_COLOR, border_color=ACCENT_COLOR, border_width=1)
    frame_log.pack(fill="both", expand=True, padx=10, pady=10)

    header = ctk.CTkFrame(frame_log, fg_color=OTHER_COLOR)
    header.pack(fill="x", padx=10, pady=(10, 5))
    ctk.CTkLabel(header, text="Server Log", font=("Arial", 16, "bold"),
                 text_color=TEXT_COLOR).pack(side="left")

    def reload_icons():
        reload_button.configure(state="disabled")

        def worker():
            try:
                plugin.reload()
            finally:
                app.after(0, lambda: reload_button.configure(state="normal"))

        threading.Thread(target=worker, daemon=True).start()

    reload_button = ctk.CTkButton(
        header,
        text="Reload icons",
        fg_color=ACCENT_COLOR,
        hover_color=HOVER_COLOR,
        text_color=TEXT_COLOR,
        command=reload_icons,
    )
    reload_button.pack(side="right")

    log_box = ctk.CTkTextbox(
        frame_log,
        state="disabled",
        corner_radius=10,
        fg_color=BACKGROUND_COLOR,
        text_color=TEXT_COLOR,
        border_color=ACCENT_COLOR,
        border_width=1,
    )
    log_box.pack(fill="both", expand=True, padx=10, pady=10)

    handler = ConsoleLogHandler(app, log_box)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s", "%H:%M:%S"))
    logging.getLogger().addHandler(handler)

    def refresh_labels():
        host_label.configure(text=f"Host: {host}")
        port_label.configure(text=f"Server Port: {state.SERVER_PORT or '-'}")
        icons_label.configure(text=f"Icons Loaded: {plugin.icon_count}")
        served_label.configure(text=f"Status Requests: {state.status_requests}")
        app.after(REFRESH_INTERVAL_MS, refresh_labels)

    refresh_labels()
    return app


def run_console(plugin, host):
    app = build_console(plugin, host)
    app.mainloop()
