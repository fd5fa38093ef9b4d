import customtkinter as ctk
from customtkinter import CTkImage
from PIL import Image

from app_controller import AppController
from config import DEFAULT_CONFIG
from dialogs import TkDialogs
from logger_setup import logger

# Appearance
ctk.set_appearance_mode("dark")
ctk.set_default_color_theme("green")

PANEL = "#0f1113"
INNER_PANEL = "#0b0c0d"
BORDER = "#1f1f1f"
BUTTON_BAR_HEIGHT = 64


def font(name, size, weight=None):
    return (name, size, weight) if weight else (name, size)


class FaceDetectionGUI:
    def __init__(self, detector, snapshot_writer, config=DEFAULT_CONFIG, open_camera=None):
        self.config = config
        self._after_id = None
        self._photo = None

        # ---------- Root ----------
        self.root = ctk.CTk()
        self.root.title(config.window_title)
        self.root.geometry(f"{config.frame_width}x{config.frame_height + BUTTON_BAR_HEIGHT}")
        self.root.grid_rowconfigure(0, weight=1)
        self.root.grid_columnconfigure(0, weight=1)

        # ---------- Video Panel ----------
        video_outer = ctk.CTkFrame(self.root, corner_radius=0, fg_color=PANEL, border_width=2, border_color=BORDER)
        video_outer.grid(row=0, column=0, sticky="nsew")
        self.video_label = ctk.CTkLabel(video_outer, text="", fg_color=INNER_PANEL)
        self.video_label.pack(expand=True, fill="both", padx=4, pady=4)

        # ---------- Buttons ----------
        button_bar = ctk.CTkFrame(self.root, fg_color=PANEL, height=BUTTON_BAR_HEIGHT)
        button_bar.grid(row=1, column=0, sticky="ew")

        self.dialogs = TkDialogs(self.root)
        self.controller = AppController(
            detector, snapshot_writer, self.dialogs, display=self,
            open_camera=open_camera, config=config,
        )
        self.controller.on_quit = self.close_window

        self.start_button = ctk.CTkButton(button_bar, text="Start camera", corner_radius=10, font=font("Segoe UI", 13),
                                          command=self.controller.start)
        self.stop_button = ctk.CTkButton(button_bar, text="Stop camera", corner_radius=10, font=font("Segoe UI", 13),
                                         command=self.controller.close_feed)
        self.snapshot_button = ctk.CTkButton(button_bar, text="Take snapshot", corner_radius=10, font=font("Segoe UI", 13),
                                             command=self.controller.snapshot)
        for button in (self.start_button, self.stop_button, self.snapshot_button):
            button.pack(side="left", expand=True, padx=8, pady=12)

        # Q quits, same as closing the window
        self.root.bind("<q>", lambda _e: self.controller.quit())
        self.root.bind("<Q>", lambda _e: self.controller.quit())
        self.root.protocol("WM_DELETE_WINDOW", self.controller.quit)

        # ---------- Start GUI ----------
        self.update_gui_loop()
        self.root.focus_force()

    # -------------------- Display Surface --------------------
    def _label_size(self):
        width = self.video_label.winfo_width()
        height = self.video_label.winfo_height()
        if width <= 1 or height <= 1:
            return self.config.frame_width, self.config.frame_height
        return width, height

    def show_frame(self, image):
        size = self._label_size()
        self._photo = CTkImage(light_image=image, dark_image=image, size=size)
        self.video_label.configure(image=self._photo)

    def clear_frame(self):
        # CTkLabel keeps the old picture on image=None, so paint a blank one
        size = self._label_size()
        blank = Image.new("RGB", size, INNER_PANEL)
        self.show_frame(blank)

    def update_gui_loop(self):
        try:
            image = self.controller.frames.latest()
            if image is not None and self.controller.camera_active:
                self.show_frame(image)
        except Exception:
            logger.exception("Video render failed")

        self._after_id = self.root.after(self.config.refresh_ms, self.update_gui_loop)

    # -------------------- Lifecycle --------------------
    def close_window(self):
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.root.destroy()
        logger.info("Window disposed.")

    def run(self):
        self.root.mainloop()
