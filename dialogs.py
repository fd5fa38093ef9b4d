from tkinter import messagebox

import customtkinter as ctk


class TkDialogs:
    """Modal dialogs parented to the main window. UI thread only."""

    def __init__(self, master=None):
        self.master = master

    def ask_label(self, prompt="Enter name: ", title="Take snapshot"):
        dialog = ctk.CTkInputDialog(text=prompt, title=title)
        return dialog.get_input()  # None when cancelled

    def confirm(self, message, title="Confirm"):
        return messagebox.askyesno(title, message, parent=self.master)

    def show_info(self, message, title="Info"):
        messagebox.showinfo(title, message, parent=self.master)

    def show_error(self, message, title="Error"):
        messagebox.showerror(title, message, parent=self.master)
