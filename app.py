# app.py
# CustomTkinter GUI for the spell corrector (dark theme, ZIP-aware).
# - Train from a folder OR a ZIP archive (ZIP extracted safely to a temp dir).
# - Background training thread (keeps UI responsive).
# - Live correction with debounce; corrected text & event log panes.

from __future__ import annotations
import os
import shutil
import threading
import zipfile
import tempfile
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from speller.engine import Engine
from speller.models import CorrectionResult


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def safe_extract_zip(zip_path: str, dest_dir: str) -> None:
    """
    Extract zip contents to dest_dir with basic zip-slip protection.
    Only ensures members stay within dest_dir (no absolute paths / .. traversal).
    """
    dest_abs = os.path.abspath(dest_dir)
    with zipfile.ZipFile(zip_path) as zf:
        for info in zf.infolist():
            target = os.path.abspath(os.path.join(dest_abs, info.filename))
            if target != dest_abs and not target.startswith(dest_abs + os.sep):
                raise RuntimeError(f"Unsafe zip entry: {info.filename!r}")
        zf.extractall(dest_abs)


# -------------------- main app --------------------

class SpellerApp(ctk.CTk):
    """Dark-themed GUI that trains on a folder or ZIP and corrects what you type."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Correcteur orthographique")
        self.geometry("900x600")
        self.minsize(760, 520)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._after_id: Optional[str] = None
        self._tmpdir_path: Optional[str] = None  # holds extracted ZIP dir

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # corrected text
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_input()
        self._build_output()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Correcteur orthographique", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder).grid(
            row=0, column=0, padx=(12, 6), pady=10)
        ctk.CTkButton(bar, text="Choose ZIP", command=self._choose_zip).grid(
            row=0, column=1, padx=(0, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No corpus selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_input(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Text:", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=10)
        self.entry_text = ctk.CTkEntry(box, placeholder_text="Tapez une phrase…")
        self.entry_text.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_text.bind("<KeyRelease>", self._on_text_changed)

    def _build_output(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Corrected", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2))
        self.txt_output = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_output.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_output.configure(state="disabled")
        self._set_output("(train on a corpus, then start typing)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2))
        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a folder or ZIP to train on.")

    # --------- source selection ---------

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose corpus folder")
        if path:
            self._start_training(mode="folder", source=path)

    def _choose_zip(self) -> None:
        path = fd.askopenfilename(
            title="Choose corpus ZIP",
            filetypes=[("ZIP archives", "*.zip"), ("All files", "*.*")]
        )
        if path:
            self._start_training(mode="zip", source=path)

    # --------- training pipeline (threaded) ---------

    def _start_training(self, mode: str, source: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Training", "A corpus is already being processed. Please wait.")
            return

        self._cleanup_tmpdir()

        tag = "ZIP" if mode == "zip" else "Folder"
        self.lbl_source.configure(text=f"{tag}: {shorten_path(source)}")
        self._set_status(f"Training from {tag.lower()}…")
        self.progress.start()

        self._loading_thread = threading.Thread(
            target=self._train_worker, args=(mode, source), daemon=True
        )
        self._loading_thread.start()

    def _train_worker(self, mode: str, source: str) -> None:
        # The engine keeps serving its current model until build() publishes the new one.
        try:
            roots: List[str]
            if mode == "zip":
                self.after(0, lambda: self._log(f"Extracting ZIP: {source}"))
                tmpdir = tempfile.mkdtemp(prefix="speller_corpus_")
                try:
                    safe_extract_zip(source, tmpdir)
                except Exception:
                    shutil.rmtree(tmpdir, ignore_errors=True)
                    raise
                self._tmpdir_path = tmpdir
                roots = [tmpdir]
            else:
                roots = [source]

            model = self._engine.build(roots)
            n = len(model)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_train_error(e))
            return

        self.after(0, lambda: self._on_train_ok(n))

    def _on_train_ok(self, n_words: int) -> None:
        self.progress.stop()
        self._set_status(f"Learned {n_words:,} words.")
        self._log(f"Model ready ({n_words} words).")
        self.entry_text.focus_set()
        self._do_correct()

    def _on_train_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while training.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Training error", "Failed to train on the corpus.\nSee event log for details.")

    # --------- correction ---------

    def _on_text_changed(self, _ev=None) -> None:
        if self._after_id is not None:
            self.after_cancel(self._after_id)
        self._after_id = self.after(160, self._do_correct)

    def _do_correct(self) -> None:
        self._after_id = None
        text = self.entry_text.get()
        if not text.strip():
            self._set_output("")
            return
        if not self._engine.ready:
            self._set_output("error: please train on a corpus first.")
            return
        self._set_output(self._fmt(self._engine.correct(text)))

    @staticmethod
    def _fmt(r: CorrectionResult) -> str:
        lines = [r.corrected]
        if r.changes:
            lines.append("")
            lines.extend(f"  {a} -> {b}" for a, b in r.changes)
        return "\n".join(lines)

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_output(self, text: str) -> None:
        self.txt_output.configure(state="normal")
        self.txt_output.delete("0.0", "end")
        if text:
            self.txt_output.insert("end", text)
        self.txt_output.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _cleanup_tmpdir(self) -> None:
        if self._tmpdir_path and os.path.isdir(self._tmpdir_path):
            try:
                shutil.rmtree(self._tmpdir_path, ignore_errors=True)
            finally:
                self._tmpdir_path = None

    def _on_close(self) -> None:
        self._cleanup_tmpdir()
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = SpellerApp()
    app.mainloop()
