"""
GGST BBScript Unpacker - small tkinter front end over ops.extract_file / ops.inject_files.
"""
from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk

from .errors import BBScriptError
from .ops import extract_file, inject_files

APP_TITLE = "GGST BBScript Unpacker"
UEXP_TYPES = [("Unreal export", "*.uexp"), ("All files", "*.*")]
UASSET_TYPES = [("Unreal asset", "*.uasset"), ("All files", "*.*")]


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title(APP_TITLE)
        self.resizable(False, False)
        self.status = tk.StringVar(value="Ready.")
        self.force = tk.BooleanVar(value=False)

        top = ttk.Frame(self, padding=10)
        top.pack(fill=tk.X)
        ttk.Button(top, text="Extract...", command=self.on_extract).pack(side=tk.LEFT)
        ttk.Button(top, text="Inject...", command=self.on_inject).pack(side=tk.LEFT, padx=6)
        ttk.Checkbutton(top, text="Force (skip extension check)", variable=self.force).pack(side=tk.LEFT)

        ttk.Label(self, textvariable=self.status, anchor="w", padding=(10, 0, 10, 10),
                  wraplength=480).pack(fill=tk.X, side=tk.BOTTOM)

    def on_extract(self):
        uexp = filedialog.askopenfilename(title="Select .uexp to extract from", filetypes=UEXP_TYPES)
        if not uexp:
            return
        out = filedialog.asksaveasfilename(title="Save BBScript as", initialfile=Path(uexp).stem + ".bbscript")
        if not out:
            return
        # the save dialog already asked about overwriting
        try:
            payload = extract_file(Path(uexp), Path(out), overwrite=True)
        except (BBScriptError, OSError) as e:
            self.status.set(f"ERROR: {e}")
            return
        self.status.set(f"[OK] Extracted {len(payload)} bytes -> {out}")

    def on_inject(self):
        script = filedialog.askopenfilename(title="Select BBScript file to inject")
        if not script:
            return
        uexp = filedialog.askopenfilename(title="Select target .uexp", filetypes=UEXP_TYPES)
        if not uexp:
            return
        uasset = filedialog.askopenfilename(
            title="Select matching .uasset",
            initialdir=str(Path(uexp).parent),
            filetypes=UASSET_TYPES,
        )
        if not uasset:
            return
        try:
            report = inject_files(Path(script), Path(uexp), Path(uasset), force=self.force.get())
        except (BBScriptError, OSError) as e:
            self.status.set(f"ERROR: {e}")
            return
        r = report.result
        self.status.set(
            f"[OK] Injected {r.new_payload_size} bytes (size field {r.size_field.describe()}); "
            f"uexp size 0x{report.new_uexp_size:X}, total 0x{report.new_combined_size:X}"
        )


def main():
    App().mainloop()


if __name__ == "__main__":
    main()
