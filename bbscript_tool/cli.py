#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GGST BBScript unpacker - extract / reinject BBScript in .uexp + .uasset

Extract:
  bbscript-tool extract chr_sol.uexp sol.bbscript
  bbscript-tool extract chr_sol.uexp sol.bbscript -o        (overwrite)

Inject (rewrites both files in place):
  bbscript-tool inject sol_edited.bbscript chr_sol.uexp chr_sol.uasset
  bbscript-tool inject ... -f                               (skip extension check)

GUI:
  bbscript-tool gui
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .errors import BBScriptError
from .ops import extract_file, inject_files


def cmd_extract(args: argparse.Namespace) -> None:
    payload = extract_file(args.uexp, args.output, overwrite=args.overwrite)
    print(f"[OK] Extracted {len(payload)} bytes -> {args.output}")


def cmd_inject(args: argparse.Namespace) -> None:
    if args.force:
        print("[!] --force: skipping extension check")
    report = inject_files(args.file, args.uexp, args.uasset, force=args.force)
    r = report.result
    print(f"Got magic `0x{r.marker:X}`")
    print(f"Size offset {r.size_field.describe()}: 0x{r.old_payload_size:X} -> 0x{r.new_payload_size:X}")
    print(f"new total uasset + uexp size: 0x{report.new_combined_size:X}")
    print(f"new uexp size: 0x{report.new_uexp_size:X}")
    print(f"[OK] Wrote: {args.uexp}")
    print(f"[OK] Wrote: {args.uasset}")


def cmd_gui(args: argparse.Namespace) -> None:
    from .gui import main as gui_main
    gui_main()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bbscript-tool",
        description="Extract and reinject bbscript from the uexp and uasset files in Strive",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_ex = sub.add_parser("extract", help="Extract bbscript from a .uexp file")
    ap_ex.add_argument("uexp", type=Path, help="The .uexp file to extract the BBScript from")
    ap_ex.add_argument("output", type=Path, help="The file to save the bbscript to")
    ap_ex.add_argument("-o", "--overwrite", action="store_true",
                       help="Overwrite the output path if the file already exists")
    ap_ex.set_defaults(func=cmd_extract)

    ap_in = sub.add_parser("inject", help="Inject a modified script back into the uexp and uasset files")
    ap_in.add_argument("file", type=Path, help="The BBScript file to inject")
    ap_in.add_argument("uexp", type=Path, help="The .uexp file to inject the script into")
    ap_in.add_argument("uasset", type=Path,
                       help="The .uasset file belonging to the .uexp (its size fields are updated)")
    ap_in.add_argument("-f", "--force", action="store_true",
                       help="Don't check that the files end in .uexp / .uasset")
    ap_in.set_defaults(func=cmd_inject)

    ap_gui = sub.add_parser("gui", help="Open the file-picker window")
    ap_gui.set_defaults(func=cmd_gui)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (BBScriptError, OSError) as e:
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
