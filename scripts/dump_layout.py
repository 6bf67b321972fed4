#!/usr/bin/env python
"""Print the simple-document tokens and text of a sample layout."""

from __future__ import annotations

import argparse
from pathlib import Path

from wlpprint.combinators import fill_sep, string
from wlpprint.doc import text
from wlpprint.render import SChar, SimpleDocument, SLine, SText, display_string, render_compact, render_pretty


def format_token(idx: int, token: SChar | SText | SLine) -> str:
    if isinstance(token, SChar):
        return f"[{idx}] SChar char={token.char!r}"
    if isinstance(token, SText):
        return f"[{idx}] SText length={token.length} text={token.text!r}"
    return f"[{idx}] SLine indent={token.indent}"


def format_sdoc(sdoc: SimpleDocument) -> list[str]:
    return [format_token(idx, token) for idx, token in enumerate(sdoc)]


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the layout of a text file reflowed with fill_sep.")
    parser.add_argument("input", type=Path, nargs="?", help="Text file to reflow (defaults to a built-in sample).")
    parser.add_argument("--width", type=int, default=40, help="Page width (default: 40)")
    parser.add_argument("--ribbon", type=float, default=1.0, help="Ribbon fraction (default: 1.0)")
    parser.add_argument("--compact", action="store_true", help="Use the compact renderer")
    parser.add_argument("--out", type=Path, default=None, help="Write the dump to this file instead of stdout")
    args = parser.parse_args()

    if args.input is not None:
        words = args.input.read_text(encoding="utf-8").split()
        doc = fill_sep([text(word) for word in words])
    else:
        doc = fill_sep([string(word) for word in "the quick brown fox jumps over the lazy dog".split()])

    sdoc = render_compact(doc) if args.compact else render_pretty(args.ribbon, args.width, doc)
    lines = format_sdoc(sdoc)
    lines.append("")
    lines.append("-" * max(args.width, 0) + "|")
    lines.append(display_string(sdoc))

    if args.out is None:
        print("\n".join(lines))
        return 0

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    print(f"Wrote {len(sdoc)} tokens -> {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
