"""Render entrypoints that pick a renderer from `RenderOptions`."""

from __future__ import annotations

from dataclasses import replace
from typing import TextIO

from wlpprint.doc.model import Document
from wlpprint.pipeline.results import RenderRunResult
from wlpprint.render.compact import render_compact
from wlpprint.render.display import display_string, display_to
from wlpprint.render.options import RenderMode, RenderOptions
from wlpprint.render.pretty import render_pretty
from wlpprint.render.sdoc import SimpleDocument


def run_render(
    doc: Document,
    options: RenderOptions | None = None,
    *,
    mode: RenderMode | None = None,
) -> RenderRunResult:
    """Render `doc` once and keep every intermediate form."""
    resolved = _resolve_options(options, mode=mode)
    simple = render(doc, resolved)
    return RenderRunResult(
        document=doc,
        options=resolved,
        simple=simple,
        text=display_string(simple),
    )


def render(doc: Document, options: RenderOptions) -> SimpleDocument:
    if options.mode == RenderMode.COMPACT:
        return render_compact(doc)
    return render_pretty(options.ribbon_fraction, options.page_width, doc)


def show(doc: Document, options: RenderOptions | None = None, *, mode: RenderMode | None = None) -> str:
    return run_render(doc, options, mode=mode).text


def put_doc(
    stream: TextIO,
    doc: Document,
    options: RenderOptions | None = None,
    *,
    mode: RenderMode | None = None,
) -> None:
    """Render `doc` and write it to `stream`."""
    display_to(stream, render(doc, _resolve_options(options, mode=mode)))


def _resolve_options(options: RenderOptions | None, *, mode: RenderMode | None) -> RenderOptions:
    if options is None:
        return RenderOptions.for_mode(mode) if mode is not None else RenderOptions()
    if mode is not None and mode != options.mode:
        return replace(options, mode=mode)
    return options
