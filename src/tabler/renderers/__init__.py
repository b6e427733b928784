"""Tabler section renderers.

Section renderers turn (data, active spec) into the row markup of one
table section:
- render_head: the <thead> header row
- render_body: one <tr> per row
- render_foot: empty, an extension point for summary rows

Each call builds its own StringBuilder; renderers hold no state.

"""

from tabler.renderers.sections import render_body, render_foot, render_head

__all__ = ["render_body", "render_foot", "render_head"]
