# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

from boojo.model.entry import Layout, Status


class GlyphMeaning(NamedTuple):
    status: Status
    layout: Layout


GLYPHS: dict[str, GlyphMeaning] = {
    "x": GlyphMeaning(Status.COMPLETED, Layout.TASK),
    "/": GlyphMeaning(Status.CANCELLED, Layout.TASK),
    "-": GlyphMeaning(Status.OPEN, Layout.NOTE),
    ".": GlyphMeaning(Status.OPEN, Layout.TASK),
    "·": GlyphMeaning(Status.OPEN, Layout.TASK),
}


def glyph_meaning(glyph: str) -> Optional[GlyphMeaning]:
    return GLYPHS.get(glyph)
