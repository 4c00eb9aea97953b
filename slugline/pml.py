# the page model: a laid-out script as a list of pages, each holding the
# text and rectangle drawing operations that make it up. the paginator
# builds one of these and pdf.py renders it.
#
# coordinates are inches from the top left corner of the page.

from typing import List, Optional

import slugline
import slugline.util as util

# text flags, OR them together
NORMAL = 0
BOLD = 1
ITALIC = 2
COURIER = 0

# how a RectOp is painted
NO_FILL = 0
FILL = 1
STROKE_FILL = 2


class Document:
    def __init__(self, w: float, h: float):
        # paper size, same for every page
        self.w: float = w
        self.h: float = h

        self.pages: List[Page] = []

        # open the PDF with the outline panel visible
        self.showTOC: bool = False

        self.version: str = slugline.version

    def add(self, page: "Page") -> None:
        self.pages.append(page)


class Page:
    def __init__(self, doc: Document):
        self.doc: Document = doc

        # DrawOps, in painting order
        self.ops: List["DrawOp"] = []

    def add(self, op: "DrawOp") -> None:
        self.ops.append(op)


# an outline entry pointing at the TextOp it belongs to
class TOCItem:
    def __init__(self, text: str, op: "TextOp"):
        self.text: str = text
        self.op: TextOp = op


class DrawOp:
    pass


# one run of Courier text. (x, y) is the top left corner of the text once
# 'align' has been applied; 'line' is the source line it came from, or -1
# for headers and title page text.
class TextOp(DrawOp):
    def __init__(self, text: str, x: float, y: float, size: int,
                 flags: int = NORMAL | COURIER,
                 align: int = util.ALIGN_LEFT, line: int = -1):
        self.text: str = text
        self.y: float = y
        self.size: int = size
        self.flags: int = flags
        self.line: int = line
        self.toc: Optional[TOCItem] = None

        if align == util.ALIGN_CENTER:
            x -= util.getTextWidth(text, size) / 2.0
        elif align == util.ALIGN_RIGHT:
            x -= util.getTextWidth(text, size)

        self.x: float = x


# a rectangle with its top left corner at (x, y). lineWidth is in inches,
# -1 keeps the current width.
class RectOp(DrawOp):
    def __init__(self, x: float, y: float, width: float, height: float,
                 fillType: int = FILL, lineWidth: float = -1):
        self.x: float = x
        self.y: float = y
        self.width: float = width
        self.height: float = height
        self.fillType: int = fillType
        self.lw: float = lineWidth
