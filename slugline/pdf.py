# renders a pml.Document to PDF with reportlab. only the standard Courier
# faces are used, so nothing is embedded.

import uuid
from typing import Dict

from reportlab.pdfgen.canvas import Canvas

import slugline.log as log
import slugline.pml as pml
import slugline.util as util

logger = log.getLogger(__name__)

# Courier descends 157/1000 em below the baseline, so the baseline sits
# this far (in ems) under the top of the text.
BASELINE_OFFSET = 0.843

# key = pml text flags, value = reportlab font name
FONTS: Dict[int, str] = {
    pml.COURIER: "Courier",
    pml.COURIER | pml.BOLD: "Courier-Bold",
    pml.COURIER | pml.ITALIC: "Courier-Oblique",
    pml.COURIER | pml.BOLD | pml.ITALIC: "Courier-BoldOblique",
}


# render doc and return the PDF file contents.
def generate(doc: pml.Document) -> bytes:
    return PDFWriter(doc).write()


def fontName(flags: int) -> str:
    name = FONTS.get(flags)

    if name is None:
        raise ValueError("no PDF font for text flags %d" % flags)

    return name


def points(inches: float) -> float:
    return inches * util.POINTS_PER_INCH


class PDFWriter:
    def __init__(self, doc: pml.Document):
        self.doc: pml.Document = doc

    # pml measures y down from the top, PDF up from the bottom
    def flipY(self, y: float) -> float:
        return points(self.doc.h - y)

    def write(self) -> bytes:
        doc = self.doc
        canvas = Canvas(
            "",
            pdfVersion=(1, 5),
            pagesize=(points(doc.w), points(doc.h)),
            initialFontName=fontName(pml.NORMAL),
        )

        canvas.setCreator("Slugline " + doc.version)
        canvas.setProducer("Slugline " + doc.version)

        for i, pg in enumerate(doc.pages):
            if i != 0:
                canvas.showPage()

            for op in pg.ops:
                if isinstance(op, pml.TextOp):
                    self.drawText(canvas, op)
                elif isinstance(op, pml.RectOp):
                    self.drawRect(canvas, op)

        # an empty document still gets one blank page
        canvas.showPage()

        if doc.showTOC:
            canvas.showOutline()

        data = canvas.getpdfdata()

        logger.debug("PDF generated", pages=len(doc.pages), size=len(data))

        return data

    def drawText(self, canvas: Canvas, op: pml.TextOp) -> None:
        x = points(op.x)
        top = self.flipY(op.y)

        canvas.setFont(fontName(op.flags), op.size)
        canvas.drawString(x, top - BASELINE_OFFSET * op.size, op.text)

        if op.toc:
            key = uuid.uuid4().hex
            canvas.bookmarkHorizontal(key, x, top)
            canvas.addOutlineEntry(op.toc.text, key)

    def drawRect(self, canvas: Canvas, op: pml.RectOp) -> None:
        if op.lw != -1:
            canvas.setLineWidth(points(op.lw))

        height = points(op.height)

        canvas.rect(
            points(op.x), self.flipY(op.y) - height,
            points(op.width), height,
            stroke=op.fillType in (pml.NO_FILL, pml.STROKE_FILL),
            fill=op.fillType in (pml.FILL, pml.STROKE_FILL))
