import slugline.headers as headers
import slugline.pml as pml
import slugline.util as util


# used to iteratively add lines to a PML document, starting new pages as
# they fill up. vertical position is tracked in units of line / 10 from
# the top margin.
class Pager:
    def __init__(self, cfg, doExtra=True):
        self.cfg = cfg

        # if False, only pagination is calculated and no drawing
        # operations are generated
        self.doExtra = doExtra

        self.doc = pml.Document(cfg.paperWidth, cfg.paperHeight)
        self.doc.showTOC = cfg.pdfShowTOC

        self.headers = headers.Headers()
        self.headers.addDefaults()

        # current page, or None before the first line is added
        self.pg = None

        # number of body pages so far
        self.pageNr = 0

        # position on the current page
        self.y = 0

    def newPage(self):
        cfg = self.cfg

        self.pageNr += 1
        self.y = 0
        self.pg = pml.Page(self.doc)
        self.doc.add(self.pg)

        if not self.doExtra:
            return

        # page 1 carries no number
        if self.pageNr != 1:
            self.headers.generatePML(self.pg, str(self.pageNr), cfg)

        if cfg.showMargins:
            self.pg.add(pml.RectOp(
                cfg.marginLeft, cfg.marginTop,
                cfg.paperWidth - cfg.marginLeft - cfg.marginRight,
                cfg.paperHeight - cfg.marginTop - cfg.marginBottom,
                pml.NO_FILL, 0.01))

    # add 'amount' (line / 10) of empty space, unless we're at the top of
    # a page.
    def addSpace(self, amount):
        if self.pg and (self.y > 0):
            self.y += amount

    # add one already wrapped line of text for an element whose config is
    # 'tcfg' (a config.Type). returns the created pml.TextOp, or None if
    # doExtra is False.
    def addLine(self, text, tcfg, flags, line=-1):
        cfg = self.cfg

        if (self.pg is None) or ((self.y + 10) > cfg.pageCapacity):
            self.newPage()

        op = None

        if self.doExtra:
            x = cfg.marginLeft + tcfg.indent

            if tcfg.align == util.ALIGN_RIGHT:
                x += tcfg.width

            op = pml.TextOp(text, x, self.getY(), cfg.fontSize, flags,
                            tcfg.align, line=line)
            self.pg.add(op)

        self.y += 10

        return op

    # current position in inches from the top of the page
    def getY(self):
        return self.cfg.marginTop + (self.y / 10.0) * self.cfg.lineHeight
