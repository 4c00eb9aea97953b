# the title page: the title in large bold capitals, then the byline.

import slugline.pml as pml
import slugline.util as util


class Titles:
    def __init__(self):
        # one list of TitleString objects per title page
        self.pages = []

    def addDefaults(self, title, author, cfg):
        self.pages.append([
            TitleString(util.upper(title), cfg.titleY, cfg.titleSize, True),
            TitleString(cfg.strWrittenBy, cfg.creditY),
            TitleString(author or cfg.strAnonymous, cfg.authorY),
        ])

    # add the title pages to doc. call before any body pages are added.
    def generatePages(self, doc):
        for strings in self.pages:
            pg = pml.Page(doc)

            for ts in strings:
                pg.add(ts.makeOp(doc.w))

            doc.add(pg)


# one line of text, centered horizontally on the page
class TitleString:
    def __init__(self, text, y, size=12, isBold=False):
        self.text = text

        # distance from the top of the page, in inches
        self.y = y

        self.size = size
        self.isBold = isBold

    def makeOp(self, pageWidth):
        flags = pml.COURIER | (pml.BOLD if self.isBold else pml.NORMAL)

        return pml.TextOp(util.oneLine(self.text), pageWidth / 2.0, self.y,
                          self.size, flags, util.ALIGN_CENTER)
