# the running header printed on body pages: the page number, right-aligned
# at the right margin.

import slugline.pml as pml
import slugline.util as util


class Headers:
    def __init__(self):
        # list of HeaderString objects
        self.hdrs = []

    # the standard header, "N." at the right margin
    def addDefaults(self):
        self.hdrs.append(HeaderString("${PAGE}."))

    # draw the headers onto 'page' (a pml.Page) for body page 'pageNr'.
    def generatePML(self, page, pageNr, cfg):
        for h in self.hdrs:
            page.add(h.makeOp(pageNr, cfg))


# one line of header text, ending at the right margin at cfg.pageNumberY.
# "${PAGE}" is replaced with the page number.
class HeaderString:
    def __init__(self, text):
        self.text = text

    def makeOp(self, pageNr, cfg):
        return pml.TextOp(self.text.replace("${PAGE}", str(pageNr)),
                          cfg.paperWidth - cfg.marginRight, cfg.pageNumberY,
                          cfg.pageNumberSize, pml.COURIER, util.ALIGN_RIGHT)
