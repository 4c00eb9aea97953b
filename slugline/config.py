# page geometry, element styles and the various strings we add to the
# script. all measurements are in inches.

import slugline.elements as elements
import slugline.mypickle as mypickle
import slugline.util as util
from slugline.elements import (
    ACTION,
    CHARACTER,
    DIALOGUE,
    EMPTY,
    GENERAL,
    PAREN,
    SCENE,
    SHOT,
    TRANSITION,
)
from slugline.error import ConfigError

# used so that floating point widths like 3.3 / 0.1 don't round down one
# character too few
_EPSILON = 1e-6

# style overrides for each element kind, on top of the Type defaults.
# (kind, kind that tab switches to, attributes)
_TYPE_DEFAULTS = (
    (SCENE, ACTION, {"isCaps": True, "isBold": True, "prefix": "INT. "}),
    (ACTION, ACTION, {}),
    (CHARACTER, DIALOGUE, {"indent": 2.2, "width": 3.3, "isCaps": True}),
    (DIALOGUE, CHARACTER, {"indent": 1.0, "width": 3.5}),
    (PAREN, DIALOGUE, {"indent": 1.6, "width": 2.5, "isItalic": True,
                       "prefix": "("}),
    (TRANSITION, SCENE, {"indent": 4.5, "width": 1.5,
                         "align": util.ALIGN_RIGHT, "isCaps": True,
                         "prefix": "CUT TO:"}),
    (SHOT, ACTION, {"isCaps": True, "prefix": "ANGLE ON "}),
    (GENERAL, GENERAL, {}),
    (EMPTY, ACTION, {}),
)


# style rules for one element kind
class Type:
    cvars = None

    def __init__(self, lt):
        self.lt = lt
        self.ti = elements.lt2ti(lt)

        if Type.cvars is None:
            v = Type.cvars = mypickle.Vars()

            # left offset from the left margin, and the width of the text
            # column
            v.addFloat("indent", 0.0, "Indent", 0.0, 8.0)
            v.addFloat("width", 6.0, "Width", 0.5, 8.0)

            # one of util.ALIGN_LEFT / ALIGN_RIGHT. right-aligned text ends
            # at indent + width.
            v.addInt("align", util.ALIGN_LEFT, "Align", 0, 2)

            v.addBool("isCaps", False, "AllCaps")
            v.addBool("isBold", False, "Bold")
            v.addBool("isItalic", False, "Italic")

            # text inserted when the user explicitly inserts this element
            v.addStr("prefix", "", "Prefix")

            # kind that tab on a non-empty line of this kind switches to
            v.addElemName("nextType", ACTION, "NextType")

            v.makeDicts()

        Type.cvars.setDefaults(self)

    def getPrefix(self, prefix):
        return "%s%s/" % (prefix, self.ti.name)

    def save(self, prefix):
        return self.cvars.save(self.getPrefix(prefix), self)

    def load(self, vals, prefix):
        self.cvars.load(vals, self.getPrefix(prefix), self)

    # how many characters fit on one line of this element
    def getMaxChars(self, charWidth):
        return max(1, int(self.width / charWidth + _EPSILON))

    # apply the element's capitalization to s.
    def format(self, s):
        if self.isCaps:
            return util.upper(s)

        return s


class Config:
    cvars = None

    def __init__(self):
        if Config.cvars is None:
            self.setupVars()

        Config.cvars.setDefaults(self)

        # key = element kind, value = Type
        self.types = {}

        for lt, nextType, attrs in _TYPE_DEFAULTS:
            tcfg = Type(lt)
            tcfg.nextType = nextType

            for name, val in attrs.items():
                setattr(tcfg, name, val)

            self.types[lt] = tcfg

        self.recalc()

    def setupVars(self):
        v = Config.cvars = mypickle.Vars()

        # paper size
        v.addFloat("paperWidth", 8.5, "Paper/Width", 3.0, 40.0)
        v.addFloat("paperHeight", 11.0, "Paper/Height", 3.0, 40.0)

        # margins
        v.addFloat("marginTop", 1.0, "Margin/Top", 0.0, 10.0)
        v.addFloat("marginBottom", 1.0, "Margin/Bottom", 0.0, 10.0)
        v.addFloat("marginLeft", 1.5, "Margin/Left", 0.0, 10.0)
        v.addFloat("marginRight", 1.0, "Margin/Right", 0.0, 10.0)

        # body text size, in points
        v.addInt("fontSize", 12, "FontSize", 4, 72)

        # height of one line and width of one character
        v.addFloat("lineHeight", 0.167, "LineHeight", 0.05, 2.0)
        v.addFloat("charWidth", 0.1, "CharWidth", 0.02, 1.0)

        # how many line slots there are on one page
        v.addInt("linesPerPage", 56, "LinesPerPage", 5, 200)

        # empty space after a scene heading and after a run of action
        # lines, in units of line / 10
        v.addInt("sceneSpacing", 5, "SceneSpacing", 0, 50)
        v.addInt("actionSpacing", 5, "ActionSpacing", 0, 50)

        # page number position and size
        v.addFloat("pageNumberY", 0.5, "PageNumber/Y", 0.0, 10.0)
        v.addInt("pageNumberSize", 10, "PageNumber/Size", 4, 72)

        # title page
        v.addBool("includeTitlePage", True, "TitlePage/Include")
        v.addFloat("titleY", 4.0, "TitlePage/TitleY", 0.0, 40.0)
        v.addInt("titleSize", 24, "TitlePage/TitleSize", 4, 72)
        v.addFloat("creditY", 5.0, "TitlePage/CreditY", 0.0, 40.0)
        v.addFloat("authorY", 5.5, "TitlePage/AuthorY", 0.0, 40.0)

        # scene headings as PDF outline entries, and whether the outline
        # is open when the PDF is
        v.addBool("pdfIncludeTOC", True, "PDF/Outline")
        v.addBool("pdfShowTOC", False, "PDF/ShowOutline")

        # outline the text area on every body page
        v.addBool("showMargins", False, "ShowMargins")

        # unclassifiable lines become "general" instead of "action"
        v.addBool("useGeneral", False, "UseGeneral")

        # fixed text for the title page and exports
        v.addStr("strWrittenBy", "written by", "String/WrittenBy")
        v.addStr("strAnonymous", "Anonymous", "String/Anonymous")
        v.addStr("strTitle", "Untitled Screenplay", "String/Title")

        v.makeDicts()

    # apply settings saved by save(). unknown keys and unparseable values
    # are skipped, so this never fails.
    def load(self, s):
        vals = mypickle.Vars.makeVals(s)

        self.cvars.load(vals, "", self)

        for tcfg in self.types.values():
            tcfg.load(vals, "Element/")

        self.recalc()

    # all settings as "Key:value" lines.
    def save(self):
        return self.cvars.save("", self) + "".join(
            tcfg.save("Element/") for tcfg in self.types.values())

    # pull every numeric setting back into its range and refresh the
    # derived values.
    def recalc(self):
        for it in self.cvars.numeric.values():
            util.clampObj(self, it.name, it.minVal, it.maxVal)

        for tcfg in self.types.values():
            for it in tcfg.cvars.numeric.values():
                util.clampObj(tcfg, it.name, it.minVal, it.maxVal)

            if tcfg.align != util.ALIGN_RIGHT:
                tcfg.align = util.ALIGN_LEFT

        # margins that leave under an inch of paper are dropped
        if (self.marginTop + self.marginBottom) >= (self.paperHeight - 1.0):
            self.marginTop = self.marginBottom = 0.0

        if (self.marginLeft + self.marginRight) >= (self.paperWidth - 1.0):
            self.marginLeft = self.marginRight = 0.0

        # page capacity in units of line / 10
        self.pageCapacity = self.linesPerPage * 10

    def getType(self, lt):
        return self.types[lt]

    # the kind unclassifiable lines get
    def getDefaultType(self):
        if self.useGeneral:
            return GENERAL

        return ACTION


# load config from the file at 'filename'. raises ConfigError if the file
# can't be read.
def loadFile(filename):
    s = util.loadFile(filename)

    if s is None:
        raise ConfigError("Cannot read config file '%s'" % filename)

    cfg = Config()
    cfg.load(s)

    return cfg
