# the document model: a script's raw text, its classified elements, and
# everything derived from them (scenes, character statistics, page
# estimates and the various export formats).

import math
import re

from lxml import etree

import slugline.annotations as annotations
import slugline.classifier as classifier
import slugline.config as config
import slugline.elements as elements
import slugline.log as log
import slugline.pager as pager
import slugline.pdf as pdf
import slugline.pml as pml
import slugline.titles as titles
import slugline.util as util
from slugline.element import Element
from slugline.elements import (
    ACTION,
    CHARACTER,
    DIALOGUE,
    EMPTY,
    GENERAL,
    PAREN,
    SCENE,
    TRANSITION,
)

logger = log.getLogger(__name__)

# separator between the metadata header and the body in plain text exports
FOUNTAIN_SEPARATOR = "\n\n===\n\n"

# quote characters lxml leaves unescaped in text nodes
_quoteRe = re.compile(r"([\"'])")


# one scene heading
class Scene:
    def __init__(self, elementIndex, offset, headingText, sceneNumber,
                 locked=False, omitted=False):
        # index into Screenplay.elements (same as the 0-based line)
        self.elementIndex = elementIndex

        # 1-based line number
        self.lineNumber = elementIndex + 1

        # character offset of the heading line in the text
        self.offset = offset

        # heading with any scene number token removed
        self.headingText = headingText

        # scene number as a string, e.g. "3" or "12A"
        self.sceneNumber = sceneNumber

        self.locked = locked
        self.omitted = omitted

    def __repr__(self):
        return "Scene(%s, %r)" % (self.sceneNumber, self.headingText)


# per-character dialogue statistics
class CharacterStat:
    def __init__(self, name, line):
        self.name = name
        self.dialogueBlockCount = 0
        self.wordCount = 0

        # 1-based lines of the first and last cue
        self.firstAppearanceLine = line
        self.lastAppearanceLine = line

    def __repr__(self):
        return "CharacterStat(%s, %d, %d)" % (
            self.name, self.dialogueBlockCount, self.wordCount)


# whole-script statistics
class Stats:
    def __init__(self):
        self.words = 0
        self.chars = 0
        self.pages = 0

        # estimated screen time in minutes, one per page
        self.readTime = 0

        self.dialoguePercent = 0
        self.sceneCount = 0
        self.characterCount = 0

    def asDict(self):
        return dict(self.__dict__)


# where a character offset falls in the text
class LineInfo:
    def __init__(self, line, text, start, end, column, lt):
        self.line = line
        self.text = text
        self.start = start
        self.end = end
        self.column = column
        self.lt = lt


class Screenplay:
    def __init__(self, text="", cfg=None, knownNames=None):
        self.cfg = cfg or config.Config()

        # names supplied from outside (e.g. a cast list), upper-cased
        self.knownNames = []

        for s in (knownNames or []):
            s = util.squeeze(util.upper(s))

            if s:
                self.knownNames.append(s)

        self.classifier = classifier.Classifier(self.cfg.getDefaultType())
        self.annotations = annotations.Annotations()

        self.text = ""
        self.lines = [""]
        self.elements = [Element(EMPTY, "")]

        self.setText(text)

    # replace the text, re-classify everything and rebase annotations.
    def setText(self, text):
        oldLines = self.lines

        self.text = text
        self.lines = util.fixNL(text).split("\n")

        self.annotations.rebaseText(oldLines, self.lines)

        kinds = self.classifier.classifyLines(self.lines)
        self.markDialogue(kinds)

        self.elements = [Element(lt, s) for lt, s in zip(kinds, self.lines)]

        logger.debug("document rebuilt", lines=len(self.lines))

    # after a character cue, free-form lines are dialogue until the block
    # ends. parentheticals stay as they are; anything else ends the
    # block.
    def markDialogue(self, kinds):
        inBlock = False

        for i, lt in enumerate(kinds):
            if lt == CHARACTER:
                inBlock = True
            elif not inBlock:
                continue
            elif lt in (ACTION, GENERAL):
                kinds[i] = DIALOGUE
            elif lt != PAREN:
                inBlock = False

    def getElement(self, line):
        return self.elements[util.clamp(line, 0, len(self.elements) - 1)]

    def getLineCount(self):
        return len(self.lines)

    # character offset where 'line' (0-based) starts
    def lineStart(self, line):
        line = util.clamp(line, 0, len(self.lines) - 1)

        return sum(len(s) + 1 for s in self.lines[:line])

    # get LineInfo for the given character offset.
    def getLineInfo(self, offset):
        start = 0

        for i, s in enumerate(self.lines):
            end = start + len(s)

            if end >= offset:
                return LineInfo(i, s, start, end, max(0, offset - start),
                                self.elements[i].lt)

            start = end + 1

        i = len(self.lines) - 1
        s = self.lines[i]
        start = self.lineStart(i)

        return LineInfo(i, s, start, start + len(s), len(s),
                        self.elements[i].lt)

    def getScenes(self):
        scenes = []
        offset = 0
        counter = 1

        locked = self.annotations.locked
        omitted = self.annotations.omitted

        for i, el in enumerate(self.elements):
            if el.lt == SCENE:
                num, heading = classifier.splitSceneNumber(el.text.strip())

                if num is None:
                    num = str(counter)
                    counter += 1

                scenes.append(Scene(i, offset, heading, num, i in locked,
                                    i in omitted))

            offset += len(el.text) + 1

        return scenes

    # return list of CharacterStat objects, most dialogue blocks first.
    def getCharacterStats(self):
        stats = {}
        els = self.elements

        for i, el in enumerate(els):
            if el.lt != CHARACTER:
                continue

            name = util.squeeze(util.upper(el.text))
            cs = stats.get(name)

            if not cs:
                cs = stats[name] = CharacterStat(name, i + 1)

            cs.dialogueBlockCount += 1
            cs.lastAppearanceLine = i + 1

            j = i + 1
            while (j < len(els)) and (els[j].lt in (DIALOGUE, PAREN)):
                if els[j].lt == DIALOGUE:
                    cs.wordCount += util.wordCount(els[j].text)

                j += 1

        # sorted() is stable, so ties stay in order of first appearance
        return sorted(stats.values(), key=lambda cs: -cs.dialogueBlockCount)

    # names for auto-completion: everyone with dialogue, then the known
    # names, without duplicates.
    def getCharacterNames(self):
        names = []
        seen = set()

        for s in [cs.name for cs in self.getCharacterStats()] + \
                self.knownNames:
            if s not in seen:
                seen.add(s)
                names.append(s)

        return names

    # return 0-based line of the first cue for character 'name', or -1.
    def findCharacterLine(self, name):
        name = util.squeeze(util.upper(name))

        for i, el in enumerate(self.elements):
            if (el.lt == CHARACTER) and \
                    util.squeeze(util.upper(el.text)).startswith(name):
                return i

        return -1

    # statistics estimated from the raw text, using a fixed number of
    # lines per page.
    def getStats(self):
        st = Stats()
        text = self.text.strip()

        if not text:
            return st

        lines = util.fixNL(text).split("\n")

        st.words = util.wordCount(text)
        st.chars = len(text)
        st.pages = int(math.ceil(len(lines) / float(self.cfg.linesPerPage)))
        st.readTime = st.pages

        kinds = self.classifier.classifyLines(lines)
        nonEmpty = 0
        dialogue = 0

        for lt in kinds:
            if lt == EMPTY:
                continue

            nonEmpty += 1

            if lt not in (SCENE, CHARACTER, TRANSITION):
                dialogue += 1

        st.dialoguePercent = util.pct(dialogue, nonEmpty)
        st.sceneCount = len(self.getScenes())
        st.characterCount = len(self.getCharacterStats())

        return st

    # estimated page of 'line' (0-based), 1-based.
    def getPageNumber(self, line):
        return line // self.cfg.linesPerPage + 1

    # whether 'line' is the last line of an estimated page.
    def isPageBreak(self, line):
        return ((line + 1) % self.cfg.linesPerPage) == 0

    # find the places where (MORE) / (CONT'D) belong. returns a tuple
    # (moreLines, contdLines) of 0-based line lists: dialogue broken by an
    # estimated page break gets (MORE) on the line before the break and
    # (CONT'D) on the line after it, and a character speaking again with
    # nothing but dialogue in between gets (CONT'D) on the cue.
    def getContinuedDialogue(self):
        moreLines = []
        contdLines = []

        inDialogue = False
        current = ""
        start = 0

        for i, el in enumerate(self.elements):
            if el.lt == CHARACTER:
                name = self.getBaseName(el.text)

                if inDialogue and (name == current):
                    contdLines.append(i)

                current = name
                start = i
                inDialogue = True

            elif el.lt in (DIALOGUE, PAREN):
                if self.isPageBreak(i) and inDialogue and (i > start + 1):
                    moreLines.append(i - 1)
                    contdLines.append(i)

            elif el.lt != EMPTY:
                inDialogue = False
                current = ""

        return (moreLines, contdLines)

    # character name without any trailing extension, e.g. "JOHN (V.O.)" ->
    # "JOHN".
    @staticmethod
    def getBaseName(s):
        s = util.upper(s)
        i = s.find("(")

        if i != -1:
            s = s[:i]

        return util.squeeze(s)

    def toggleSceneLock(self, line):
        return self.annotations.locked.toggle(line)

    def toggleSceneOmit(self, line):
        return self.annotations.omitted.toggle(line)

    # lay out the elements onto pages. 'pgr' is a pager.Pager; returns a
    # list mapping each line to its 1-based body page.
    def layout(self, pgr):
        cfg = self.cfg
        els = self.elements
        line2page = []

        for i, el in enumerate(els):
            if el.isEmpty():
                pgr.addSpace(10)
                line2page.append(max(pgr.pageNr, 1))

                continue

            tcfg = cfg.getType(el.lt)
            flags = pml.COURIER

            if tcfg.isBold:
                flags |= pml.BOLD

            if tcfg.isItalic:
                flags |= pml.ITALIC

            text = tcfg.format(util.squeeze(el.text))

            for s in util.wrapWords(text, tcfg.getMaxChars(cfg.charWidth)):
                op = pgr.addLine(s, tcfg, flags, i)

                if op and (el.lt == SCENE) and cfg.pdfIncludeTOC:
                    op.toc = pml.TOCItem(s, op)

            line2page.append(max(pgr.pageNr, 1))

            if el.lt == SCENE:
                pgr.addSpace(cfg.sceneSpacing)
            elif el.lt in (ACTION, GENERAL):
                nextLt = els[i + 1].lt if (i + 1) < len(els) else None

                if nextLt != el.lt:
                    pgr.addSpace(cfg.actionSpacing)

        return line2page

    # body page of each line, 1-based.
    def getLayoutPages(self):
        return self.layout(pager.Pager(self.cfg, False))

    # number of body pages. the title page is not counted.
    def getPageCount(self):
        pgr = pager.Pager(self.cfg, False)
        self.layout(pgr)

        return pgr.pageNr

    # generate PML document from the script. 'params' is an
    # export.ExportParams.
    def generatePML(self, params):
        pgr = pager.Pager(self.cfg)

        if params.includeTitlePage:
            tp = titles.Titles()
            tp.addDefaults(params.title, params.author, self.cfg)
            tp.generatePages(pgr.doc)

        self.layout(pgr)

        logger.debug("paginated", pages=pgr.pageNr,
                     titlePage=params.includeTitlePage)

        return pgr.doc

    # generate PDF and return it as bytes.
    def generatePDF(self, params):
        return pdf.generate(self.generatePML(params))

    # generate the plain text interchange format: a metadata header, a
    # separator and the text exactly as it is.
    def generateFountain(self, params):
        header = (
            "Title: %s\n"
            "Credit: %s\n"
            "Author: %s\n"
            "Draft date: %s\n"
            "Contact: " % (
                util.oneLine(params.title),
                util.oneLine(self.cfg.strWrittenBy),
                util.oneLine(params.author),
                util.oneLine(params.getDraftDate()),
            )
        )

        return header + FOUNTAIN_SEPARATOR + self.text + "\n"

    # generate Final Draft XML and return it as bytes.
    def generateFDX(self, params):
        fd = etree.Element("FinalDraft")
        fd.set("DocumentType", "Script")
        fd.set("Template", "No")
        fd.set("Version", "5")
        content = etree.SubElement(fd, "Content")

        for el in self.elements:
            para = etree.SubElement(content, "Paragraph")
            para.set("Type", elements.lt2label(el.lt))

            paratxt = etree.SubElement(para, "Text")
            setXMLText(paratxt, self.cfg.getType(el.lt).format(
                el.text.strip()))

        tp = etree.SubElement(fd, "TitlePage")
        tpContent = etree.SubElement(tp, "Content")
        para = etree.SubElement(tpContent, "Paragraph")
        para.set("Type", "Title Page")
        paratxt = etree.SubElement(para, "Text")
        setXMLText(paratxt, params.title)

        return etree.tostring(
            fd, xml_declaration=True, encoding="UTF-8", standalone=False,
            pretty_print=True)


# set the text of XML element 'el' to 's'. lxml escapes &, < and > on its
# own; quotes are added as entity references so that all five XML
# metacharacters end up escaped. characters XML can't hold are replaced
# first.
def setXMLText(el, s):
    parts = _quoteRe.split(util.toXMLStr(s))
    el.text = parts[0]

    for i in range(1, len(parts), 2):
        ent = etree.Entity("quot" if parts[i] == '"' else "apos")
        ent.tail = parts[i + 1]
        el.append(ent)
