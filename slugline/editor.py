# the editing state machine. the current element type changes only
# through transition(), a pure function of the current type and an input
# event; EditSession owns the text buffer and the caret, and the UI layer
# talks to it through cmd() / handleKey() only.

import slugline.annotations as annotations
import slugline.autocompletion as autocompletion
import slugline.classifier as classifier
import slugline.config as config
import slugline.log as log
import slugline.screenplay as screenplay
import slugline.util as util
from slugline.elements import (
    ACTION,
    CHARACTER,
    DIALOGUE,
    EMPTY,
    PAREN,
    SCENE,
    TRANSITION,
)

logger = log.getLogger(__name__)

# event types
TAB = "tab"
ENTER = "enter"
OPEN_PAREN = "openParen"
INSERT = "insert"

# what tab cycles through on an empty line
TAB_RING = (ACTION, CHARACTER, SCENE, TRANSITION)

# key name -> command name
KEYMAP = {
    "Tab": "tab",
    "Enter": "enter",
    "Escape": "abort",
    "ArrowUp": "moveUp",
    "ArrowDown": "moveDown",
    "ArrowLeft": "moveLeft",
    "ArrowRight": "moveRight",
    "Backspace": "deleteBackward",
}

_defaultCfg = config.Config()


# an input to the state machine
class Event:
    def __init__(self, type, text="", lt=None):
        # one of TAB, ENTER, OPEN_PAREN, INSERT
        self.type = type

        # text of the current line
        self.text = text

        # element type to insert, for INSERT
        self.lt = lt


# return the element type that follows 'lt' on 'event', or None if no
# rule applies.
def transition(lt, event, cfg=None):
    cfg = cfg or _defaultCfg
    s = event.text.strip()

    if event.type == INSERT:
        return event.lt

    elif event.type == TAB:
        if s:
            return cfg.getType(lt).nextType

        if lt in TAB_RING:
            return TAB_RING[(TAB_RING.index(lt) + 1) % len(TAB_RING)]

        return ACTION

    elif event.type == ENTER:
        if lt == CHARACTER and classifier.looksLikeCharacter(s):
            return DIALOGUE
        elif lt == DIALOGUE and s:
            return CHARACTER
        elif lt == PAREN:
            return DIALOGUE
        elif lt == SCENE:
            return ACTION
        elif lt == TRANSITION:
            return SCENE

    elif event.type == OPEN_PAREN:
        if lt == DIALOGUE:
            return PAREN

    return None


# per-command state, passed to every *Cmd method.
class CommandState:
    def __init__(self):

        # only used for inserting characters, in which case this is the
        # character to insert in a string form.
        self.char = None

        # element type, for insertElement
        self.lt = None

        # whether to recompute auto-completion afterwards
        self.doAutoComp = True


class EditSession:
    def __init__(self, text="", cfg=None, knownNames=None):
        self.cfg = cfg or config.Config()

        self.sp = screenplay.Screenplay(util.fixNL(text), self.cfg,
                                        knownNames)

        # caret, as a character offset into the text
        self.caret = 0

        # current element type
        self.lt = ACTION

        self.autoCompletion = autocompletion.AutoCompletion()
        self.popup = autocompletion.Popup()

        # when on, new lines get stamped with revisionColor
        self.revisionMode = False
        self.revisionColor = annotations.REVISION_COLORS[1]

        self.rederive()

    @property
    def text(self):
        return self.sp.text

    @property
    def annotations(self):
        return self.sp.annotations

    def getLineInfo(self):
        return self.sp.getLineInfo(self.caret)

    # the current line, 0-based
    def getLine(self):
        return self.getLineInfo().line

    # replace the whole text, keeping annotations in sync, and put the
    # caret at 'caret'.
    def setText(self, text, caret=None):
        text = util.fixNL(text)
        self.sp.setText(text)

        if caret is None:
            caret = self.caret

        self.caret = util.clamp(caret, 0, len(text))

    # replace text between offsets start and end with s and put the caret
    # after it.
    def replace(self, start, end, s):
        t = self.text
        self.setText(t[:start] + s + t[end:], start + len(s))

    def insert(self, s):
        self.replace(self.caret, self.caret, s)

    # set current type from the element under the caret. empty lines
    # carry no information, so they keep the previous type.
    def rederive(self):
        lt = self.getLineInfo().lt

        if lt != EMPTY:
            self.lt = lt

    # recompute the auto-completion popup for the current line.
    def fillAutoComp(self):
        info = self.getLineInfo()
        lt, items = self.autoCompletion.getSuggestions(
            info.text, self.sp.getCharacterNames())

        self.popup = autocompletion.Popup(lt, items)

    def moveCaret(self, pos):
        oldLine = self.getLine()
        self.caret = util.clamp(pos, 0, len(self.text))
        self.rederive()

        if self.getLine() != oldLine:
            self.fillAutoComp()

    def cmd(self, name, char=None, lt=None, count=1):
        for i in range(count):
            cs = CommandState()

            if char:
                cs.char = char

            if lt is not None:
                cs.lt = lt

            getattr(self, name + "Cmd")(cs)

            if cs.doAutoComp:
                self.fillAutoComp()

    # call addCharCmd for each character in s.
    def typeText(self, s):
        for char in s:
            self.cmd("addChar", char=char)

    # dispatch a key by its name ("Tab", "ArrowUp", ...) or a single
    # character. unknown keys are ignored.
    def handleKey(self, key):
        name = KEYMAP.get(key)

        if name:
            self.cmd(name)
        elif len(key) == 1:
            self.cmd("addChar", char=key)

    def addCharCmd(self, cs):
        char = cs.char

        if (char is None) or (len(char) != 1):
            cs.doAutoComp = False

            return

        if char == "\n":
            self.enterCmd(cs)

            return

        if char == "(":
            self.openParenCmd(cs)

            return

        self.insert(char)
        self.rederive()

    # '(' typed. in dialogue, insert a matching ')' and switch to
    # parenthetical.
    def openParenCmd(self, cs):
        nxt = transition(self.lt, Event(OPEN_PAREN), self.cfg)

        if nxt is None:
            self.insert("(")
            self.rederive()

            return

        self.insert("()")
        self.caret -= 1
        self.lt = nxt

    def tabCmd(self, cs):
        if self.popup.isActive():
            self.applyAutoComplete(self.popup.commit())
            cs.doAutoComp = False

            return

        info = self.getLineInfo()
        nxt = transition(self.lt, Event(TAB, info.text), self.cfg)

        if info.text.strip():
            self.insert("\n")
            self.rederive()

        self.lt = nxt

    def enterCmd(self, cs):
        if self.popup.isActive():
            self.applyAutoComplete(self.popup.commit())
            cs.doAutoComp = False

            return

        info = self.getLineInfo()
        nxt = transition(self.lt, Event(ENTER, info.text), self.cfg)

        self.insert("\n")

        if self.revisionMode:
            self.annotations.markRevision(info.line + 1, self.revisionColor)

        self.rederive()

        if nxt is not None:
            self.lt = nxt

    # replace the current line with the prefix of element type cs.lt, if
    # it has one, and switch to that type.
    def insertElementCmd(self, cs):
        prefix = self.cfg.getType(cs.lt).prefix

        if prefix:
            info = self.getLineInfo()
            self.replace(info.start, info.end, prefix)

        self.lt = transition(self.lt, Event(INSERT, lt=cs.lt), self.cfg)

    def insertElement(self, lt):
        self.cmd("insertElement", lt=lt)

    # Escape
    def abortCmd(self, cs):
        self.popup.abort()
        cs.doAutoComp = False

    def moveUpCmd(self, cs):
        if self.popup.isActive():
            self.popup.up()
            cs.doAutoComp = False

            return

        self.moveVertical(-1)

    def moveDownCmd(self, cs):
        if self.popup.isActive():
            self.popup.down()
            cs.doAutoComp = False

            return

        self.moveVertical(1)

    def moveVertical(self, delta):
        info = self.getLineInfo()
        line = util.clamp(info.line + delta, 0, self.sp.getLineCount() - 1)
        start = self.sp.lineStart(line)

        self.moveCaret(start + min(info.column, len(self.sp.lines[line])))

    def moveLeftCmd(self, cs):
        self.moveCaret(self.caret - 1)

    def moveRightCmd(self, cs):
        self.moveCaret(self.caret + 1)

    def deleteBackwardCmd(self, cs):
        if self.caret > 0:
            self.replace(self.caret - 1, self.caret, "")
            self.rederive()

    # replace the current line with the auto-completion 'item' and put
    # the caret at its end.
    def applyAutoComplete(self, item):
        if item is None:
            return

        info = self.getLineInfo()
        self.replace(info.start, info.end, item)
        self.rederive()

        logger.debug("auto-completed", line=info.line, item=item)

    def toggleBookmarkCmd(self, cs):
        self.annotations.toggleBookmark(self.getLine())
        cs.doAutoComp = False

    def toggleSceneLockCmd(self, cs):
        self.sp.toggleSceneLock(self.getLine())
        cs.doAutoComp = False

    def toggleSceneOmitCmd(self, cs):
        self.sp.toggleSceneOmit(self.getLine())
        cs.doAutoComp = False

    # add a note on 'line', or the current line if None.
    def addNote(self, text, line=None):
        if line is None:
            line = self.getLine()

        return self.annotations.addNote(line, text)

    def resolveNote(self, id):
        return self.annotations.resolveNote(id)

    def deleteNote(self, id):
        return self.annotations.deleteNote(id)

    def setRevisionMode(self, on):
        self.revisionMode = bool(on)

    # unknown colors are ignored.
    def setRevisionColor(self, color):
        if color in annotations.REVISION_COLORS:
            self.revisionColor = color
