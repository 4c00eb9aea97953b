# line-indexed annotations (notes, bookmarks, revision marks and the scene
# lock/omit flags). each kind lives in its own Layer, a sparse mapping from
# 0-based line index to a value, and all layers are shifted together when
# lines are inserted or removed.

import difflib

import slugline.log as log

logger = log.getLogger(__name__)

# revision colors, in the order revisions traditionally go through them
REVISION_COLORS = (
    "white",
    "blue",
    "pink",
    "yellow",
    "green",
    "goldenrod",
    "buff",
    "salmon",
    "cherry",
)


# one note attached to a line
class Note:
    def __init__(self, id, text):
        self.id = id
        self.text = text
        self.resolved = False

    def __repr__(self):
        return "Note(%d, %r%s)" % (
            self.id, self.text, ", resolved" if self.resolved else "")


# a sparse line -> value mapping
class Layer:
    def __init__(self, name):
        self.name = name

        # key = line index, value = anything
        self.items = {}

    def __len__(self):
        return len(self.items)

    def __contains__(self, line):
        return line in self.items

    def get(self, line, default=None):
        return self.items.get(line, default)

    def set(self, line, val):
        self.items[line] = val

    # flip a boolean flag on line. returns the new state.
    def toggle(self, line):
        if line in self.items:
            del self.items[line]

            return False

        self.items[line] = True

        return True

    # return sorted list of lines that have a value
    def lines(self):
        return sorted(self.items.keys())

    # shift entries for 'delta' lines inserted (delta > 0) or removed
    # (delta < 0) at 'line'. entries on removed lines are dropped.
    def rebase(self, line, delta):
        if delta == 0:
            return

        tmp = {}

        for k, v in self.items.items():
            if k < line:
                tmp[k] = v
            elif delta < 0 and k < (line - delta):
                continue
            else:
                tmp[k + delta] = v

        self.items = tmp


# all annotation layers of one script
class Annotations:
    def __init__(self):
        self.notes = Layer("notes")
        self.bookmarks = Layer("bookmarks")
        self.revisions = Layer("revisions")
        self.locked = Layer("locked")
        self.omitted = Layer("omitted")

        # next note id
        self.noteId = 1

    def getLayers(self):
        return (self.notes, self.bookmarks, self.revisions, self.locked,
                self.omitted)

    def rebase(self, line, delta):
        for layer in self.getLayers():
            layer.rebase(line, delta)

    # rebase all layers to follow the change from 'oldLines' to
    # 'newLines' (lists of strings).
    def rebaseText(self, oldLines, newLines):
        if not any(len(layer) for layer in self.getLayers()):
            return

        # only diff the part between the common head and tail
        lo = 0
        maxLo = min(len(oldLines), len(newLines))

        while lo < maxLo and oldLines[lo] == newLines[lo]:
            lo += 1

        oldHi = len(oldLines)
        newHi = len(newLines)

        while oldHi > lo and newHi > lo and \
                oldLines[oldHi - 1] == newLines[newHi - 1]:
            oldHi -= 1
            newHi -= 1

        sm = difflib.SequenceMatcher(
            None, oldLines[lo:oldHi], newLines[lo:newHi], autojunk=False)

        # go backwards so that earlier indexes stay valid
        for tag, i1, i2, j1, j2 in reversed(sm.get_opcodes()):
            i1 += lo
            i2 += lo

            oldCount = i2 - i1
            newCount = j2 - j1

            if tag == "equal":
                continue
            elif tag == "insert":
                self.rebase(i1, newCount)
            elif tag == "delete":
                self.rebase(i1, -oldCount)
            elif newCount > oldCount:
                self.rebase(i2, newCount - oldCount)
            elif newCount < oldCount:
                self.rebase(i1 + newCount, newCount - oldCount)

        logger.debug("annotations rebased", old=len(oldLines),
                     new=len(newLines))

    def addNote(self, line, text):
        note = Note(self.noteId, text)
        self.noteId += 1

        self.notes.items.setdefault(line, []).append(note)

        return note

    # return the (line, Note) with the given id, or (None, None).
    def findNote(self, id):
        for line, notes in self.notes.items.items():
            for n in notes:
                if n.id == id:
                    return (line, n)

        return (None, None)

    def resolveNote(self, id):
        line, note = self.findNote(id)

        if note:
            note.resolved = True

        return note

    def deleteNote(self, id):
        line, note = self.findNote(id)

        if note:
            notes = self.notes.items[line]
            notes.remove(note)

            if not notes:
                del self.notes.items[line]

        return note

    def getNotes(self, line):
        return self.notes.get(line, [])

    def toggleBookmark(self, line):
        return self.bookmarks.toggle(line)

    def markRevision(self, line, color):
        self.revisions.set(line, color)
