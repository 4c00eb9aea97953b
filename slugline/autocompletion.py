# suggestions offered while typing: character names, scene heading
# prefixes and transitions.

import slugline.elements as elements
import slugline.mypickle as mypickle
import slugline.util as util
from slugline.elements import CHARACTER, SCENE, TRANSITION

# at most this many suggestions are offered
MAX_ITEMS = 8

# every prefix that starts a scene heading
SCENE_PREFIXES = (
    "INT. ",
    "EXT. ",
    "INT./EXT. ",
    "EXT./INT. ",
    "I/E. ",
    "E/I. ",
    "INT ",
    "EXT ",
)

# words that make a line a candidate for transition completion
TRANSITION_WORDS = ("CUT", "FADE", "DISSOLVE")


# completion settings for one element kind: whether it is on, and its
# item list.
class CompletionType:
    cvars = None

    def __init__(self, lt):
        self.ti = elements.lt2ti(lt)

        if CompletionType.cvars is None:
            v = CompletionType.cvars = mypickle.Vars()
            v.addBool("enabled", True, "Enabled")
            v.addList("items", [], "Items", mypickle.StrVar("", "", ""))
            v.makeDicts()

        CompletionType.cvars.setDefaults(self)

    # e.g. "AutoCompletion/character/"
    def getPrefix(self, prefix):
        return "%s%s/" % (prefix, self.ti.name)

    def save(self, prefix):
        return self.cvars.save(self.getPrefix(prefix), self)

    def load(self, vals, prefix):
        self.cvars.load(vals, self.getPrefix(prefix), self)


# the completion lists and matching rules for one editing session.
class AutoCompletion:
    def __init__(self):
        # key = element kind, value = CompletionType
        self.types = {}

        t = CompletionType(CHARACTER)
        self.types[t.ti.lt] = t

        # the prefixes offered when completing a scene heading
        t = CompletionType(SCENE)
        t.items = ["INT. ", "EXT. ", "INT./EXT. ", "I/E. "]
        self.types[t.ti.lt] = t

        t = CompletionType(TRANSITION)
        t.items = [
            "CUT TO:",
            "DISSOLVE TO:",
            "FADE IN:",
            "FADE OUT.",
            "FADE TO BLACK.",
            "SMASH CUT TO:",
            "MATCH CUT TO:",
            "JUMP CUT TO:",
            "TIME CUT:",
            "IRIS IN:",
            "IRIS OUT:",
            "WIPE TO:",
            "FLASH CUT TO:",
            "INTERCUT WITH:",
            "BACK TO:",
            "THE END.",
        ]
        self.types[t.ti.lt] = t

        self.refresh()

    # load settings saved by save(). bad or missing values are ignored.
    def load(self, s):
        vals = mypickle.Vars.makeVals(s)

        for t in self.types.values():
            t.load(vals, "AutoCompletion/")

        self.refresh()

    # return the settings as "Key:value" lines.
    def save(self):
        s = ""

        for t in self.types.values():
            s += t.save("AutoCompletion/")

        return s

    # fix up invalid values and uppercase everything. leading whitespace
    # goes, trailing whitespace is kept since scene prefixes end in a
    # space.
    def refresh(self):
        for t in self.types.values():
            tmp = []

            for v in t.items:
                v = util.upper(util.oneLine(v)).lstrip()

                if v.strip() and (v not in tmp):
                    tmp.append(v)

            t.items = tmp

    # CompletionType for kind lt, or None.
    def getType(self, lt):
        return self.types.get(lt)

    def isEnabled(self, lt):
        t = self.getType(lt)

        return bool(t and t.enabled)

    # find suggestions for the line 'line'. 'names' is the list of known
    # character names. returns a tuple (lt, items) where lt is the type of
    # completion, or (None, []) if there's nothing to offer.
    def getSuggestions(self, line, names):
        for lt, func in (
            (CHARACTER, self.getCharacterMatches),
            (SCENE, self.getSceneMatches),
            (TRANSITION, self.getTransitionMatches),
        ):
            if not self.isEnabled(lt):
                continue

            items = func(line, names)

            if items:
                return (lt, items[:MAX_ITEMS])

        return (None, [])

    def getCharacterMatches(self, line, names):
        s = line.strip()

        if (len(s) < 2) or line[-1].isspace() or (s != util.upper(s)):
            return []

        res = []

        for n in names + self.types[CHARACTER].items:
            n = util.upper(n)

            if n.startswith(s) and (n != s) and (n not in res):
                res.append(n)

        return res

    def getSceneMatches(self, line, names):
        up = util.upper(line.strip())

        if not up.startswith(("INT", "EXT", "I/E")):
            return []

        prefixes = self.types[SCENE].items

        for p in prefixes:
            if up == p or up == p.strip():
                return []

        for p in SCENE_PREFIXES:
            if util.upper(line.lstrip()).startswith(p):
                return []

        return [p for p in prefixes
                if p.startswith(up) or up.startswith(p.strip())]

    def getTransitionMatches(self, line, names):
        up = util.upper(line.strip())

        if not up:
            return []

        if not up.endswith(":") and \
                not any(w in up for w in TRANSITION_WORDS):
            return []

        first = up.split()[0]

        return [t for t in self.types[TRANSITION].items
                if (t != up) and
                (t.startswith(up) or t.split()[0] == first)]


# the suggestion popup's state
class Popup:
    def __init__(self, lt=None, items=None):
        # completion type, or None when hidden
        self.lt = lt

        self.items = items or []

        # index of the highlighted item
        self.sel = 0

    def isActive(self):
        return len(self.items) > 0

    def up(self):
        self.sel = util.clamp(self.sel - 1, 0, len(self.items) - 1)

    def down(self):
        self.sel = util.clamp(self.sel + 1, 0, len(self.items) - 1)

    # return the highlighted item and hide the popup.
    def commit(self):
        item = self.items[self.sel] if self.items else None
        self.abort()

        return item

    def abort(self):
        self.lt = None
        self.items = []
        self.sel = 0
