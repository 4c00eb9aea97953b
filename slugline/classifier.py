# line classification. every line of a script is given exactly one element
# type by running it through an ordered table of rules; the first rule
# whose predicate accepts the line wins.

import re

import slugline.util as util
from slugline.elements import (
    ACTION,
    CHARACTER,
    EMPTY,
    PAREN,
    SCENE,
    SHOT,
    TRANSITION,
)

# transitions recognized when classifying
TRANSITIONS = (
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
)

# standard character extensions
EXTENSIONS = (
    "(V.O.)",
    "(O.S.)",
    "(O.C.)",
    "(CONT'D)",
    "(PRE-LAP)",
    "(FILTER)",
    "(PHONE)",
    "(TEXT)",
    "(SUBTITLE)",
    "(CAPTION)",
)

# shot tokens. matched case-sensitively so that ordinary prose like
# "Insert the key." stays action.
SHOTS = ("ANGLE ON", "CLOSE ON", "POV", "INSERT")

# optional scene number, then INT./EXT./INT/EXT/I/E, with or without the
# trailing period.
sceneRe = re.compile(
    r"^(?:\d+[A-Z]?\.?\s+)?"
    r"(?:INT\.?/EXT|EXT\.?/INT|INT|EXT|I/E|E/I)(?:\.|(?=\s|$))",
    re.IGNORECASE,
)

# leading scene number token
sceneNumberRe = re.compile(r"^(\d+[A-Z]?)\.?\s+")

# transition phrases with their trailing punctuation optional
transitionRe = re.compile(
    r"^(?:CUT TO|DISSOLVE TO|FADE (?:IN|OUT|TO BLACK|TO)|SMASH CUT TO"
    r"|MATCH CUT TO|JUMP CUT TO|TIME CUT|IRIS (?:IN|OUT)|WIPE TO"
    r"|FLASH CUT TO|INTERCUT WITH|INTERCUT|BACK TO|CONTINUOUS"
    r"|MOMENTS LATER|LATER|THE END)[.:]?$"
)

shotRe = re.compile(r"^(?:%s)\b" % "|".join(re.escape(s) for s in SHOTS))

characterRe = re.compile(
    r"^[A-Z][A-Z .']*?(?:\s*(?:%s))?$"
    % "|".join(re.escape(e) for e in EXTENSIONS)
)

parenRe = re.compile(r"^\([^()]*\)$")


def isSceneHeading(s):
    return bool(sceneRe.match(s))


def isTransition(s):
    up = util.upper(s)

    if (up in TRANSITIONS) or transitionRe.match(up):
        return True

    return util.isUpper(s) and s.endswith(":") and (len(s) < 20)


# whether a transition phrase appears anywhere in s. only used to keep
# lines like "JOHN FADE OUT." from passing as character cues.
def mentionsTransition(s):
    up = util.upper(s)

    for t in TRANSITIONS:
        if t in up:
            return True

    return False


def isShot(s):
    return bool(shotRe.match(s))


# whether s has the shape of a character cue, ignoring context.
def looksLikeCharacter(s):
    return (1 < len(s) < 30) and bool(characterRe.match(s)) and \
        not isTransition(s) and not mentionsTransition(s)


def isParen(s):
    return bool(parenRe.match(s))


# strip a leading scene number token from a scene heading. returns
# (number or None, rest).
def splitSceneNumber(s):
    m = sceneNumberRe.match(s)

    if m:
        return (m.group(1), s[m.end():])

    return (None, s)


# one row of the classification table
class Rule:
    def __init__(self, lt, func):
        # element type this rule produces
        self.lt = lt

        # func(line, nextLine) -> bool. both are trimmed; nextLine is the
        # next non-empty line or "".
        self.func = func

    def matches(self, line, nextLine):
        return self.func(line, nextLine)


# the rules, in priority order. EMPTY is first since every other rule
# assumes a non-empty line.
RULES = (
    Rule(EMPTY, lambda s, nxt: s == ""),
    Rule(SCENE, lambda s, nxt: isSceneHeading(s)),
    Rule(TRANSITION, lambda s, nxt: isTransition(s)),
    Rule(SHOT, lambda s, nxt: isShot(s)),
    Rule(CHARACTER,
         lambda s, nxt: looksLikeCharacter(s) and not isSceneHeading(nxt)),
    Rule(PAREN, lambda s, nxt: isParen(s)),
)


class Classifier:
    def __init__(self, defaultLt=ACTION):
        # what unmatched lines become, ACTION or GENERAL
        self.defaultLt = defaultLt

        self.rules = RULES

    # classify one line. 'nextLine' is the next non-empty line after it,
    # or "" if there is none.
    def classify(self, line, nextLine=""):
        s = line.strip()
        nxt = nextLine.strip()

        for r in self.rules:
            if r.matches(s, nxt):
                return r.lt

        return self.defaultLt

    # classify a list of lines, feeding each one the next non-empty line
    # as lookahead. returns a list of line types.
    def classifyLines(self, lines):
        res = [self.defaultLt] * len(lines)
        nxt = ""

        for i in range(len(lines) - 1, -1, -1):
            res[i] = self.classify(lines[i], nxt)

            if lines[i].strip():
                nxt = lines[i]

        return res


_default = Classifier()


def classify(line, nextLine=""):
    return _default.classify(line, nextLine)
