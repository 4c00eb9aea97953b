import math
import re

# alignment values
ALIGN_LEFT = 0
ALIGN_CENTER = 1
ALIGN_RIGHT = 2

# width of one Courier character, in ems. all standard Courier faces share
# this advance.
COURIER_ADVANCE = 0.6

# points per inch
POINTS_PER_INCH = 72.0

# matches a run of whitespace
_wsRe = re.compile(r"\s+")

# C0 control characters other than tab, newline and carriage return
_xml_tbl = dict((i, "|") for i in range(32) if chr(i) not in "\t\n\r")
_xml_tbl[ord("\f")] = None

# lone surrogates and the U+FFFE / U+FFFF noncharacters
_xmlBadRe = re.compile("[\ud800-\udfff\ufffe\uffff]")


def upper(s):
    return s.upper()


# convert all newline variants to "\n".
def fixNL(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")


# replace embedded newlines with spaces, for single-line header fields.
def oneLine(s):
    return " ".join(fixNL(s).split("\n"))


# return s with the characters XML 1.0 can't hold replaced by "|". form
# feeds are deleted.
def toXMLStr(s):
    return _xmlBadRe.sub("|", s.translate(_xml_tbl))


# val limited to [minVal, maxVal]. a limit of None means unbounded.
def clamp(val, minVal=None, maxVal=None):
    if (minVal is not None) and (val < minVal):
        return minVal

    if (maxVal is not None) and (val > maxVal):
        return maxVal

    return val


# clamp the attribute 'name' of obj in place.
def clampObj(obj, name, minVal=None, maxVal=None):
    setattr(obj, name, clamp(getattr(obj, name), minVal, maxVal))


# parse s as a float within [minVal, maxVal]. anything unparseable,
# including NaN, gives defVal instead; the result is clamped either way.
def str2float(s, defVal, minVal=None, maxVal=None):
    try:
        val = float(s)
    except (ValueError, OverflowError):
        val = defVal

    if math.isnan(val):
        val = defVal

    return clamp(val, minVal, maxVal)


# int counterpart of str2float.
def str2int(s, defVal, minVal=None, maxVal=None, radix=10):
    try:
        val = int(s, radix)
    except ValueError:
        val = defVal

    return clamp(val, minVal, maxVal)


# val1 as a whole percentage of val2, rounded half up. 0 when val2 is 0.
def pct(val1, val2):
    if val2 == 0:
        return 0

    return int(math.floor((100.0 * val1) / val2 + 0.5))


# number of whitespace-separated tokens in s.
def wordCount(s):
    return len(s.split())


# collapse runs of whitespace into single spaces.
def squeeze(s):
    return _wsRe.sub(" ", s).strip()


# true if s has at least one cased character and all of them are upper
# case.
def isUpper(s):
    return s.isupper()


# return height of text at given point size, in inches.
def getTextHeight(size):
    return size / POINTS_PER_INCH


# return how wide given text is at given point size, in inches. all
# our output is in Courier, so this is just a character count.
def getTextWidth(text, size):
    return len(text) * COURIER_ADVANCE * size / POINTS_PER_INCH


# wrap text into lines of at most maxChars characters, packing whole words
# greedily. a word longer than maxChars gets a line of its own and is
# never split. empty or whitespace-only text wraps into no lines.
def wrapWords(text, maxChars):
    lines = []
    cur = ""

    for w in text.split():
        if not cur:
            cur = w
        elif (len(cur) + 1 + len(w)) <= maxChars:
            cur += " " + w
        else:
            lines.append(cur)
            cur = w

    if cur:
        lines.append(cur)

    return lines


# replace every character that is not an ASCII letter or digit with "_".
def slug(s):
    return re.sub(r"[^a-zA-Z0-9]", "_", s)


# read the whole file and return its contents as a string, or None when it
# cannot be read.
def loadFile(filename):
    try:
        with open(filename, "r", encoding="UTF-8") as f:
            return f.read()
    except (IOError, UnicodeDecodeError):
        return None


# write data (str or bytes) to filename. returns True on success.
def writeToFile(filename, data):
    if isinstance(data, str):
        data = data.encode("UTF-8")

    try:
        with open(filename, "wb") as f:
            f.write(data)

        return True
    except IOError:
        return False
