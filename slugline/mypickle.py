# typed configuration variables. a class declares its settings once in a
# Vars collection; Vars then knows each setting's default, range and how
# it is stored as a "Key:value" line.

import copy

import slugline.elements as elements
import slugline.util as util


class Vars:
    def __init__(self):
        # list of ConfVar objects, in declaration order
        self.cvars = []

        # attribute name -> NumericVar, filled in by makeDicts
        self.numeric = {}

    def __iter__(self):
        return iter(self.cvars)

    # index the numeric variables by attribute name, for clamping.
    # call after all variables are added.
    def makeDicts(self):
        self.numeric = dict(
            (v.name, v) for v in self.cvars if isinstance(v, NumericVar))

    # give obj a fresh copy of every default value.
    def setDefaults(self, obj):
        for v in self.cvars:
            setattr(obj, v.name, copy.deepcopy(v.defVal))

    # split a saved string into a dict of key -> raw value. lines without
    # a colon are skipped.
    @staticmethod
    def makeVals(s):
        vals = {}

        for line in util.fixNL(str(s)).split("\n"):
            key, sep, val = line.partition(":")

            if sep:
                vals[key] = val

        return vals

    def save(self, prefix, obj):
        return "".join(v.toStr(getattr(obj, v.name), prefix + v.key)
                       for v in self.cvars if v.key)

    # set obj's attributes from 'vals' (from makeVals). used keys are
    # removed from vals; missing keys leave the attribute alone.
    def load(self, vals, prefix, obj):
        for v in self.cvars:
            key = prefix + v.key

            if v.key and (key in vals):
                setattr(obj, v.name, v.fromStr(vals, vals.pop(key), key))

    def add(self, var):
        self.cvars.append(var)

    def addBool(self, name, defVal, key):
        self.add(BoolVar(name, defVal, key))

    def addFloat(self, name, defVal, key, minVal, maxVal):
        self.add(FloatVar(name, defVal, key, minVal, maxVal))

    def addInt(self, name, defVal, key, minVal, maxVal):
        self.add(IntVar(name, defVal, key, minVal, maxVal))

    def addStr(self, name, defVal, key):
        self.add(StrVar(name, defVal, key))

    def addElemName(self, name, defVal, key):
        self.add(ElementNameVar(name, defVal, key))

    def addList(self, name, defVal, key, itemType):
        self.add(ListVar(name, defVal, key, itemType))


# one setting. 'name' is the attribute on the owning object, 'key' the
# name it's stored under; an empty key means it's never stored.
class ConfVar:
    def __init__(self, name, defVal, key):
        self.name = name
        self.defVal = defVal
        self.key = key

    def line(self, key, s):
        return "%s:%s\n" % (key, s)


class BoolVar(ConfVar):
    def toStr(self, val, key):
        return self.line(key, "True" if val else "False")

    def fromStr(self, vals, s, key):
        return s == "True"


class NumericVar(ConfVar):
    def __init__(self, name, defVal, key, minVal, maxVal):
        ConfVar.__init__(self, name, defVal, key)
        self.minVal = minVal
        self.maxVal = maxVal


# stored with three decimals
class FloatVar(NumericVar):
    def toStr(self, val, key):
        return self.line(key, "%.3f" % val)

    def fromStr(self, vals, s, key):
        return util.str2float(s, self.defVal, self.minVal, self.maxVal)


class IntVar(NumericVar):
    def toStr(self, val, key):
        return self.line(key, "%d" % val)

    def fromStr(self, vals, s, key):
        return util.str2int(s, self.defVal, self.minVal, self.maxVal)


# newlines can't be stored, they become spaces.
class StrVar(ConfVar):
    def toStr(self, val, key):
        return self.line(key, util.oneLine(str(val)))

    def fromStr(self, vals, s, key):
        return s


# an element kind, stored by its name ("sceneHeading"). unknown names
# give the default.
class ElementNameVar(ConfVar):
    def toStr(self, val, key):
        return self.line(key, elements.lt2name(val))

    def fromStr(self, vals, s, key):
        ti = elements.name2ti(s, False)

        return ti.lt if ti else self.defVal


# a list of items of type 'itemType' (a ConfVar instance). stored as
# "Key:count" followed by "Key/1:item", "Key/2:item" and so on.
class ListVar(ConfVar):
    # upper limit for the stored count
    MAX_ITEMS = 1000

    def __init__(self, name, defVal, key, itemType):
        ConfVar.__init__(self, name, defVal, key)
        self.itemType = itemType

    def toStr(self, val, key):
        s = self.line(key, "%d" % len(val))

        for i, item in enumerate(val):
            s += self.itemType.toStr(item, "%s/%d" % (key, i + 1))

        return s

    def fromStr(self, vals, s, key):
        count = util.str2int(s, -1, -1, self.MAX_ITEMS)

        if count == -1:
            return copy.deepcopy(self.defVal)

        res = []

        for i in range(1, count + 1):
            itemKey = "%s/%d" % (key, i)

            if itemKey in vals:
                res.append(self.itemType.fromStr(vals, vals.pop(itemKey),
                                                 itemKey))

        return res
