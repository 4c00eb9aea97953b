# element kinds and the static information attached to each of them.

from slugline.error import ConfigError

# element kinds. the values are never stored anywhere, saved configs use
# TypeInfo.name.
SCENE = 1
ACTION = 2
CHARACTER = 3
DIALOGUE = 4
PAREN = 5
TRANSITION = 6
SHOT = 7
GENERAL = 8
EMPTY = 9


class TypeInfo:
    def __init__(self, lt, name, label):
        self.lt = lt

        # used in APIs and saved configs, e.g. "sceneHeading"
        self.name = name

        # shown to people and used as the FDX paragraph type, e.g.
        # "Scene Heading"
        self.label = label

    def __repr__(self):
        return "TypeInfo(%s)" % self.name


# every kind, in display order. empty lines export as empty action
# paragraphs.
_TIS = [
    TypeInfo(SCENE, "sceneHeading", "Scene Heading"),
    TypeInfo(ACTION, "action", "Action"),
    TypeInfo(CHARACTER, "character", "Character"),
    TypeInfo(DIALOGUE, "dialogue", "Dialogue"),
    TypeInfo(PAREN, "parenthetical", "Parenthetical"),
    TypeInfo(TRANSITION, "transition", "Transition"),
    TypeInfo(SHOT, "shot", "Shot"),
    TypeInfo(GENERAL, "general", "General"),
    TypeInfo(EMPTY, "empty", "Action"),
]

_byLt = dict((ti.lt, ti) for ti in _TIS)
_byName = dict((ti.name, ti) for ti in _TIS)


def getTIs():
    return _TIS


def lt2ti(lt):
    ti = _byLt.get(lt)

    if ti is None:
        raise ConfigError("unknown element kind %r" % (lt,))

    return ti


# TypeInfo for 'name'. unknown names raise ConfigError, or give None if
# raiseException is False.
def name2ti(name, raiseException=True):
    ti = _byName.get(name)

    if (ti is None) and raiseException:
        raise ConfigError("unknown element name '%s'" % name)

    return ti


def lt2name(lt):
    return lt2ti(lt).name


def lt2label(lt):
    return lt2ti(lt).label
