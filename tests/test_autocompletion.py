import slugline.autocompletion as autocompletion
from slugline.elements import CHARACTER, SCENE, TRANSITION


def new():
    return autocompletion.AutoCompletion()


def testCharacter():
    ac = new()

    assert ac.getSuggestions("JO", ["JOHN", "JOE", "MARY"]) == (
        CHARACTER, ["JOHN", "JOE"])

    # exact match, lower case, trailing space, too short
    assert ac.getSuggestions("JOHN", ["JOHN"]) == (None, [])
    assert ac.getSuggestions("Jo", ["JOHN"]) == (None, [])
    assert ac.getSuggestions("JO ", ["JOHN"]) == (None, [])
    assert ac.getSuggestions("J", ["JOHN"]) == (None, [])


def testCharacterBeforeTransition():
    assert new().getSuggestions("CUT", ["CUTTER"]) == (CHARACTER, ["CUTTER"])


def testMaxItems():
    names = ["AA" + chr(ord("A") + i) for i in range(12)]
    lt, items = new().getSuggestions("AA", names)

    assert lt == CHARACTER
    assert items == names[:autocompletion.MAX_ITEMS]


def testScene():
    ac = new()

    assert ac.getSuggestions("INT", []) == (SCENE, ["INT. ", "INT./EXT. "])
    assert ac.getSuggestions("int", []) == (SCENE, ["INT. ", "INT./EXT. "])
    assert ac.getSuggestions("EXT", []) == (SCENE, ["EXT. "])
    assert ac.getSuggestions("I/E", []) == (SCENE, ["I/E. "])

    # already complete
    assert ac.getSuggestions("INT.", []) == (None, [])
    assert ac.getSuggestions("INT. ", []) == (None, [])
    assert ac.getSuggestions("INT. HOUSE", []) == (None, [])
    assert ac.getSuggestions("EXT HOUSE", []) == (None, [])

    assert ac.getSuggestions("I", []) == (None, [])


def testTransition():
    ac = new()

    assert ac.getSuggestions("FADE", []) == (
        TRANSITION, ["FADE IN:", "FADE OUT.", "FADE TO BLACK."])
    assert ac.getSuggestions("dissolve", []) == (
        TRANSITION, ["DISSOLVE TO:"])
    assert ac.getSuggestions("FADE I", []) == (
        TRANSITION, ["FADE IN:", "FADE OUT.", "FADE TO BLACK."])

    assert ac.getSuggestions("CUT TO:", []) == (None, [])
    assert ac.getSuggestions("TO:", []) == (None, [])
    assert ac.getSuggestions("SMASH", []) == (None, [])
    assert ac.getSuggestions("", []) == (None, [])


def testDisabled():
    ac = new()
    ac.load("AutoCompletion/character/Enabled:False\n")

    assert not ac.isEnabled(CHARACTER)
    assert ac.getSuggestions("JO", ["JOHN"]) == (None, [])

    assert ac.isEnabled(SCENE)
    assert ac.getSuggestions("EXT", []) == (SCENE, ["EXT. "])


def testLoadSave():
    ac = new()
    ac.load("AutoCompletion/transition/Items:2\n"
            "AutoCompletion/transition/Items/1:wipe to:\n"
            "AutoCompletion/transition/Items/2:  wipe to:\n")

    assert ac.getType(TRANSITION).items == ["WIPE TO:"]

    ac2 = new()
    ac2.load(ac.save())

    assert ac2.getType(TRANSITION).items == ["WIPE TO:"]

    # trailing spaces of scene prefixes survive
    assert ac2.getType(SCENE).items == ["INT. ", "EXT. ", "INT./EXT. ",
                                        "I/E. "]
    assert ac2.save() == ac.save()


def testPopup():
    p = autocompletion.Popup()

    assert not p.isActive()
    assert p.commit() is None

    p = autocompletion.Popup(CHARACTER, ["A", "B", "C"])

    assert p.isActive()

    p.up()
    assert p.sel == 0

    for i in range(5):
        p.down()

    assert p.sel == 2
    assert p.commit() == "C"
    assert not p.isActive()
    assert p.lt is None

    p = autocompletion.Popup(CHARACTER, ["A"])
    p.abort()

    assert not p.isActive()
