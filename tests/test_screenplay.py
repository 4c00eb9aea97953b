import u
from slugline.elements import (
    ACTION,
    CHARACTER,
    DIALOGUE,
    EMPTY,
    PAREN,
    SCENE,
    TRANSITION,
)


def testEmpty():
    sp = u.new()

    assert sp.text == ""
    assert sp.getLineCount() == 1
    assert [el.lt for el in sp.elements] == [EMPTY]
    assert sp.getScenes() == []
    assert sp.getCharacterStats() == []


def testElements():
    sp = u.load("INT. KITCHEN - DAY\n\nJohn enters.\n\nJOHN\nHello there.\n"
                "(beat)\nBye.\n\nCUT TO:")

    assert [el.lt for el in sp.elements] == [
        SCENE, EMPTY, ACTION, EMPTY, CHARACTER, DIALOGUE, PAREN, DIALOGUE,
        EMPTY, TRANSITION]

    # text is kept exactly as given
    assert sp.elements[5].text == "Hello there."

    assert sp.getElement(0).text == "INT. KITCHEN - DAY"
    assert sp.getElement(99).lt == TRANSITION
    assert str(sp.getElement(4)) == "character:JOHN"


def testDialogueBlockEnds():
    sp = u.load("JOHN\nHello.\nINT. HOUSE - DAY\nHe sits.")

    assert [el.lt for el in sp.elements] == [
        CHARACTER, DIALOGUE, SCENE, ACTION]

    sp = u.load("JOHN\nHello.\n\nHe sits.")

    assert sp.elements[3].lt == ACTION


def testDialogueMentioningTransition():
    sp = u.load("JOHN\nI said we cut to: the chase.")

    assert [el.lt for el in sp.elements] == [CHARACTER, DIALOGUE]

    stats = sp.getCharacterStats()

    assert [cs.name for cs in stats] == ["JOHN"]
    assert stats[0].wordCount == 7


def testNewlines():
    sp = u.load("INT. HOUSE\r\nHe sits.\rHe stands.")

    assert sp.getLineCount() == 3
    assert sp.elements[0].lt == SCENE

    # the raw text is not touched
    assert sp.text == "INT. HOUSE\r\nHe sits.\rHe stands."


def testGetLineInfo():
    sp = u.load("ab\ncd")

    li = sp.getLineInfo(0)
    assert (li.line, li.column, li.start, li.end) == (0, 0, 0, 2)

    li = sp.getLineInfo(2)
    assert (li.line, li.column) == (0, 2)

    li = sp.getLineInfo(3)
    assert (li.line, li.column, li.text) == (1, 0, "cd")

    li = sp.getLineInfo(5)
    assert (li.line, li.column) == (1, 2)

    # past the end clamps to the end of the last line
    li = sp.getLineInfo(99)
    assert (li.line, li.column) == (1, 2)

    assert sp.lineStart(0) == 0
    assert sp.lineStart(1) == 3


def testScenes():
    text = ("INT. KITCHEN - DAY\nJohn cooks.\n\n5A. EXT. GARDEN - NIGHT\n"
            "Rain.\n\nINT. HALL - DAY")
    sp = u.load(text)
    scenes = sp.getScenes()

    assert len(scenes) == 3

    # explicit numbers don't use up the counter
    assert [s.sceneNumber for s in scenes] == ["1", "5A", "2"]

    assert [s.headingText for s in scenes] == [
        "INT. KITCHEN - DAY", "EXT. GARDEN - NIGHT", "INT. HALL - DAY"]
    assert [s.lineNumber for s in scenes] == [1, 4, 7]
    assert [s.elementIndex for s in scenes] == [0, 3, 6]
    assert [s.offset for s in scenes] == [
        0, text.index("5A."), text.index("INT. HALL")]

    for s in scenes:
        assert not s.locked
        assert not s.omitted


def testSceneLockFollowsEdits():
    text = ("INT. KITCHEN - DAY\nJohn cooks.\n\n5A. EXT. GARDEN - NIGHT\n"
            "Rain.\n\nINT. HALL - DAY")
    sp = u.load(text)

    assert sp.toggleSceneLock(3)
    assert sp.toggleSceneOmit(6)
    assert [s.locked for s in sp.getScenes()] == [False, True, False]

    sp.setText("FADE IN:\n\n" + text)
    scenes = sp.getScenes()

    assert scenes[1].elementIndex == 5
    assert [s.locked for s in scenes] == [False, True, False]
    assert [s.omitted for s in scenes] == [False, False, True]

    assert not sp.toggleSceneLock(5)
    assert not sp.getScenes()[1].locked


def testCharacterStats():
    sp = u.load("JOHN\nHello there.\n\nMARY\nHi John!")
    stats = sp.getCharacterStats()

    assert [cs.name for cs in stats] == ["JOHN", "MARY"]

    assert stats[0].dialogueBlockCount == 1
    assert stats[0].wordCount == 2
    assert stats[0].firstAppearanceLine == 1

    assert stats[1].dialogueBlockCount == 1
    assert stats[1].wordCount == 2
    assert stats[1].firstAppearanceLine == 4

    assert sp.findCharacterLine("mary") == 3
    assert sp.findCharacterLine("BOB") == -1


def testCharacterStatsBlocks():
    sp = u.load("JOHN\nOne two three.\n(quietly)\nFour.\n\nMARY\nHi.\n\n"
                "JOHN\nAgain here.")
    stats = sp.getCharacterStats()

    assert [cs.name for cs in stats] == ["JOHN", "MARY"]

    # parentheticals don't count as words
    assert stats[0].dialogueBlockCount == 2
    assert stats[0].wordCount == 6
    assert stats[0].firstAppearanceLine == 1
    assert stats[0].lastAppearanceLine == 9

    assert stats[1].wordCount == 1


def testCharacterExtensionsAreDistinct():
    sp = u.load("JOHN (V.O.)\nHello.\n\nJOHN\nHi.")

    assert [cs.name for cs in sp.getCharacterStats()] == [
        "JOHN (V.O.)", "JOHN"]
    assert sp.getBaseName("JOHN (V.O.)") == "JOHN"


def testCharacterNames():
    sp = u.load("JOHN\nHello there.\n\nMARY\nHi John!",
                knownNames=["Alice", "john", "  "])

    assert sp.getCharacterNames() == ["JOHN", "MARY", "ALICE"]


def testStats():
    st = u.new().getStats()

    assert st.asDict() == {
        "words": 0, "chars": 0, "pages": 0, "readTime": 0,
        "dialoguePercent": 0, "sceneCount": 0, "characterCount": 0}

    text = "INT. HOUSE - DAY\n\nJOHN\nHello there.\n\nCUT TO:"
    st = u.load(text).getStats()

    assert st.words == 9
    assert st.chars == len(text)
    assert st.pages == 1
    assert st.readTime == 1
    assert st.dialoguePercent == 25
    assert st.sceneCount == 1
    assert st.characterCount == 1

    st = u.load("JOHN\nHello there.\n\nMARY\nHi John!").getStats()
    assert st.dialoguePercent == 50

    # surrounding whitespace is ignored
    st = u.load("\n\n  " + text + "  \n\n").getStats()
    assert st.words == 9
    assert st.chars == len(text)


def testStatsPages():
    assert u.load("\n".join(["Walks."] * 56)).getStats().pages == 1
    assert u.load("\n".join(["Walks."] * 57)).getStats().pages == 2


def testPageNumbers():
    sp = u.new()

    assert sp.getPageNumber(0) == 1
    assert sp.getPageNumber(55) == 1
    assert sp.getPageNumber(56) == 2

    assert not sp.isPageBreak(54)
    assert sp.isPageBreak(55)
    assert sp.isPageBreak(111)


def testContinuedSpeaker():
    sp = u.load("JOHN\nHello.\n\nJOHN\nAgain.")
    assert sp.getContinuedDialogue() == ([], [3])

    sp = u.load("JOHN (V.O.)\nHello.\n\nJOHN\nAgain.")
    assert sp.getContinuedDialogue() == ([], [3])

    sp = u.load("JOHN\nHello.\n\nSomething happens.\n\nJOHN\nAgain.")
    assert sp.getContinuedDialogue() == ([], [])

    sp = u.load("JOHN\nHello.\n\nMARY\nHi.\n\nJOHN\nAgain.")
    assert sp.getContinuedDialogue() == ([], [])


def testDialogueOverPageBreak():
    lines = ["Action."] * 50 + ["JOHN"] + ["Talking on."] * 8
    sp = u.load("\n".join(lines))

    assert sp.elements[50].lt == CHARACTER
    assert sp.getContinuedDialogue() == ([54], [55])


def testFixture():
    sp = u.loadFixture()

    scenes = sp.getScenes()
    assert [s.sceneNumber for s in scenes] == ["1", "2A"]
    assert [s.headingText for s in scenes] == [
        "INT. COFFEE SHOP - MORNING", "EXT. STREET - CONTINUOUS"]
    assert [s.lineNumber for s in scenes] == [3, 21]

    assert sp.elements[0].lt == TRANSITION
    assert sp.elements[12].lt == PAREN
    assert sp.elements[27].lt == TRANSITION

    stats = sp.getCharacterStats()
    assert [cs.name for cs in stats] == ["JAMES", "MARIA", "MARIA (V.O.)"]
    assert [cs.dialogueBlockCount for cs in stats] == [2, 1, 1]
    assert [cs.wordCount for cs in stats] == [7, 2, 4]
    assert stats[0].firstAppearanceLine == 9
    assert stats[0].lastAppearanceLine == 16

    assert sp.getContinuedDialogue() == ([], [])
    assert sp.getStats().pages == 1
