import pytest

import u
import slugline.config as config
import slugline.elements as elements
import slugline.util as util
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
from slugline.error import ConfigError


def testDefaults():
    cfg = u.cfg()

    assert cfg.paperWidth == 8.5
    assert cfg.marginLeft == 1.5
    assert cfg.linesPerPage == 56
    assert cfg.pageCapacity == 560
    assert cfg.getDefaultType() == ACTION

    t = cfg.getType(CHARACTER)
    assert t.indent == 2.2
    assert t.width == 3.3
    assert t.isCaps
    assert t.nextType == DIALOGUE

    t = cfg.getType(TRANSITION)
    assert t.align == util.ALIGN_RIGHT
    assert t.prefix == "CUT TO:"

    assert cfg.getType(SCENE).isBold
    assert cfg.getType(PAREN).isItalic


def testMaxChars():
    cfg = u.cfg()

    assert cfg.getType(ACTION).getMaxChars(cfg.charWidth) == 60
    assert cfg.getType(CHARACTER).getMaxChars(cfg.charWidth) == 33
    assert cfg.getType(DIALOGUE).getMaxChars(cfg.charWidth) == 35
    assert cfg.getType(PAREN).getMaxChars(cfg.charWidth) == 25
    assert cfg.getType(TRANSITION).getMaxChars(cfg.charWidth) == 15


def testSaveLoad():
    cfg = u.cfg()
    cfg.marginLeft = 2.0
    cfg.strWrittenBy = "by"
    cfg.getType(CHARACTER).indent = 3.0
    cfg.getType(DIALOGUE).nextType = PAREN

    s = cfg.save()

    assert "Margin/Left:2.000\n" in s
    assert "Element/character/Indent:3.000\n" in s
    assert "Element/dialogue/NextType:parenthetical\n" in s

    cfg2 = u.cfg()
    cfg2.load(s)

    assert cfg2.marginLeft == 2.0
    assert cfg2.strWrittenBy == "by"
    assert cfg2.getType(CHARACTER).indent == 3.0
    assert cfg2.getType(DIALOGUE).nextType == PAREN
    assert cfg2.save() == s


def testLoadBadValues():
    cfg = u.cfg()
    cfg.load("FontSize:abc\n"
             "Margin/Left:-5\n"
             "LinesPerPage:1000\n"
             "garbage without a colon\n"
             "Unknown/Key:1\n"
             "Element/scene/NextType:general\n"
             "Element/transition/Align:1\n")

    assert cfg.fontSize == 12
    assert cfg.marginLeft == 0.0
    assert cfg.linesPerPage == 200
    assert cfg.pageCapacity == 2000
    assert cfg.getType(SCENE).nextType == GENERAL
    assert cfg.getType(TRANSITION).align == util.ALIGN_LEFT


def testUseGeneral():
    cfg = u.cfg()
    cfg.load("UseGeneral:True\n")

    assert cfg.getDefaultType() == GENERAL


def testLoadFile(tmp_path):
    fn = tmp_path / "test.conf"
    fn.write_text("LinesPerPage:50\n")

    assert config.loadFile(str(fn)).linesPerPage == 50

    with pytest.raises(ConfigError):
        config.loadFile(str(tmp_path / "missing.conf"))


def testElementTypes():
    assert [ti.name for ti in elements.getTIs()] == [
        "sceneHeading", "action", "character", "dialogue", "parenthetical",
        "transition", "shot", "general", "empty"]

    assert elements.name2ti("parenthetical").lt == PAREN
    assert elements.lt2label(SCENE) == "Scene Heading"
    assert elements.lt2label(EMPTY) == "Action"
    assert elements.name2ti("bogus", False) is None

    with pytest.raises(ConfigError):
        elements.name2ti("bogus")
