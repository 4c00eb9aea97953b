# ut:ignore
import os

import slugline.config as config
import slugline.editor as editor
import slugline.screenplay as screenplay


# return a default config
def cfg():
    return config.Config()


# return new, empty Screenplay
def new():
    return screenplay.Screenplay("", cfg())


def fixtureFilePath(filePathRelativeToFixturesDir: str) -> str:
    location = os.path.dirname(__file__) + "/fixtures/"

    return os.path.join(location, filePathRelativeToFixturesDir)


# read a fixture file into a string
def fixture(filename="sample.txt"):
    with open(fixtureFilePath(filename), "r", encoding="UTF-8") as f:
        return f.read()


# load script from given string
def load(s, knownNames=None):
    return screenplay.Screenplay(s, cfg(), knownNames)


# load script from the given fixture file
def loadFixture(filename="sample.txt"):
    return load(fixture(filename))


# return an editing session on the given text
def session(s="", knownNames=None):
    return editor.EditSession(s, cfg(), knownNames)
