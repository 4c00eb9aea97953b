# setup.py
from setuptools import setup

import os.path

# read the version without importing the package
def getVersion():
    path = os.path.join(os.path.dirname(__file__), "slugline", "__init__.py")
    vals = {}

    with open(path) as f:
        exec(f.read(), vals)

    return vals["version"]

setup(
    name = "slugline",
    version = getVersion(),
    description = "Screenplay formatting engine: classification, editing "
        "state, pagination and Fountain/FDX/PDF export",

    long_description = """\
Slugline takes screenplay text written as plain lines and turns it into a
properly formatted script.

Features:

 * Classifier: Every line is recognized as a scene heading, action,
   character cue, dialogue, parenthetical, transition or shot.
 * Editing: A small state machine drives tab-cycling, smart enter and
   auto-completion of character names, scene prefixes and transitions.
 * Statistics: Scenes with numbering, per-character dialogue counts,
   word counts and page estimates.
 * Pagination: Industry-standard US Letter layout with page numbers and
   an optional title page.
 * Export: PDF, Fountain-style plain text and Final Draft XML (.fdx).
""",
    license = "GPL",
    packages = ["slugline"],
    python_requires = ">=3.8",
    install_requires = [
        "lxml",
        "reportlab",
        "structlog",
    ],
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": ["slugline = slugline.main:main"],
    },
)
