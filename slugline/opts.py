import sys

from slugline.error import ConfigError

USAGE = """usage: slugline [options] FILE

options:
  --conf FILE       read configuration from FILE
  --format FORMAT   fountain, fdx or pdf (default pdf)
  --title TITLE     title for the title page and file name
  --author AUTHOR   author for the title page
  --draft-date D    draft date (default today)
  --no-title-page   leave out the title page
  --out FILE        output file name (default from the title)
  --stats           print statistics instead of exporting
  --debug           log debug information to stderr
  --help            show this help"""


# parse command line options into module variables. 'argv' defaults to
# sys.argv. raises ConfigError on invalid usage.
def init(argv=None):
    global conf, filenames, fmt, title, author, draftDate, titlePage, out
    global showStats, debug, showHelp

    if argv is None:
        argv = sys.argv

    # script filenames to load
    filenames = []

    # name of config file to use, or None
    conf = None

    fmt = "pdf"
    title = None
    author = ""
    draftDate = None

    # None = use the config's setting
    titlePage = None

    out = None
    showStats = False
    debug = False
    showHelp = False

    # options that take a value, and the variable it goes to
    valueOpts = {
        "--conf": "conf",
        "--format": "fmt",
        "--title": "title",
        "--author": "author",
        "--draft-date": "draftDate",
        "--out": "out",
    }

    i = 1
    while i < len(argv):
        arg = str(argv[i])

        if arg in valueOpts:
            if (i + 1) >= len(argv):
                raise ConfigError("option %s requires a value" % arg)

            globals()[valueOpts[arg]] = str(argv[i + 1])
            i += 1
        elif arg == "--stats":
            showStats = True
        elif arg == "--debug":
            debug = True
        elif arg == "--no-title-page":
            titlePage = False
        elif arg in ("--help", "-h"):
            showHelp = True
        elif arg.startswith("--"):
            raise ConfigError("unknown option %s" % arg)
        else:
            filenames.append(arg)

        i += 1

    if not showHelp and (len(filenames) != 1):
        raise ConfigError("exactly one script file must be given")
