import sys

import slugline.config as config
import slugline.export as export
import slugline.log as log
import slugline.opts as opts
import slugline.screenplay as screenplay
import slugline.util as util
from slugline.error import MiscError, SluglineError

logger = log.getLogger(__name__)


# format stats for printing
def formatStats(sp):
    st = sp.getStats()

    s = "Words: %d\n" % st.words
    s += "Characters: %d\n" % st.chars
    s += "Pages (estimated): %d\n" % st.pages
    s += "Pages (laid out): %d\n" % sp.getPageCount()
    s += "Read time: %d min\n" % st.readTime
    s += "Dialogue: %d%%\n" % st.dialoguePercent
    s += "Scenes: %d\n" % st.sceneCount
    s += "Speaking characters: %d\n" % st.characterCount

    for cs in sp.getCharacterStats():
        s += "  %s: %d blocks, %d words, lines %d-%d\n" % (
            cs.name, cs.dialogueBlockCount, cs.wordCount,
            cs.firstAppearanceLine, cs.lastAppearanceLine)

    return s


def run(argv):
    opts.init(argv)

    if opts.showHelp:
        print(opts.USAGE)

        return

    log.configure(opts.debug)

    if opts.conf:
        cfg = config.loadFile(opts.conf)
    else:
        cfg = config.Config()

    filename = opts.filenames[0]
    text = util.loadFile(filename)

    if text is None:
        raise MiscError("Cannot read script file '%s'" % filename)

    logger.debug("script loaded", filename=filename, size=len(text))

    if opts.showStats:
        sys.stdout.write(formatStats(screenplay.Screenplay(text, cfg)))

        return

    titlePage = opts.titlePage

    if titlePage is None:
        titlePage = cfg.includeTitlePage

    params = export.ExportParams(opts.title or cfg.strTitle, opts.author,
                                 opts.draftDate, titlePage)

    res = export.exportScript(text, opts.fmt, params, cfg)
    outName = opts.out or res.filename

    if not util.writeToFile(outName, res.data):
        raise MiscError("Cannot write file '%s'" % outName)

    logger.info("exported", filename=outName, mimeType=res.mimeType)


def main(argv=None):
    try:
        run(argv if argv is not None else sys.argv)
    except SluglineError as e:
        sys.stderr.write("slugline: %s\n" % e)

        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
