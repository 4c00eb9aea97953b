# exporting a script to a file format. everything here works on a
# snapshot of the text taken when the export is requested.

import datetime
import threading

import slugline.config as config
import slugline.log as log
import slugline.screenplay as screenplay
import slugline.util as util
from slugline.error import ExportError

logger = log.getLogger(__name__)

DEFAULT_TITLE = "Untitled Screenplay"


# what the user gave us for the title page and headers
class ExportParams:
    def __init__(self, title=None, author="", draftDate=None,
                 includeTitlePage=True):
        title = (title or "").strip()

        self.title = title or DEFAULT_TITLE
        self.author = author or ""

        # string, or None for today's date
        self.draftDate = draftDate

        self.includeTitlePage = includeTitlePage

    def getDraftDate(self):
        if self.draftDate:
            return self.draftDate

        return formatDate(datetime.date.today())

    def getFilename(self, fmt):
        return util.slug(self.title) + getFormat(fmt).extension


# one supported output format
class Format:
    def __init__(self, name, extension, mimeType, method):
        self.name = name
        self.extension = extension
        self.mimeType = mimeType

        # name of the Screenplay method that generates it
        self.method = method


FORMATS = {}

for _f in (
    Format("fountain", ".fountain", "text/plain", "generateFountain"),
    Format("fdx", ".fdx", "application/xml", "generateFDX"),
    Format("pdf", ".pdf", "application/pdf", "generatePDF"),
):
    FORMATS[_f.name] = _f

del _f


def getFormat(name):
    f = FORMATS.get(name)

    if not f:
        raise ExportError("Unknown export format '%s'" % name)

    return f


# the output of one export
class ExportResult:
    def __init__(self, filename, mimeType, data):
        self.filename = filename
        self.mimeType = mimeType

        # bytes
        self.data = data


# e.g. "October 19, 2026"
def formatDate(d):
    return "%s %d, %d" % (d.strftime("%B"), d.day, d.year)


# export 'text' in format 'fmt' ("fountain", "fdx" or "pdf").
def exportScript(text, fmt, params=None, cfg=None, knownNames=None):
    f = getFormat(fmt)
    params = params or ExportParams()

    sp = screenplay.Screenplay(text, cfg or config.Config(), knownNames)
    data = getattr(sp, f.method)(params)

    if isinstance(data, str):
        data = data.encode("UTF-8")

    logger.debug("exported", format=f.name, size=len(data))

    return ExportResult(params.getFilename(fmt), f.mimeType, data)


# return the body of a plain text export, i.e. the script text as it was.
def extractBody(data):
    if isinstance(data, bytes):
        data = data.decode("UTF-8")

    i = data.find(screenplay.FOUNTAIN_SEPARATOR)

    if i == -1:
        return data

    body = data[i + len(screenplay.FOUNTAIN_SEPARATOR):]

    if body.endswith("\n"):
        body = body[:-1]

    return body


# a pending export
class ExportRequest:
    def __init__(self, generation, text, fmt, params):
        self.generation = generation

        # snapshot of the text at request time
        self.text = text

        self.fmt = fmt
        self.params = params


# runs exports so that a newer request supersedes an older one still in
# progress: the older one's result is thrown away instead of delivered.
class ExportManager:
    def __init__(self, cfg=None, knownNames=None):
        self.cfg = cfg or config.Config()
        self.knownNames = knownNames

        self.generation = 0
        self.lock = threading.Lock()

        # ExportResult of the latest finished request, or None
        self.result = None

    def request(self, text, fmt, params=None):
        getFormat(fmt)

        with self.lock:
            self.generation += 1

            return ExportRequest(self.generation, str(text), fmt,
                                 params or ExportParams())

    def isCurrent(self, req):
        with self.lock:
            return req.generation == self.generation

    # run 'req'. returns its ExportResult, or None if a newer request
    # was made in the meantime.
    def run(self, req):
        res = exportScript(req.text, req.fmt, req.params, self.cfg,
                           self.knownNames)

        with self.lock:
            if req.generation != self.generation:
                logger.debug("export superseded", generation=req.generation,
                             current=self.generation)

                return None

            self.result = res

        return res

    def export(self, text, fmt, params=None):
        return self.run(self.request(text, fmt, params))
