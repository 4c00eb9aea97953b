# exception classes


class SluglineError(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


class ConfigError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


class ExportError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


class MiscError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)
