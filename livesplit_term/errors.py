class LivesplitTermError(Exception):
    pass


class RunOpenError(LivesplitTermError):
    def __init__(self, path):
        super().__init__(f"Unable to open {path}")
        self.path = path


class RunParseError(LivesplitTermError):
    def __init__(self, path, reason=""):
        super().__init__(f"Unable to parse {path}")
        self.path = path
        self.reason = reason


class TerminalError(LivesplitTermError):
    pass
