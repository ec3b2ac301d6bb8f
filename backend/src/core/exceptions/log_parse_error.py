class LogParseError(Exception):
    def __init__(self, line_number: int, raw_line: str, reason: str):
        self.line_number = line_number
        self.raw_line = raw_line
        self.reason = reason
        super().__init__(f"Malformed log record at line {line_number}: {reason} ({raw_line!r})")
