"""Output sinks for command results."""

from cli.constants import RED, RESET


class ConsoleSink:
    """Writes result lines to stdout, error lines in red."""

    def __init__(self):
        self.error_count = 0

    def println(self, text: str) -> None:
        print(text)

    def println_err(self, text: str) -> None:
        self.error_count += 1
        print(f"{RED}{text}{RESET}")


class BufferedSink:
    """Collects lines in memory, for callers that post-process the output."""

    def __init__(self):
        self.lines: list[str] = []
        self.errors: list[str] = []

    def println(self, text: str) -> None:
        self.lines.append(text)

    def println_err(self, text: str) -> None:
        self.errors.append(text)
