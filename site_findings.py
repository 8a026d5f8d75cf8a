import queue
from dataclasses import dataclass, field

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str


@dataclass(frozen=True)
class Finding:
    label: str
    passed: bool
    detail: str = None

    @classmethod
    def for_check(cls, check, found):
        if found:
            return cls(label=check.label, passed=True)
        return cls(label=check.label, passed=False, detail=f"{check.label} not found")


@dataclass
class RunResult:
    findings: list = field(default_factory=list)
    diagnostics: list = field(default_factory=list)
    image_count: int = 0
    nav_link_count: int = 0

    @property
    def failures(self):
        return [f for f in self.findings if not f.passed]

    @property
    def errors(self):
        return [d for d in self.diagnostics if d.kind == ERROR]

    @property
    def warnings(self):
        return [d for d in self.diagnostics if d.kind == WARNING]

    @property
    def passed(self):
        # Diagnostics are reported but do not fail the run
        return not self.failures


class DiagnosticLog:
    """Collects console messages and uncaught page errors.

    The handlers are registered on the page before navigation and can be
    called by the Playwright driver at any point afterwards, so entries go
    through a SimpleQueue and are read back once with drain() after the
    browser has been closed.
    """

    def __init__(self):
        self._queue = queue.SimpleQueue()

    def append(self, diagnostic):
        self._queue.put(diagnostic)

    def on_console(self, message):
        if message.type == ERROR:
            self.append(Diagnostic(ERROR, message.text))
        elif message.type == WARNING:
            self.append(Diagnostic(WARNING, message.text))

    def on_page_error(self, error):
        self.append(Diagnostic(ERROR, error.message))

    def drain(self):
        items = []
        while True:
            try:
                items.append(self._queue.get_nowait())
            except queue.Empty:
                return items
