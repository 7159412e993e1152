"""Background render worker."""

from PySide6.QtCore import QObject, QRunnable, Signal

from models.render_snapshot import RenderSnapshot
from engines.compositor import render


class RenderSignals(QObject):
    """Signals emitted by :class:`RenderWorker`."""

    finished = Signal(object)
    error = Signal(str, int)


class RenderWorker(QRunnable):
    """Renders one snapshot off the UI thread; results carry the snapshot sequence."""

    def __init__(self, snapshot: RenderSnapshot):
        super().__init__()
        self.snapshot = snapshot
        self.signals = RenderSignals()

    def run(self):
        try:
            result = render(self.snapshot)
        except Exception as e:
            self.signals.error.emit(str(e), self.snapshot.sequence)
            return
        self.signals.finished.emit(result)
