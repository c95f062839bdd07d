from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtCore import QObject


@contextmanager
def blocked_signals(*objs: QObject):
    """
    Temporarily silence Qt signals of the given widgets, so programmatic
    updates (render_*) are not mistaken for user edits.
    """
    previous = [obj.blockSignals(True) for obj in objs]
    try:
        yield
    finally:
        for obj, was_blocked in zip(objs, previous):
            obj.blockSignals(was_blocked)
