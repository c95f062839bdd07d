import logging

from notes_app.logging_setup import LOGGER_NAME, SESSION_ID, setup_logging


def test_setup_logging_writes_session_id(tmp_path):
    base = logging.getLogger(LOGGER_NAME)
    saved = list(base.handlers)
    for h in saved:
        base.removeHandler(h)
    try:
        log_path = tmp_path / "logs" / "notes.log"
        log = setup_logging(log_path)
        # module loggers inside the package end up in the same file
        logging.getLogger("notes_app.repository").warning("child record")
        log.info("adapter record")
        assert setup_logging(log_path).logger is base
        for h in base.handlers:
            h.flush()
        text = log_path.read_text(encoding="utf-8")
        assert "child record" in text
        assert f"adapter record | sid={SESSION_ID}" in text
    finally:
        for h in list(base.handlers):
            base.removeHandler(h)
            h.close()
        for h in saved:
            base.addHandler(h)
