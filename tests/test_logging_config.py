import io
import logging

from meshmorph.logging_config import setup_logging


def test_setup_logging_replaces_handlers():
    logger = setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG)
    assert logger.name == "meshmorph"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_is_silent():
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    assert stream.getvalue() == ""


def test_module_records_reach_stream_and_file(tmp_path):
    stream = io.StringIO()
    log_file = tmp_path / "morph.log"
    logger = setup_logging(logging.INFO, str(log_file), stream=stream)
    logging.getLogger("meshmorph.morph").info("frame done")
    logging.getLogger("meshmorph.warp.resampler").debug("cell trace")
    for handler in logger.handlers:
        handler.flush()

    assert "meshmorph.morph - INFO - frame done" in stream.getvalue()
    text = log_file.read_text(encoding="utf-8")
    assert "frame done" in text
    assert "cell trace" not in text
    setup_logging(logging.WARNING)
