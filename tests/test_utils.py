import logging

from sheep_metrics.utils import setup_logging


def test_console_only_by_default():
    logger = setup_logging("sheep_metrics_test_console")
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    assert logger.level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging("sheep_metrics_test_repeat", log_dir=tmp_path)
    logger = setup_logging("sheep_metrics_test_repeat", log_dir=tmp_path)
    assert len(logger.handlers) == 2


def test_file_handler_writes_component_log(tmp_path):
    logger = setup_logging("Sheep_Metrics_Test_File", log_dir=tmp_path / "logs")
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "sheep_metrics_test_file.log"
    assert "INFO - hello" in log_file.read_text(encoding="utf-8")
