import logging

import pytest

import prodreport


def test_set_logging_level():
    prodreport.set_logging("debug", "null")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn").level == logging.INFO


def test_set_logging_keeps_module_loggers():
    module_logger = logging.getLogger("prodreport.analytics.reconciliation")
    prodreport.set_logging("INFO")
    assert not module_logger.disabled


def test_file_handler_writes_on_first_record(tmp_path):
    log_file = tmp_path / "logs" / "prodreport.log"
    prodreport.set_logging("INFO", "file", str(log_file))
    assert not log_file.exists()

    logging.getLogger("prodreport").info("Report generated.")

    assert "Report generated." in log_file.read_text()


def test_unknown_handler():
    with pytest.raises(ValueError):
        prodreport.set_logging("INFO", "syslog")
