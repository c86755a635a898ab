import logging

from contract_cost.logging_config import CALCULATION_LOGGER, reset_logging, setup_logging


def test_setup_logging_creates_log_files(tmp_path, clean_logging):
    setup_logging(tmp_path, debug=False)
    logging.getLogger(CALCULATION_LOGGER).info("calculation started")
    logging.getLogger("contract_cost.test").warning("something odd")

    assert "calculation started" in (tmp_path / "calculation_events.log").read_text()
    assert "something odd" in (tmp_path / "warnings_errors.log").read_text()
    assert "calculation started" in (tmp_path / "combined.log").read_text()
    assert not (tmp_path / "debug_detail.log").exists()


def test_setup_logging_is_idempotent_until_reset(tmp_path, clean_logging):
    first, second = tmp_path / "a", tmp_path / "b"
    setup_logging(first)
    setup_logging(second)
    assert not second.exists()

    reset_logging()
    setup_logging(second)
    assert (second / "combined.log").exists()
