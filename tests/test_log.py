import logging

from cliffbasic.log import configure_logging, get_logger


def test_logger_names_are_namespaced():
    assert get_logger("demo").name == "cliffbasic.demo"
    assert get_logger("cliffbasic.algebra").name == "cliffbasic.algebra"
    assert get_logger("cliffbasic").name == "cliffbasic"


def test_root_logger_has_handler():
    get_logger("demo")
    assert logging.getLogger("cliffbasic").handlers


def test_algebra_logs_initialization(caplog):
    from cliffbasic.algebra import CliffordAlgebra

    with caplog.at_level(logging.DEBUG, logger="cliffbasic"):
        CliffordAlgebra(2, 1)
    assert any("Cl(2,1)" in record.getMessage() for record in caplog.records)


def test_configure_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "cliffbasic.log"
    try:
        root = configure_logging("DEBUG", log_file=str(log_file))
        configure_logging("DEBUG", log_file=str(log_file))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        get_logger("demo").debug("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()
    finally:
        configure_logging("WARNING")
    assert len(logging.getLogger("cliffbasic").handlers) == 1
