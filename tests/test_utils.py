import json
import logging

import pytest

from utils import almost_equal, load_config, setup_logging


def test_almost_equal():
    assert almost_equal(1.0, 1.0 + 1e-12)
    assert almost_equal(0.25, 0.25, eps=0)
    assert not almost_equal(0.25, 0.25 + 1e-15, eps=0)
    assert not almost_equal(1.0, 1.001)
    assert almost_equal(1.0, 1.001, eps=0.01)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"simulation_parameters": {"seed": 1}}))
    assert load_config(str(path)) == {"simulation_parameters": {"seed": 1}}


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


def test_load_config_malformed(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_load_config_requires_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_setup_logging_installs_handlers(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})
        setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert log_file.exists()
        assert "Particle logging ready at DEBUG" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
