"""Console Entry Point: startup failures exit with status 1."""

import logging

import pytest

import users_api.main as main_module


@pytest.fixture(autouse=True)
def _drop_log_handler():
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "users_api":
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


@pytest.mark.parametrize("uvicorn_status", [1, 3])
def test_run_exits_1_when_uvicorn_fails(monkeypatch, uvicorn_status):
    def _failing_run(*args, **kwargs):
        raise SystemExit(uvicorn_status)

    monkeypatch.setattr(main_module.uvicorn, "run", _failing_run)
    with pytest.raises(SystemExit) as exc_info:
        main_module.run()
    assert exc_info.value.code == 1


def test_run_propagates_clean_exit(monkeypatch):
    def _clean_exit(*args, **kwargs):
        raise SystemExit(0)

    monkeypatch.setattr(main_module.uvicorn, "run", _clean_exit)
    with pytest.raises(SystemExit) as exc_info:
        main_module.run()
    assert exc_info.value.code == 0


def test_run_returns_after_normal_shutdown(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda *a, **kw: calls.append(kw),
    )
    main_module.run()
    assert calls[0]["port"] == main_module.get_settings().port
