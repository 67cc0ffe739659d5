from __future__ import annotations

import logging

import pytest

from stateful_api.logging_config import setup_logging


def _bare_root(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    # Dentro del test: pytest agrega sus propios handlers al logger raíz.
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_setup_logging_adds_console_and_file(monkeypatch: pytest.MonkeyPatch, tmp_path):
    bare_root = _bare_root(monkeypatch)
    logfile = tmp_path / "api.log"
    setup_logging("debug", str(logfile))

    assert bare_root.level == logging.DEBUG
    kinds = {type(h) for h in bare_root.handlers}
    assert logging.FileHandler in kinds
    assert logging.StreamHandler in kinds

    logging.getLogger("stateful_api.test").info("hola")
    for h in bare_root.handlers:
        h.flush()
        if isinstance(h, logging.FileHandler):
            h.close()
    assert "[INFO] stateful_api.test: hola" in logfile.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch):
    bare_root = _bare_root(monkeypatch)
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(bare_root.handlers) == 1


def test_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch):
    bare_root = _bare_root(monkeypatch)
    setup_logging("ruidoso")
    assert bare_root.level == logging.INFO
