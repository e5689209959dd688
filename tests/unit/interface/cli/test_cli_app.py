from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process with the pipeline replaced, so only the controller's
own decisions are exercised: exit code mapping and the configuration it
hands to the pipeline.
"""

import json

import pytest

from singleinclude.domain.constants import MAX_DEPTH_LIMIT, ExitCode
from singleinclude.interface.cli import app


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the root logger untouched by the controller."""
    calls = []
    monkeypatch.setattr(app, "configure_logging", lambda cfg, force=False: calls.append(cfg))
    return calls


def test_keyboard_interrupt_maps_to_interrupted(monkeypatch, tmp_path, capsys):
    root = tmp_path / "a.h"
    root.write_text("A\n", encoding="utf-8")

    def interrupted(cfg):
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "run_pipeline", interrupted)

    assert app.main([str(root)]) == ExitCode.INTERRUPTED
    assert "Interrupted" in capsys.readouterr().err


def test_pipeline_receives_validated_config(monkeypatch, tmp_path, quiet_logging):
    config = tmp_path / "si.json"
    config.write_text(json.dumps({"verbose": 1, "max_depth": 5000}), encoding="utf-8")
    seen = {}

    def capture(cfg):
        seen.update(cfg)
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "run_pipeline", capture)

    app.main(["--config", str(config), str(tmp_path / "a.h")])

    assert seen["verbose"] is True
    assert seen["print_tree"] is True
    assert seen["max_depth"] == MAX_DEPTH_LIMIT
    # Bootstrap at WARNING, then raised to DEBUG by the configuration file
    assert [c.level for c in quiet_logging] == ["WARNING", "DEBUG"]
