"""Tests for the process entry point."""
import pytest

from verbquiz import main as main_module

from conftest import BE


class FakeApp:
    instances = []

    def __init__(self, session):
        self.session = session
        self.looped = False
        FakeApp.instances.append(self)

    def mainloop(self):
        self.looped = True


@pytest.fixture
def errors(monkeypatch):
    shown = []
    monkeypatch.setattr(main_module, "show_startup_error", shown.append)
    return shown


@pytest.fixture
def fake_app(monkeypatch):
    FakeApp.instances = []
    monkeypatch.setattr(main_module, "VerbQuizApp", FakeApp)
    return FakeApp


def test_run_ok(write_verbs, errors, fake_app):
    assert main_module.run(write_verbs([BE])) == 0
    assert errors == []
    assert len(fake_app.instances) == 1
    assert fake_app.instances[0].looped
    assert fake_app.instances[0].session.current.verb.infinitive == "at være"


def test_run_missing_file(tmp_path, errors, fake_app):
    assert main_module.run(tmp_path / "missing.json") == 1
    assert len(errors) == 1
    assert fake_app.instances == []


def test_run_malformed_file(write_verbs, errors, fake_app):
    assert main_module.run(write_verbs("not json")) == 1
    assert "Cannot start practice" in errors[0]


def test_run_empty_file(write_verbs, errors, fake_app):
    assert main_module.run(write_verbs([])) == 1
    assert fake_app.instances == []


def test_main_exits_with_run_code(monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)
    monkeypatch.setattr(main_module, "run", lambda: 1)
    with pytest.raises(SystemExit) as exc:
        main_module.main()
    assert exc.value.code == 1
