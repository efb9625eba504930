import sys

from budget_tracker import launcher


def test_build_command_runs_home_page():
    assert launcher.build_command() == [sys.executable, '-m', 'streamlit', 'run', 'Home.py']
    assert launcher.build_command(['--server.port', '8600'])[-2:] == ['--server.port', '8600']


def test_main_runs_from_package_directory(monkeypatch):
    captured = {}

    class _Completed:
        returncode = 0

    def fake_run(command):
        captured['command'] = command
        return _Completed()

    monkeypatch.setattr(launcher.os, 'chdir', lambda path: captured.setdefault('cwd', path))
    monkeypatch.setattr(launcher.subprocess, 'run', fake_run)

    assert launcher.main(['--server.headless', 'true']) == 0
    assert captured['cwd'] == launcher.APP_DIR
    assert captured['command'][-2:] == ['--server.headless', 'true']
    assert (launcher.APP_DIR / 'Home.py').exists()
