from types import SimpleNamespace

import pytest

from sysfetch.modules.base import FactError


@pytest.fixture
def fake_uname(monkeypatch):
    """Replace os.uname with a canned kernel name and node name."""

    def install(sysname="Linux", nodename="testbox"):
        result = SimpleNamespace(sysname=sysname, nodename=nodename)
        monkeypatch.setattr("os.uname", lambda: result)
        return result

    return install


@pytest.fixture
def fake_commands(monkeypatch):
    """Stub FactModule.run_command on a module instance with a command table."""

    def install(module, outputs):
        calls = []

        def run_command(command):
            calls.append(list(command))
            output = outputs.get(tuple(command))
            if output is None:
                raise FactError(f"no such command: {command[0]}")
            return output

        monkeypatch.setattr(module, "run_command", run_command)
        return calls

    return install
