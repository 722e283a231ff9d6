# commands/test_servers.py

from rich.console import Console
from rich.table import Table

from svcli.commands.servers import servers_action
from svcli.models import Credentials, Server


def test_servers_action_no_servers(monkeypatch):
    printed = []
    monkeypatch.setattr(Console, "print", lambda self, msg, **kw: printed.append(str(msg)))

    servers_action([])
    assert any("No servers resolved" in p for p in printed)


def test_servers_action_with_servers(monkeypatch):
    servers = [
        Server("alpha", "http://alpha", Credentials("admin")),
        Server("beta", "http://beta"),
    ]

    output = []
    monkeypatch.setattr(Console, "print", lambda self, obj, **kw: output.append(obj))

    servers_action(servers)

    tables = [o for o in output if isinstance(o, Table)]
    assert tables, f"Expected a Table, got: {output}"
    table = tables[0]

    assert table.row_count == 2

    headers = [col.header for col in table.columns]
    assert headers == ["ID", "URL", "Username"]

    assert list(table.columns[0].cells) == ["alpha", "beta"]
    assert list(table.columns[2].cells) == ["admin", "-"]


def test_servers_action_uses_given_console():
    console = Console(record=True, width=120)
    servers_action([Server("alpha", "http://alpha:6085/management")], console=console)
    text = console.export_text()
    assert "alpha" in text
    assert "http://alpha:6085/management" in text
