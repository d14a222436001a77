# topmark:header:start
#
#   project      : SSHMark
#   file         : test_toml_provider.py
#   file_relpath : tests/status/test_toml_provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML status provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sshmark.status import PeerStatus, Status, StatusError, TomlStatusProvider
from sshmark.status.provider import parse_status
from tests.conftest import SAMPLE_STATUS_TOML

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    f: Path = tmp_path / "status.toml"
    f.write_text(text, encoding="utf-8")
    return f


def test_parses_sample_document(tmp_path: Path) -> None:
    status: Status = TomlStatusProvider(_write(tmp_path, SAMPLE_STATUS_TOML)).status()

    assert status.self_status.name == "laptop"
    assert status.magic_dns_suffix == "example.ts.net"
    assert [p.name for p in status.peers] == ["server", "nas"]
    server: PeerStatus = status.peers[0]
    assert server.dns_name == "server.example.ts.net."
    assert server.addresses == ("100.64.0.2", "fd7a:115c:a1e0::2")
    assert len(status.peers[1].host_keys) == 2


def test_empty_document_yields_empty_status(tmp_path: Path) -> None:
    status = TomlStatusProvider(_write(tmp_path, "")).status()
    assert status == Status()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StatusError, match="not found"):
        TomlStatusProvider(tmp_path / "absent.toml").status()


def test_syntax_error(tmp_path: Path) -> None:
    with pytest.raises(StatusError, match="Error parsing"):
        TomlStatusProvider(_write(tmp_path, "[peers\nname = 1\n")).status()


@pytest.mark.parametrize(
    "data, message",
    [
        ({"self": "laptop"}, "'self' must be a table"),
        ({"tailnet": {"magic_dns_suffix": 3}}, "'magic_dns_suffix' must be a string"),
        ({"peers": {"name": "x"}}, "'peers' must be an array"),
        ({"peers": [{"dns_name": "x."}]}, "'name' is required"),
        ({"peers": [{"name": "x", "addresses": "100.64.0.9"}]}, "'addresses' must be a list"),
        ({"peers": [{"name": "x", "host_keys": [1]}]}, "'host_keys' must be a list"),
    ],
)
def test_wrong_types(data: dict[str, object], message: str) -> None:
    with pytest.raises(StatusError, match=message):
        parse_status(data)


def test_peer_host_names_and_matching() -> None:
    peer = PeerStatus(
        name="server",
        dns_name="Server.example.ts.net.",
        addresses=("100.64.0.2", "100.64.0.2"),
    )
    assert peer.host_names() == ["Server.example.ts.net", "server", "100.64.0.2"]
    assert peer.matches("server.example.ts.net.")
    assert peer.matches("SERVER")
    assert peer.matches("100.64.0.2")
    assert not peer.matches("nas")
