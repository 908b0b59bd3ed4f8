from unittest.mock import AsyncMock, patch

import pytest

from xport.core.exceptions import CommandError
from xport.core.lib.windows import (
    NETSTAT_COMMAND,
    TASKLIST_COMMAND,
    collect_windows,
    parse_netstat,
    parse_netstat_line,
    parse_tasklist,
)
from xport.core.models import PortRecord, Protocol


def test_listening_tcp_line():
    record = parse_netstat_line("TCP    0.0.0.0:8080    0.0.0.0:0    LISTENING    4321")
    assert record == PortRecord(port=8080, pid=4321, protocol=Protocol.TCP)


def test_listening_state_is_case_insensitive():
    record = parse_netstat_line("TCP    0.0.0.0:8080    0.0.0.0:0    listening    4321")
    assert record is not None
    assert record.port == 8080


def test_non_listening_tcp_line_dropped():
    assert parse_netstat_line("TCP    127.0.0.1:8080    127.0.0.1:53122    ESTABLISHED    4321") is None


def test_four_field_udp_line_dropped():
    assert parse_netstat_line("UDP    0.0.0.0:5353    *:*    2468") is None


def test_udp_line_kept_with_five_fields():
    record = parse_netstat_line("UDP    0.0.0.0:5353    *:*    -    2468")
    assert record == PortRecord(port=5353, pid=2468, protocol=Protocol.UDP)


def test_non_numeric_pid_dropped():
    assert parse_netstat_line("UDP    0.0.0.0:500    *:*    -    N/A") is None
    assert parse_netstat_line("TCP    0.0.0.0:135    0.0.0.0:0    LISTENING    N/A") is None


def test_pid_zero_dropped():
    assert parse_netstat_line("TCP    0.0.0.0:49664    0.0.0.0:0    LISTENING    0") is None


def test_ipv6_local_address():
    record = parse_netstat_line("TCP    [::1]:5432    [::]:0    LISTENING    777")
    assert record is not None
    assert record.port == 5432


def test_unparsable_port_dropped():
    assert parse_netstat_line("TCP    0.0.0.0:*    0.0.0.0:0    LISTENING    777") is None
    assert parse_netstat_line("TCP    localhost    0.0.0.0:0    LISTENING    777") is None


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Active Connections",
        "  Proto  Local Address          Foreign Address        State           PID",
        "TCP    0.0.0.0:8080    LISTENING    4321",
    ],
)
def test_short_and_header_lines_dropped(line):
    assert parse_netstat_line(line) is None


def test_parse_netstat_keeps_duplicates(netstat_output):
    records = parse_netstat(netstat_output)
    assert [(r.port, r.pid) for r in records] == [
        (135, 1048),
        (8080, 4321),
        (445, 4),
        (8080, 4321),
        (135, 1048),
        (5353, 2468),
    ]


def test_parse_tasklist(tasklist_output):
    names = parse_tasklist(tasklist_output)
    assert names[4] == "System"
    assert names[4321] == "node.exe"
    assert names[2468] == "mdns\\x20responder.exe"
    assert len(names) == 5


def test_parse_tasklist_skips_malformed_lines():
    output = '"only-one-field"\n"name.exe","not-a-pid","Console"\nplain text\n"ok.exe","12","Console"\n'
    assert parse_tasklist(output) == {12: "ok.exe"}


@pytest.mark.asyncio
async def test_collect_windows(netstat_output, tasklist_output):
    outputs = {NETSTAT_COMMAND: netstat_output, TASKLIST_COMMAND: tasklist_output}
    run = AsyncMock(side_effect=lambda command: outputs[command])
    with patch("xport.core.lib.windows.run_command", run):
        records = await collect_windows()

    assert records == [
        PortRecord(port=135, pid=1048, protocol=Protocol.TCP, process_name="svchost.exe"),
        PortRecord(port=445, pid=4, protocol=Protocol.TCP, process_name="System"),
        PortRecord(port=5353, pid=2468, protocol=Protocol.UDP, process_name="mdns responder.exe"),
        PortRecord(port=8080, pid=4321, protocol=Protocol.TCP, process_name="node.exe"),
    ]


@pytest.mark.asyncio
async def test_collect_windows_netstat_failure_returns_empty():
    run = AsyncMock(side_effect=CommandError(NETSTAT_COMMAND))
    with patch("xport.core.lib.windows.run_command", run):
        assert await collect_windows() == []
    run.assert_awaited_once()


@pytest.mark.asyncio
async def test_collect_windows_tasklist_failure_keeps_records(netstat_output):
    def fake_run(command):
        if command == TASKLIST_COMMAND:
            raise CommandError(command, 1, "access denied")
        return netstat_output

    with patch("xport.core.lib.windows.run_command", AsyncMock(side_effect=fake_run)):
        records = await collect_windows()

    assert [r.port for r in records] == [135, 445, 5353, 8080]
    assert all(r.process_name == "" for r in records)


@pytest.mark.asyncio
async def test_collect_windows_unknown_pid_keeps_empty_name(netstat_output):
    outputs = {NETSTAT_COMMAND: netstat_output, TASKLIST_COMMAND: '"node.exe","4321","Console","1","87,512 K"\n'}
    with patch("xport.core.lib.windows.run_command", AsyncMock(side_effect=lambda command: outputs[command])):
        records = await collect_windows()

    names = {r.pid: r.process_name for r in records}
    assert names[4321] == "node.exe"
    assert names[1048] == ""
