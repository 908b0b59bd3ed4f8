import pytest

from xport.core.models import PortRecord, Protocol

NETSTAT_OUTPUT = """
Active Connections

  Proto  Local Address          Foreign Address        State           PID
  TCP    0.0.0.0:135            0.0.0.0:0              LISTENING       1048
  TCP    0.0.0.0:8080           0.0.0.0:0              LISTENING       4321
  TCP    127.0.0.1:8080         127.0.0.1:53122        ESTABLISHED     4321
  TCP    0.0.0.0:445            0.0.0.0:0              LISTENING       4
  TCP    [::]:8080              [::]:0                 LISTENING       4321
  TCP    [::]:135               [::]:0                 LISTENING       1048
  TCP    0.0.0.0:49664          0.0.0.0:0              LISTENING       0
  TCP    192.168.1.20:52000     52.1.2.3:443           TIME_WAIT       0
  UDP    0.0.0.0:5353           *:*                    -               2468
  UDP    [::]:5353              *:*                                    2468
  UDP    0.0.0.0:500            *:*                                    N/A
"""

TASKLIST_OUTPUT = """\
"System Idle Process","0","Services","0","8 K"
"System","4","Services","0","144 K"
"svchost.exe","1048","Services","0","12,204 K"
"node.exe","4321","Console","1","87,512 K"
"mdns\\x20responder.exe","2468","Console","1","3,100 K"
INFO: No tasks are running which match the specified criteria.
"""

LSOF_OUTPUT = """\
COMMAND     PID   USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME
loginwind   104  guxiu   22u  IPv4 0x1c8d3e2f0a1b2c3d      0t0  TCP *:62985 (LISTEN)
node       3210  guxiu   23u  IPv6 0x2d9e4f3a1b2c3d4e      0t0  TCP *:3000 (LISTEN)
node       3210  guxiu   24u  IPv4 0x3eaf5a4b2c3d4e5f      0t0  TCP *:3000 (LISTEN)
node       3210  guxiu   25u  IPv4 0x4fb06b5c3d4e5f60      0t0  TCP 127.0.0.1:3000->127.0.0.1:51234 (ESTABLISHED)
Google\\x20  5555  guxiu   40u  IPv4 0x50c17c6d4e5f6071      0t0  TCP 127.0.0.1:9222 (LISTEN)
mDNSRespo   321  _mdns    7u  IPv4 0x61d28d7e5f607182      0t0  UDP *:5353
mDNSRespo   321  _mdns    8u  IPv6 0x72e39e8f60718293      0t0  UDP *:5353
rapportd    612  guxiu    4u  IPv4 0x83f4af9071829304      0t0  UDP 127.0.0.1:60001->127.0.0.1:53
"""


@pytest.fixture
def netstat_output():
    return NETSTAT_OUTPUT


@pytest.fixture
def tasklist_output():
    return TASKLIST_OUTPUT


@pytest.fixture
def lsof_output():
    return LSOF_OUTPUT


@pytest.fixture
def sample_records():
    return [
        PortRecord(port=3000, pid=3210, protocol=Protocol.TCP, process_name="node"),
        PortRecord(port=5353, pid=321, protocol=Protocol.UDP, process_name="mDNSResponder"),
        PortRecord(port=8080, pid=4321, protocol=Protocol.TCP, process_name="Java"),
        PortRecord(port=9222, pid=5555, protocol=Protocol.TCP, process_name=""),
        PortRecord(port=30001, pid=80, protocol=Protocol.TCP, process_name="python3"),
    ]
