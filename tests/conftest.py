# tests/conftest.py
# This file is part of Redprint - Erlang trace message printing
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Redprint tests.

The configuration handles:
- Python path setup for module imports
- Common fixtures for raw tracer messages
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import model
        import parser
        import printing
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the project logger to the session stderr before any test swaps it
    from utils.logger import get_logger

    get_logger()

    yield


class _CurrentStderr:
    """Stream that writes to whatever `sys.stderr` is at write time.

    `capsys` swaps in a fresh stderr for each test phase, so binding the
    handler to the object seen during fixture setup would leave it closed.
    """

    def write(self, text):
        return sys.stderr.write(text)

    def flush(self):
        sys.stderr.flush()


@pytest.fixture
def log_stderr(capsys):
    """Route project log output to the stderr captured by `capsys`."""
    from utils.logger import get_logger

    handler = get_logger().logger.handlers[0]
    previous = handler.setStream(_CurrentStderr())
    yield capsys
    if previous is not None:
        handler.setStream(previous)


@pytest.fixture
def time_tuple():
    """Raw tracer timestamp: 12:04:59.120345."""
    return (12, 4, 59, 120345)


@pytest.fixture
def sample_dump():
    """Process dump with two frame lines and unrelated noise."""
    return "\n".join(
        [
            "=proc:<0.150.0>",
            "0x00007f3c1b2c3d40 Return addr 0x00007f3c1a2b3c40 (lists:foldl/3 + 64)",
            "y(0)     []",
            "0x00007f3c1b2c3d58 Return addr 0x00007f3c1a2b3d00 ('Elixir.Foo':'do work'/2 + 8)",
            "0x00007f3c1b2c3d60 Return addr 0x0000000000a6c9c8 (<terminate process normally>)",
        ]
    )


@pytest.fixture
def raw_messages(time_tuple, sample_dump):
    """One raw message of each kind, keyed by tag."""
    from model.terms import Atom, Pid

    pid = Pid(0, 150, 0)
    origin = (pid, (Atom("erlang"), Atom("apply"), 2))
    return {
        "call": (
            Atom("call"),
            ((Atom("Elixir.Foo"), Atom("bar"), [1, 2]), sample_dump),
            origin,
            time_tuple,
        ),
        "retn": (
            Atom("retn"),
            ((Atom("Elixir.Foo"), Atom("bar"), 2), Atom("ok")),
            origin,
            time_tuple,
        ),
        "send": (
            Atom("send"),
            ((Atom("ping"), 1), (Pid(0, 151, 0), Atom("server"))),
            origin,
            time_tuple,
        ),
        "recv": (
            Atom("recv"),
            (Atom("pong"), 1),
            (Pid(0, 151, 0), (Atom("gen_server"), Atom("loop"), 7)),
            time_tuple,
        ),
    }
