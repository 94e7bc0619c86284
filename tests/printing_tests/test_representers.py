# tests/printing_tests/test_representers.py
# This file is part of Redprint - Erlang trace message printing
#
# Test suite for event representation and the formatting pipeline

"""Test suite for rendering typed events into text blocks."""

import pytest
from model.events import CallEvent
from model.signature import Signature
from model.terms import Atom, Pid
from model.timestamp import Timestamp
from printing import FormatOptions, format_event, represent

HEADER = "# 12:04:59 #PID<0.150.0> :erlang.apply/2"


class TestRepresenters:
    """Exact output of each representer."""

    def test_call_with_stack(self, raw_messages):
        assert format_event(raw_messages["call"]) == (
            f"{HEADER}\n"
            "# Foo.bar(1, 2)\n"
            "#   :lists.foldl/3\n"
            "#   Foo.do work/2"
        )

    def test_return(self, raw_messages):
        assert format_event(raw_messages["retn"]) == f"{HEADER}\n# Foo.bar/2 -> :ok"

    def test_send(self, raw_messages):
        assert format_event(raw_messages["send"]) == (
            f"{HEADER}\n# #PID<0.151.0> (:server) <<< {{:ping, 1}}"
        )

    def test_receive(self, raw_messages):
        assert format_event(raw_messages["recv"]) == (
            "# 12:04:59 #PID<0.151.0> :gen_server.loop/7\n# <<< {:pong, 1}"
        )

    def test_millisecond_option(self, raw_messages):
        text = format_event(raw_messages["retn"], {"print_msec": True})
        assert text.startswith("# 12:04:59.120 #PID<0.150.0>")

    @pytest.mark.parametrize("dump", [None, "", "no frames here\n=proc:<0.1.0>"])
    def test_call_without_frames_has_two_lines(self, dump):
        event = CallEvent(
            signature=Signature("Elixir.Foo", "bar", 2),
            dump=dump,
            from_pid=None,
            from_signature=Atom("shell"),
            time=Timestamp(1, 2, 3, 0),
        )
        assert represent(event, FormatOptions()) == "# 01:02:03 nil (:shell)\n# Foo.bar/2"

    def test_bare_origin_renders_nil_pid(self):
        raw = (Atom("retn"), (("erlang", "now", 0), 7), [Atom("a")], (0, 0, 1, 0))
        assert format_event(raw) == "# 00:00:01 nil ([:a])\n# :erlang.now/0 -> 7"

    def test_pass_through_value_renders_inspected(self):
        assert format_event((Atom("trace_done"), 3)) == "# {:trace_done, 3}"


class TestFormattingProperties:
    """Structural properties that hold for every message kind."""

    @pytest.mark.parametrize("tag", ["call", "retn", "send", "recv"])
    def test_header_and_body_lines(self, raw_messages, tag):
        lines = format_event(raw_messages[tag]).split("\n")
        assert len(lines) >= 2
        assert all(line.startswith("#") for line in lines)
        if tag != "call":
            assert len(lines) == 2

    @pytest.mark.parametrize("tag", ["call", "retn", "send", "recv"])
    def test_no_trailing_newline(self, raw_messages, tag):
        assert not format_event(raw_messages[tag]).endswith("\n")

    @pytest.mark.parametrize("tag", ["call", "retn", "send", "recv"])
    def test_formatting_is_idempotent(self, raw_messages, tag):
        options = FormatOptions(print_msec=True)
        assert format_event(raw_messages[tag], options) == format_event(
            raw_messages[tag], options
        )

    def test_trailer_only_for_non_empty_dump(self, raw_messages):
        with_stack = format_event(raw_messages["call"]).split("\n")
        tag, (mfa, _dump), origin, time = raw_messages["call"]
        without_stack = format_event((tag, (mfa, ""), origin, time)).split("\n")

        assert len(with_stack) == 4
        assert len(without_stack) == 2
        assert with_stack[:2] == without_stack
