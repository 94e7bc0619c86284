# tests/model_tests/test_trace_model_scenarios.py

import pytest
from model.signature import Signature
from model.terms import Atom, Pid
from model.timestamp import Timestamp


class TestSignatureModel:
    """
    Construction of Signature records from raw (module, function, args) tuples
    and pass-through of the degenerate atom/list forms.
    """

    def test_01_three_tuple_becomes_signature(self):
        sig = Signature.from_raw(("Elixir.Foo", "bar", 2))
        assert sig == Signature("Elixir.Foo", "bar", 2)
        assert sig.has_args is False

    def test_02_argument_list_is_kept(self):
        sig = Signature.from_raw((Atom("lists"), Atom("map"), [1, [2]]))
        assert sig.args_or_arity == [1, [2]]
        assert sig.has_args is True

    @pytest.mark.parametrize(
        "raw", [Atom("shell"), [Atom("a"), Atom("b")], (1, 2), "plain", 42]
    )
    def test_03_other_shapes_stay_opaque(self, raw):
        """Anything that is not a 3-tuple is returned as the same object."""
        assert Signature.from_raw(raw) is raw

    def test_04_signature_is_immutable(self):
        sig = Signature("erlang", "apply", 2)
        with pytest.raises(AttributeError):
            sig.module = "lists"


class TestTimestampModel:
    """Construction of Timestamp records from raw (h, m, s, us) tuples."""

    def test_01_four_tuple_becomes_timestamp(self):
        ts = Timestamp.from_raw((1, 2, 3, 1500))
        assert ts == Timestamp(1, 2, 3, 1500)
        assert ts.milliseconds == 1

    @pytest.mark.parametrize(
        "raw",
        [
            (1, 2, 3),
            (1, 2, 3, 4, 5),
            [1, 2, 3, 4],
            (1, 2, -3, 4),
            (1, 2, "3", 4),
            (True, 2, 3, 4),
            None,
        ],
    )
    def test_02_malformed_times_are_rejected(self, raw):
        assert Timestamp.from_raw(raw) is None

    def test_03_milliseconds_truncate(self):
        assert Timestamp(0, 0, 0, 999).milliseconds == 0
        assert Timestamp(0, 0, 0, 999999).milliseconds == 999


class TestTermModel:
    """Atom and Pid stand-ins for Erlang values."""

    def test_01_atom_equals_its_name(self):
        assert Atom("call") == "call"
        assert hash(Atom("call")) == hash("call")
        assert {"call": 1}[Atom("call")] == 1

    def test_02_atom_repr_is_distinct(self):
        assert repr(Atom("ok")) == "Atom('ok')"

    def test_03_pid_parse_and_str(self):
        pid = Pid.parse("<0.150.0>")
        assert pid == Pid(0, 150, 0)
        assert str(pid) == "<0.150.0>"

    def test_04_pid_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            Pid.parse("<0.150>")
