import pytest

from wiresim import Wire
from wiresim.wire import to_signal


@pytest.fixture(autouse=True)
def wire():
    return Wire("w1", 0)


@pytest.fixture
def calls():
    return []


class TestCreate:
    def test(self, wire):
        assert wire.name == "w1"
        assert wire.index == 0
        assert wire.get_signal() is False
        assert wire.reactions == []

    def test_str(self, wire):
        assert str(wire) == "Wire<w1 = False>"
        wire.set_signal(True)
        assert str(wire) == "Wire<w1 = True>"

    def test_repr(self, wire):
        assert repr(wire) == "Wire('w1', index=0, signal=False)"


class TestSetSignal:
    @pytest.mark.parametrize("value", [True, 1])
    def test_set(self, wire, value):
        wire.set_signal(value)
        assert wire.get_signal() is True

    def test_reactions_called_on_change(self, wire, calls):
        wire.add_action(lambda: calls.append(wire.get_signal()))
        calls.clear()
        wire.set_signal(True)
        wire.set_signal(False)
        assert calls == [True, False]

    def test_unchanged_is_noop(self, wire, calls):
        wire.add_action(lambda: calls.append(wire.get_signal()))
        calls.clear()
        wire.set_signal(True)
        wire.set_signal(True)
        assert calls == [True]
        wire.set_signal(False)
        wire.set_signal(0)
        assert calls == [True, False]

    def test_unchanged_initial(self, wire, calls):
        wire.add_action(lambda: calls.append("called"))
        calls.clear()
        wire.set_signal(False)
        assert calls == []

    def test_registration_order(self, wire, calls):
        for label in ("first", "second", "third"):
            wire.add_action(lambda label=label: calls.append(label))
        calls.clear()
        wire.set_signal(True)
        assert calls == ["first", "second", "third"]

    def test_new_value_visible_to_reactions(self, wire, calls):
        other = Wire("w2")
        wire.add_action(lambda: calls.append((wire.signal, other.signal)))
        calls.clear()
        wire.set_signal(True)
        assert calls == [(True, False)]

    @pytest.mark.parametrize("value", [2, "1", None, 1.0])
    def test_badvalue(self, wire, value):
        msg = "is not a boolean"
        with pytest.raises(TypeError, match=msg):
            wire.set_signal(value)


class TestAddAction:
    def test_fires_on_registration(self, wire, calls):
        wire.add_action(lambda: calls.append("called"))
        assert calls == ["called"]
        assert len(wire.reactions) == 1

    @pytest.mark.parametrize("value", [False, True])
    def test_fires_regardless_of_state(self, wire, calls, value):
        wire.set_signal(value)
        wire.add_action(lambda: calls.append(wire.get_signal()))
        assert calls == [value]

    def test_action_added_during_reaction(self, wire, calls):
        def add_another():
            if wire.get_signal():
                wire.add_action(lambda: calls.append("added"))

        wire.add_action(add_another)
        assert calls == []
        wire.set_signal(True)
        # The new action runs once on registration, but not again for this change.
        assert calls == ["added"]


class TestToSignal:
    @pytest.mark.parametrize("value, expected", [(0, False), (1, True), (True, True)])
    def test_ok(self, value, expected):
        assert to_signal(value) is expected
