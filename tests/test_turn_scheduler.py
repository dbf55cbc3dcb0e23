"""Tests for the TurnScheduler and its snapshot dispatch."""

from rogueboard.engine.signals import Signal
from rogueboard.engine.turn_scheduler import TurnScheduler


class TestCounter:
    def test_starts_at_one(self):
        assert TurnScheduler().turn_count == 1

    def test_tick_with_no_subscribers_only_moves_counter(self):
        s = TurnScheduler()
        s.tick()
        s.tick()
        assert s.turn_count == 3
        assert s.subscriber_count == 0

    def test_reset_keeps_subscribers(self):
        s = TurnScheduler()
        s.subscribe(lambda: None)
        s.tick()
        s.reset()
        assert s.turn_count == 1
        assert s.subscriber_count == 1


class TestDispatch:
    def test_subscribers_called_in_order_once_each(self):
        s = TurnScheduler()
        calls = []
        s.subscribe(lambda: calls.append("a"))
        s.subscribe(lambda: calls.append("b"))
        s.subscribe(lambda: calls.append("c"))
        s.tick()
        assert calls == ["a", "b", "c"]

    def test_counter_advanced_before_dispatch(self):
        s = TurnScheduler()
        seen = []
        s.subscribe(lambda: seen.append(s.turn_count))
        s.tick()
        assert seen == [2]

    def test_self_unsubscribe_not_reinvoked(self):
        s = TurnScheduler()
        calls = []

        def once():
            calls.append("once")
            s.unsubscribe(once)

        s.subscribe(once)
        s.subscribe(lambda: calls.append("other"))
        s.tick()
        s.tick()
        assert calls == ["once", "other", "other"]
        assert not s.is_subscribed(once)

    def test_subscriber_added_during_dispatch_waits_for_next_tick(self):
        s = TurnScheduler()
        calls = []

        def late():
            calls.append("late")

        def adder():
            calls.append("adder")
            if not s.is_subscribed(late):
                s.subscribe(late)

        s.subscribe(adder)
        s.tick()
        assert calls == ["adder"]
        s.tick()
        assert calls == ["adder", "adder", "late"]

    def test_removal_of_later_subscriber_applies_next_tick(self):
        s = TurnScheduler()
        calls = []

        def victim():
            calls.append("victim")

        def remover():
            calls.append("remover")
            s.unsubscribe(victim)

        s.subscribe(remover)
        s.subscribe(victim)
        s.tick()
        assert calls == ["remover", "victim"]
        s.tick()
        assert calls == ["remover", "victim", "remover"]

    def test_unsubscribe_unknown_is_noop(self):
        s = TurnScheduler()
        s.unsubscribe(lambda: None)
        s.tick()
        assert s.turn_count == 2

    def test_bound_methods_unsubscribe_by_equality(self):
        class Actor:
            def __init__(self):
                self.turns = 0

            def on_turn(self):
                self.turns += 1

        s = TurnScheduler()
        actor = Actor()
        s.subscribe(actor.on_turn)
        s.tick()
        s.unsubscribe(actor.on_turn)
        s.tick()
        assert actor.turns == 1


class TestSignal:
    def test_emit_passes_arguments(self):
        sig = Signal("levels")
        got = []
        sig.connect(got.append)
        sig.emit(4)
        assert got == [4]

    def test_disconnect_reports_membership(self):
        sig = Signal()
        cb = lambda: None  # noqa: E731
        sig.connect(cb)
        assert sig.disconnect(cb) is True
        assert sig.disconnect(cb) is False
        assert len(sig) == 0
