"""Tests for the event emitter and the room behavior registry."""

from pathlib import Path

import pytest
from structlog.testing import capture_logs

from hearthmoor.game.world import BehaviorContext, BehaviorRegistry, EventEmitter, Room


@pytest.fixture
def room() -> Room:
    return Room(title="Square", description="A stone square.", location=1001, area="village")


class TestEventEmitter:
    """Test named-event publish/subscribe."""

    def test_listeners_called_in_order(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("tick", lambda n: calls.append(("a", n)))
        emitter.on("tick", lambda n: calls.append(("b", n)))

        emitter.emit("tick", 3)

        assert calls == [("a", 3), ("b", 3)]

    def test_keyword_payload(self):
        emitter = EventEmitter()
        received = {}
        emitter.on("say", lambda **kw: received.update(kw))

        emitter.emit("say", speaker="bob", text="hi")

        assert received == {"speaker": "bob", "text": "hi"}

    def test_emit_with_listener_logs_event_name(self):
        emitter = EventEmitter()
        emitter.on("tick", lambda: None)

        with capture_logs() as logs:
            assert emitter.emit("tick") is True

        emitted = [entry for entry in logs if entry["event"] == "event_emitted"]
        assert len(emitted) == 1
        assert emitted[0]["name"] == "tick"
        assert emitted[0]["listeners"] == 1

    def test_off_removes_listener(self):
        emitter = EventEmitter()
        calls = []

        def listener():
            calls.append(1)

        emitter.on("tick", listener)
        emitter.off("tick", listener)
        emitter.off("tick", listener)

        assert emitter.emit("tick") is False
        assert calls == []
        assert emitter.listeners("tick") == []


class TestBehaviorRegistry:
    """Test behavior registration and attachment."""

    def test_register_duplicate_name(self):
        registry = BehaviorRegistry()
        registry.register("ambient", lambda room, ctx: {})

        with pytest.raises(ValueError):
            registry.register("ambient", lambda room, ctx: {})

    def test_register_empty_name(self):
        with pytest.raises(ValueError):
            BehaviorRegistry().register("", lambda room, ctx: {})

    def test_attach_listed_behaviors(self, room):
        registry = BehaviorRegistry()
        heard = []
        contexts: list[BehaviorContext] = []

        def ambient(target: Room, ctx: BehaviorContext):
            contexts.append(ctx)
            return {"playerEnter": lambda player: heard.append((target.get_location(), player))}

        registry.register("ambient", ambient)
        config = {"behaviors": ["ambient"]}

        registry(config, Path("l10n"), Path("scripts"), room)
        room.emit("playerEnter", "alice")

        assert heard == [(1001, "alice")]
        assert contexts[0].config is config
        assert contexts[0].l10n_dir == Path("l10n")
        assert contexts[0].scripts_dir == Path("scripts")
        assert contexts[0].area == "village"
        assert contexts[0].options == {}

    def test_attach_with_options(self, room):
        registry = BehaviorRegistry()
        seen = {}

        def bell(target, ctx):
            seen.update(ctx.options)
            return {}

        registry.register("bell", bell)

        registry({"behaviors": {"bell": {"every": 60}}}, Path("."), Path("."), room)

        assert seen == {"every": 60}

    def test_unknown_behavior_is_skipped(self, room):
        registry = BehaviorRegistry()

        with capture_logs() as logs:
            registry({"behaviors": ["ghost"]}, Path("."), Path("."), room)

        assert any(entry["event"] == "behavior_not_registered" for entry in logs)
        assert room.emit("playerEnter") is False

    def test_failing_factory_is_skipped(self, room):
        registry = BehaviorRegistry()

        def broken(target, ctx):
            raise RuntimeError("script missing")

        registry.register("broken", broken)
        registry.register("ok", lambda target, ctx: {"tick": lambda: None})

        with capture_logs() as logs:
            registry({"behaviors": ["broken", "ok"]}, Path("."), Path("."), room)

        assert any(entry["event"] == "behavior_attach_failed" for entry in logs)
        assert room.emit("tick") is True

    def test_factory_returning_none(self, room):
        """A factory with nothing to subscribe does not disturb other behaviors."""
        registry = BehaviorRegistry()
        registry.register("noop", lambda target, ctx: None)
        registry.register("ok", lambda target, ctx: {"tick": lambda: None})

        with capture_logs() as logs:
            registry({"behaviors": ["noop", "ok"]}, Path("."), Path("."), room)

        assert not any(entry["event"] == "behavior_attach_failed" for entry in logs)
        assert room.emit("tick") is True

    def test_factory_returning_non_mapping(self, room):
        registry = BehaviorRegistry()
        registry.register("odd", lambda target, ctx: ["tick"])
        registry.register("ok", lambda target, ctx: {"tick": lambda: None})

        with capture_logs() as logs:
            registry({"behaviors": ["odd", "ok"]}, Path("."), Path("."), room)

        failed = [entry for entry in logs if entry["event"] == "behavior_attach_failed"]
        assert [entry["behavior"] for entry in failed] == ["odd"]
        assert room.emit("tick") is True

    def test_scalar_declaration_ignored(self, room):
        registry = BehaviorRegistry()
        registry.register("ok", lambda target, ctx: {"tick": lambda: None})

        with capture_logs() as logs:
            registry({"behaviors": 5}, Path("."), Path("."), room)

        assert any(entry["event"] == "behaviors_declaration_invalid" for entry in logs)
        assert room.emit("tick") is False

    def test_no_behaviors_declared(self, room):
        BehaviorRegistry()({}, Path("."), Path("."), room)

        assert room.events.listeners("playerEnter") == []
