"""Unit tests for Scope — isolated copies of a flow's chain."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from structlog.testing import capture_logs

from flowware import create_controller
from flowware.config import FlowSettings
from flowware.errors import InvalidScopePositionError, MiddlewareTypeError
from flowware.pipeline import Context, Scope, ScopePosition


def make_recording_middleware(name: str, record: list[str]) -> Any:
    async def mw(context: Context, next_: Any) -> Any:
        record.append(f"{name}:before")
        result = await next_()
        record.append(f"{name}:after")
        return result

    return mw


def make_action(record: list[str]) -> Any:
    def action(x: int) -> int:
        record.append("action")
        return x + 1

    return action


class TestCreateScope:
    def test_scope_copies_global_chain(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        flow.register(make_recording_middleware("G", record))
        scope = flow.create_scope()
        assert isinstance(scope, Scope)
        assert scope.middleware == flow.middleware
        assert asyncio.run(scope(1)) == 2
        assert record == ["G:before", "action", "G:after"]

    def test_later_global_registration_not_seen_by_existing_scope(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        early = flow.create_scope()
        flow.register(make_recording_middleware("M2", record))
        late = flow.create_scope()

        asyncio.run(early(1))
        assert record == ["action"]

        record.clear()
        asyncio.run(late(1))
        assert record == ["M2:before", "action", "M2:after"]

    def test_empty_scope_calls_action(self) -> None:
        flow = create_controller(lambda a, b: a * b)
        assert asyncio.run(flow.create_scope()(6, 7)) == 42


class TestScopeRegister:
    def test_prefix_runs_before_copied_middleware(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        flow.register(make_recording_middleware("G", record))
        scope = flow.create_scope()
        scope.register("prefix", make_recording_middleware("P", record))

        asyncio.run(scope(1))
        assert record == ["P:before", "G:before", "action", "G:after", "P:after"]

    def test_suffix_runs_after_copied_middleware_before_action(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        flow.register(make_recording_middleware("G", record))
        scope = flow.create_scope()
        scope.register("suffix", make_recording_middleware("S", record))

        asyncio.run(scope(1))
        assert record == ["G:before", "S:before", "action", "S:after", "G:after"]

    def test_prefix_and_suffix_stack(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        flow.register(make_recording_middleware("G", record))
        scope = flow.create_scope()
        scope.register(ScopePosition.PREFIX, make_recording_middleware("P1", record))
        scope.register(ScopePosition.PREFIX, make_recording_middleware("P2", record))
        scope.register(ScopePosition.SUFFIX, make_recording_middleware("S1", record))
        scope.register(ScopePosition.SUFFIX, make_recording_middleware("S2", record))

        asyncio.run(scope(1))
        befores = [entry for entry in record if entry.endswith(":before")]
        assert befores == ["P2:before", "P1:before", "G:before", "S1:before", "S2:before"]
        assert record[5] == "action"

    def test_scope_registration_does_not_touch_flow(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        scope = flow.create_scope()
        scope.register("prefix", make_recording_middleware("P", record))

        asyncio.run(flow(1))
        assert record == ["action"]
        assert flow.middleware == ()

    def test_sibling_scopes_are_independent(self) -> None:
        record: list[str] = []
        flow = create_controller(make_action(record))
        first = flow.create_scope()
        second = flow.create_scope()
        first.register("suffix", make_recording_middleware("F", record))

        asyncio.run(second(1))
        assert record == ["action"]
        assert len(first.middleware) == 1
        assert second.middleware == ()

    def test_scope_uses_updater_setter(self) -> None:
        async def triple(context: Context, next_: Any) -> None:
            await next_()
            context.set_res(lambda res: res * 3)

        flow = create_controller(lambda x: x * 2)
        scope = flow.create_scope()
        scope.register("suffix", triple)
        assert asyncio.run(scope(3)) == 18

    def test_registration_logged_only_when_tracing(self) -> None:
        quiet = create_controller(make_action([])).create_scope()
        traced = create_controller(
            make_action([]), settings=FlowSettings(trace_calls=True)
        ).create_scope()
        with capture_logs() as logs:
            quiet.register("prefix", make_recording_middleware("Q", []))
            traced.register("suffix", make_recording_middleware("T", []))
        assert logs == [
            {
                "event": "scope.middleware_registered",
                "position": "suffix",
                "middleware_count": 1,
                "log_level": "debug",
            }
        ]

    def test_invalid_position_raises(self) -> None:
        scope = create_controller(make_action([])).create_scope()
        with pytest.raises(InvalidScopePositionError, match="prefix' or 'suffix"):
            scope.register("middle", make_recording_middleware("X", []))  # type: ignore[arg-type]
        assert scope.middleware == ()

    def test_invalid_position_is_a_value_error(self) -> None:
        scope = create_controller(make_action([])).create_scope()
        with pytest.raises(ValueError):
            scope.register(None, make_recording_middleware("X", []))  # type: ignore[arg-type]

    def test_non_callable_middleware_raises(self) -> None:
        scope = create_controller(make_action([])).create_scope()
        with pytest.raises(MiddlewareTypeError):
            scope.register("suffix", 123)  # type: ignore[arg-type]
        assert scope.middleware == ()
