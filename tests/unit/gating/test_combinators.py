"""
Tests for the combinator functions and the fluent ``.gated*`` methods.
"""

from types import SimpleNamespace

import pytest

from gated_middleware import (
    ActionGate,
    ActionSource,
    GatedEffectMiddleware,
    GatedMiddleware,
    GateState,
    InvalidGateStateError,
    InvalidProjectionError,
    StateGate,
    gated,
    gated_by_flag,
    gated_by_gate_state,
    gated_by_state,
    gated_by_state_flag,
)
from gated_middleware.gates import to_control_action_map, to_state_map

from tests.unit.gating.mocks import (
    OneMore,
    SampleEffectMiddleware,
    SampleMiddleware,
    SomethingElse,
    Store,
    ToggleSampleMiddleware,
    enable_sample,
)


class TestWrapperSelection:
    """The wrapper matches the shape of the inner middleware."""

    def test_context_middleware_gets_gated_middleware(self, sample_middleware):
        wrapped = gated_by_flag(sample_middleware, enable_sample, default=GateState.ACTIVE)

        assert isinstance(wrapped, GatedMiddleware)
        assert isinstance(wrapped._gate, ActionGate)

    def test_effect_middleware_gets_gated_effect_middleware(self, sample_effect_middleware):
        wrapped = gated_by_state(sample_effect_middleware, "sample_enabled")

        assert isinstance(wrapped, GatedEffectMiddleware)
        assert isinstance(wrapped._gate, StateGate)

    def test_fluent_and_functional_forms_match(self, sample_middleware):
        fluent = sample_middleware.gated(
            enable_sample,
            turn_on=True,
            turn_off=False,
            default=GateState.BYPASS,
        )
        functional = gated(
            sample_middleware,
            enable_sample,
            turn_on=True,
            turn_off=False,
            default=GateState.BYPASS,
        )

        assert type(fluent) is type(functional)
        assert fluent._gate is not functional._gate

    def test_gated_middleware_can_be_gated_again(self, store: Store, sample_middleware):
        inner = sample_middleware.gated_by_state("sample_enabled")
        outer = inner.gated_by_flag("enabled", default=GateState.ACTIVE)
        outer.receive_context(store.get_state, store.action_handler)

        outer.handle(SomethingElse(), ActionSource.here())
        store.state.sample_enabled = GateState.BYPASS
        outer.handle(OneMore(), ActionSource.here())

        assert sample_middleware.handled == [SomethingElse()]


class TestByActionForms:
    def test_general_form_with_custom_sentinels(self, store: Store, sample_middleware):
        wrapped = gated(
            sample_middleware,
            lambda action: getattr(action, "command", None),
            turn_on="start",
            turn_off="stop",
            default="active",
        )
        wrapped.receive_context(store.get_state, store.action_handler)

        wrapped.handle(SimpleNamespace(command="stop"), ActionSource.here())
        wrapped.handle(SomethingElse(), ActionSource.here())
        wrapped.handle(SimpleNamespace(command="pause"), ActionSource.here())
        wrapped.handle(SomethingElse(), ActionSource.here())
        wrapped.handle(SimpleNamespace(command="start"), ActionSource.here())
        wrapped.handle(OneMore(), ActionSource.here())

        assert [getattr(action, "command", action) for action in sample_middleware.handled] == [
            "stop",
            "pause",
            "start",
            OneMore(),
        ]

    def test_flag_form_with_callable(self, store: Store, sample_middleware):
        wrapped = sample_middleware.gated_by_flag(enable_sample, default=GateState.ACTIVE)
        wrapped.receive_context(store.get_state, store.action_handler)

        wrapped.handle(ToggleSampleMiddleware(False), ActionSource.here())
        sample_middleware.send(OneMore())

        assert store.actions_received == []

    def test_gate_state_form(self, store: Store, sample_middleware):
        wrapped = gated_by_gate_state(
            sample_middleware,
            lambda action: getattr(action, "gate", None),
            default=GateState.BYPASS,
        )
        wrapped.receive_context(store.get_state, store.action_handler)

        wrapped.handle(SimpleNamespace(gate=GateState.ACTIVE), ActionSource.here())
        sample_middleware.send(OneMore())

        assert store.actions_received == [OneMore()]

    def test_default_accepts_text(self, sample_middleware):
        wrapped = sample_middleware.gated_by_flag("enabled", default="bypass")

        assert wrapped._gate.should_dispatch_action(OneMore(), None) is False

    def test_default_rejects_unknown_text(self, sample_middleware):
        with pytest.raises(InvalidGateStateError):
            sample_middleware.gated_by_flag("enabled", default="off")


class TestByStateForms:
    def test_flag_form(self, store: Store, sample_middleware):
        wrapped = gated_by_state_flag(sample_middleware, "sample_flag")
        wrapped.receive_context(store.get_state, store.action_handler)

        store.state.sample_flag = False
        wrapped.handle(SomethingElse(), ActionSource.here())

        assert sample_middleware.handled == []

    def test_callable_projection(self, sample_effect_middleware: SampleEffectMiddleware):
        wrapped = sample_effect_middleware.gated_by_state(
            lambda state: GateState.from_flag(state.sample_flag)
        )
        state = SimpleNamespace(sample_flag=False)

        io = wrapped.handle(SomethingElse(), ActionSource.here(), lambda: state)

        assert sample_effect_middleware.handle_action_count == 0
        io.run(None)


class TestProjections:
    """Attribute paths stand in for callables."""

    def test_control_action_path_missing_attribute_is_none(self):
        project = to_control_action_map("enabled")

        assert project(SomethingElse()) is None
        assert project(ToggleSampleMiddleware(False)) is False

    def test_control_action_nested_path(self):
        project = to_control_action_map("payload.toggle")

        assert project(SimpleNamespace(payload=SimpleNamespace(toggle=True))) is True
        assert project(SimpleNamespace(payload=None)) is None
        assert project(SimpleNamespace()) is None

    def test_state_nested_path(self):
        project = to_state_map("settings.sample_enabled")
        state = SimpleNamespace(settings=SimpleNamespace(sample_enabled=GateState.BYPASS))

        assert project(state) is GateState.BYPASS

    def test_state_missing_attribute_raises(self):
        project = to_state_map("sample_enabled")

        with pytest.raises(AttributeError):
            project(SimpleNamespace())

    def test_callables_returned_unchanged(self):
        assert to_control_action_map(enable_sample) is enable_sample
        assert to_state_map(enable_sample) is enable_sample

    def test_invalid_projection(self, sample_middleware):
        with pytest.raises(InvalidProjectionError) as error:
            sample_middleware.gated_by_state(42)

        assert isinstance(error.value, TypeError)
        assert error.value.projection == 42

        with pytest.raises(InvalidProjectionError):
            gated_by_flag(sample_middleware, None, default=GateState.ACTIVE)
