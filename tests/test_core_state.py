import pytest

from seedgen.core.models import GenState
from seedgen.core.primitives import int_, lcg_step
from seedgen.core.state import (
    ap,
    bind,
    bind_to,
    chain,
    chain_first,
    do,
    let,
    map_,
    of,
    sequence_record,
    sequence_tuple,
)
from seedgen.lcg import mk_seed

R1, R2, R3 = 43, 2075653, 1409598201


def _spy(calls: list[GenState]):
    def run(state: GenState):
        calls.append(state)
        return lcg_step(state)

    return run


class TestConstruction:
    def test_composing_never_invokes_children(self) -> None:
        calls: list[GenState] = []
        spy = _spy(calls)
        map_(spy, str)
        chain(spy, lambda _: spy)
        sequence_tuple([spy, spy])
        sequence_record({"a": spy})
        bind(bind_to(spy, "x"), "y", lambda _: spy)
        assert calls == []

    def test_generator_is_reusable(self, state42: GenState) -> None:
        gen = int_(0, 100)
        assert gen(state42) == gen(state42)


class TestOf:
    def test_returns_value_and_same_state(self, state42: GenState) -> None:
        value, state = of("x")(state42)
        assert value == "x"
        assert state == state42


class TestMap:
    def test_applies_function_leaving_state(self, state42: GenState) -> None:
        value, state = map_(lcg_step, lambda n: n * 2)(state42)
        _, expected_state = lcg_step(state42)
        assert value == R1 * 2
        assert state == expected_state

    def test_map_over_of_does_not_draw(self, state42: GenState) -> None:
        _, state = map_(of(1), lambda n: n + 1)(state42)
        assert state == state42


class TestChain:
    def test_second_generator_sees_advanced_state(
        self, state42: GenState
    ) -> None:
        gen = chain(
            lcg_step, lambda first: map_(lcg_step, lambda s: (first, s))
        )
        value, _ = gen(state42)
        assert value == (R1, R2)

    def test_value_drives_next_generator(self, state42: GenState) -> None:
        gen = chain(int_(1, 5), lambda n: sequence_tuple([lcg_step] * n))
        value, _ = gen(state42)
        # 43 mod 5 == 3, so four draws follow the length draw
        assert len(value) == 4
        assert value[:3] == (R2, R3, 1842888923)

    def test_chain_first_keeps_first_value(self, state42: GenState) -> None:
        gen = sequence_tuple(
            [chain_first(int_(0, 100), lambda _: lcg_step), lcg_step]
        )
        value, _ = gen(state42)
        assert value == (43, R3)


class TestAp:
    def test_runs_function_then_argument(self, state42: GenState) -> None:
        gen = ap(map_(lcg_step, lambda a: lambda b: (a, b)), lcg_step)
        value, _ = gen(state42)
        assert value == (R1, R2)


class TestSequencing:
    def test_tuple_declaration_order(self, state42: GenState) -> None:
        value, _ = sequence_tuple([lcg_step, lcg_step, lcg_step])(state42)
        assert value == (R1, R2, R3)

    def test_empty_tuple_does_not_draw(self, state42: GenState) -> None:
        assert sequence_tuple([])(state42) == ((), state42)

    def test_record_preserves_keys_and_order(self, state42: GenState) -> None:
        value, _ = sequence_record({"b": lcg_step, "a": lcg_step})(state42)
        assert value == {"b": R1, "a": R2}
        assert list(value) == ["b", "a"]

    def test_record_field_order_changes_values(
        self, state42: GenState
    ) -> None:
        forward, _ = sequence_record(
            {"a": int_(0, 100), "b": int_(0, 100)}
        )(state42)
        backward, _ = sequence_record(
            {"b": int_(0, 100), "a": int_(0, 100)}
        )(state42)
        assert forward == {"a": 43, "b": 2}
        assert backward == {"b": 43, "a": 2}
        assert forward != backward


class TestDoNotation:
    def test_bind_chain_and_let(self, state42: GenState) -> None:
        gen = let(
            bind(
                bind_to(int_(0, 100), "a"),
                "b",
                lambda scope: int_(0, scope["a"]),
            ),
            "c",
            lambda scope: scope["a"] + scope["b"],
        )
        value, _ = gen(state42)
        assert value == {"a": 43, "b": 41, "c": 84}

    def test_do_starts_from_empty_scope(self, state42: GenState) -> None:
        value, state = do()(state42)
        assert value == {}
        assert state == state42

    def test_bind_does_not_mutate_previous_scope(
        self, state42: GenState
    ) -> None:
        seen: list[dict] = []

        def record_scope(scope: dict):
            seen.append(scope)
            return of(1)

        value, _ = bind(bind_to(of(0), "x"), "y", record_scope)(state42)
        assert value == {"x": 0, "y": 1}
        assert seen == [{"x": 0}]

    @pytest.mark.parametrize("helper", [bind, let])
    def test_rejects_empty_name(self, helper) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            helper(do(), "", lambda _: of(1))


def test_states_are_values_not_shared() -> None:
    state = GenState(seed=mk_seed(1), size=3)
    _, after = lcg_step(state)
    assert state.seed == mk_seed(1)
    assert after is not state
