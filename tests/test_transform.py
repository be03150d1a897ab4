import pytest

from randkit import CountingSource, Outcome, always, integers
from randkit.combinators import CompactMap, FlatMap, Map, TryMap

from fakes import seeded


def test_map_transforms_each_sample() -> None:
    gen = integers(1, 10).map(lambda n: n * 2)
    source = seeded(42)
    assert [gen.run(source) for _ in range(3)] == [12, 20, 12]


def test_chained_maps_collapse_into_one() -> None:
    base = integers(1, 10)
    chained = base.map(lambda n: n + 1).map(str)
    assert isinstance(chained, Map)
    assert chained.upstream is base


def test_collapsed_map_matches_nested_map() -> None:
    base = integers(1, 10)
    collapsed = base.map(lambda n: n + 1).map(lambda n: n * 3)
    nested = Map(Map(base, lambda n: n + 1), lambda n: n * 3)
    a, b = seeded(3), seeded(3)
    assert [collapsed.run(a) for _ in range(20)] == [nested.run(b) for _ in range(20)]


def test_map_does_not_mutate_upstream() -> None:
    base = integers(1, 10)
    base.map(lambda n: -n)
    assert base.run(seeded(42)) == 6


def test_flat_map_shape_depends_on_value() -> None:
    gen = integers(1, 3).flat_map(lambda n: always("x").array(n))
    source = seeded(42)
    assert gen.run(source) == ["x", "x"]
    assert gen.run(source) == ["x", "x", "x"]
    assert isinstance(gen, FlatMap)


def test_flat_map_runs_inner_with_same_source() -> None:
    gen = integers(1, 10).flat_map(lambda n: integers(0, n))
    counting = CountingSource(seeded(8))
    gen.run(counting)
    assert counting.draws == 2


def test_compact_map_skips_declined_values() -> None:
    gen = integers(1, 10).compact_map(lambda n: n if n % 2 == 0 else None)
    source = seeded(1)
    assert [gen.run(source) for _ in range(6)] == [2, 2, 6, 10, 6, 4]
    assert isinstance(gen, CompactMap)


def test_compact_map_keeps_falsy_values() -> None:
    gen = always(0).compact_map(lambda n: n)
    assert gen.run(seeded()) == 0


class TestTryMap:
    def test_failure_is_captured(self) -> None:
        gen = integers(1, 10).try_map(lambda n: 100 // (n - 6))
        source = seeded(42)

        first = gen.run(source)
        assert first.failed
        assert isinstance(first.error, ZeroDivisionError)

        second = gen.run(source)
        assert not second.failed
        assert second.value == 25
        assert isinstance(gen, TryMap)

    def test_does_not_retry(self) -> None:
        counting = CountingSource(seeded())
        integers(1, 10).try_map(lambda n: int("nope")).run(counting)
        assert counting.draws == 1

    def test_unwrap(self) -> None:
        assert Outcome.success(3).unwrap() == 3
        with pytest.raises(KeyError):
            Outcome.failure(KeyError("missing")).unwrap()
