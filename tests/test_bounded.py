import pytest

from randkit import (
    AttemptBounded,
    AttemptPolicy,
    CountingSource,
    Fallback,
    GeneratorConfigError,
    always,
    integers,
    sampled_from,
)

from fakes import seeded


def never(_: object) -> bool:
    return False


class TestFilter:
    def test_only_matching_values(self) -> None:
        gen = integers(1, 10).filter(lambda n: n % 2 == 0)
        source = seeded(1)
        assert [gen.run(source) for _ in range(3)] == [2, 2, 6]

    def test_default_budget(self) -> None:
        gen = integers(1, 10).filter(lambda n: True)
        assert isinstance(gen, AttemptBounded)
        assert gen.policy.max_attempts == 100
        assert gen.policy.fallback == Fallback.UseLast()


class TestRetry:
    def test_retry_until(self) -> None:
        gen = integers(1, 10).retry(lambda n: n > 5)
        source = seeded(42)
        assert [gen.run(source) for _ in range(3)] == [6, 10, 6]

    def test_default_budget(self) -> None:
        assert integers(1, 10).retry(lambda n: True).policy.max_attempts == 10

    def test_immediately_satisfied_draws_once(self) -> None:
        counting = CountingSource(seeded(42))
        assert integers(1, 10).retry(lambda n: n == 6).run(counting) == 6
        assert counting.draws == 1


class TestFallbacks:
    def test_use_last_returns_kth_sample(self) -> None:
        # samples: 6, 10, 6, 8, 2 | 3, 7, 9, 10, 1
        gen = integers(1, 10).retry(never, max_attempts=5, fallback=Fallback.UseLast())
        counting = CountingSource(seeded(42))
        assert gen.run(counting) == 2
        assert counting.draws == 5
        assert gen.run(counting) == 1

    def test_use_default(self) -> None:
        gen = integers(1, 100).retry(never, max_attempts=5, fallback=Fallback.UseDefault(42))
        counting = CountingSource(seeded(7))
        assert gen.run(counting) == 42
        assert counting.draws == 5

    def test_delegate(self) -> None:
        gen = integers(1, 50).retry(
            lambda n: n > 200, max_attempts=5, fallback=Fallback.Delegate(lambda: 999)
        )
        assert gen.run(seeded(1)) == 999

    def test_keep_trying(self) -> None:
        gen = integers(1, 10).retry(lambda n: n == 9, max_attempts=3, fallback=Fallback.KeepTrying())
        counting = CountingSource(seeded(42))
        assert gen.run(counting) == 9
        assert counting.draws == 8

    def test_exhaustion_never_raises(self) -> None:
        gen = always(5).filter(lambda n: n % 2 == 0, max_attempts=1)
        assert gen.run(seeded()) == 5


class TestConstruction:
    @pytest.mark.parametrize("attempts", [0, -3])
    def test_budget_must_be_positive(self, attempts: int) -> None:
        with pytest.raises(GeneratorConfigError):
            integers(1, 10).filter(lambda n: True, max_attempts=attempts)

    @pytest.mark.parametrize("attempts", [True, "5", 2.0])
    def test_budget_must_be_a_plain_int(self, attempts: object) -> None:
        with pytest.raises(GeneratorConfigError):
            integers(1, 10).retry(lambda n: True, max_attempts=attempts)  # type: ignore[arg-type]

    def test_fallback_must_be_a_fallback(self) -> None:
        with pytest.raises(GeneratorConfigError):
            integers(1, 10).retry(lambda n: True, fallback="use_last")  # type: ignore[arg-type]

    def test_policy_is_frozen(self) -> None:
        policy = AttemptPolicy(max_attempts=3)
        with pytest.raises(Exception):
            policy.max_attempts = 4  # type: ignore[misc]

    def test_attempt_bounded_op(self) -> None:
        gen = integers(1, 10).attempt_bounded(lambda n: n > 8, max_attempts=20)
        source = seeded(42)
        assert gen.run(source) == 10


class TestRetryMap:
    def test_parses_first_numeric_string(self) -> None:
        words = sampled_from(["abc", "123", "xyz", "456", "qwerty"])
        gen = words.retry_map(lambda s: int(s) if s.isdigit() else None)
        assert gen.run(seeded(42)) == 456

    def test_exhausted_use_last_yields_none(self) -> None:
        gen = always("abc").retry_map(lambda s: None, max_attempts=3)
        assert gen.run(seeded()) is None

    def test_default_applies_to_transformed_value(self) -> None:
        gen = always("abc").retry_map(
            lambda s: None, max_attempts=3, fallback=Fallback.UseDefault(-1)
        )
        assert gen.run(seeded()) == -1
