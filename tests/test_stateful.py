import logging
import threading

from randkit import LCRNG, CountingSource, RemoveDuplicates, always, integers

from fakes import seeded


def test_skips_consecutive_repeats() -> None:
    # raw rolls: 1 1 6 3 2 2 4 2 2 1 6 4
    gen = integers(1, 6).remove_duplicates()
    source = seeded(7)
    assert [gen.run(source) for _ in range(8)] == [1, 6, 3, 2, 4, 2, 1, 6]


def test_no_adjacent_duplicates() -> None:
    gen = integers(1, 3).remove_duplicates()
    source = seeded(21)
    values = [gen.run(source) for _ in range(50)]
    assert all(a != b for a, b in zip(values, values[1:]))


def test_first_run_samples_once() -> None:
    counting = CountingSource(seeded())
    integers(1, 6).remove_duplicates().run(counting)
    assert counting.draws == 1


def test_exhaustion_accepts_repeat(caplog) -> None:
    gen = always(5).remove_duplicates(max_attempts=3)
    with caplog.at_level(logging.DEBUG, logger="randkit.combinators.stateful"):
        assert [gen.run(seeded()) for _ in range(3)] == [5, 5, 5]
    assert "No distinct value after 3 attempts" in caplog.text


def test_exhaustion_draws_max_attempts() -> None:
    gen = integers(4, 4).remove_duplicates(max_attempts=3)
    counting = CountingSource(seeded())
    gen.run(counting)
    gen.run(counting)
    assert counting.draws == 4


def test_custom_equivalence() -> None:
    gen = integers(1, 10).remove_duplicates(by=lambda a, b: a % 2 == b % 2)
    source = seeded(13)
    values = [gen.run(source) for _ in range(30)]
    assert all(a % 2 != b % 2 for a, b in zip(values, values[1:]))


def test_instances_have_independent_memory() -> None:
    base = integers(1, 6)
    first = base.remove_duplicates()
    second = base.remove_duplicates()
    first.run(seeded(7))
    # fresh instance has nothing remembered, so it samples exactly once
    counting = CountingSource(seeded(7))
    assert second.run(counting) == 1
    assert counting.draws == 1


def test_shared_across_threads() -> None:
    gen = integers(1, 6).remove_duplicates()
    assert isinstance(gen, RemoveDuplicates)
    results: dict[int, list[int]] = {}

    def worker(seed: int) -> None:
        source = LCRNG(seed=seed)
        results[seed] = [gen.run(source) for _ in range(200)]

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(results) == [0, 1, 2, 3]
    for values in results.values():
        assert len(values) == 200
        assert all(1 <= v <= 6 for v in values)
