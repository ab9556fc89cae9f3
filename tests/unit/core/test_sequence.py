"""Tests for identifier allocation."""

from concurrent.futures import ThreadPoolExecutor

from src.bookshelf.core.storage import IdSequence


class TestIdSequence:
    def test_starts_at_one_and_increments(self):
        sequence = IdSequence()

        assert [sequence.next() for _ in range(3)] == ["1", "2", "3"]

    def test_custom_start(self):
        sequence = IdSequence(start=10)

        assert sequence.next() == "10"
        assert sequence.peek() == 11

    def test_peek_does_not_consume(self):
        sequence = IdSequence()

        assert sequence.peek() == 1
        assert sequence.peek() == 1
        assert sequence.next() == "1"

    def test_concurrent_allocation_is_unique(self):
        sequence = IdSequence()

        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(lambda _: sequence.next(), range(500)))

        assert len(set(ids)) == 500
        assert sorted(int(i) for i in ids) == list(range(1, 501))
