"""
Unit Tests for Cursor

Peek/advance/rewind bounds and transactional backtracking.
"""

import pytest

from parsing import Cursor, Success, Failure


class TestCursorMovement:
    """Tests for peek, advance and rewind."""

    def test_peek_does_not_consume(self):
        cursor = Cursor("abc")
        assert cursor.peek(2) == "ab"
        assert cursor.offset == 0

    def test_peek_insufficient_input(self, make_cursor):
        cursor = make_cursor("abc", 2)
        assert cursor.peek(2) is None
        assert cursor.peek(1) == "c"

    def test_advance_moves_offset(self):
        cursor = Cursor("abc")
        assert cursor.advance(2) is True
        assert cursor.offset == 2
        assert cursor.peek() == "c"

    def test_advance_past_end_is_noop(self, make_cursor):
        cursor = make_cursor("abc", 2)
        assert cursor.advance(2) is False
        assert cursor.offset == 2

    def test_advance_to_exact_end(self):
        cursor = Cursor("abc")
        assert cursor.advance(3) is True
        assert cursor.at_end
        assert cursor.remaining == 0

    def test_rewind_clamps_at_zero(self, make_cursor):
        cursor = make_cursor("abc", 1)
        cursor.rewind(5)
        assert cursor.offset == 0

    def test_advance_rejects_negative_count(self):
        cursor = Cursor("abc")
        with pytest.raises(ValueError):
            cursor.advance(-2)
        assert cursor.offset == 0

    def test_rewind_rejects_negative_count(self, make_cursor):
        cursor = make_cursor("abc", 1)
        with pytest.raises(ValueError):
            cursor.rewind(-10)
        assert cursor.offset == 1

    @pytest.mark.parametrize("offset, n", [(0, 0), (3, 0), (3, 1), (2, 7)])
    def test_offset_stays_in_bounds(self, make_cursor, offset, n):
        cursor = make_cursor("abc", offset)
        cursor.advance(n)
        assert 0 <= cursor.offset <= 3
        cursor.rewind(n)
        assert 0 <= cursor.offset <= 3

    def test_location_counts_lines(self):
        cursor = Cursor("1 +\n  2")
        assert cursor.location(0) == (1, 1)
        assert cursor.location(6) == (2, 3)


class TestTransaction:
    """Tests for with_transaction."""

    def test_success_commits(self):
        cursor = Cursor("abc")

        def consume(c):
            c.advance(2)
            return Success("ab", c.offset)

        outcome = cursor.with_transaction(consume)
        assert outcome == Success("ab", 2)
        assert cursor.offset == 2

    def test_failure_restores(self):
        cursor = Cursor("abc")

        def consume_then_fail(c):
            c.advance(2)
            return Failure("nope", c.offset)

        outcome = cursor.with_transaction(consume_then_fail)
        assert not outcome
        assert outcome.index == 2
        assert cursor.offset == 0

    def test_exception_restores(self):
        cursor = Cursor("abc")

        def explode(c):
            c.advance(1)
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            cursor.with_transaction(explode)
        assert cursor.offset == 0

    def test_nested_restores_only_own_level(self):
        cursor = Cursor("abcd")

        def inner(c):
            c.advance(1)
            return Failure("inner", c.offset)

        def outer(c):
            c.advance(2)
            c.with_transaction(inner)
            assert c.offset == 2
            return Success(None, c.offset)

        cursor.with_transaction(outer)
        assert cursor.offset == 2
