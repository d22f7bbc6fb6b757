"""
Tests for RequestContext cancellation and deadlines.
"""

import time
import traceback

from xelon_sdk import DeadlineExceededError, RequestCancelledError, RequestContext, background


class TestRequestContext:
    def test_background_is_never_done(self):
        ctx = background()

        assert ctx.err() is None
        assert not ctx.done()
        assert ctx.remaining() is None
        assert ctx.deadline is None

    def test_cancel(self):
        ctx = RequestContext()

        ctx.cancel()

        assert ctx.done()
        assert isinstance(ctx.err(), RequestCancelledError)
        assert str(ctx.err()) == "context canceled"

    def test_err_reports_the_same_reason_as_new_instances(self):
        ctx = RequestContext()
        ctx.cancel()
        first = ctx.err()

        ctx.cancel()
        second = ctx.err()

        assert type(second) is type(first) is RequestCancelledError
        assert str(second) == str(first)
        assert second is not first

    def test_raising_err_repeatedly_keeps_traceback_short(self):
        ctx = RequestContext(timeout=0)
        depths = []

        for _ in range(20):
            try:
                raise ctx.err()
            except DeadlineExceededError as e:
                depths.append(len(traceback.extract_tb(e.__traceback__)))

        assert depths == [1] * 20

    def test_deadline_expires(self):
        ctx = RequestContext(timeout=0.01)
        time.sleep(0.05)

        assert isinstance(ctx.err(), DeadlineExceededError)
        assert str(ctx.err()) == "context deadline exceeded"
        assert ctx.remaining() == 0.0

    def test_cancel_after_deadline_keeps_deadline_error(self):
        ctx = RequestContext(timeout=0)
        assert isinstance(ctx.err(), DeadlineExceededError)

        ctx.cancel()

        assert isinstance(ctx.err(), DeadlineExceededError)

    def test_earlier_of_timeout_and_deadline_wins(self):
        deadline = time.monotonic() + 100
        ctx = RequestContext(timeout=10, deadline=deadline)

        assert ctx.deadline < deadline
        assert 0 < ctx.remaining() <= 10

    def test_absolute_deadline(self):
        ctx = RequestContext(deadline=time.monotonic() + 60)

        assert not ctx.done()
        assert 0 < ctx.remaining() <= 60
