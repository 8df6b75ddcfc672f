import threading
import time

from funcpipe.cancellation import (
    NEVER_CANCELLED,
    CancellationSignal,
    CancellationToken,
    check_cancelled,
)
from funcpipe.errors import CancellationError, DeadlineExceededError


class DescribeNeverCancelled:
    def it_never_fires(self):
        assert NEVER_CANCELLED.is_set() is False
        assert check_cancelled(NEVER_CANCELLED, 0) is None


class DescribeCancellationToken:
    def it_starts_unset(self):
        token = CancellationToken()

        assert not token.is_set()
        assert token.error() is None

    def it_fires_when_cancelled(self):
        token = CancellationToken()

        token.cancel("user abort")

        assert token.is_set()
        assert token.reason == "user abort"
        error = token.error(position=3)
        assert isinstance(error, CancellationError)
        assert error.reason == "user abort"
        assert error.position == 3

    def it_keeps_the_first_reason(self):
        token = CancellationToken()

        token.cancel("first")
        token.cancel("second")

        assert token.reason == "first"

    def it_fires_once_the_deadline_passes(self):
        token = CancellationToken(deadline=time.monotonic() - 1)

        assert token.is_set()
        assert token.deadline_exceeded()
        assert isinstance(token.error(), DeadlineExceededError)

    def it_does_not_fire_before_the_deadline(self):
        token = CancellationToken.with_timeout(60)

        assert not token.is_set()
        assert token.deadline is not None

    def it_can_be_cancelled_from_another_thread(self):
        token = CancellationToken()

        thread = threading.Thread(target=token.cancel, args=("worker",))
        thread.start()
        thread.join()

        assert token.is_set()
        assert token.reason == "worker"

    def it_satisfies_the_signal_protocol(self):
        assert isinstance(CancellationToken(), CancellationSignal)
        assert isinstance(threading.Event(), CancellationSignal)


class DescribeCheckCancelled:
    def it_returns_a_generic_error_for_plain_events(self):
        event = threading.Event()
        event.set()

        error = check_cancelled(event, 2)

        assert isinstance(error, CancellationError)
        assert not isinstance(error, DeadlineExceededError)
        assert error.position == 2

    def it_returns_none_for_unset_signals(self):
        assert check_cancelled(threading.Event(), 0) is None

    def it_uses_the_token_error(self):
        token = CancellationToken(deadline=time.monotonic() - 1)

        assert isinstance(check_cancelled(token, 0), DeadlineExceededError)
