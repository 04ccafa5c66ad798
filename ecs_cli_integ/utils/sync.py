"""Utilities for waiting on remote state"""

import logging
import time
from typing import Callable, Optional, Tuple, TypeVar

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class ShortCircuitWaitException(Exception):
    """raise to immediately stop waiting, e.g. when an operation permanently failed"""

    pass


def poll_with_retries(
    fn: Callable[[], Tuple[bool, Optional[T]]],
    max_retries: int,
    interval: float,
    sleep: Optional[Callable[[float], None]] = None,
) -> Tuple[bool, Optional[T]]:
    """
    Calls ``fn`` up to ``max_retries`` times, sleeping a fixed ``interval`` after every unsuccessful attempt.

    ``fn`` returns a tuple ``(settled, value)``. As soon as an attempt reports ``settled``, ``(True, value)`` is
    returned. Exceptions raised by ``fn`` count as an unsuccessful attempt, except for
    ``ShortCircuitWaitException`` which stops polling right away.

    :param fn: the attempt to execute
    :param max_retries: the maximum number of attempts
    :param interval: seconds to sleep between attempts
    :param sleep: the sleep function, defaults to ``time.sleep``
    :return: ``(True, value)`` of the settling attempt, or ``(False, None)`` if the budget is exhausted
    """
    sleep = sleep or time.sleep
    for attempt in range(1, max_retries + 1):
        try:
            settled, value = fn()
        except ShortCircuitWaitException:
            return False, None
        except Exception as e:
            LOG.debug("Attempt %s/%s failed: %s", attempt, max_retries, e)
            settled, value = False, None

        if settled:
            return True, value

        if attempt < max_retries:
            sleep(interval)

    return False, None
