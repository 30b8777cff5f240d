"""Query string parsing shared by the blueprints."""

import logging

from flask import abort, request


logger = logging.getLogger(__name__)

# Primary keys are 32-bit signed integers
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def int_arg(name: str) -> int:
    """Read an integer query parameter.

    A missing parameter reads as 0, which never matches a row. So does a
    value outside the range of the id columns. A value that is not an
    integer aborts with 400.
    """
    raw = request.args.get(name)
    if raw is None:
        return 0
    try:
        value = int(raw)
    except ValueError:
        abort(400)
    if not MIN_ID <= value <= MAX_ID:
        logger.debug(f"Out of range {name} reads as no match: {raw!r}")
        return 0
    return value


def completed_filter(raw: str | None) -> bool | None:
    """Parse the ``isCompleted`` filter.

    Accepts ``true``/``false`` in any case; anything else means no filter.
    """
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    logger.debug(f"Ignoring unparsable isCompleted filter: {raw!r}")
    return None
