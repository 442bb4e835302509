import logging
from functools import wraps

from pprintpp import pformat

__all__ = ["logger", "log_state"]

# create logger
logger = logging.getLogger("PyTxUtil")

# create console handler and set level to debug
ch = logging.StreamHandler()

# create formatter
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# add formatter to ch
ch.setFormatter(formatter)

# add ch to logger
logger.addHandler(ch)


def log_state(func):
    """Decorator to log the record produced by a builder function."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            output = func(*args, **kwargs)
        except Exception as e:
            logger.warning(
                f"Function: {func.__qualname__}, arguments:\n {pformat(args, indent=2)}"
            )
            raise e
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Function: {func.__qualname__}, state:\n {pformat(output, indent=2)}"
            )
        return output

    return wrapper
