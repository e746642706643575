import functools
import logging

logger = logging.getLogger(__name__.split(".")[-1])


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        # Skip self for methods, the engine repr is not useful
        shown_args = args[1:] if args and hasattr(args[0], fn.__name__) else args
        logger.debug(f"Calling {fn.__name__} {shown_args} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped
