import functools
import logging
from typing import Generic, TypeVar, Callable, Optional
from ..errors import SeedPhraseException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SeedResult(Generic[T]):
    """
    Represents the result of an operation with optional value and error details.
    """

    def __init__(
        self,
        value: Optional[T] = None,
        error: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        self.value = value
        self.error = error
        self.error_code = error_code

    @property
    def success(self) -> bool:
        """
        Checks if the operation was successful.
        """
        return self.error is None

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Unwraps the SeedResult, returning the value if successful or
        raising a SeedPhraseException if there's an error.
        """
        if self.error is not None:
            raise SeedPhraseException(
                self.error, self.error_code if self.error_code else "UNKNOWN_ERROR"
            )
        return self.value


R = TypeVar("R")


def handle_errors(
    func: Callable[..., R],
) -> Callable[..., SeedResult[R]]:
    """
    Decorator to turn raised SeedPhraseExceptions into a failed SeedResult.

    Anything else is a bug and propagates.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> SeedResult[R]:
        try:
            return SeedResult[R](value=func(*args, **kwargs))
        except SeedPhraseException as e:
            logger.debug("%s failed: %s", func.__name__, e.code)
            return SeedResult[R](error=e.message, error_code=e.code)

    return wrapper
