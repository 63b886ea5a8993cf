from abc import ABC, abstractmethod
import logging
from typing import Callable, Optional


class LogGateway(ABC):
    """
    Receives log messages from the pipeline, and decides the fate of every error.
    """

    @abstractmethod
    def log(self, message: str, *args) -> None:
        """
        Log a message. `message` is a `str.format` template for `args`.
        """

    @abstractmethod
    def should_propagate(self, error: Exception) -> bool:
        """
        Report `error` and decide whether it is raised to the caller.

        @return
          `True` to raise `error`, `False` to return a `FailedResponse` instead.
        """


def always_propagate(error: Exception) -> bool:
    return True


def never_propagate(error: Exception) -> bool:
    return False


class LoggingGateway(LogGateway):
    """
    Writes to a `logging` logger, and delegates the propagation decision to a policy function.
    """

    def __init__(self,
                 propagate: Callable[[Exception], bool] = always_propagate,
                 logger: Optional[logging.Logger] = None) -> None:
        self.__propagate = propagate
        self.__logger = logger or logging.getLogger(__name__)

    def log(self, message: str, *args) -> None:
        self.__logger.info(message.format(*args))

    def should_propagate(self, error: Exception) -> bool:
        propagate = self.__propagate(error)
        self.__logger.warning('{}: {} ({})'.format(type(error).__name__,
                                                   error,
                                                   'propagating' if propagate else 'suppressing'))
        return propagate
