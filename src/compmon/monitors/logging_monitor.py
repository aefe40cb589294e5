"""A component monitor that writes to a stdlib ``logging`` logger.

Successful lifecycle steps are logged at DEBUG, failures at WARNING with the
original exception attached. Messages are only formatted when the target
level is enabled on the logger.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from compmon.core.errors import ConfigurationError
from compmon.core.members import MemberDescriptor, describe_member, qualified_name
from compmon.core.templates import (
    INSTANTIATED,
    INSTANTIATING,
    INSTANTIATION_FAILED,
    INVOCATION_FAILED,
    INVOKED,
    INVOKING,
    format_message,
    safe_text,
)

LoggerLike = logging.Logger | logging.LoggerAdapter
Formatter = Callable[[str, Sequence[Any]], str]
LoggerLookup = Callable[[MemberDescriptor], LoggerLike]


class EventLogger:
    """Forwards container lifecycle notifications to a named logger.

    ``logger`` may be a ``Logger``/``LoggerAdapter`` (used as is), a logger
    name, or a class whose fully qualified name is used as the logger name.
    Without an argument the logger is named after this class.
    """

    __slots__ = ("_logger", "_formatter", "_logger_lookup")

    def __init__(
        self,
        logger: LoggerLike | str | type | None = None,
        *,
        formatter: Formatter = format_message,
        logger_lookup: LoggerLookup | None = None,
    ) -> None:
        self._logger = _resolve_logger(EventLogger if logger is None else logger)
        self._formatter = formatter
        self._logger_lookup = logger_lookup

    @property
    def logger(self) -> LoggerLike:
        return self._logger

    def get_logger(self, member: MemberDescriptor) -> LoggerLike:
        """Logger for notifications about ``member``.

        The base implementation ignores ``member`` and returns the single
        stored logger. Pass ``logger_lookup`` or override this to route
        members to different loggers.
        """
        if self._logger_lookup is not None:
            return self._logger_lookup(member)
        return self._logger

    def instantiating(self, constructor: Any) -> None:
        constructor = describe_member(constructor)
        self._emit(constructor, logging.DEBUG, INSTANTIATING, (constructor,))

    def instantiated(self, constructor: Any, duration_ms: int) -> None:
        constructor = describe_member(constructor)
        self._emit(constructor, logging.DEBUG, INSTANTIATED, (constructor, duration_ms))

    def instantiation_failed(self, constructor: Any, error: BaseException) -> None:
        constructor = describe_member(constructor)
        self._emit(
            constructor,
            logging.WARNING,
            INSTANTIATION_FAILED,
            (constructor, safe_text(error)),
            error=error,
        )

    def invoking(self, method: Any, instance: Any) -> None:
        method = describe_member(method)
        self._emit(method, logging.DEBUG, INVOKING, (method, instance))

    def invoked(self, method: Any, instance: Any, duration_ms: int) -> None:
        method = describe_member(method)
        self._emit(method, logging.DEBUG, INVOKED, (method, instance, duration_ms))

    def invocation_failed(self, method: Any, instance: Any, error: BaseException) -> None:
        method = describe_member(method)
        self._emit(
            method,
            logging.WARNING,
            INVOCATION_FAILED,
            (method, instance, safe_text(error)),
            error=error,
        )

    def _emit(
        self,
        member: MemberDescriptor,
        level: int,
        template: str,
        args: Sequence[Any],
        error: BaseException | None = None,
    ) -> None:
        logger = self.get_logger(member)
        if not logger.isEnabledFor(level):
            return
        message = self._formatter(template, args)
        if level >= logging.WARNING:
            logger.warning(message, exc_info=error)
        else:
            logger.debug(message)

    def __getstate__(self) -> tuple[Any, ...]:
        return (self._logger, self._formatter, self._logger_lookup)

    def __setstate__(self, state: tuple[Any, ...]) -> None:
        self._logger, self._formatter, self._logger_lookup = state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(logger={self._logger.name!r})"


def _resolve_logger(source: Any) -> LoggerLike:
    if isinstance(source, (logging.Logger, logging.LoggerAdapter)):
        return source
    if isinstance(source, str):
        return logging.getLogger(source)
    if isinstance(source, type):
        return logging.getLogger(qualified_name(source))
    raise ConfigurationError(
        f"EventLogger expects a Logger, logger name or class, got {type(source).__name__}"
    )
