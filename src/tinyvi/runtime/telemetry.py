"""Editor telemetry on top of telelog.

Spans and events carry the editor's own vocabulary: the active ``mode``, the
``cursor`` as ``row:col`` and the ``key`` being handled are first-class
fields, anything else is passed as extra keyword fields::

    with span("session::handle_key", component="session", mode=mode, key="i"):
        ...
    record_event("session.quit", cursor=(0, 3))

The ``tui`` preset keeps the console silent so records never paint over the
editor; it is the default for the ``tinyvi`` command.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TINYVI_"
LOGGER_NAME = "tinyvi"

PRESETS = ("development", "production", "performance", "tui")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def format_value(value: Any) -> str:
    """Render editor values: modes by name, cursors as ``row:col``."""

    if isinstance(value, Enum):
        return str(value.value)
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(part, int) for part in value)
    ):
        return f"{value[0]}:{value[1]}"
    return str(value)


def editor_fields(
    *,
    mode: Any = None,
    cursor: Any = None,
    key: Optional[str] = None,
    **extra: Any,
) -> Dict[str, str]:
    """Ordered, stringified record fields; ``None`` values are left out."""

    fields: Dict[str, str] = {}
    for name, value in (("mode", mode), ("cursor", cursor), ("key", key)):
        if value is not None:
            fields[name] = format_value(value)
    for name, value in extra.items():
        if value is not None:
            fields[name] = format_value(value)
    return fields


def _build_config(preset: Optional[str]) -> Any:
    config = tl.Config()
    log_file = _env("LOG_FILE") or ""

    if preset is None:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        console = not _env_flag("DISABLE_CONSOLE")
        config.with_console_output(console)
        if console:
            config.with_colored_output(not _env_flag("NO_COLOR"))
        if _env_flag("LOG_JSON"):
            config.with_json_format(True)
        if _env_flag("LOG_BUFFERED"):
            config.with_buffering(True)
            config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    elif preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif preset == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_buffering(True)
        log_file = log_file or "tinyvi.log"
    elif preset == "performance":
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_buffering(True)
        config.with_json_format(True)
        log_file = log_file or "tinyvi-performance.log"
    elif preset == "tui":
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        config.with_console_output(False)
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration.

    ``preset`` is one of ``PRESETS``; ``config`` is a ready ``tl.Config``.
    With neither, the ``TINYVI_*`` environment decides.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")

    _ACTIVE_CONFIG = config if config is not None else _build_config(preset)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name`` (default ``tinyvi``)."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_config(None)
    logger_name = name or LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _write(log: Any, level: str, message: str, fields: Dict[str, str]) -> None:
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, list(fields.items()))
        return
    method = getattr(log, level, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(f"{message} {fields}" if fields else message)


def record_event(
    name: str,
    *,
    level: str = "info",
    logger_name: Optional[str] = None,
    mode: Any = None,
    cursor: Any = None,
    key: Optional[str] = None,
    **extra: Any,
) -> None:
    """Write one ``event::<name>`` record with editor fields attached."""

    fields = {"event": name, **editor_fields(mode=mode, cursor=cursor, key=key, **extra)}
    _write(get_logger(logger_name), level.lower(), f"event::{name}", fields)


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects fields that are known only at the end."""

    logger: Any
    span_name: str
    component: Optional[str] = None
    fields: Dict[str, str] = field(default_factory=dict)

    def add(self, **fields: Any) -> None:
        self.fields.update(editor_fields(**fields))

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.fields, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _write(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    logger_name: Optional[str] = None,
    mode: Any = None,
    cursor: Any = None,
    key: Optional[str] = None,
    **extra: Any,
) -> Iterator[SpanHandle]:
    """Profile a block, tracked under ``component`` when one is given.

    The editor fields are set as logger context while the block runs. An
    exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    fields = editor_fields(mode=mode, cursor=cursor, key=key, **extra)
    for field_name, value in fields.items():
        log.add_context(field_name, value)

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log, span_name=name, component=component, fields=dict(fields)
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for field_name in fields:
                log.remove_context(field_name)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "editor_fields",
    "format_value",
    "get_logger",
    "record_event",
    "span",
]
