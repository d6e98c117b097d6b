"""telelog-backed logging for selectors, cursor transactions and the registry.

Every selector invocation runs inside ``span("selector::<label>")`` which
profiles the scan, tags it with a component (``selectors``, ``cursor`` or
``registry``) and, on exit, writes one ``span::done`` line carrying whatever
the selector attached through ``SpanHandle.add_metadata`` (status, span,
failure reason). Discrete outcomes such as ``selection.failed`` go through
``record_event``.

Output is driven by ``TEXTOBJ_ENGINE_*`` variables; see ``LogSettings``.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

from .config import env, env_flag

tl = cast(Any, telelog)

ROOT_LOGGER = "textobj_engine"


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Logging knobs read from the environment."""

    logger_name: str = ROOT_LOGGER
    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        buffered = env_flag("LOG_BUFFERED", False)
        return cls(
            logger_name=env("LOGGER") or ROOT_LOGGER,
            level=(env("LOG_LEVEL") or "INFO").upper(),
            console=not env_flag("DISABLE_CONSOLE", False),
            color=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            log_file=env("LOG_FILE") or "",
            buffer_size=int(env("LOG_BUFFER_SIZE") or "2048") if buffered else None,
        )


def build_config(settings: LogSettings) -> Any:
    """Translate ``LogSettings`` into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffer_size:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def _debug_preset(settings: LogSettings) -> LogSettings:
    return LogSettings(logger_name=settings.logger_name, level="DEBUG")


def _production_preset(settings: LogSettings) -> LogSettings:
    return LogSettings(
        logger_name=settings.logger_name,
        console=False,
        log_file=settings.log_file or "textobj_engine.log",
        buffer_size=settings.buffer_size or 2048,
    )


def _quiet_preset(settings: LogSettings) -> LogSettings:
    return LogSettings(logger_name=settings.logger_name, level="ERROR", console=False)


PRESETS: Dict[str, Callable[[LogSettings], LogSettings]] = {
    "development": _debug_preset,
    "production": _production_preset,
    "quiet": _quiet_preset,
}


class _State:
    settings: LogSettings = LogSettings()
    config: Optional[Any] = None
    loggers: Dict[str, Any] = {}


def configure(
    *,
    settings: Optional[LogSettings] = None,
    preset: Optional[str] = None,
    config: Optional[Any] = None,
) -> None:
    """Replace the active logging setup and drop cached loggers.

    ``preset`` names one of ``PRESETS`` and is applied on top of ``settings``
    (or the environment). A ready-made ``telelog.Config`` may be passed
    instead; it cannot be combined with a preset.
    """

    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    base = settings or LogSettings.from_env()
    if preset:
        try:
            base = PRESETS[preset.lower()](base)
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None

    _State.settings = base
    _State.config = config if config is not None else build_config(base)
    _State.loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Cached ``telelog.Logger`` bound to the active configuration."""

    if _State.config is None:
        configure()
    logger_name = name or _State.settings.logger_name
    logger = _State.loggers.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _State.config)
        _State.loggers[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _write(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(value)) for key, value in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Write an ``event::<name>`` line with ``data`` as key/value pairs."""

    _write(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Collects metadata reported when the enclosing ``span`` closes."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    _dirty: bool = field(default=False, repr=False)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)
        self._dirty = True

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(extra or {})
        return payload

    def fail(self, reason: str) -> None:
        _write(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def finish(self) -> None:
        if self._dirty:
            _write(self.logger, "debug", "span::done", self._payload())


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name`` and track it as ``component``.

    ``metadata`` is pushed as logger context for the duration of the block
    and seeds the handle's metadata.
    """

    log = get_logger(logger_name)
    seeded = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log, span_name=name, component_name=component, metadata=dict(seeded)
    )

    with ExitStack() as stack:
        for key, value in seeded.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        handle.finish()


__all__ = [
    "LogSettings",
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
