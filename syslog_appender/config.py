"""Configuration module: frozen dataclass built from factory params, YAML, env vars and CLI args."""

import argparse
import enum
import logging
import os
from dataclasses import dataclass

import yaml

from syslog_appender.priority import LOG_USER, facility_from_name

logger = logging.getLogger(__name__)

DEFAULT_PORT = 514
MAX_PORT = 65535


class ConfigError(ValueError):
    """Raised when appender configuration is missing or malformed."""


class Transport(str, enum.Enum):
    UDP = "udp"
    TCP = "tcp"

    @classmethod
    def parse(cls, value) -> "Transport":
        if isinstance(value, Transport):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(f"unknown transport: {value!r}") from None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _parse_int(key: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be an integer, got {value!r}") from None


def _parse_facility(value) -> int:
    """Accept a pre-shifted code (8, "8") or a facility name ("user", "local0")."""
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        return facility_from_name(text)
    except ValueError as e:
        raise ConfigError(str(e)) from None


@dataclass(frozen=True)
class AppenderConfig:
    name: str = "syslog"
    syslog_name: str = "syslog"
    host: str = "localhost"
    facility: int = LOG_USER
    port: int = DEFAULT_PORT
    transport: Transport = Transport.UDP
    timeout: float | None = None

    def __post_init__(self):
        if not 0 <= self.port <= MAX_PORT:
            raise ConfigError(f"port must be in 0..{MAX_PORT}, got {self.port}")
        if self.timeout is not None and self.timeout < 0:
            raise ConfigError(f"timeout must not be negative, got {self.timeout}")

    @property
    def tcp(self) -> bool:
        return self.transport is Transport.TCP


def _normalize(params: dict) -> dict:
    """Turn loosely typed parameters into AppenderConfig keyword arguments.

    ``relayer`` is accepted as an alias for ``host``, ``tcp: true`` as an
    alias for ``transport: tcp``. A facility or port of -1 means "use the
    default".
    """
    kwargs: dict = {}
    if params.get("name") is not None:
        kwargs["name"] = str(params["name"])
    if params.get("syslog_name") is not None:
        kwargs["syslog_name"] = str(params["syslog_name"])
    for key in ("relayer", "host"):
        if params.get(key) is not None:
            kwargs["host"] = str(params[key])
    if params.get("facility") is not None:
        facility = _parse_facility(params["facility"])
        kwargs["facility"] = LOG_USER if facility == -1 else facility
    if params.get("port") is not None:
        port = _parse_int("port", params["port"])
        kwargs["port"] = DEFAULT_PORT if port == -1 else port
    if params.get("tcp") is not None:
        tcp = params["tcp"]
        if isinstance(tcp, str):
            tcp = _parse_bool(tcp)
        kwargs["transport"] = Transport.TCP if tcp else Transport.UDP
    if params.get("transport") is not None:
        kwargs["transport"] = Transport.parse(params["transport"])
    if params.get("timeout") is not None:
        try:
            kwargs["timeout"] = float(params["timeout"])
        except (TypeError, ValueError):
            raise ConfigError(f"timeout must be a number, got {params['timeout']!r}") from None
    return kwargs


def config_from_params(params: dict) -> AppenderConfig:
    """Build a config from factory parameters.

    ``name``, ``syslog_name`` and ``relayer`` (or ``host``) are required;
    ``facility``, ``port``, ``tcp``/``transport`` and ``timeout`` are optional.
    """
    missing = [key for key in ("name", "syslog_name") if not params.get(key)]
    if not params.get("relayer") and not params.get("host"):
        missing.append("relayer")
    if missing:
        raise ConfigError(
            "remote syslog appender: missing required parameter(s): " + ", ".join(missing)
        )
    return AppenderConfig(**_normalize(params))


def load_yaml_config(path: str | None) -> dict:
    """Load the ``appender`` section of a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    section = data.get("appender", data) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'appender' must be a mapping")
    return section


def _env_params() -> dict:
    env_keys = {
        "name": "SYSLOG_NAME",
        "syslog_name": "SYSLOG_APP_NAME",
        "host": "SYSLOG_HOST",
        "port": "SYSLOG_PORT",
        "facility": "SYSLOG_FACILITY",
        "transport": "SYSLOG_TRANSPORT",
        "timeout": "SYSLOG_TIMEOUT",
    }
    return {key: os.environ[var] for key, var in env_keys.items() if var in os.environ}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Remote syslog sender")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--name", type=str, default=None)
    parser.add_argument("--syslog-name", type=str, default=None)
    parser.add_argument("--host", type=str, default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--facility", type=str, default=None)
    parser.add_argument("--transport", type=str, choices=[t.value for t in Transport],
                        default=None)
    parser.add_argument("--timeout", type=float, default=None)
    parser.add_argument("--level", type=str, default="INFO",
                        help="priority of every line (EMERG .. DEBUG)")
    return parser


def config_from_args(args: argparse.Namespace, yaml_data: dict | None = None) -> AppenderConfig:
    """Merge defaults <- YAML <- env vars <- CLI args (highest priority)."""
    kwargs = _normalize(yaml_data or {})
    kwargs.update(_normalize(_env_params()))

    cli = {
        "name": args.name,
        "syslog_name": args.syslog_name,
        "host": args.host,
        "port": args.port,
        "facility": args.facility,
        "transport": args.transport,
        "timeout": args.timeout,
    }
    kwargs.update(_normalize({k: v for k, v in cli.items() if v is not None}))
    return AppenderConfig(**kwargs)


def load_config(args: argparse.Namespace) -> AppenderConfig:
    """Build the merged config from parsed CLI args and the YAML file they name."""
    return config_from_args(args, load_yaml_config(args.config))
