from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from rich.markup import escape

from . import console

APP_NAME = "upnotes"
CONFIG_FILENAME = "config.toml"
PACKAGE_NAME_DEFAULT = "upnotes-cli"
PACKAGE_URL_DEFAULT = "https://pypi.org/pypi/upnotes-cli/json"
CHANGELOG_URL_DEFAULT = "https://raw.githubusercontent.com/upnotes/upnotes-cli/main/CHANGELOG.md"
TIMEOUT_S_DEFAULT = 15.0

ENV_PACKAGE_URL = "UPNOTES_PACKAGE_URL"
ENV_CHANGELOG_URL = "UPNOTES_CHANGELOG_URL"
ENV_NO_UPDATE_CHECK = "UPNOTES_NO_UPDATE_CHECK"


@dataclass
class AppConfig:
    package_name: str = PACKAGE_NAME_DEFAULT
    package_url: str = PACKAGE_URL_DEFAULT
    changelog_url: str = CHANGELOG_URL_DEFAULT
    check_updates: bool = True
    timeout_s: float = TIMEOUT_S_DEFAULT
    update_command: list[str] = field(default_factory=list)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def default_update_command(package_name: str) -> list[str]:
    return [sys.executable, "-m", "pip", "install", "--upgrade", package_name]


def effective_update_command(cfg: AppConfig) -> list[str]:
    return list(cfg.update_command) or default_update_command(cfg.package_name)


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "package_name": cfg.package_name,
        "package_url": cfg.package_url,
        "changelog_url": cfg.changelog_url,
        "check_updates": cfg.check_updates,
        "timeout_s": cfg.timeout_s,
    }
    if cfg.update_command:
        data["update_command"] = list(cfg.update_command)
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    package_name = str(data.get("package_name") or "").strip()
    if package_name:
        cfg.package_name = package_name
    package_url = str(data.get("package_url") or "").strip()
    if package_url:
        cfg.package_url = package_url
    changelog_url = str(data.get("changelog_url") or "").strip()
    if changelog_url:
        cfg.changelog_url = changelog_url
    check_updates = data.get("check_updates")
    if isinstance(check_updates, bool):
        cfg.check_updates = check_updates
    timeout_s = data.get("timeout_s")
    if isinstance(timeout_s, (int, float)) and not isinstance(timeout_s, bool) and timeout_s > 0:
        cfg.timeout_s = float(timeout_s)
    command = data.get("update_command")
    if isinstance(command, list) and command and all(isinstance(c, str) for c in command):
        cfg.update_command = [str(c) for c in command]
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()
    except tomllib.TOMLDecodeError as exc:
        console.warn(escape(f"Ignoring malformed config {path}: {exc}"))
        return default_config()


def resolve_package_url(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_PACKAGE_URL, "").strip()
    if env_value:
        return env_value
    return (cfg.package_url or PACKAGE_URL_DEFAULT).strip()


def resolve_changelog_url(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_CHANGELOG_URL, "").strip()
    if env_value:
        return env_value
    return (cfg.changelog_url or CHANGELOG_URL_DEFAULT).strip()


def update_check_enabled(cfg: AppConfig) -> bool:
    if os.getenv(ENV_NO_UPDATE_CHECK, "").strip().lower() in {"1", "true", "yes"}:
        return False
    return cfg.check_updates


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
