"""Configuration file management for hearth."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from hearth.currency import DEFAULT_CURRENCY_CODE, get_currency


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_dir() -> Path:
    """Get the hearth config directory."""
    return get_xdg_config_home() / "hearth"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_config_dir() / "config.toml"


def default_budget_path() -> Path:
    """Get the default budget file path, next to the config file."""
    return get_config_dir() / "budget.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "currency": DEFAULT_CURRENCY_CODE,
        "budget_file": str(config_path.parent / "budget.toml"),
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _load_or_empty(config_path: Path | None) -> dict[str, Any]:
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return {}


def get_currency_code(config_path: Path | None = None) -> str:
    """Get the configured currency code.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Currency code, or USD when unset, unknown, or there is no config file.
    """
    code = _load_or_empty(config_path).get("currency")
    if isinstance(code, str) and get_currency(code):
        return code.strip().upper()
    return DEFAULT_CURRENCY_CODE


def set_currency_code(code: str, config_path: Path | None = None) -> str:
    """Set the configured currency code.

    Args:
        code: ISO currency code.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The normalized code that was saved.

    Raises:
        ValueError: If the code is not a supported currency.
    """
    currency = get_currency(code)
    if currency is None:
        raise ValueError(f"Unsupported currency: {code}")

    config = _load_or_empty(config_path)
    config["currency"] = currency.code
    save_config(config, config_path)
    return currency.code


def get_budget_path(config_path: Path | None = None) -> Path:
    """Get the budget file path.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configured budget file path, or the default next to the config file.
    """
    budget_file = _load_or_empty(config_path).get("budget_file")
    if isinstance(budget_file, str) and budget_file:
        return Path(budget_file).expanduser()
    if config_path is not None:
        return config_path.parent / "budget.toml"
    return default_budget_path()
