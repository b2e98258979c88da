"""
Configuration management for ysh.

Handles loading and saving user configuration from:
- XDG config directory: ~/.config/ysh/config.json
- Fallback: ~/.ysh/config.json
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class ShellConfig:
    """Shell session settings."""
    prompt: str = "% "
    echo: bool = False
    history_file: Optional[str] = None


@dataclass
class CLIConfig:
    """CLI default options."""
    verbose: bool = False
    color: bool = True


@dataclass
class YshConfig:
    """Main ysh configuration."""
    shell: ShellConfig = field(default_factory=ShellConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "shell": asdict(self.shell),
            "cli": asdict(self.cli),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'YshConfig':
        """Create from dictionary."""
        return cls(
            shell=ShellConfig(**data.get("shell", {})),
            cli=CLIConfig(**data.get("cli", {})),
        )


def get_config_path() -> Path:
    """
    Get configuration file path.

    Follows XDG Base Directory specification:
    1. $XDG_CONFIG_HOME/ysh/config.json (usually ~/.config/ysh/config.json)
    2. Fallback: ~/.ysh/config.json

    Returns:
        Path to config file
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / "ysh" / "config.json"

    default_config_home = Path.home() / ".config"
    if default_config_home.exists():
        config_dir = default_config_home / "ysh"
    else:
        config_dir = Path.home() / ".ysh"

    return config_dir / "config.json"


def get_history_path(config: YshConfig) -> Path:
    """Shell history file: configured path, or history next to the config file."""
    if config.shell.history_file:
        return Path(config.shell.history_file).expanduser()
    return get_config_path().parent / "history"


def load_config() -> YshConfig:
    """
    Load configuration from file.

    Returns:
        YshConfig instance with loaded values or defaults
    """
    config_path = get_config_path()

    if not config_path.exists():
        return YshConfig()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return YshConfig.from_dict(data)
    except (json.JSONDecodeError, OSError, TypeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        logger.warning("Using default configuration")
        return YshConfig()


def save_config(config: YshConfig) -> Path:
    """
    Save configuration to file.

    Args:
        config: Configuration to save

    Returns:
        Path the configuration was written to
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    logger.debug(f"Configuration saved to {config_path}")
    return config_path


def ensure_config_exists() -> Path:
    """
    Ensure configuration file exists, creating with defaults if not.

    Returns:
        Path to config file
    """
    config_path = get_config_path()

    if not config_path.exists():
        save_config(YshConfig())
        logger.info(f"Created default configuration at {config_path}")

    return config_path


def update_config(
    # Shell settings
    shell_prompt: Optional[str] = None,
    shell_echo: Optional[bool] = None,
    shell_history_file: Optional[str] = None,
    # CLI settings
    cli_verbose: Optional[bool] = None,
    cli_color: Optional[bool] = None,
) -> YshConfig:
    """
    Update configuration.

    Only updates provided values, leaving others unchanged.

    Returns:
        The saved configuration
    """
    config = load_config()

    if shell_prompt is not None:
        config.shell.prompt = shell_prompt
    if shell_echo is not None:
        config.shell.echo = shell_echo
    if shell_history_file is not None:
        config.shell.history_file = shell_history_file

    if cli_verbose is not None:
        config.cli.verbose = cli_verbose
    if cli_color is not None:
        config.cli.color = cli_color

    save_config(config)
    return config
