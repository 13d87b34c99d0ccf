from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Tuple


SETTINGS_PATH = Path(__file__).with_name("settings.json")

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) '
    'AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)

try:
    with SETTINGS_PATH.open("r") as f:
        _SETTINGS = json.load(f)
except FileNotFoundError:
    _SETTINGS = {}


def get_setting(key: str, default: Any = None) -> Any:
    """Return the configured value for ``key`` or ``default`` if missing."""
    return _SETTINGS.get(key, default)


DEFAULT_HEADERS = (
    ("Accept-Language", "en-US,en;q=0.9"),
    ("Accept-Encoding", "gzip, deflate, br"),
)


@dataclass(frozen=True)
class ScraperConfig:
    """Read-only knobs for a single scrape run.

    ``timeout`` is in milliseconds and bounds both navigation and the wait
    for ``wait_selector``. ``extra_headers`` is a tuple of name/value pairs.
    """

    timeout: int = 30_000
    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1920
    viewport_height: int = 1080
    headless: bool = True
    launch_args: Tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")
    extra_headers: Tuple[Tuple[str, str], ...] = DEFAULT_HEADERS
    wait_selector: str = "body"
    item_selector: str = "article, .item, [data-item]"

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            # Playwright treats 0 as "wait forever".
            raise ValueError(
                f"timeout must be a positive number of milliseconds, got {self.timeout}"
            )


_FILE_KEYS = ("timeout", "user_agent", "viewport_width", "viewport_height", "headless")


def load_config(**overrides: Any) -> ScraperConfig:
    """Build a config from defaults, then ``settings.json``, then ``overrides``.

    Overrides set to ``None`` are ignored so CLI flags can be passed through
    unconditionally.
    """
    values = {key: _SETTINGS[key] for key in _FILE_KEYS if key in _SETTINGS}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return replace(ScraperConfig(), **values)
