from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

console = Console()

_LOGGING_CONFIGURED = False


def configure_logging(level: str = "WARNING") -> None:
    """Route stdlib logging through rich once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s | %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    _LOGGING_CONFIGURED = True


def _to_jsonable(x: Any) -> Any:
    if is_dataclass(x) and not isinstance(x, type):
        return asdict(x)
    if hasattr(x, "model_dump"):
        return x.model_dump(mode="json")
    if isinstance(x, Enum):
        return x.value
    if isinstance(x, (list, tuple)):
        return [_to_jsonable(v) for v in x]
    if isinstance(x, dict):
        return {k: _to_jsonable(v) for k, v in x.items()}
    return x


def to_json(payload: Any) -> str:
    return json.dumps(_to_jsonable(payload), default=str)


def log_event(event: str, payload: dict[str, Any]) -> None:
    console.print(f"[bold]{event}[/bold]")
    console.print_json(to_json(payload))
