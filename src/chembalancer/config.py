"""JSON configuration for batch runs and equation rendering."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class RenderOptions:
    """How balanced equations are written out.

    Attributes:
        arrow: Separator placed between the two sides.
        unicode_minus: Write negative charges with U+2212 instead of ``-``.
        show_ones: Print coefficients equal to 1 instead of omitting them.
    """

    arrow: str = "→"
    unicode_minus: bool = True
    show_ones: bool = False


@dataclass(frozen=True)
class BatchConfig:
    equations: tuple[str, ...]
    render: RenderOptions = field(default_factory=RenderOptions)


def _parse_render(data: Dict[str, Any]) -> RenderOptions:
    known = {f.name for f in fields(RenderOptions)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown render options: {', '.join(sorted(unknown))}")
    arrow = data.get("arrow", RenderOptions.arrow)
    if not isinstance(arrow, str):
        raise ValueError("Render option 'arrow' must be a string")
    for name in ("unicode_minus", "show_ones"):
        if name in data and not isinstance(data[name], bool):
            raise ValueError(f"Render option '{name}' must be true or false")
    return RenderOptions(
        arrow=arrow,
        unicode_minus=data.get("unicode_minus", RenderOptions.unicode_minus),
        show_ones=data.get("show_ones", RenderOptions.show_ones),
    )


def parse_config(data: Dict[str, Any]) -> BatchConfig:
    equations = data.get("equations")
    if not isinstance(equations, list) or not equations:
        raise ValueError("Config needs a non-empty 'equations' list")
    if not all(isinstance(item, str) for item in equations):
        raise ValueError("Every entry in 'equations' must be a string")
    return BatchConfig(
        equations=tuple(equations),
        render=_parse_render(data.get("render", {})),
    )


def load_config(path: str | Path) -> BatchConfig:
    with open(path, "r", encoding="utf-8") as f:
        return parse_config(json.load(f))
