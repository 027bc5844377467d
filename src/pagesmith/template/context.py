"""Data visible to directives while a template renders."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Protocol


class RandomSource(Protocol):
    """Anything that can pick one element of a sequence (e.g. random.Random)."""

    def choice(self, seq: Any) -> Any: ...


@dataclass(frozen=True)
class TemplateContext:
    """Rendering context shared by every code portion of one template."""

    static_dir: str
    content: str = ""
    variables: dict[str, str] = field(default_factory=dict)
    rng: RandomSource = field(default_factory=random.Random, compare=False)
