from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class RenderOptions:
    # "-" reads the template from stdin
    template: str = "-"
    data_files: List[Path] = field(default_factory=list)
    # Raw 'key.path=value' strings from --set, applied in order
    overrides: List[str] = field(default_factory=list)
    output: Optional[Path] = None
    # Frontmatter of the template provides default context values
    use_frontmatter: bool = True


__all__ = ["RenderOptions"]
