"""
reqdoc.render.config - Rendering options from the [render] section.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class RenderConfig:
    """
    Options for document rendering.

    Attributes:
        toc: Emit the ``[[_TOC_]]`` marker in Markdown output
        highlight_keywords: Emphasise lower-case RFC 2119 key words
    """

    toc: bool = True
    highlight_keywords: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from the [render] configuration section."""
        return cls(
            toc=data.get("toc", True),
            highlight_keywords=data.get("highlight_keywords", True),
        )
