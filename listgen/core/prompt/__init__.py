from __future__ import annotations

from .builder import PROMPT_VERSION, SYSTEM_DIRECTIVE, build_prompt

__all__ = ["PROMPT_VERSION", "SYSTEM_DIRECTIVE", "build_prompt"]
