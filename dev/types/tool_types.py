"""
Tool result types shared by every skill.

Usage:
    from dev.types.tool_types import ToolResult
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ToolResult(BaseModel):
  """Result of one tool invocation, as handed back to the transport."""

  model_config = ConfigDict(frozen=True)

  content: str
  is_error: bool = False

  @classmethod
  def error(cls, message: str) -> ToolResult:
    return cls(content=f"Error: {message}", is_error=True)

  def to_envelope(self) -> dict[str, Any]:
    """Wire shape of the result: a single text content entry plus the error flag."""
    return {
      "content": [{"type": "text", "text": self.content}],
      "isError": self.is_error,
    }
