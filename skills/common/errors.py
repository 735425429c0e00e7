"""
Exception types shared by all skills.

Handlers raise these; the dispatcher turns them into error results.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
  CONFIG = "CONFIG"
  POLICY = "POLICY"
  VALIDATION = "VALIDATION"
  API = "API"
  BACKEND = "BACKEND"


class SkillError(Exception):
  """Base class for errors raised on purpose by skill code."""

  category: ErrorCategory = ErrorCategory.BACKEND


class ConfigurationError(SkillError):
  """Required settings are missing or invalid."""

  category = ErrorCategory.CONFIG


class PolicyViolationError(SkillError):
  """A statement was rejected by the read-only policy."""

  category = ErrorCategory.POLICY


class ValidationError(SkillError):
  """A tool argument is missing or malformed."""

  category = ErrorCategory.VALIDATION
