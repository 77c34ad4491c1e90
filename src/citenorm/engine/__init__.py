"""Normalization run orchestration.

This module wires payload validation, normalization, and audit logging
around the pure normalization engine.
"""

from citenorm.engine.config import NormalizationConfig
from citenorm.engine.runner import run_normalization

__all__ = ["NormalizationConfig", "run_normalization"]
