"""
Structured generation through the OpenAI chat completions API.
"""

from .llm_generator import StructuredGenerator, SYSTEM_PROMPT

__all__ = ['StructuredGenerator', 'SYSTEM_PROMPT']
