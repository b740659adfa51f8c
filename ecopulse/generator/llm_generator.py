"""
Generator Module for LLM Integration

This module provides the interface to the chat model that turns campus energy
prompts into structured JSON, constrained by a declared output schema.
"""
from typing import Any, Dict, Optional
import logging
import time

import openai
from openai import AsyncOpenAI

from ecopulse.config.settings import get_api_key, get_settings
from ecopulse.exceptions import GenerationServiceError, ResponseParseError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an AI sustainability analyst for a college campus energy team.
You work with hourly solar, wind and demand data and report in the framing of UN SDG 7 (affordable and clean energy).
Write for non-technical decision-makers.
Respond only with JSON that matches the requested schema."""


class StructuredGenerator:
    """
    Text generation component that asks the chat model for JSON output
    conforming to a strict schema and returns the raw JSON text.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, client: Optional[AsyncOpenAI] = None):
        """
        Initialize the Generator.

        Args:
            config: Configuration dictionary (model_name, temperature)
            client: Optional pre-built async OpenAI client, left open after each call.
                When omitted a new client is created and closed around every call
                so the API key is read at call time.
        """
        self.config = config or {}
        settings = get_settings()
        self.model_name = self.config.get("model_name", settings.model)
        self.temperature = self.config.get("temperature", settings.temperature)
        self.client = client

    def _create_client(self) -> AsyncOpenAI:
        try:
            return AsyncOpenAI(api_key=get_api_key())
        except openai.OpenAIError as e:
            raise GenerationServiceError(f"Could not create OpenAI client: {e}") from e

    async def generate_json(self, prompt: str, schema_name: str, schema: Dict[str, Any]) -> str:
        """
        Call the chat model with a JSON schema response format.

        Args:
            prompt: User prompt
            schema_name: Name reported to the API for the schema
            schema: JSON schema the response must conform to

        Returns:
            The JSON text produced by the model

        Raises:
            GenerationServiceError: if the API call fails
            ResponseParseError: if the model returned no content
        """
        if self.client is not None:
            return await self._complete(self.client, prompt, schema_name, schema)

        async with self._create_client() as client:
            return await self._complete(client, prompt, schema_name, schema)

    async def _complete(self, client: AsyncOpenAI, prompt: str, schema_name: str, schema: Dict[str, Any]) -> str:
        start_time = time.time()
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt}
        ]
        logger.debug(f"Prompt for {schema_name}:\n{prompt}")

        try:
            response = await client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                temperature=self.temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "schema": schema,
                        "strict": True,
                    },
                },
            )
        except openai.OpenAIError as e:
            logger.error(f"Error calling OpenAI API for {schema_name}: {e}")
            raise GenerationServiceError(f"Generation call for {schema_name} failed: {e}") from e

        if not response.choices:
            raise ResponseParseError(f"Model returned no choices for {schema_name}")
        generated_text = response.choices[0].message.content
        if not generated_text or not generated_text.strip():
            raise ResponseParseError(f"Model returned an empty response for {schema_name}")

        execution_time_ms = (time.time() - start_time) * 1000
        usage = getattr(response, "usage", None)
        total_tokens = getattr(usage, "total_tokens", 0) if usage else 0
        logger.info(
            f"{schema_name} generated with {self.model_name} in {execution_time_ms:.0f}ms ({total_tokens} tokens)"
        )
        return generated_text
