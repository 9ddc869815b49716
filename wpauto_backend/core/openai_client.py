"""
OpenAI client singleton and helper functions.
"""
import json
import logging
from typing import List, Dict, Any, Optional
from openai import OpenAI
from .config import settings

logger = logging.getLogger(__name__)

# Singleton instance
_openai_client: Optional[OpenAI] = None


def get_openai() -> OpenAI:
    """Get OpenAI client singleton."""
    global _openai_client

    if _openai_client is None:
        if not settings.OPENAI_API_KEY:
            raise ValueError("OPENAI_API_KEY is required but not set")

        _openai_client = OpenAI(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.OPENAI_TIMEOUT_S
        )
        logger.info(f"OpenAI client initialized with model: {settings.OPENAI_TEXT_MODEL}")

    return _openai_client


async def run_text(messages: List[Dict[str, str]], **opts) -> str:
    """
    Generate text using OpenAI chat completions.

    Args:
        messages: List of message dicts with 'role' and 'content'
        **opts: Additional options (model, temperature, max_completion_tokens, etc.)

    Returns:
        Generated text content
    """
    client = get_openai()

    options = {
        "model": settings.OPENAI_TEXT_MODEL,
        "temperature": settings.OPENAI_TEMPERATURE,
        "max_completion_tokens": settings.OPENAI_MAX_TOKENS_TEXT,
        "messages": messages
    }
    options.update(opts)

    try:
        logger.info(f"Calling OpenAI with model: {options['model']}")
        response = client.chat.completions.create(**options)

        content = response.choices[0].message.content
        logger.info(f"OpenAI response received, length: {len(content) if content else 0}")

        return content or ""

    except Exception as e:
        logger.error(f"OpenAI text generation failed: {str(e)}")
        raise


def validate_json_response(content: str, context: str = "") -> Dict[str, Any]:
    """
    Validate and parse JSON response from OpenAI.

    Args:
        content: Raw content from OpenAI
        context: Context for error messages

    Returns:
        Parsed JSON dict

    Raises:
        ValueError: If JSON is invalid
    """
    try:
        content = content.strip()

        # Look for JSON block markers
        if "```json" in content:
            start = content.find("```json") + 7
            end = content.find("```", start)
            if end != -1:
                content = content[start:end].strip()
        elif "```" in content:
            start = content.find("```") + 3
            end = content.find("```", start)
            if end != -1:
                content = content[start:end].strip()

        if not content:
            raise ValueError(f"Empty content after cleaning for {context}")

        result = json.loads(content)
        if not isinstance(result, dict):
            raise ValueError(f"Expected a JSON object for {context}")
        logger.info(f"JSON validation successful for {context}")
        return result

    except json.JSONDecodeError as e:
        logger.error(f"JSON validation failed for {context}: {str(e)}")
        logger.error(f"Content: {content[:200]}...")
        raise ValueError(f"Invalid JSON response for {context}: {str(e)}")


async def run_text_structured(messages: List[Dict[str, str]], context: str = "", **opts) -> Dict[str, Any]:
    """
    Request a JSON object from OpenAI, retrying once with a JSON-only nudge.

    Args:
        messages: Chat messages
        context: Context for error messages
        **opts: Passed through to run_text

    Returns:
        Parsed JSON dict
    """
    opts.setdefault("response_format", {"type": "json_object"})

    try:
        content = await run_text(messages, **opts)
        return validate_json_response(content, context)

    except ValueError as e:
        logger.info(f"Retrying with JSON-only prompt for {context}: {str(e)}")

        retry_messages = messages + [
            {
                "role": "user",
                "content": "Return valid JSON only. No commentary, no HTML wrappers, no explanations. Just the JSON object."
            }
        ]

        content = await run_text(retry_messages, **opts)
        return validate_json_response(content, f"{context} (retry)")
