"""
Utilities for building vision requests and reading completion responses.
"""

from typing import Any, Dict, List

from .prompts import SYSTEM_PROMPT


def build_messages(prompt: str, image_url: str) -> List[Dict[str, Any]]:
    """
    Build the system + user chat messages for a vision extraction request.

    Args:
        prompt: Instruction text for the user turn
        image_url: Location of the image to analyze

    Returns:
        Messages list for chat.completions.create
    """
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": image_url}},
            ],
        },
    ]


def extract_text_from_choice(choice: Any) -> str:
    """
    Safely extract text content from a completion choice.

    Args:
        choice: One entry of completion.choices

    Returns:
        Extracted text string; "" when the message has no content
    """
    message = getattr(choice, "message", None)
    content = getattr(message, "content", None)

    # Handle list of content blocks (OpenAI-compatible gateways)
    if isinstance(content, list):
        text_parts = []
        for block in content:
            if hasattr(block, "type") and block.type == "text":
                text_parts.append(block.text)
            elif isinstance(block, dict) and block.get("type") == "text":
                text_parts.append(block["text"])
        return "\n".join(text_parts)

    if isinstance(content, str):
        return content

    return str(content) if content else ""
