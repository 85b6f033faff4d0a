"""Message helpers shipped in the layer."""

from __future__ import annotations

from typing import Any

LAYER_BANNER = "This is a message from a layer!"


def print_message(text: Any) -> None:
    """Print the layer banner followed by ``text`` in brackets."""

    print(LAYER_BANNER, flush=True)
    print(f"The message is: [{text}]", flush=True)
