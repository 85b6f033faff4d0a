"""Shared utilities distributed as a Lambda layer."""

from layer_util.messages import print_message

__all__ = ["print_message"]
