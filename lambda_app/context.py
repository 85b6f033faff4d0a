"""Local stand-in for the context object the Lambda runtime passes to handlers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from time import monotonic

from lambda_app.settings import Settings


@dataclass(slots=True)
class InvocationContext:
    function_name: str
    function_version: str
    invoked_function_arn: str
    memory_limit_in_mb: int
    aws_request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    log_group_name: str = ""
    log_stream_name: str = ""
    deadline: float = 0.0

    def get_remaining_time_in_millis(self) -> int:
        return max(0, int((self.deadline - monotonic()) * 1000))

    @classmethod
    def from_settings(cls, settings: Settings) -> InvocationContext:
        """Build a context for one local invocation with a fresh request id."""

        return cls(
            function_name=settings.function_name,
            function_version=settings.function_version,
            invoked_function_arn=settings.function_arn,
            memory_limit_in_mb=settings.memory_limit_mb,
            log_group_name=f"/aws/lambda/{settings.function_name}",
            log_stream_name=f"local/[{settings.function_version}]",
            deadline=monotonic() + settings.timeout_seconds,
        )
