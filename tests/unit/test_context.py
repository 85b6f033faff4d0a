from __future__ import annotations

from lambda_app.context import InvocationContext
from lambda_app.settings import Settings


def test_context_from_settings() -> None:
    settings = Settings(AWS_LAMBDA_FUNCTION_NAME="layer-fn", FUNCTION_TIMEOUT_SECONDS=2)

    context = InvocationContext.from_settings(settings)

    assert context.function_name == "layer-fn"
    assert context.function_version == settings.function_version
    assert context.invoked_function_arn == settings.function_arn
    assert context.memory_limit_in_mb == settings.memory_limit_mb
    assert context.log_group_name == "/aws/lambda/layer-fn"
    assert 0 < context.get_remaining_time_in_millis() <= 2000


def test_each_context_gets_a_fresh_request_id() -> None:
    settings = Settings()

    ids = {InvocationContext.from_settings(settings).aws_request_id for _ in range(10)}

    assert len(ids) == 10


def test_remaining_time_never_negative() -> None:
    context = InvocationContext.from_settings(Settings())
    context.deadline = 0.0

    assert context.get_remaining_time_in_millis() == 0
