"""
Tests for the CompletionRouter contract: Success/Failure results, fixed
backend selection and independence of concurrent calls.
"""

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace
from unittest.mock import patch

from backend.llm_router import (
    Backend,
    BackendError,
    ChatTurn,
    CompletionRouter,
    Failure,
    HuggingFaceClient,
    LLMClient,
    OpenAIClient,
    Success,
)
from configs import Settings

from conftest import EchoClient, FailingClient


TURNS = [
    ChatTurn(role="system", content="You are a helpful AI assistant."),
    ChatTurn(role="user", content="Hello"),
]


class TestComplete:

    def test_echo_stub_returns_success(self):
        result = CompletionRouter(EchoClient("Hi there")).complete(TURNS)
        assert result == Success(text="Hi there")
        assert result.ok

    def test_turns_forwarded_unmodified(self, echo_client):
        CompletionRouter(echo_client).complete(TURNS)
        assert echo_client.calls == [TURNS]

    def test_auth_error_becomes_failure(self, failing_client):
        result = CompletionRouter(failing_client).complete(TURNS)
        assert isinstance(result, Failure)
        assert not result.ok
        assert result.kind == "BackendError"
        assert "401 Unauthorized: invalid API token" in result.message

    def test_unexpected_exception_becomes_failure(self):
        client = FailingClient(ValueError("unexpected payload"))
        result = CompletionRouter(client).complete(TURNS)
        assert result == Failure(kind="BackendError", message="unexpected payload")

    def test_failure_is_logged_with_backend_name(self, failing_client, caplog):
        with caplog.at_level("ERROR", logger="personarelay.router"):
            CompletionRouter(failing_client).complete(TURNS)
        assert "huggingface error: 401 Unauthorized" in caplog.text

    def test_empty_turns_fail_without_calling_backend(self, echo_client):
        result = CompletionRouter(echo_client).complete([])
        assert result.kind == BackendError.KIND
        assert echo_client.calls == []

    def test_no_retry_on_failure(self):
        calls = []

        class CountingClient(FailingClient):
            def generate(self, turns):
                calls.append(turns)
                return super().generate(turns)

        CompletionRouter(CountingClient()).complete(TURNS)
        assert len(calls) == 1

    def test_real_client_error_path(self):
        router = CompletionRouter(OpenAIClient(api_key="sk-bad"))
        with patch(
            "backend.llm_router.llm_client.completion",
            side_effect=RuntimeError("AuthenticationError: invalid key"),
        ):
            result = router.complete(TURNS)
        assert result == Failure(
            kind="BackendError",
            message="OpenAI Error: AuthenticationError: invalid key",
        )


class TestBackendSelection:

    def test_from_settings_prefers_huggingface(self):
        router = CompletionRouter.from_settings(Settings(hf_api_token="hf_x", openai_api_key="sk-x"))
        assert router.backend == Backend.HUGGINGFACE
        assert isinstance(router.client, HuggingFaceClient)

    def test_from_settings_openai_without_hf_token(self):
        router = CompletionRouter.from_settings(Settings(openai_api_key="sk-x"))
        assert router.backend == Backend.OPENAI
        assert isinstance(router.client, OpenAIClient)

    def test_from_settings_reads_environment_when_omitted(self, monkeypatch):
        monkeypatch.setenv("HF_API_TOKEN", "hf_env")
        router = CompletionRouter.from_settings()
        assert router.backend == Backend.HUGGINGFACE

    def test_selection_fixed_for_router_lifetime(self, monkeypatch):
        router = CompletionRouter.from_settings(Settings(hf_api_token="hf_x"))
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="ok"))])

        with patch("backend.llm_router.llm_client.completion", return_value=response) as mock_completion:
            for _ in range(3):
                router.complete(TURNS)
            # Environment changes after construction do not affect the choice
            monkeypatch.setenv("OPENAI_API_KEY", "sk-late")
            router.complete(TURNS)

        models = {c.kwargs["model"] for c in mock_completion.call_args_list}
        assert models == {"huggingface/deepseek-ai/DeepSeek-V3"}
        assert router.backend == Backend.HUGGINGFACE


class _ReverseClient(LLMClient):
    """Replies with the reversed user content."""

    backend = Backend.OPENAI
    label = "Reverse"

    @property
    def litellm_model(self) -> str:
        return self.model

    def generate(self, turns):
        return turns[-1].content[::-1]


def test_concurrent_calls_do_not_interfere():
    router = CompletionRouter(_ReverseClient(model="reverse"))
    inputs = [f"message-{i}" for i in range(50)]

    def run(text):
        return router.complete([ChatTurn(role="system", content="s"), ChatTurn(role="user", content=text)])

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(run, inputs))

    assert results == [Success(text=t[::-1]) for t in inputs]
