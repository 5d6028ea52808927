"""
共享测试夹具: 假 Playwright 会话与假 OpenAI 客户端
"""
from contextlib import contextmanager
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from support_magic.llm.openai_assistant import OpenAIAssistantAnalyzer
from support_magic.scrapers.loom_scraper import LoomTranscriptScraper

TRANSCRIPT_URL = "https://cdn.loom.com/mediametadata/transcription/123.json"


def make_response(url, payload=None, json_error=None):
    response = MagicMock()
    response.url = url
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class FakeBrowserSession:
    """记录调用的假 Playwright: context.on 注册时立即回放预设的网络响应"""

    def __init__(self, responses=(), launch_error=None):
        self.page = MagicMock()
        self.context = MagicMock()
        self.context.new_page.return_value = self.page
        self.context.on.side_effect = self._on
        self.browser = MagicMock()
        self.browser.new_context.return_value = self.context
        self.chromium = MagicMock()
        if launch_error is not None:
            self.chromium.launch.side_effect = launch_error
        else:
            self.chromium.launch.return_value = self.browser
        self.responses = list(responses)

    def _on(self, event, handler):
        if event == "response":
            for response in self.responses:
                handler(response)

    @contextmanager
    def factory(self):
        yield SimpleNamespace(chromium=self.chromium)


def make_message_page(text):
    block = SimpleNamespace(text=SimpleNamespace(value=text))
    return SimpleNamespace(data=[SimpleNamespace(content=[block])])


def make_openai_client(reply="AI response", statuses=("completed",)):
    client = MagicMock()
    threads = client.beta.threads
    threads.create.return_value = SimpleNamespace(id="thread-123")
    threads.runs.create.return_value = SimpleNamespace(id="run-123")
    threads.runs.retrieve.side_effect = [SimpleNamespace(status=s) for s in statuses]
    threads.messages.list.return_value = make_message_page(reply)
    return client


@pytest.fixture
def transcript_payload():
    return {
        "phrases": [
            {"ts": 10, "value": "Hello world"},
            {"ts": 65, "value": "This is a test"},
        ]
    }


@pytest.fixture
def make_scraper():
    def _make(session: FakeBrowserSession) -> LoomTranscriptScraper:
        return LoomTranscriptScraper(
            button_timeout_ms=5000,
            grace_ms=5000,
            playwright_factory=session.factory,
        )
    return _make


@pytest.fixture
def make_analyzer():
    def _make(client, **kwargs) -> OpenAIAssistantAnalyzer:
        kwargs.setdefault("sleep", MagicMock())
        return OpenAIAssistantAnalyzer(client=client, assistant_id="test-assistant-id", **kwargs)
    return _make
