"""
基于 OpenAI Assistants API 的转写分析器
创建 thread → 发送消息 → 启动 run → 轮询直到结束 → 读取最新消息
"""
import logging
import time
from typing import Callable, Optional

from openai import OpenAI
from tenacity import RetryError, Retrying, retry_if_result, stop_after_attempt, wait_fixed

from support_magic.errors import AssistantRunFailedError, AssistantRunTimeoutError
from support_magic.llm.base import TranscriptAnalyzer
from support_magic.llm.templates import build_user_message

logger = logging.getLogger(__name__)

RUN_COMPLETED = "completed"
RUN_FAILED_STATUSES = frozenset({"failed", "cancelled", "expired", "incomplete"})


class OpenAIAssistantAnalyzer(TranscriptAnalyzer):
    """
    OpenAI Assistant 分析器

    Assistant 的 instructions 在 OpenAI 控制台中预先配置，
    这里只负责投递转写并取回结果
    """

    def __init__(
        self,
        client: OpenAI,
        assistant_id: str,
        poll_interval: float = 1.0,
        max_poll_attempts: int = 600,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.assistant_id = assistant_id
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts
        self._sleep = sleep

    @classmethod
    def from_credentials(
        cls,
        api_key: str,
        assistant_id: str,
        base_url: Optional[str] = None,
        **kwargs,
    ) -> "OpenAIAssistantAnalyzer":
        client = OpenAI(api_key=api_key, base_url=base_url)
        logger.info(f"[Assistant] 初始化完成: assistant_id={assistant_id}, base_url={base_url}")
        return cls(client=client, assistant_id=assistant_id, **kwargs)

    def analyze(self, transcript: str) -> str:
        threads = self.client.beta.threads

        thread = threads.create()
        threads.messages.create(
            thread.id,
            role="user",
            content=build_user_message(transcript),
        )
        run = threads.runs.create(thread_id=thread.id, assistant_id=self.assistant_id)
        logger.info(
            f"[Assistant] run 已启动: thread={thread.id}, run={run.id}, "
            f"transcript_len={len(transcript)}"
        )

        self._wait_for_run(thread.id, run.id)

        messages = threads.messages.list(thread_id=thread.id)
        text = messages.data[0].content[0].text.value
        logger.info(f"[Assistant] 分析完成: output_len={len(text)}")
        return text

    def _wait_for_run(self, thread_id: str, run_id: str):
        """按固定间隔轮询 run 状态，直到 completed；失败状态立即中止"""
        retrying = Retrying(
            stop=stop_after_attempt(self.max_poll_attempts),
            wait=wait_fixed(self.poll_interval),
            retry=retry_if_result(lambda status: status != RUN_COMPLETED),
            sleep=self._sleep,
        )
        try:
            retrying(self._poll_status, thread_id, run_id)
        except RetryError:
            logger.error(
                f"[Assistant] run 超时: thread={thread_id}, run={run_id}, "
                f"attempts={self.max_poll_attempts}"
            )
            raise AssistantRunTimeoutError(self.max_poll_attempts)

    def _poll_status(self, thread_id: str, run_id: str) -> str:
        run = self.client.beta.threads.runs.retrieve(run_id, thread_id=thread_id)
        if run.status in RUN_FAILED_STATUSES:
            logger.error(f"[Assistant] run 失败: run={run_id}, status={run.status}")
            raise AssistantRunFailedError(run.status)
        return run.status
