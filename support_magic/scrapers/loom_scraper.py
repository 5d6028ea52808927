"""
基于 Playwright 的 Loom 转写抓取器
打开分享页面，拦截转写元数据接口的 JSON 响应
"""
import logging
from typing import Any, Callable, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Response, sync_playwright

from support_magic.errors import TranscriptNotFoundError
from support_magic.models.transcript import phrases_from_payload, render_transcript
from support_magic.scrapers.base import TranscriptScraper

logger = logging.getLogger(__name__)


class LoomTranscriptScraper(TranscriptScraper):
    """
    Loom 转写抓取器

    流程:
    1. 启动独立的 Chromium 实例和 context（每次调用一个，不复用）
    2. 监听网络响应，捕获 transcription 接口的 JSON
    3. 打开页面，尝试点击 Transcript 侧边栏按钮
    4. 等待固定时长让转写请求完成，然后格式化
    """

    TRANSCRIPT_URL_MARKER = "cdn.loom.com/mediametadata/transcription"
    TRANSCRIPT_BUTTON_SELECTOR = 'button[data-testid="sidebar-tab-Transcript"]'

    def __init__(
        self,
        headless: bool = True,
        button_timeout_ms: int = 5000,
        grace_ms: int = 5000,
        playwright_factory: Optional[Callable] = None,
    ):
        self.headless = headless
        self.button_timeout_ms = button_timeout_ms
        self.grace_ms = grace_ms
        self._playwright_factory = playwright_factory or sync_playwright

    @classmethod
    def is_transcript_response(cls, url: str) -> bool:
        return cls.TRANSCRIPT_URL_MARKER in url and ".json" in url

    def scrape(self, url: str) -> str:
        logger.info(f"[Scraper] 开始抓取: {url}")

        with self._playwright_factory() as playwright:
            browser = playwright.chromium.launch(headless=self.headless)
            try:
                payload = self._capture_payload(browser, url)
            finally:
                browser.close()

        if payload is None:
            raise TranscriptNotFoundError()

        phrases = phrases_from_payload(payload)
        logger.info(f"[Scraper] 抓取完成: 句数={len(phrases)}")
        return render_transcript(phrases)

    def _capture_payload(self, browser, url: str) -> Any:
        """在单个 browser context 中打开页面，返回最后一次捕获到的转写 JSON"""
        context = browser.new_context()
        captured = {}

        def on_response(response: Response):
            if not self.is_transcript_response(response.url):
                return
            try:
                captured["payload"] = response.json()
                logger.info(f"[Scraper] 捕获转写响应: {response.url}")
            except Exception as e:
                logger.error(f"[Scraper] 转写 JSON 解析失败: {e}")

        context.on("response", on_response)

        page = context.new_page()
        page.goto(url)
        page.wait_for_load_state("domcontentloaded")

        # 部分页面默认已展开转写面板，按钮不存在时继续
        try:
            page.wait_for_selector(self.TRANSCRIPT_BUTTON_SELECTOR, timeout=self.button_timeout_ms)
            page.click(self.TRANSCRIPT_BUTTON_SELECTOR)
        except PlaywrightError as e:
            logger.info(f"[Scraper] 未找到 Transcript 按钮，继续: {e}")

        page.wait_for_timeout(self.grace_ms)
        return captured.get("payload")
