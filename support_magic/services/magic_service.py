"""
核心编排服务
抓取: 视频链接 → 转写文本
分析: 转写文本 → Assistant 文章 → 替换模板标记
"""
import logging
from typing import Optional

from support_magic.config import settings
from support_magic.errors import InvalidRequestError
from support_magic.llm.base import TranscriptAnalyzer
from support_magic.llm.openai_assistant import OpenAIAssistantAnalyzer
from support_magic.llm.templates import (
    NEED_HELP_SECTION,
    build_video_walkthrough_section,
    extract_video_id,
    fill_markers,
)
from support_magic.models.analysis import AnalysisResult
from support_magic.scrapers.base import TranscriptScraper
from support_magic.scrapers.loom_scraper import LoomTranscriptScraper

logger = logging.getLogger(__name__)


class MagicService:
    """
    转写抓取 + 文章生成服务

    scraper / analyzer 由外部注入，测试时可替换为假实现；
    每次请求独立执行，服务本身不保存任何请求状态
    """

    def __init__(self, scraper: TranscriptScraper, analyzer: TranscriptAnalyzer):
        self.scraper = scraper
        self.analyzer = analyzer

    def scrape(self, url: Optional[str]) -> str:
        if not url:
            raise InvalidRequestError("Please provide ?url= parameter.")
        return self.scraper.scrape(url)

    def analyze(self, transcript: Optional[str], original_url: Optional[str]) -> AnalysisResult:
        """
        生成文章

        :param transcript: /scrape 返回的转写
        :param original_url: Loom 分享链接，用于生成内嵌播放器
        :return: AnalysisResult
        """
        if not transcript or not original_url:
            raise InvalidRequestError("Transcript and original URL are required")

        video_id = extract_video_id(original_url)
        logger.info(f"[Service] 开始分析: video_id={video_id}")

        text = self.analyzer.analyze(transcript)
        text = fill_markers(
            text,
            video_section=build_video_walkthrough_section(video_id, transcript),
            need_help_section=NEED_HELP_SECTION,
        )
        return AnalysisResult(text=text)


def build_default_service() -> MagicService:
    """根据配置创建服务实例"""
    if not settings.openai_api_key:
        logger.warning("[Service] OPENAI_API_KEY 未配置，/analyze-transcript 将失败")
    if not settings.openai_assistant_id:
        logger.warning("[Service] OPENAI_ASSISTANT_ID 未配置，/analyze-transcript 将失败")

    scraper = LoomTranscriptScraper(
        headless=settings.browser_headless,
        button_timeout_ms=settings.transcript_button_timeout_ms,
        grace_ms=settings.transcript_grace_ms,
    )
    analyzer = OpenAIAssistantAnalyzer.from_credentials(
        api_key=settings.openai_api_key,
        assistant_id=settings.openai_assistant_id,
        base_url=settings.openai_base_url,
        poll_interval=settings.run_poll_interval,
        max_poll_attempts=settings.run_poll_max_attempts,
    )
    logger.info(
        f"[Service] 初始化完成: headless={settings.browser_headless}, "
        f"assistant={settings.openai_assistant_id}"
    )
    return MagicService(scraper=scraper, analyzer=analyzer)
