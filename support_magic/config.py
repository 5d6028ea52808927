"""
Support Magic 配置模块
从 .env 文件加载所有配置项，提供全局单例 settings
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """全局配置"""

    # 服务
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # OpenAI Assistant
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    openai_assistant_id: str = os.getenv("OPENAI_ASSISTANT_ID", "")

    # Run 轮询: 间隔（秒）与最大次数
    run_poll_interval: float = float(os.getenv("RUN_POLL_INTERVAL", "1.0"))
    run_poll_max_attempts: int = int(os.getenv("RUN_POLL_MAX_ATTEMPTS", "600"))

    # 浏览器 (Playwright Chromium)
    browser_headless: bool = _env_bool("BROWSER_HEADLESS", "true")
    transcript_button_timeout_ms: int = int(os.getenv("TRANSCRIPT_BUTTON_TIMEOUT_MS", "5000"))
    transcript_grace_ms: int = int(os.getenv("TRANSCRIPT_GRACE_MS", "5000"))


settings = Settings()
