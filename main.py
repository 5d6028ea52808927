"""
Roster Support Magic — Loom 转写抓取 + 支持文章生成

启动命令:
    python main.py
    或
    uvicorn main:app --host 0.0.0.0 --port 3000

首次运行前需安装 Chromium: playwright install chromium
"""
import logging

import uvicorn

from support_magic import create_app
from support_magic.config import settings

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-7s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("support_magic")

app = create_app()

if __name__ == "__main__":
    logger.info(f"🚀 Support Magic 启动中 http://{settings.host}:{settings.port}")
    logger.info(f"📖 API 文档: http://127.0.0.1:{settings.port}/docs")
    logger.info(f"🤖 Assistant: {settings.openai_assistant_id or '(未配置)'} @ {settings.openai_base_url}")
    logger.info(f"🌐 Chromium: headless={settings.browser_headless}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
    )
