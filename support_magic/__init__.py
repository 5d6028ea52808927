"""
Support Magic - Loom 转写抓取 + 支持文章生成
"""
from fastapi import FastAPI


def create_app(service=None) -> FastAPI:
    """
    :param service: MagicService 实例；为 None 时在首次请求时按配置创建
    """
    from support_magic.routers import transcript

    app = FastAPI(
        title="Roster Support Magic",
        description="输入 Loom 视频链接，抓取转写并生成支持文章",
        version="0.1.0",
    )
    app.state.service = service
    app.include_router(transcript.router)
    return app
