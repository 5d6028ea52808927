"""
转写 API 路由

  1. GET  /                     — 交互页面
  2. GET  /scrape?url=          — 抓取 Loom 转写，返回纯文本
  3. POST /analyze-transcript   — 转写 → Assistant 文章
"""
import logging
import threading
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from support_magic.errors import InvalidRequestError
from support_magic.models.analysis import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from support_magic.pages import INDEX_HTML
from support_magic.services.magic_service import MagicService, build_default_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["transcript"])

ANALYZE_FAILED_MESSAGE = "Failed to analyze transcript"

_service_lock = threading.Lock()


def get_service(request: Request) -> MagicService:
    """取 app.state 上注入的服务，未注入时按配置创建（并发的首批请求只创建一次）"""
    state = request.app.state
    if state.service is None:
        with _service_lock:
            if state.service is None:
                state.service = build_default_service()
    return state.service


# ==================== API Endpoints ====================


@router.get("/", response_class=HTMLResponse, summary="交互页面")
def index():
    return HTMLResponse(INDEX_HTML)


@router.get("/scrape", response_class=PlainTextResponse, summary="抓取 Loom 转写")
def scrape(url: Optional[str] = None, service: MagicService = Depends(get_service)):
    """
    打开 Loom 分享页并返回带时间戳的转写

    失败时原样返回错误信息
    """
    try:
        transcript = service.scrape(url)
    except InvalidRequestError as e:
        return PlainTextResponse(str(e), status_code=400)
    except Exception as e:
        logger.error(f"[API] 抓取失败: url={url}, error={e}", exc_info=True)
        return JSONResponse({"error": str(e)}, status_code=500)

    return PlainTextResponse(transcript)


@router.post(
    "/analyze-transcript",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="生成文章",
)
def analyze_transcript(
    payload: Optional[AnalyzeRequest] = Body(None),
    service: MagicService = Depends(get_service),
):
    """
    将转写交给 Assistant 生成文章，并替换模板标记

    处理失败时只返回通用错误信息，不暴露内部原因
    """
    payload = payload or AnalyzeRequest()
    try:
        result = service.analyze(payload.transcript, payload.original_url)
    except InvalidRequestError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except Exception as e:
        logger.error(f"[API] 分析失败: url={payload.original_url}, error={e}", exc_info=True)
        return JSONResponse({"error": ANALYZE_FAILED_MESSAGE}, status_code=500)

    return AnalyzeResponse(response=result.text)
