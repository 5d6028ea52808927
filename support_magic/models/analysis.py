"""
分析相关数据模型
"""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# -------- API 请求 / 响应模型 (Pydantic) --------

class AnalyzeRequest(BaseModel):
    """POST /analyze-transcript 请求体"""
    model_config = ConfigDict(populate_by_name=True)

    transcript: Optional[str] = None                                # /scrape 返回的转写文本
    original_url: Optional[str] = Field(None, alias="originalUrl")  # Loom 分享链接


class AnalyzeResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


# -------- 内部数据模型 (dataclass) --------

@dataclass
class AnalysisResult:
    """替换模板标记后的 Assistant 输出"""
    text: str
