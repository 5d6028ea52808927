"""
转写数据模型与格式化
Loom 的转写数据 (phrases) → 带时间戳的纯文本
"""
from dataclasses import dataclass
from typing import Any, List

from support_magic.errors import UnexpectedTranscriptFormatError


@dataclass
class TranscriptPhrase:
    """单句转写"""
    timestamp: float   # 起始时间（秒）
    text: str          # 文本内容

    @classmethod
    def from_payload(cls, phrase: dict) -> "TranscriptPhrase":
        """从平台原始数据 {ts, value} 构建，字段缺失或类型不对时报格式错误"""
        if not isinstance(phrase, dict):
            raise UnexpectedTranscriptFormatError()
        ts = phrase.get("ts")
        value = phrase.get("value")
        if isinstance(ts, bool) or not isinstance(ts, (int, float)) or not isinstance(value, str):
            raise UnexpectedTranscriptFormatError()
        return cls(timestamp=ts, text=value)


def phrases_from_payload(payload: Any) -> List[TranscriptPhrase]:
    """
    解析转写接口返回的 JSON

    :param payload: 已解析的 JSON 对象，要求 phrases 为列表
    :return: 按原顺序排列的 TranscriptPhrase
    """
    phrases = payload.get("phrases") if isinstance(payload, dict) else None
    if not isinstance(phrases, list):
        raise UnexpectedTranscriptFormatError()
    return [TranscriptPhrase.from_payload(p) for p in phrases]


def format_timestamp(seconds: float) -> str:
    """将秒数格式化为 mm:ss，超过一小时为 hh:mm:ss（只截断，不四舍五入）"""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def render_transcript(phrases: List[TranscriptPhrase]) -> str:
    """每句一行 '[时间] 文本'，以换行结尾"""
    return "".join(
        f"[{format_timestamp(p.timestamp)}] {p.text}\n" for p in phrases
    )
