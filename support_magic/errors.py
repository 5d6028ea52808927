"""
异常定义

客户端输入错误 (InvalidRequestError) 映射为 400，
其余抓取 / 分析失败由路由层映射为 500
"""


class SupportMagicError(Exception):
    """所有业务异常的基类"""


class InvalidRequestError(SupportMagicError):
    """缺少必要参数"""


# -------- 抓取 --------

class ScrapeError(SupportMagicError):
    """转写抓取失败"""


class TranscriptNotFoundError(ScrapeError):
    def __init__(self, message: str = "No transcript data found"):
        super().__init__(message)


class UnexpectedTranscriptFormatError(ScrapeError):
    def __init__(self, message: str = "Unexpected transcript data format"):
        super().__init__(message)


# -------- 分析 --------

class AnalysisError(SupportMagicError):
    """Assistant 分析失败"""


class AssistantRunFailedError(AnalysisError):
    def __init__(self, status: str = "failed"):
        self.status = status
        super().__init__(f"Assistant run failed (status={status})")


class AssistantRunTimeoutError(AnalysisError):
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"Timed out waiting for assistant run to finish after {attempts} polls"
        )
