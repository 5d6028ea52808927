"""
LLM 抽象基类
"""
from abc import ABC, abstractmethod


class TranscriptAnalyzer(ABC):
    """转写分析器基类"""

    @abstractmethod
    def analyze(self, transcript: str) -> str:
        """
        将转写交给 LLM，生成带模板标记的文章

        :param transcript: 带时间戳的转写文本
        :return: LLM 原始输出（尚未替换模板标记）
        """
        ...
