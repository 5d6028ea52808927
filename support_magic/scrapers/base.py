"""
转写抓取器抽象基类
所有平台的抓取器都需要继承此类并实现 scrape 方法
"""
from abc import ABC, abstractmethod


class TranscriptScraper(ABC):
    """视频页面转写抓取器基类"""

    @abstractmethod
    def scrape(self, url: str) -> str:
        """
        打开视频页面并提取转写

        :param url: 视频页面链接
        :return: 每行 '[时间] 文本' 的纯文本转写
        """
        ...
