"""
文章模板模块
定义 Assistant 输出中的模板标记及其替换内容
"""

# ==================== 模板标记 ====================

VIDEO_WALKTHROUGH_MARKER = "{{videoWalkthroughSection}}"
NEED_HELP_MARKER = "{{needHelpSection}}"


# ==================== 用户消息 ====================

USER_MESSAGE_TEMPLATE = "Here is the Loom transcript: {transcript}"


def build_user_message(transcript: str) -> str:
    return USER_MESSAGE_TEMPLATE.format(transcript=transcript)


# ==================== 替换内容 ====================

LOOM_EMBED_URL = "https://www.loom.com/embed/{video_id}"

VIDEO_WALKTHROUGH_TEMPLATE = """
:::iframe{{iframeHeight="0" code="<div style=&#x22;position: relative; padding-bottom: 58.31533477321814%; height: 0;&#x22;><iframe src=&#x22;{embed_url}&#x22; frameborder=&#x22;0&#x22; webkitallowfullscreen mozallowfullscreen allowfullscreen style=&#x22;position: absolute; top: 0; left: 0; width: 100%; height: 100%;&#x22;></iframe></div>"}}

:::

:::expandable-heading
### Video transcript

This is a transcript from the Loom video walkthrough.

{transcript}
:::"""

NEED_HELP_SECTION = """
If you need any additional assistance with with your Roster account, feel free to contact our support team at [support@getroster.com](mailto:support@getroster.com). We're here to help!
"""


def extract_video_id(url: str) -> str:
    """分享链接最后一个 '/' 之后的部分，如 .../share/abc123 → abc123"""
    return url.split("/")[-1]


def build_video_walkthrough_section(video_id: str, transcript: str) -> str:
    """Loom 内嵌播放器 + 可折叠的完整转写"""
    return VIDEO_WALKTHROUGH_TEMPLATE.format(
        embed_url=LOOM_EMBED_URL.format(video_id=video_id),
        transcript=transcript,
    )


def fill_markers(text: str, video_section: str, need_help_section: str = NEED_HELP_SECTION) -> str:
    """
    替换模板标记

    按字面量替换，每个标记只替换第一次出现；标记不存在时原样返回
    """
    text = text.replace(VIDEO_WALKTHROUGH_MARKER, video_section, 1)
    text = text.replace(NEED_HELP_MARKER, need_help_section, 1)
    return text
