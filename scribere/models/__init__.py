from .codeblock import CodeBlock
from .event import Event
from .source import SourceCode

__all__ = ["CodeBlock", "Event", "SourceCode"]
