"""XML writing utilities"""
from .text_utils import to_text, as_list
from .xml_builder import (
    BackendUnavailableError,
    XmlBuilder,
    LxmlBuilder,
    MarkupBuilder,
    get_builder,
)

__all__ = [
    'to_text',
    'as_list',
    'BackendUnavailableError',
    'XmlBuilder',
    'LxmlBuilder',
    'MarkupBuilder',
    'get_builder',
]
