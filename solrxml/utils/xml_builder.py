"""XML building backends for update messages

Both backends expose the same contract: ``build(callback)`` hands the callback
a node builder whose ``element(name, attrs, text, children)`` method adds one
element, and returns the finished document as a single-line string starting
with the XML declaration.
"""
import io
import logging
import re
from xml.sax.saxutils import XMLGenerator, escape

from .text_utils import to_text

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# control characters lxml refuses; the markup backend rejects the same set
ILLEGAL_XML_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")


class BackendUnavailableError(RuntimeError):
    """Raised when the library behind an XML backend cannot be loaded"""


def _attributes(attrs):
    """Stringify attribute names and values, keeping their order"""
    return {str(key): to_text(value) for key, value in (attrs or {}).items()}


class XmlBuilder:
    """Base class for XML writing backends"""
    name = None

    def build(self, callback):
        """Run callback against a root node builder and return the XML string"""
        raise NotImplementedError


class _LxmlNode:
    """Node builder that appends children to an lxml element"""

    def __init__(self, etree, parent=None):
        self._etree = etree
        self.parent = parent
        self.root = None

    def element(self, name, attrs=None, text=None, children=None):
        attrib = _attributes(attrs)
        if self.parent is None:
            element = self._etree.Element(name, attrib)
            self.root = element
        else:
            element = self._etree.SubElement(self.parent, name, attrib)

        if text is not None:
            content = to_text(text)
            # leave empty text unset so the element serializes self-closed
            if content:
                element.text = content

        if children is not None:
            children(_LxmlNode(self._etree, element))
        return element


class LxmlBuilder(XmlBuilder):
    """Strict backend: builds an lxml tree, then serializes it"""
    name = 'lxml'

    def _load(self):
        try:
            from lxml import etree
        except ImportError as e:
            logger.error(f"lxml XML backend selected but lxml could not be imported: {str(e)}")
            raise BackendUnavailableError(
                "The 'lxml' XML backend requires the lxml package"
            ) from e
        return etree

    def build(self, callback):
        etree = self._load()
        node = _LxmlNode(etree)
        callback(node)
        return XML_DECLARATION + etree.tostring(node.root, encoding='unicode')


def _check_xml_compatible(value):
    if ILLEGAL_XML_CHARS.search(value):
        raise ValueError(
            "All strings must be XML compatible: Unicode or ASCII, no NULL bytes or control characters"
        )
    return value


class _MarkupWriter(XMLGenerator):
    """XMLGenerator that writes carriage returns in text as &#13;"""

    def characters(self, content):
        if content:
            self._finish_pending_start_element()
            self._write(escape(content, {'\r': '&#13;'}))


class _MarkupNode:
    """Node builder that streams SAX events straight into the output"""

    def __init__(self, writer):
        self._writer = writer

    def element(self, name, attrs=None, text=None, children=None):
        attrib = _attributes(attrs)
        for value in attrib.values():
            _check_xml_compatible(value)
        self._writer.startElement(name, attrib)
        if text is not None:
            self._writer.characters(_check_xml_compatible(to_text(text)))
        if children is not None:
            children(self)
        self._writer.endElement(name)


class MarkupBuilder(XmlBuilder):
    """Lightweight backend: writes markup directly, no tree in memory"""
    name = 'markup'

    def build(self, callback):
        out = io.StringIO()
        # startDocument() is skipped: it ends the declaration with a newline
        writer = _MarkupWriter(out, encoding='utf-8', short_empty_elements=True)
        callback(_MarkupNode(writer))
        return XML_DECLARATION + out.getvalue()


BACKENDS = {
    LxmlBuilder.name: LxmlBuilder,
    MarkupBuilder.name: MarkupBuilder,
}


def get_builder(name):
    """Return a new XML builder for the named backend"""
    try:
        builder_class = BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown XML backend '{name}' (expected one of: {', '.join(sorted(BACKENDS))})"
        ) from None
    logger.info(f"Using '{name}' XML backend")
    return builder_class()
