import builtins

import pytest
from lxml import etree
from solrxml import BackendUnavailableError
from solrxml.utils.xml_builder import (
    XML_DECLARATION,
    LxmlBuilder,
    MarkupBuilder,
    get_builder,
)


def nested(xml):
    def children(parent):
        parent.element('a', {'x': 1}, 'one')
        parent.element('b', {}, '', children=lambda b: b.element('c', text=True))
        parent.element('d')
    xml.element('root', {'k': 'v', 'n': None}, children=children)


class TestXmlBuilder:
    """Test suite for the XML backends"""

    @pytest.mark.parametrize('name', ['lxml', 'markup'])
    def test_single_line_output(self, name):
        xml = get_builder(name).build(nested)
        assert xml == (
            XML_DECLARATION
            + '<root k="v" n=""><a x="1">one</a><b><c>true</c></b><d/></root>'
        )
        assert '\n' not in xml
        assert xml.count('<?xml') == 1

    def test_backends_agree(self):
        assert LxmlBuilder().build(nested) == MarkupBuilder().build(nested)

    def test_get_builder(self):
        assert isinstance(get_builder('lxml'), LxmlBuilder)
        assert isinstance(get_builder('markup'), MarkupBuilder)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match='Unknown XML backend'):
            get_builder('nokogiri')

    def test_missing_lxml(self, monkeypatch):
        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name == 'lxml' or name.startswith('lxml.'):
                raise ImportError('No module named lxml')
            return real_import(name, *args, **kwargs)

        builder = LxmlBuilder()
        monkeypatch.setattr(builtins, '__import__', fake_import)
        with pytest.raises(BackendUnavailableError):
            builder.build(lambda xml: xml.element('commit'))

    @pytest.mark.parametrize('name', ['lxml', 'markup'])
    def test_carriage_return_survives_parsing(self, name):
        xml = get_builder(name).build(lambda x: x.element('field', {'name': 't'}, 'a\r\nb'))
        root = etree.fromstring(xml.encode('utf-8'))
        assert root.text == 'a\r\nb'

    def test_carriage_return_written_the_same(self):
        def write(xml):
            xml.element('field', {'name': 't'}, 'a\r\nb')
        assert LxmlBuilder().build(write) == MarkupBuilder().build(write)

    @pytest.mark.parametrize('name', ['lxml', 'markup'])
    def test_control_character_in_text_is_rejected(self, name):
        with pytest.raises(ValueError):
            get_builder(name).build(lambda x: x.element('field', {'name': 't'}, 'a\x0bb'))

    @pytest.mark.parametrize('name', ['lxml', 'markup'])
    def test_control_character_in_attribute_is_rejected(self, name):
        with pytest.raises(ValueError):
            get_builder(name).build(lambda x: x.element('doc', {'boost': '1\x00'}))
