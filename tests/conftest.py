import pytest
from lxml import etree
from solrxml import Generator

BACKENDS = ['lxml', 'markup']


@pytest.fixture(params=BACKENDS)
def generator(request):
    """A generator for each XML backend."""
    return Generator(backend=request.param)


@pytest.fixture
def parse():
    """Parse generated XML back into an lxml tree."""
    def _parse(xml):
        return etree.fromstring(xml.encode('utf-8'))
    return _parse
