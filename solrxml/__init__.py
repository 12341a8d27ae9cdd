"""XML update messages for Solr-style search servers"""
from .document import Document, Field
from .generator import Generator, create_generator
from .utils.xml_builder import BackendUnavailableError

__version__ = '0.1.0'

__all__ = [
    'Document',
    'Field',
    'Generator',
    'create_generator',
    'BackendUnavailableError',
]
