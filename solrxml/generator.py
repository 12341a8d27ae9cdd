"""Update message generation module"""
import logging
from collections.abc import Mapping

from .config import config
from .document import Document
from .utils.text_utils import as_list
from .utils.xml_builder import get_builder

logger = logging.getLogger(__name__)


class Generator:
    """Builds the XML messages of the update protocol

    The XML backend is chosen once, when the generator is created; every
    message method returns a complete XML string.
    """

    def __init__(self, backend='lxml'):
        self.builder = get_builder(backend)

    @property
    def backend(self):
        """Name of the XML backend in use"""
        return self.builder.name

    def build(self, callback):
        """Run callback against a root node builder and return the XML string"""
        return self.builder.build(callback)

    def _to_document(self, record):
        """Use a Document as-is, convert a mapping into one"""
        if isinstance(record, Document):
            return record
        if isinstance(record, Mapping):
            return Document(record)
        raise TypeError(
            f"Expected a Document or a mapping of field names to values, got {type(record).__name__}"
        )

    def add(self, data, add_attrs=None, customize=None):
        """Generate an <add> message

        "data" is a document record or a list of them. A record is either a
        Document or a mapping of field name to value; list values create one
        field per element.

        "add_attrs" become the attributes of the <add> element.

        "customize", when given, is called with each Document before it is
        written, so attributes can be set from the document's own content:

            def boost(doc):
                doc.attrs['boost'] = 10.0
                nickname = doc.field_by_name('nickname')
                if nickname is not None and nickname.value == 'Tim':
                    nickname.attrs['boost'] = 20

            generator.add({'id': 1, 'nickname': 'Tim'}, {'commitWithin': 1000}, boost)
        """
        records = as_list(data)
        documents = [self._to_document(record) for record in records]
        logger.debug(f"Generating add message for {len(documents)} document(s)")

        def write_fields(document):
            def write(doc_node):
                for field in document.fields:
                    doc_node.element('field', field.attrs, field.value)
            return write

        def write_add(add_node):
            for document in documents:
                if customize is not None:
                    customize(document)
                add_node.element('doc', document.attrs, children=write_fields(document))

        return self.build(lambda xml: xml.element('add', add_attrs or {}, children=write_add))

    def commit(self, opts=None):
        """Generate a <commit/> message"""
        logger.debug("Generating commit message")
        return self.build(lambda xml: xml.element('commit', opts or {}))

    def optimize(self, opts=None):
        """Generate an <optimize/> message"""
        logger.debug("Generating optimize message")
        return self.build(lambda xml: xml.element('optimize', opts or {}))

    def rollback(self):
        """Generate a <rollback/> message"""
        logger.debug("Generating rollback message")
        return self.build(lambda xml: xml.element('rollback'))

    def delete_by_id(self, ids):
        """Generate a <delete><id>ID</id></delete> message

        "ids" can be a single value or a list of values.
        """
        return self._delete('id', as_list(ids))

    def delete_by_query(self, queries):
        """Generate a <delete><query>QUERY</query></delete> message

        "queries" can be a single query string or a list of them.
        """
        return self._delete('query', as_list(queries))

    def _delete(self, tag, values):
        logger.debug(f"Generating delete message with {len(values)} {tag} node(s)")

        def write_delete(delete_node):
            for value in values:
                delete_node.element(tag, text=value)

        return self.build(lambda xml: xml.element('delete', children=write_delete))


def create_generator(config_name='default'):
    """Create a Generator from a named configuration"""
    try:
        settings = config[config_name]
    except KeyError:
        raise ValueError(
            f"Unknown configuration '{config_name}' (expected one of: {', '.join(sorted(config))})"
        ) from None

    settings.init_logging(logging.getLogger('solrxml'))
    logger.info(f"{settings.APP_NAME} generator startup ({config_name} configuration)")
    return Generator(backend=settings.XML_BACKEND)
