"""Document and field model for update messages"""
from .utils.text_utils import to_text, as_list


class Field:
    """One <field> node: its XML attributes plus a text value

    ``attrs`` must contain a ``name`` entry; any other key (``boost``,
    ``update``...) is written to the XML element as-is. ``value`` is kept
    as given and only converted to text when the message is generated.
    """

    def __init__(self, attrs, value):
        self.attrs = attrs
        self.value = value

    @property
    def name(self):
        """The value of the "name" attribute"""
        return self.attrs['name']

    def __repr__(self):
        return f"Field({self.attrs!r}, {self.value!r})"


class Document:
    """One <doc> node: document-level attributes and an ordered list of fields"""

    def __init__(self, doc_hash=None):
        """Build fields from a mapping of field name to value(s)

        A list or tuple value creates one field per element. Values that
        are empty once converted to text are skipped.
        """
        self.attrs = {}
        self.fields = []
        for name, values in (doc_hash or {}).items():
            for value in as_list(values):
                if to_text(value) == "":
                    continue
                self.fields.append(Field({'name': name}, value))

    def fields_by_name(self, name):
        """Return all fields matching name, in document order"""
        return [field for field in self.fields if field.name == name]

    def field_by_name(self, name):
        """Return the first field matching name, or None"""
        return next((field for field in self.fields if field.name == name), None)

    def add_field(self, name, value, **options):
        """Append a field; options become XML attributes of the <field> node

        Unlike the constructor, empty values are kept.

        Example:
            document.add_field('title', 'A Title', boost=2.0)
        """
        field = Field({**options, 'name': name}, value)
        self.fields.append(field)
        return field

    def __iter__(self):
        return iter(self.fields)

    def __len__(self):
        return len(self.fields)

    def __repr__(self):
        return f"Document(attrs={self.attrs!r}, fields={self.fields!r})"
