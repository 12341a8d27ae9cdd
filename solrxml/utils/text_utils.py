"""Text coercion helpers shared by the data model and the XML writers"""


def to_text(value):
    """Convert a field or attribute value to its XML text form"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_list(value):
    """Wrap a single value in a list; lists and tuples pass through"""
    if isinstance(value, (list, tuple)):
        return value
    return [value]
