"""Small object helpers: rectangle factory and JSON text conversion."""

from selectorkit.objects.rectangle import Rectangle, make_rectangle
from selectorkit.objects.serialization import from_json_text, to_json_text

__all__ = ["Rectangle", "make_rectangle", "to_json_text", "from_json_text"]
