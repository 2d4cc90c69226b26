"""Process-wide converter bootstrap (import side-effect)."""
from .api import set_converter
from .bootstrap import build_converter

set_converter(build_converter())
