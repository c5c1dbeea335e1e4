"""Host adapter: declaration files to compilation snapshots."""

from propsynth.host.errors import ParseError
from propsynth.host.loader import build_compilation, load_compilation, load_files
from propsynth.host.parser import parse_declarations

__all__ = [
    "ParseError",
    "build_compilation",
    "load_compilation",
    "load_files",
    "parse_declarations",
]
