from .validator import validate_dictionary, pretty_summary
from .io import read_lines, write_lines, find_dictionary_path, load_dictionary, DICTIONARY_FILENAME

__all__ = ["validate_dictionary", "pretty_summary", "read_lines", "write_lines",
           "find_dictionary_path", "load_dictionary", "DICTIONARY_FILENAME"]
