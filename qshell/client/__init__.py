from .segmenter import InputBuffer, QuoteState, extract_statement, find_terminator
from .line_source import LineSource, StreamLineSource, IterableLineSource, has_console
from .interactive import InteractiveClient, LoopState, SessionState
