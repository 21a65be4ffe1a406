"""Small worked exercises: puzzles, data structures, parsers, a decoder, widgets and concurrency demos."""

__version__ = "0.1.0"

__all__ = [
    "async_philosophers",
    "bintree",
    "chat_client",
    "chat_server",
    "compass",
    "counter",
    "elevator",
    "linkcheck",
    "listdir",
    "logger",
    "numbers",
    "package_builder",
    "parser",
    "philosophers",
    "protobuf",
    "rot",
    "sequences",
    "tree_eval",
    "vectors",
    "widgets",
]