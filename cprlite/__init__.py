"""HTTP client building blocks: header and cookie parsing, request options, containers, multipart parts and a thread pool."""

__version__ = "1.10.5"
__all__ = ["containers", "multipart", "options", "threadpool", "util"]