"""Exceptions raised by the compiler; none of them are retried."""

from __future__ import annotations


class WikiBookError(Exception):
    """Base class for every failure the compiler reports."""


class FetchError(WikiBookError):
    """A page could not be fetched or its URL could not be escaped."""


class ParseError(WikiBookError):
    """A fetched page has no content region."""


class ImageFetchError(WikiBookError):
    """An image download failed."""


class FilesystemError(WikiBookError):
    """A list file, image or output file could not be read or written."""
