"""Open a catalog source (local file or http(s) URL) and return its lines."""

import logging

import requests

from course_planner.errors import SourceUnavailable

logger = logging.getLogger(__name__)

HEADERS = {'User-Agent': 'Mozilla/5.0'}


def is_url(source):
    return source.lower().startswith(("http://", "https://"))


def fetch_url_lines(url, timeout=10):
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailable(url, str(e)) from e
    return resp.text.lstrip("\ufeff").splitlines()


def read_file_lines(path):
    try:
        with open(path, encoding="utf-8-sig") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, str(e)) from e


def open_source(source, timeout=10):
    """Read the whole source up front so a failed read never touches the catalog.

    Raises SourceUnavailable when the source cannot be opened or read.
    """
    source = str(source).strip()
    if not source:
        raise SourceUnavailable(source, "no source given")
    if is_url(source):
        logger.debug("Fetching catalog from %s", source)
        return fetch_url_lines(source, timeout=timeout)
    logger.debug("Reading catalog file %s", source)
    return read_file_lines(source)
