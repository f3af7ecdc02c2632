"""Recursive, multi-threaded regular-expression search over a directory."""

from __future__ import annotations

import os
import re
import sys
import threading
import time
from dataclasses import dataclass
from typing import IO, Iterator, Optional, Union

from .binary import is_binary
from .work_queue import WorkQueue

_HIGHLIGHT_START = "\033[31m"
_HIGHLIGHT_END = "\033[0m"
_POLL_INTERVAL = 0.001


@dataclass
class Options:
    """Search options."""

    ignore_binaries: bool = True
    verbose_mode: bool = False
    file_mask: str = ""


def _report(err: Optional[IO[str]], options: Options, message: object) -> None:
    if options.verbose_mode and err is not None:
        print(message, file=err)


def iter_files(root, options: Options, err: Optional[IO[str]] = None) -> Iterator[str]:
    """Yield paths of regular files under ``root`` whose names match the mask.

    Errors are written to ``err`` in verbose mode and otherwise ignored.
    """
    mask = None
    if options.file_mask:
        try:
            mask = re.compile(options.file_mask)
        except re.error as exc:
            _report(err, options, exc)
            return
    yield from _walk(os.fspath(root), mask, options, err)


def _walk(directory: str, mask, options: Options, err) -> Iterator[str]:
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError as exc:
        _report(err, options, exc)
        return
    for entry in entries:
        try:
            if entry.is_file() and (mask is None or mask.search(entry.name)):
                yield entry.path
            if entry.is_dir():
                yield from _walk(entry.path, mask, options, err)
        except OSError as exc:
            _report(err, options, exc)


def highlight(line: str, match: re.Match) -> str:
    """Render a match with the matched text coloured red.

    The text before the match starts where the search for it began.
    """
    return (
        line[match.pos:match.start()]
        + _HIGHLIGHT_START
        + match.group()
        + _HIGHLIGHT_END
        + line[match.end():]
    )


def _matches(pattern: re.Pattern, line: str) -> Iterator[re.Match]:
    pos = 0
    while pos <= len(line):
        match = pattern.search(line, pos)
        if match is None:
            return
        yield match
        pos = match.end() if match.end() > match.start() else match.end() + 1


def grep_file(path, pattern: Union[str, re.Pattern], options: Options) -> Iterator[str]:
    """Yield ``line:path:highlighted text`` for every match in the file.

    Raises OSError if the file cannot be read.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    name = os.fspath(path)
    with open(name, "rb") as handle:
        for number, raw in enumerate(handle, start=1):
            if number == 1 and options.ignore_binaries and is_binary(raw):
                if options.verbose_mode:
                    yield f"{name}: is binary"
                return
            text = raw.removesuffix(b"\n").decode("utf-8", errors="replace")
            for match in _matches(pattern, text):
                yield f"{number}:{name}:{highlight(text, match)}"


class Grep:
    """Searches a directory tree with one lister thread and several searchers."""

    def __init__(
        self,
        out: Optional[IO[str]] = None,
        err: Optional[IO[str]] = None,
        workers: Optional[int] = None,
    ) -> None:
        if workers is not None and workers < 1:
            raise ValueError("workers must be at least 1")
        self._out = out
        self._err = err
        self._workers = workers or max(1, os.cpu_count() or 1)
        self._paths = WorkQueue()
        self._results = WorkQueue()
        self._listing_done = threading.Event()
        self._stopped = threading.Event()
        self._err_lock = threading.Lock()

    def search(self, path, query: str, options: Optional[Options] = None) -> None:
        """Search every file under ``path`` for ``query`` and print the matches.

        Raises re.error if ``query`` is not a valid regular expression.
        """
        options = options or Options()
        pattern = re.compile(query)
        out = self._out if self._out is not None else sys.stdout
        err = self._err if self._err is not None else sys.stderr
        self._listing_done.clear()
        self._stopped.clear()

        threads = [threading.Thread(target=self._list_files, args=(path, options, err))]
        threads += [
            threading.Thread(target=self._search_files, args=(pattern, options, err))
            for _ in range(self._workers)
        ]
        for thread in threads:
            thread.start()
        try:
            self._print(threads, out)
        finally:
            for thread in threads:
                thread.join()

    def stop(self) -> None:
        """Ask all running threads to finish."""
        self._listing_done.set()
        self._stopped.set()

    def _list_files(self, path, options: Options, err) -> None:
        try:
            for file in iter_files(path, options, err):
                if self._stopped.is_set():
                    break
                self._paths.push_back(file)
        finally:
            self._listing_done.set()

    def _search_files(self, pattern: re.Pattern, options: Options, err) -> None:
        while not self._stopped.is_set():
            listing_done = self._listing_done.is_set()
            try:
                file = self._paths.pop_front()
            except IndexError:
                if listing_done:
                    return
                time.sleep(_POLL_INTERVAL)
                continue
            try:
                for result in grep_file(file, pattern, options):
                    self._results.push_back(result)
            except OSError:
                if options.verbose_mode:
                    self._results.push_back(f"can't open file:{file}")
            except Exception as exc:  # keep searching the remaining files
                with self._err_lock:
                    print(exc, file=err)

    def _print(self, threads, out) -> None:
        while True:
            finished = self._stopped.is_set() or not any(t.is_alive() for t in threads)
            try:
                text = self._results.pop_front()
            except IndexError:
                if finished:
                    return
                time.sleep(_POLL_INTERVAL)
                continue
            print(text, file=out)