# treegrep

`treegrep` searches every file under a directory tree for a regular
expression. One thread lists the files and several worker threads search them
at the same time. Each match is printed with its line number and file path,
and the matched text is shown in red.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
treegrep <directory> <search query> [options]
```

The search query is a Python regular expression. Options may come anywhere
after the directory and the query.

| Option         | Meaning                                                       |
|----------------|---------------------------------------------------------------|
| `-m REGEXP`    | Search only files whose names contain a match for `REGEXP`    |
| `-v`           | Verbose mode: report unreadable paths and skipped binary files |
| `-di`          | Do not skip binary files                                      |
| `-h`, `--help` | Print the usage and option list, then run the search          |

The help text is printed only when a directory and a query are also given;
the search still runs afterwards.

The command exits with status 1 if fewer than two arguments are given, if the
first argument is not a directory, or if the query is not a valid regular
expression. Otherwise it exits with status 0.

Examples:

```
treegrep ./src "TODO|FIXME"
treegrep ./config "timeout" -m "\.json$" -v
```

### Output

Each match is printed on its own line in this form:

```
<line number>:<file path>:<line with the match highlighted>
```

A line with several matches is printed once for each match. For the second
and later matches, the printed text begins just after the previous match.
Results from different files may be interleaved, since files are searched in
parallel. Files are read as UTF-8; bytes that cannot be decoded are replaced.

By default, a file is skipped when its first line starts with the signature
of a known binary format: ELF, `ar` archives, JPEG, PNG, ZIP, gzip or PDF.
In verbose mode a skipped file is reported as `<path>: is binary`, and a file
that cannot be opened as `can't open file:<path>`. Errors met while listing
directories, including an invalid `-m` mask, are written to standard error in
verbose mode and otherwise ignored.

## Library use

```python
import sys
from treegrep.search import Grep, Options

options = Options(ignore_binaries=True, verbose_mode=False, file_mask=r"\.py$")
Grep(out=sys.stdout, err=sys.stderr, workers=4).search("./src", r"def \w+", options)
```

`Grep(out, err, workers)` writes results to `out` and errors to `err`
(standard output and standard error by default). `workers` defaults to the
number of CPUs and must be at least 1. `Grep.search` raises `re.error` for an
invalid query. `Grep.stop()` asks the running threads to finish.

The module `treegrep.search` also provides these functions:

- `iter_files(root, options, err)` yields the paths of regular files under
  `root` that match `options.file_mask`, in name order, directory by directory.
- `grep_file(path, pattern, options)` yields the output lines for one file.
  `pattern` may be a string or a compiled pattern. It raises `OSError` if the
  file cannot be read.
- `highlight(line, match)` renders one match with its text coloured red.

`treegrep.binary.is_binary(data)` checks whether a block of bytes starts with
one of the known binary signatures. Each format also has its own check:
`is_elf_header`, `is_archive_header`, `is_jpeg`, `is_png`, `is_zip`,
`is_gzip` and `is_pdf`.

`treegrep.work_queue.WorkQueue` is a thread-safe FIFO queue with
`push_back`, `pop_front`, `is_empty` and `len()`. `pop_front` never waits; it
raises `IndexError` when the queue is empty. It carries file paths to the
workers and their results to the printer.