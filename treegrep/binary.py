"""Detection of common binary formats by their magic bytes."""

from __future__ import annotations

_ELF_MAGIC = b"\x7fELF"
_ARCHIVE_MAGIC = b"!<arch>"
_JPEG_MAGIC = b"\xff\xd8\xff"
_PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
_ZIP_MAGIC = b"PK\x03\x04"
_GZIP_MAGIC = b"\x1f\x8b"
_PDF_MAGIC = b"%PDF-"


def is_elf_header(data: bytes) -> bool:
    """Return True if ``data`` starts like an ELF executable."""
    return data.startswith(_ELF_MAGIC)


def is_archive_header(data: bytes) -> bool:
    """Return True if ``data`` starts like an ``ar`` archive."""
    return data.startswith(_ARCHIVE_MAGIC)


def is_jpeg(data: bytes) -> bool:
    """Return True if ``data`` starts like a JPEG image."""
    return data.startswith(_JPEG_MAGIC)


def is_png(data: bytes) -> bool:
    """Return True if ``data`` starts like a PNG image."""
    return data.startswith(_PNG_MAGIC)


def is_zip(data: bytes) -> bool:
    """Return True if ``data`` starts like a ZIP archive."""
    return data.startswith(_ZIP_MAGIC)


def is_gzip(data: bytes) -> bool:
    """Return True if ``data`` starts like a gzip stream."""
    return data.startswith(_GZIP_MAGIC)


def is_pdf(data: bytes) -> bool:
    """Return True if ``data`` starts like a PDF document."""
    return data.startswith(_PDF_MAGIC)


_CHECKS = (is_elf_header, is_archive_header, is_jpeg, is_png, is_zip, is_gzip, is_pdf)


def is_binary(data: bytes) -> bool:
    """Return True if ``data`` starts with any known binary magic."""
    return any(check(data) for check in _CHECKS)