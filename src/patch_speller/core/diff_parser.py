"""Parser for unified diffs.

This module implements the UnifiedDiffParser class that turns the text of
a unified diff (as printed by `git diff` or `diff -u`) into FilePatch
objects holding the added lines of every file. It supports:
- git extended headers (new/deleted file, rename, index, mode changes)
- plain `diff -u` output without a `diff --git` line
- binary file markers
- "\\ No newline at end of file" markers
- hunks with omitted line counts ("@@ -1 +1 @@")

The line locator of every added line is its 1-based line number in the
new version of the file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import structlog

from patch_speller.models.patch import AddedLine, FilePatch
from patch_speller.utils.errors import DiffParseError

log = structlog.get_logger()

DEV_NULL = "/dev/null"


@dataclass
class _FileState:
    """Mutable accumulator for the file currently being parsed."""

    old_path: str | None = None
    new_path: str | None = None
    header_new_path: str | None = None
    deleted: bool = False
    binary: bool = False
    lines: list[AddedLine] = field(default_factory=list)

    def path(self) -> str | None:
        return self.new_path or self.header_new_path

    def to_patch(self) -> FilePatch | None:
        path = self.path()
        if self.deleted or self.binary or path is None:
            return None
        return FilePatch(new_file_path=path, lines=tuple(self.lines), old_file_path=self.old_path)


class UnifiedDiffParser:
    """Parser for unified diffs.

    Responsibilities:
    - Split a multi-file diff into per-file changes
    - Track new-file line numbers through each hunk
    - Collect added lines, ignoring context and removed lines
    - Skip deleted and binary files

    Example:
        parser = UnifiedDiffParser()
        for patch in parser.parse(diff_text):
            print(patch.new_file_path, patch.additions)
    """

    GIT_HEADER = re.compile(r"^diff --git a/(.+?) b/(.+)$")
    OLD_FILE = re.compile(r"^--- (.+)$")
    NEW_FILE = re.compile(r"^\+\+\+ (.+)$")
    HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
    BINARY_MARKER = re.compile(r"^Binary files .* differ$")
    DELETED_FILE = re.compile(r"^deleted file mode ")
    NO_NEWLINE_MARKER = "\\"

    def parse(self, text: str) -> list[FilePatch]:
        """Parse unified diff text.

        Args:
            text: Diff text, possibly covering several files

        Returns:
            FilePatch per changed file still present after the change,
            in diff order

        Raises:
            DiffParseError: If a hunk header is malformed or hunk content
                appears before any file header
        """
        patches: list[FilePatch] = []
        current: _FileState | None = None
        old_remaining = 0
        new_remaining = 0
        new_line = 0

        def finish(state: _FileState | None) -> None:
            if state is None:
                return
            patch = state.to_patch()
            if patch is None:
                log.debug(
                    "diff_file_skipped",
                    path=state.path(),
                    deleted=state.deleted,
                    binary=state.binary,
                )
                return
            log.debug(
                "diff_file_parsed",
                path=patch.new_file_path,
                new_file=patch.is_new_file,
                additions=patch.additions,
            )
            patches.append(patch)

        for number, raw in enumerate(text.splitlines(), start=1):
            in_hunk = old_remaining > 0 or new_remaining > 0

            if in_hunk and current is not None:
                marker = raw[:1]
                if marker == "+":
                    current.lines.append(
                        AddedLine(
                            file_path=current.path() or "",
                            content=raw[1:],
                            line_locator=new_line,
                        )
                    )
                    new_line += 1
                    new_remaining -= 1
                    continue
                if marker == "-":
                    old_remaining -= 1
                    continue
                if marker == " " or raw == "":
                    new_line += 1
                    old_remaining -= 1
                    new_remaining -= 1
                    continue
                if marker == self.NO_NEWLINE_MARKER:
                    continue
                raise DiffParseError(f"Unexpected line inside hunk: {raw!r}", line_number=number)

            if raw.startswith(self.NO_NEWLINE_MARKER):
                continue

            header = self.GIT_HEADER.match(raw)
            if header:
                finish(current)
                current = _FileState(old_path=header.group(1), header_new_path=header.group(2))
                continue

            if raw.startswith("@@"):
                hunk = self.HUNK_HEADER.match(raw)
                if not hunk:
                    raise DiffParseError(f"Malformed hunk header: {raw!r}", line_number=number)
                if current is None or current.path() is None:
                    raise DiffParseError("Hunk found before any file header", line_number=number)
                old_remaining = int(hunk.group(2)) if hunk.group(2) is not None else 1
                new_remaining = int(hunk.group(4)) if hunk.group(4) is not None else 1
                new_line = int(hunk.group(3))
                continue

            old_file = self.OLD_FILE.match(raw)
            if old_file:
                # Plain `diff -u` output starts a file with "---"
                if current is None or current.new_path is not None:
                    finish(current)
                    current = _FileState()
                current.old_path = self._strip_path(old_file.group(1), "a/")
                continue

            new_file = self.NEW_FILE.match(raw)
            if new_file and current is not None:
                path = self._strip_path(new_file.group(1), "b/")
                if path is None:
                    current.deleted = True
                else:
                    current.new_path = path
                continue

            if current is not None:
                if self.DELETED_FILE.match(raw):
                    current.deleted = True
                elif self.BINARY_MARKER.match(raw):
                    current.binary = True

        finish(current)

        log.debug(
            "diff_parsed",
            files=len(patches),
            added_lines=sum(p.additions for p in patches),
        )
        return patches

    @staticmethod
    def _strip_path(raw_path: str, prefix: str) -> str | None:
        """Normalize a path from a ---/+++ header.

        Drops trailing timestamps, surrounding quotes and the a/ or b/ prefix.

        Returns:
            The path, or None for /dev/null
        """
        path = raw_path.split("\t", 1)[0].strip().strip('"')
        if path == DEV_NULL:
            return None
        if path.startswith(prefix):
            path = path[len(prefix) :]
        return path
