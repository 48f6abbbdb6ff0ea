"""Spell-check run over the added lines of a change.

This module implements the SpellRunner class that coordinates a run:
1. Skip patches without additions or outside files_to_lint
2. Skip lines failing the keyword gate
3. Extract candidate words from each remaining line
4. Classify each word against the filter chain and dictionary
5. Build a finding for every misspelled word

Runs are sequential and deterministic: the same patches give the same
findings in the same order.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from patch_speller.config.schema import FilterConfig
from patch_speller.core.classifier import SpellClassifier
from patch_speller.core.filters import FilterChain
from patch_speller.core.findings import FindingBuilder
from patch_speller.core.tokenizer import extract_words
from patch_speller.interfaces.catalog import IdentifierCatalog
from patch_speller.interfaces.dictionary import SpellingDictionary
from patch_speller.interfaces.patch import Patch
from patch_speller.models.finding import Finding
from patch_speller.models.patch import AddedLine
from patch_speller.utils.logging import bind_context, unbind_context
from patch_speller.utils.metrics import SpellMetrics

log = structlog.get_logger()


class SpellRunner:
    """Runs the spell-check pipeline over a set of patches.

    The filter configuration and identifier catalog are fixed for the
    lifetime of the runner; the dictionary is owned by it.

    Example:
        runner = create_runner(config)
        findings = runner.run(UnifiedDiffParser().parse(diff_text))
    """

    def __init__(
        self,
        config: FilterConfig,
        dictionary: SpellingDictionary,
        catalog: IdentifierCatalog,
        metrics: SpellMetrics | None = None,
    ) -> None:
        """Initialize the SpellRunner.

        Args:
            config: Resolved filter parameters
            dictionary: Dictionary service for config.language
            catalog: Known identifiers, snapshotted at run start
            metrics: Optional counters to update
        """
        self._config = config
        self._metrics = metrics or SpellMetrics()
        self._filters = FilterChain(config, catalog)
        self._classifier = SpellClassifier(dictionary, self._filters, self._metrics)
        self._builder = FindingBuilder(dictionary, config.max_suggestions)

    @property
    def config(self) -> FilterConfig:
        """Filter parameters of the run."""
        return self._config

    @property
    def metrics(self) -> SpellMetrics:
        """Counters of the most recent run."""
        return self._metrics

    def run(self, patches: Iterable[Patch] | None) -> list[Finding]:
        """Spell-check the added lines of every patch.

        Args:
            patches: Per-file changes, in the order findings should follow

        Returns:
            Findings ordered by patch, line, then word position. Empty
            when there is nothing to report.
        """
        patch_list = list(patches or [])
        self._metrics.reset()
        if not patch_list:
            log.debug("no_patches_to_check")
            return []

        findings: list[Finding] = []
        for patch in patch_list:
            if not self._should_inspect(patch):
                continue

            bind_context(file_path=patch.new_file_path)
            try:
                findings.extend(self.inspect(patch))
            finally:
                unbind_context("file_path")

        log.info("spell_run_complete", patches=len(patch_list), **self._metrics.snapshot())
        return findings

    def _should_inspect(self, patch: Patch) -> bool:
        if patch.additions <= 0:
            self._metrics.patches_skipped.inc(labels={"reason": "no_additions"})
            log.debug("patch_skipped", path=patch.new_file_path, reason="no_additions")
            return False

        if not self._filters.is_lintable_file(patch.new_file_path):
            self._metrics.patches_skipped.inc(labels={"reason": "files_to_lint"})
            log.debug("patch_skipped", path=patch.new_file_path, reason="files_to_lint")
            return False

        return True

    def inspect(self, patch: Patch) -> list[Finding]:
        """Spell-check the added lines of one patch.

        The file gate is not applied here; run() applies it.

        Args:
            patch: A single file's change

        Returns:
            Findings in line order
        """
        findings: list[Finding] = []
        for line in patch.added_lines():
            findings.extend(self.inspect_line(line))
        return findings

    def inspect_line(self, line: AddedLine) -> list[Finding]:
        """Spell-check one added line.

        Args:
            line: The added line

        Returns:
            Findings in order of first occurrence in the line
        """
        self._metrics.lines_scanned.inc()

        if not self._filters.line_matches_keywords(line.content):
            self._metrics.lines_skipped.inc(labels={"reason": "keywords"})
            log.debug("line_skipped_by_keywords", line=line.line_locator)
            return []

        findings: list[Finding] = []
        for word in extract_words(line.content):
            if not self._classifier.is_misspelled(word):
                continue

            finding = self._builder.build(word, line)
            self._metrics.findings_emitted.inc()
            log.debug("misspelling_found", word=word, line=line.line_locator)
            findings.append(finding)

        return findings


def create_runner(
    config: FilterConfig,
    dictionary: SpellingDictionary | None = None,
    catalog: IdentifierCatalog | None = None,
) -> SpellRunner:
    """Factory function to create a SpellRunner with its collaborators.

    Collaborators not supplied are built from the configuration: a
    pyspellchecker dictionary for config.language, and a snapshot of the
    identifiers known to the interpreter.

    Args:
        config: Resolved filter parameters
        dictionary: Dictionary service to use instead of the default
        catalog: Identifier catalog to use instead of the default

    Returns:
        Configured SpellRunner

    Raises:
        DictionaryUnavailableError: If the default dictionary can't be built
    """
    if dictionary is None:
        # Import here to avoid loading the word lists when a host supplies its own
        from patch_speller.adapters.dictionary.pyspellchecker import PySpellCheckerDictionary

        dictionary = PySpellCheckerDictionary(config.language, config.suggestion_mode)

    if catalog is None:
        from patch_speller.adapters.catalog.python_symbols import PythonSymbolCatalog

        catalog = PythonSymbolCatalog.snapshot()

    return SpellRunner(config, dictionary, catalog)
