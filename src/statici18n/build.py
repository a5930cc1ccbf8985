"""One static i18n build pass.

BuildPass wires the components into the strictly ordered pipeline of a
single host build:

    start()           load and validate locale data, reset key sets
    transform()       per module, any order or concurrently
    finish()          finalize key sets, audit locales, backfill
    generate_bundle() replicate artifacts once per locale

Nothing is kept between passes: start() rebuilds the key sets and the
fallback graph from scratch. transform(), finish() and generate_bundle()
are no-ops unless the build target inlines translations (a production
client build).

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from enum import Enum, auto

from statici18n.config import BuildTarget, I18nConfig
from statici18n.constants import TRANSFORMABLE_MODULE_PATTERN
from statici18n.localization.audit import AuditSummary, KeyAuditor
from statici18n.localization.loading import LoadSummary, LocaleFileLoader
from statici18n.localization.store import LocaleStore
from statici18n.replication.replicator import BuildArtifact, BundleReplicator
from statici18n.replication.tokens import SourceTransformer
from statici18n.runtime.accumulator import KeyAccumulator, KeySnapshot

__all__ = ["BuildPass"]

logger = logging.getLogger(__name__)

_TRANSFORMABLE = re.compile(TRANSFORMABLE_MODULE_PATTERN)


class _Phase(Enum):
    """Pipeline position of a BuildPass."""

    IDLE = auto()
    SCANNING = auto()
    AUDITED = auto()


class BuildPass:
    """Static translation pipeline for one host build.

    Example:
        >>> build = BuildPass(I18nConfig(locales=("en", "nl")), transformer=my_transformer)
        >>> build.start()
        >>> code = build.transform(source, "src/app.ts")
        >>> summary = build.finish()
        >>> copies = build.generate_bundle(artifacts)

    Attributes:
        config: Plugin configuration
        target: Host build target
    """

    __slots__ = (
        "_config",
        "_keys",
        "_loader",
        "_phase",
        "_snapshot",
        "_store",
        "_target",
        "_transformer",
    )

    def __init__(
        self,
        config: I18nConfig,
        target: BuildTarget | None = None,
        *,
        transformer: SourceTransformer | None = None,
        loader: LocaleFileLoader | None = None,
    ) -> None:
        """Initialize build pass.

        Args:
            config: Plugin configuration
            target: Host build target (default: production client build)
            transformer: Rewrites modules into placeholder tokens
            loader: Locale file loader (default: files under config.locales_path)
        """
        self._config = config
        self._target = target or BuildTarget()
        self._transformer = transformer
        self._loader = loader or LocaleFileLoader(config.locales_path)
        self._keys = KeyAccumulator()
        self._store: LocaleStore | None = None
        self._snapshot: KeySnapshot | None = None
        self._phase = _Phase.IDLE

    @property
    def config(self) -> I18nConfig:
        """Plugin configuration."""
        return self._config

    @property
    def target(self) -> BuildTarget:
        """Host build target."""
        return self._target

    @property
    def should_inline(self) -> bool:
        """Whether translations are inlined into this build's output."""
        return self._target.should_inline

    @property
    def keys(self) -> KeyAccumulator:
        """Key accumulator of the current pass."""
        return self._keys

    @property
    def store(self) -> LocaleStore:
        """Locale store loaded by start().

        Raises:
            RuntimeError: If start() has not run
        """
        if self._store is None:
            msg = "BuildPass.start() must run before locale data is available"
            raise RuntimeError(msg)
        return self._store

    def start(self) -> LoadSummary:
        """Begin a build pass: reset key sets, load and validate locale data.

        Raises:
            LocaleDataError: On any fatal locale configuration problem
        """
        self._keys.reset()
        self._snapshot = None
        self._store = None
        store = LocaleStore(
            self._config.locales,
            self._loader,
            self._keys,
            default_locale=self._config.default_locale,
            add_missing=self._config.add_missing,
        )
        summary = store.load()
        self._store = store
        self._phase = _Phase.SCANNING
        return summary

    def transform(self, code: str, module_id: str) -> str | None:
        """Hand one module to the source transformer.

        Returns:
            Rewritten source, or None when the module is left alone
        """
        if not self.should_inline or self._transformer is None:
            return None
        if not _TRANSFORMABLE.search(module_id):
            return None
        if self._phase is not _Phase.SCANNING:
            msg = "BuildPass.transform() called outside the scan phase"
            raise RuntimeError(msg)
        return self._transformer.transform(code, module_id, self._keys)

    def finish(self) -> AuditSummary | None:
        """Close the scan phase and audit every locale.

        Returns:
            AuditSummary, or None when this build does not inline translations
        """
        if not self.should_inline:
            return None
        store = self.store
        self._snapshot = self._keys.finalize()
        auditor = KeyAuditor(store, add_missing=self._config.add_missing)
        summary = auditor.audit(self._snapshot.all_keys)
        self._phase = _Phase.AUDITED
        return summary

    def generate_bundle(self, artifacts: Iterable[BuildArtifact]) -> tuple[BuildArtifact, ...]:
        """Emit the locale-scoped copies of a build's artifacts.

        Returns:
            New artifacts to add to the output; empty when this build does
            not inline translations
        """
        if not self.should_inline:
            return ()
        store = self.store
        snapshot = self._snapshot or self._keys.finalize()
        replicator = BundleReplicator(
            store, snapshot.plural_keys, assets_dir=self._config.assets_dir
        )
        return replicator.replicate(artifacts)
