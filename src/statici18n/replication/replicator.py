"""Per-locale replication of build artifacts.

For every in-scope artifact and every configured locale, the replicator
emits a copy under a locale subdirectory:

    assets_dir set:    <assets_dir><locale>/<rest of path>
    assets_dir unset:  <locale>/<path>

Artifacts outside assets_dir are not replicated. The original artifacts
stay at their paths untouched (servers render with them before a
locale-specific asset set is chosen).

Textual code has its placeholder tokens substituted; everything else is
copied byte-for-byte. A call token becomes:

    - the JSON of the raw translation (plural table or string) when the key
      is plural-shaped in some locale, so runtime code can still select a
      case with a value known only at request time;
    - otherwise the JSON string of the resolved translation, interpolated
      with the token's captured arguments. When fewer arguments were
      captured than the template has slots, the raw template is emitted so
      runtime interpolation can still apply it.

Missing translations resolve through the locale's fallback chain and
finally to the key text itself.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Set
from dataclasses import dataclass

from statici18n.constants import TEXT_ARTIFACT_SUFFIX
from statici18n.diagnostics import ErrorTemplate
from statici18n.enums import ArtifactKind, ReplicationAction
from statici18n.localization.store import LocaleStore
from statici18n.localization.types import LocaleCode, Translation, TranslationKey
from statici18n.replication.tokens import PlaceholderCall, replace_tokens
from statici18n.runtime.interpolation import interpolate, is_fully_bound
from statici18n.runtime.plural import resolve_plural

__all__ = ["BuildArtifact", "BundleReplicator", "normalize_assets_dir"]

logger = logging.getLogger(__name__)


def normalize_assets_dir(assets_dir: str | None) -> str | None:
    """Ensure a non-empty assets directory ends with '/'.

    Example:
        >>> normalize_assets_dir("assets")
        'assets/'
        >>> normalize_assets_dir("") is None
        True
    """
    if not assets_dir:
        return None
    return assets_dir if assets_dir.endswith("/") else f"{assets_dir}/"


@dataclass(frozen=True, slots=True)
class BuildArtifact:
    """One file of the build output.

    Attributes:
        file_name: Path relative to the output directory, '/'-separated
        source: File content
        kind: CHUNK for compiled code, ASSET for anything else
    """

    file_name: str
    source: str | bytes
    kind: ArtifactKind = ArtifactKind.ASSET

    @property
    def is_text_code(self) -> bool:
        """Whether placeholder tokens should be substituted in this artifact."""
        if not isinstance(self.source, str):
            return False
        return self.kind == ArtifactKind.CHUNK or self.file_name.endswith(TEXT_ARTIFACT_SUFFIX)


class BundleReplicator:
    """Produces the locale-scoped copies of a build's artifacts.

    Example:
        >>> replicator = BundleReplicator(store, snapshot.plural_keys)
        >>> copies = replicator.replicate([BuildArtifact("app.js", code, ArtifactKind.CHUNK)])
        >>> [c.file_name for c in copies]
        ['en/app.js', 'nl/app.js']
    """

    __slots__ = ("_assets_dir", "_plural_keys", "_reported_missing", "_store")

    def __init__(
        self,
        store: LocaleStore,
        plural_keys: Set[TranslationKey],
        *,
        assets_dir: str | None = None,
    ) -> None:
        """Initialize replicator.

        Args:
            store: Loaded locale store
            plural_keys: Keys that are plural-shaped in at least one locale
            assets_dir: Subdirectory of browser assets; None replicates everything
        """
        self._store = store
        self._plural_keys = frozenset(plural_keys)
        self._assets_dir = normalize_assets_dir(assets_dir)
        self._reported_missing: set[tuple[LocaleCode, TranslationKey]] = set()

    @property
    def assets_dir(self) -> str | None:
        """Normalized assets directory."""
        return self._assets_dir

    def output_path(self, file_name: str, locale: LocaleCode) -> str | None:
        """Path of a locale's copy of an artifact, or None when out of scope."""
        if self._assets_dir is None:
            return f"{locale}/{file_name}"
        if not file_name.startswith(self._assets_dir):
            return None
        return f"{self._assets_dir}{locale}/{file_name[len(self._assets_dir) :]}"

    def _lookup(self, locale: LocaleCode, key: TranslationKey) -> Translation:
        found = self._store.lookup(locale, key)
        if found is not None:
            return found.value
        if (locale, key) not in self._reported_missing:
            self._reported_missing.add((locale, key))
            logger.warning("%s", ErrorTemplate.translation_missing(key, locale))
        return key

    def render_call(self, call: PlaceholderCall, locale: LocaleCode) -> str:
        """Replacement literal for one call token in one locale."""
        translation = self._lookup(locale, call.key)

        if call.key in self._plural_keys:
            return json.dumps(translation, ensure_ascii=False)

        if isinstance(translation, dict):
            # Only reachable when plural_keys was computed from other data
            text = resolve_plural(translation, call.args, key=call.key, locale=locale)
        elif not is_fully_bound(translation, len(call.args)):
            text = translation
        else:
            text = interpolate(translation, call.args)
        return json.dumps(text, ensure_ascii=False)

    def translate_code(self, code: str, locale: LocaleCode, file_name: str = "") -> str:
        """Substitute every placeholder token in a text for one locale.

        Raises:
            PlaceholderSyntaxError: If a call token is malformed
        """
        return replace_tokens(
            code, locale, lambda call: self.render_call(call, locale), file_name=file_name
        )

    def replicate_artifact(self, artifact: BuildArtifact) -> list[BuildArtifact]:
        """All locale copies of one artifact (empty when out of scope)."""
        copies: list[BuildArtifact] = []
        for locale in self._store.locales:
            target = self.output_path(artifact.file_name, locale)
            if target is None:
                return []
            if artifact.is_text_code:
                source: str | bytes = self.translate_code(
                    artifact.source,  # type: ignore[arg-type]
                    locale,
                    artifact.file_name,
                )
                action = ReplicationAction.TRANSLATED
            else:
                source = artifact.source
                action = ReplicationAction.COPIED
            logger.debug("%s %s -> %s", action, artifact.file_name, target)
            copies.append(BuildArtifact(file_name=target, source=source))
        return copies

    def replicate(self, artifacts: Iterable[BuildArtifact]) -> tuple[BuildArtifact, ...]:
        """Replicate a whole artifact set.

        All copies are built before any is returned, so a failure leaves no
        partial set behind.

        Args:
            artifacts: Artifacts of one build

        Returns:
            New locale-scoped artifacts; originals are not included

        Raises:
            PlaceholderSyntaxError: If an artifact contains a malformed call token
        """
        emitted: list[BuildArtifact] = []
        in_scope = 0
        for artifact in artifacts:
            copies = self.replicate_artifact(artifact)
            if copies:
                in_scope += 1
            emitted.extend(copies)
        logger.info(
            "Replicated %d artifacts into %d locales (%d files)",
            in_scope,
            len(self._store.locales),
            len(emitted),
        )
        return tuple(emitted)
