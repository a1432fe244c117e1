from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from invoicegen.styles.table import STYLE_TABLE, StyleBundle


class StyleComposer:
    """Resolves class token strings against a fixed style table.

    The table is copied on construction, so later edits to the source
    mapping do not leak into composed bundles.
    """

    def __init__(self, table: Mapping[str, Mapping[str, object]]) -> None:
        self._table = MappingProxyType({k: dict(v) for k, v in table.items()})

    @property
    def table(self) -> Mapping[str, Mapping[str, object]]:
        return self._table

    def compose(self, tokens: Optional[str]) -> StyleBundle:
        """Merge the bundles of whitespace-separated *tokens*, left to right.

        Later tokens win on overlapping keys; unknown tokens add nothing.
        """
        bundle: Dict[str, object] = {}
        for token in (tokens or "").split():
            bundle.update(self._table.get(token, {}))
        return bundle


_default: Optional[StyleComposer] = None


def default_composer() -> StyleComposer:
    global _default
    if _default is None:
        _default = StyleComposer(STYLE_TABLE)
    return _default


def compose(tokens: Optional[str]) -> StyleBundle:
    return default_composer().compose(tokens)
