"""Documento HTML sobre BeautifulSoup.

Implementa `core.interfaces.document.DocumentNode` para que el clasificador
no dependa de bs4. Se usa `html.parser`: tolera markup roto sin lanzar, y
los selectores sobre un documento mal formado simplemente no encuentran nada.
"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag


class SoupNode:
    """Nodo de solo lectura respaldado por un `Tag` de BeautifulSoup."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def select_first(self, selector: str) -> SoupNode | None:
        found = self._tag.select_one(selector)
        if found is None:
            return None
        return SoupNode(found)

    def text(self) -> str:
        return self._tag.get_text()

    def __repr__(self) -> str:
        return f"SoupNode(<{self._tag.name}>)"


def parse_html(html: str) -> SoupNode:
    """Parsea `html` y devuelve la raíz del documento."""

    return SoupNode(BeautifulSoup(html or "", "html.parser"))
