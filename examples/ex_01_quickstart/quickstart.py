"""Quickstart: convert request attributes into a stored document.

Map a dataclass in an in-memory document manager, then let the converter
look it up by identifier and by criteria.
"""

from __future__ import annotations

from dataclasses import dataclass

from paramwire import DocumentParamConverter, InMemoryDocumentManager, ParamConverter, Request


@dataclass
class Article:
    id: str
    slug: str
    title: str


def main() -> None:
    manager = InMemoryDocumentManager()
    manager.register(Article).add(
        Article(id="1", slug="hello", title="Hello"),
        Article(id="2", slug="world", title="World"),
    )
    converter = DocumentParamConverter(manager)
    declaration = ParamConverter(name="article", document_class=Article)

    print(f"supported={converter.supports(declaration)}")  # => supported=True

    by_id = Request.from_attributes(id="1")
    converter.apply(by_id, declaration)
    print(f"by_id={by_id.attributes.get('article').title}")  # => by_id=Hello

    by_slug = Request.from_attributes(slug="world", _route="article_show")
    converter.apply(by_slug, declaration)
    print(f"by_slug={by_slug.attributes.get('article').title}")  # => by_slug=World


if __name__ == "__main__":
    main()
