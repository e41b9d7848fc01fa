"""Named finders with signature binding.

``repository_method`` selects a finder on the repository. With
``map_method_signature`` the mapped request attributes are bound to the finder
parameters by name, and defaults fill the rest.
"""

from __future__ import annotations

from dataclasses import dataclass

from paramwire import (
    DocumentParamConverter,
    InMemoryDocumentManager,
    InMemoryRepository,
    ParamConverter,
    ParamwireMissingArgumentError,
    Request,
    finder,
)


@dataclass
class Ticket:
    id: str
    project: str
    state: str


class TicketRepository(InMemoryRepository):
    @finder
    def find_open(self, project: str, state: str = "open") -> list[Ticket]:
        return self.find_by({"project": project, "state": state})


def main() -> None:
    manager = InMemoryDocumentManager()
    manager.register(Ticket, TicketRepository(), repository_name="tickets").add(
        Ticket(id="1", project="core", state="open"),
        Ticket(id="2", project="core", state="closed"),
        Ticket(id="3", project="docs", state="open"),
    )
    converter = DocumentParamConverter(manager)
    declaration = ParamConverter(
        name="tickets",
        document_class=Ticket,
        options={
            "mapping": {"projectKey": "project"},
            "repository_method": "find_open",
            "map_method_signature": True,
        },
    )

    request = Request.from_attributes(projectKey="core")
    converter.apply(request, declaration)
    ids = [ticket.id for ticket in request.attributes.get("tickets")]
    print(f"open_core={ids}")  # => open_core=['1']

    unmapped = ParamConverter(
        name="tickets",
        document_class=Ticket,
        options={"repository_method": "find_open", "map_method_signature": True},
    )
    try:
        converter.apply(Request.from_attributes(other="core"), unmapped)
    except ParamwireMissingArgumentError as error:
        print(f"missing={error.parameter_name}")  # => missing=project


if __name__ == "__main__":
    main()
