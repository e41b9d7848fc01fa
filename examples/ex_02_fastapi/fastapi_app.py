"""FastAPI integration via ``Converted(...)`` dependencies.

This module demonstrates route-parameter conversion without network startup:

1. A registry built from an in-memory document manager.
2. A route whose ``{id}`` path parameter is converted into a document.
3. A miss rendered as a 404 response.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from fastapi import FastAPI
from fastapi.testclient import TestClient

from paramwire import InMemoryDocumentManager
from paramwire.integrations.fastapi import Converted, build_registry, setup_paramwire


@dataclass
class Customer:
    id: str
    name: str


def main() -> None:
    manager = InMemoryDocumentManager()
    manager.register(Customer).add(Customer(id="7", name="Ada"))

    app = FastAPI()
    setup_paramwire(app, build_registry(manager))

    @app.get("/customers/{id}")
    def show_customer(customer: Customer = Converted(Customer)) -> dict[str, str]:
        return {"name": customer.name}

    client = TestClient(app)
    found = client.get("/customers/7")
    missing = client.get("/customers/8")

    found_json = json.dumps(found.json(), sort_keys=True, separators=(",", ":"))
    print(f"found={found.status_code} {found_json}")  # => found=200 {"name":"Ada"}
    print(f"missing={missing.status_code}")  # => missing=404


if __name__ == "__main__":
    main()
