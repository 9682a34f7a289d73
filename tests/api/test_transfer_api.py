"""
API tests for attribute, import, export and backend catalog endpoints.

Tests cover:
- Backend catalogs
- Attribute introspection
- File import with summary
- File export download
- Backend errors (503) and kind mismatch (400)
"""

from fastapi.testclient import TestClient


def create_csv_template(
    client: TestClient,
    kind: str = "Import",
    name: str = "Tickets",
    object_type: str = "Ticket",
    **format_data,
) -> int:
    """Helper to create a template with CSV format data; returns its ID."""
    response = client.post("/templates", json={
        "kind": kind,
        "object_type": object_type,
        "format_type": "CSV",
        "name": name,
    })
    assert response.status_code == 201, response.text
    template_id = response.json()["template_id"]

    data = {"ColumnSeparator": "Comma", "Charset": "UTF-8", "IncludeColumnHeaders": "0"}
    data.update(format_data)
    client.put(f"/templates/{template_id}/format-data", json={"data": data})
    return template_id


# =============================================================================
# CATALOG TESTS
# =============================================================================


class TestBackendCatalogAPI:
    """Tests for GET /backends endpoints."""

    def test_list_object_backends(self, client: TestClient):
        response = client.get("/backends/objects")

        assert response.status_code == 200
        assert response.json() == {"backends": {"FAQ": "FAQ Article", "Ticket": "Ticket"}}

    def test_list_format_backends(self, client: TestClient):
        response = client.get("/backends/formats")

        assert response.status_code == 200
        assert response.json()["backends"] == {"CSV": "CSV (Comma Separated Values)"}


# =============================================================================
# ATTRIBUTE TESTS
# =============================================================================


class TestAttributesAPI:
    """Tests for attribute introspection endpoints."""

    def test_format_attributes(self, client: TestClient):
        """
        GIVEN a CSV template
        WHEN I GET its format attributes
        THEN the CSV configuration surface is described
        """
        template_id = create_csv_template(client)

        response = client.get(f"/templates/{template_id}/format-attributes")

        assert response.status_code == 200
        data = response.json()
        assert [a["key"] for a in data] == ["ColumnSeparator", "Charset", "IncludeColumnHeaders"]
        assert data[0]["input"]["type"] == "Selection"
        assert data[1]["input"]["default_value"] == "UTF-8"

    def test_format_mapping_attributes(self, client: TestClient):
        template_id = create_csv_template(client)

        response = client.get(f"/templates/{template_id}/format-mapping-attributes")

        assert response.status_code == 200
        assert response.json()[0]["input"] == {
            "type": "DTL",
            "options": {},
            "data": "Counter",
            "required": False,
            "default_value": None,
            "translation": False,
            "possible_none": False,
            "size": None,
            "max_length": None,
        }

    def test_object_attributes(self, client: TestClient):
        template_id = create_csv_template(client)

        response = client.get(f"/templates/{template_id}/object-attributes")

        assert response.status_code == 200
        assert [a["key"] for a in response.json()] == ["DefaultState"]

    def test_object_mapping_attributes(self, client: TestClient):
        template_id = create_csv_template(client)

        response = client.get(f"/templates/{template_id}/object-mapping-attributes")

        assert response.status_code == 200
        assert response.json()[0]["input"]["options"] == {"Title": "Title", "State": "State"}

    def test_unknown_object_backend_returns_503(self, client: TestClient):
        """
        GIVEN a template for an object without a backend
        WHEN I GET its object attributes
        THEN response is 503 with a backend load error
        """
        template_id = create_csv_template(client, object_type="FAQ")

        response = client.get(f"/templates/{template_id}/object-attributes")

        assert response.status_code == 503
        assert response.json()["error"] == "BACKEND_LOAD_ERROR"

    def test_missing_template_returns_404(self, client: TestClient):
        assert client.get("/templates/999/format-attributes").status_code == 404


# =============================================================================
# IMPORT TESTS
# =============================================================================


class TestImportAPI:
    """Tests for POST /templates/{id}/import endpoint."""

    def test_import_file(self, client: TestClient, ticket_store):
        """
        GIVEN an Import template with headers enabled
        WHEN I upload a CSV file
        THEN rows after the header are imported and summarized
        """
        template_id = create_csv_template(client, IncludeColumnHeaders="1")
        content = "Title,State\nPrinter,new\n,open\nCoffee,closed\n".encode("utf-8")

        response = client.post(
            f"/templates/{template_id}/import",
            files={"file": ("tickets.csv", content, "text/csv")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["template_id"] == template_id
        assert data["imported_count"] == 2
        assert data["skipped_count"] == 1
        assert data["error_count"] == 1
        assert data["errors"] == ["Row 2: Ticket title is required"]
        assert ticket_store[template_id] == [["Printer", "new"], ["Coffee", "closed"]]

    def test_import_reports_parse_diagnostics(self, client: TestClient):
        template_id = create_csv_template(client)

        response = client.post(
            f"/templates/{template_id}/import",
            files={"file": ("tickets.csv", b'A,new\nB,"x"y\n', "text/csv")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["imported_count"] == 1
        assert data["diagnostics"][0]["line"] == 2
        assert data["diagnostics"][0]["code"] == "CSV_PARSE_ERROR"

    def test_import_through_export_template_returns_400(self, client: TestClient):
        template_id = create_csv_template(client, kind="Export")

        response = client.post(
            f"/templates/{template_id}/import",
            files={"file": ("tickets.csv", b"A,new", "text/csv")},
        )

        assert response.status_code == 400

    def test_import_without_format_data_returns_400(self, client: TestClient):
        response = client.post("/templates", json={
            "kind": "Import",
            "object_type": "Ticket",
            "format_type": "CSV",
            "name": "Unconfigured",
        })
        template_id = response.json()["template_id"]

        response = client.post(
            f"/templates/{template_id}/import",
            files={"file": ("tickets.csv", b"A,new", "text/csv")},
        )

        assert response.status_code == 400
        assert "No format data" in response.json()["message"]


# =============================================================================
# EXPORT TESTS
# =============================================================================


class TestExportAPI:
    """Tests for GET /templates/{id}/export endpoint."""

    def test_export_download(self, client: TestClient, ticket_store):
        """
        GIVEN an Export template with headers and stored tickets
        WHEN I GET the export
        THEN a CSV attachment with every field quoted is returned
        """
        template_id = create_csv_template(
            client, kind="Export", ColumnSeparator="Semicolon", IncludeColumnHeaders="1"
        )
        ticket_store[template_id] = [["Printer", "new"], ["Coffee; urgent", "open"]]

        response = client.get(f"/templates/{template_id}/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert f"template_{template_id:06d}.csv" in response.headers["content-disposition"]
        assert response.text == '"Title";"State"\n"Printer";"new"\n"Coffee; urgent";"open"'

    def test_export_non_utf8_download(self, client: TestClient, ticket_store):
        """
        GIVEN an ISO-8859-1 Export template with headers and raw byte tickets
        WHEN I GET the export
        THEN the original bytes are returned
        """
        template_id = create_csv_template(
            client, kind="Export", Charset="ISO-8859-1", IncludeColumnHeaders="1"
        )
        ticket_store[template_id] = [[b"caf\xe9", b"open"]]

        response = client.get(f"/templates/{template_id}/export")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/octet-stream"
        assert response.content == b'"Title","State"\n"caf\xe9","open"'

    def test_export_through_import_template_returns_400(self, client: TestClient):
        template_id = create_csv_template(client, kind="Import")

        assert client.get(f"/templates/{template_id}/export").status_code == 400

    def test_export_missing_template_returns_404(self, client: TestClient):
        assert client.get("/templates/999/export").status_code == 404
