from api_doc_agent.parser.base import Info, OpenApiDocument, Operation, Parameter, Server


class TestParameter:
    def test_create_with_openapi_names(self):
        p = Parameter.model_validate({"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}})
        assert p.location == "path"
        assert p.json_schema == {"type": "integer"}
        assert p.description is None

    def test_create_with_field_names(self):
        p = Parameter(name="limit", location="query", json_schema={"type": "integer"})
        assert p.required is False

    def test_dump_uses_openapi_names(self):
        p = Parameter(name="limit", location="query", json_schema={"type": "integer"})
        data = p.model_dump(by_alias=True, exclude_none=True)
        assert data == {"name": "limit", "in": "query", "required": False, "schema": {"type": "integer"}}


class TestOperation:
    def test_minimal(self):
        op = Operation(summary="List users", description="Returns all users")
        assert op.parameters is None
        assert op.request_body is None

    def test_extra_fields_preserved(self):
        op = Operation.model_validate({"summary": "s", "description": "d", "operationId": "listUsers"})
        assert op.model_dump(by_alias=True, exclude_none=True)["operationId"] == "listUsers"


class TestOpenApiDocument:
    def test_to_dict(self):
        doc = OpenApiDocument(
            openapi="3.0.0",
            info=Info(title="T", version="1", description="D"),
            servers=[Server(url="http://localhost:3000/api")],
            paths={
                "/users/{id}": {
                    "get": Operation(
                        summary="Get user",
                        description="Returns one user",
                        parameters=[Parameter(name="id", location="path", required=True)],
                        request_body=None,
                    )
                }
            },
        )
        data = doc.to_dict()
        assert data["servers"] == [{"url": "http://localhost:3000/api"}]
        op = data["paths"]["/users/{id}"]["get"]
        assert op["parameters"][0]["in"] == "path"
        assert "requestBody" not in op
