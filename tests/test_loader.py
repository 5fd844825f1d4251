"""Tests for loading schemas and documents from disk."""

import json

import pytest
from graphql import GraphQLError, introspection_from_schema, print_schema

from gql_typegen.core.loader import collect_files, load_documents, load_schema


@pytest.fixture
def schema_dir(tmp_path, githunt_schema):
    """A directory holding the GitHunt schema split over two files."""
    directory = tmp_path / "schema"
    directory.mkdir()
    sdl = print_schema(githunt_schema)
    query_start = sdl.index("type Query")
    (directory / "a_enums.graphql").write_text(sdl[:query_start])
    (directory / "b_types.graphqls").write_text(sdl[query_start:])
    (directory / "README.md").write_text("not a schema")
    return directory


class TestCollectFiles:
    """Tests for collect_files."""

    def test_directory_sorted_and_filtered(self, schema_dir):
        files = collect_files(str(schema_dir), (".graphql", ".graphqls"))
        assert [f.rsplit("/", 1)[-1] for f in files] == ["a_enums.graphql", "b_types.graphqls"]

    def test_single_file(self, schema_dir):
        path = str(schema_dir / "a_enums.graphql")
        assert collect_files(path, (".graphql",)) == [path]

    def test_nested_directories(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "q.gql").write_text("{ a }")
        assert len(collect_files(str(tmp_path), (".gql",))) == 1


class TestLoadSchema:
    """Tests for load_schema."""

    def test_sdl_directory(self, schema_dir):
        schema = load_schema(str(schema_dir))
        assert schema.query_type.name == "Query"
        assert "FeedType" in schema.type_map

    def test_sdl_file(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { a: String }")
        assert load_schema(str(path)).query_type.name == "Query"

    def test_introspection(self, tmp_path, githunt_schema):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(introspection_from_schema(githunt_schema)))
        schema = load_schema(str(path))
        assert schema.mutation_type.name == "Mutation"

    def test_introspection_with_data_envelope(self, tmp_path, githunt_schema):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": introspection_from_schema(githunt_schema)}))
        assert load_schema(str(path)).subscription_type.name == "Subscription"

    def test_no_files(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(str(tmp_path))

    def test_invalid_sdl(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { a: Missing }")
        with pytest.raises(GraphQLError):
            load_schema(str(path))


class TestLoadDocuments:
    """Tests for load_documents."""

    def test_loads_files_and_directories(self, tmp_path):
        (tmp_path / "queries").mkdir()
        (tmp_path / "queries" / "feed.graphql").write_text("query feed { feed { id } }")
        (tmp_path / "user.gql").write_text("query user { currentUser { login } }")
        documents = load_documents([str(tmp_path / "queries"), str(tmp_path / "user.gql")])
        names = [d.definitions[0].name.value for d in documents]
        assert names == ["feed", "user"]

    def test_syntax_error(self, tmp_path):
        (tmp_path / "bad.graphql").write_text("query {")
        with pytest.raises(GraphQLError):
            load_documents([str(tmp_path)])
