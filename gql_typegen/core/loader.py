"""Loading of schemas and operation documents from disk.

Schemas are read from SDL files (.graphql, .graphqls, .gql), directories of
them, or introspection results (.json). Documents are parsed with
graphql-core; validation is left to upstream tooling.
"""

import json
import logging
import os

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    parse,
)

logger = logging.getLogger(__name__)

SDL_EXTENSIONS = (".graphql", ".graphqls", ".gql")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect files with the given extensions from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def load_schema(path: str) -> GraphQLSchema:
    """Load a schema from SDL or an introspection JSON file."""
    if os.path.isfile(path) and path.endswith(".json"):
        with open(path) as f:
            introspection = json.load(f)
        # Accept both a raw result and one wrapped in {"data": ...}
        if "data" in introspection:
            introspection = introspection["data"]
        return build_client_schema(introspection)

    files = collect_files(path, SDL_EXTENSIONS)
    if not files:
        raise FileNotFoundError(f"No schema files found at {path}")
    sources = []
    for file_path in files:
        with open(file_path) as f:
            sources.append(f.read())
    try:
        return build_schema("\n".join(sources))
    except GraphQLError as e:
        logger.error("Error building schema from %s: %s", path, e)
        raise
    except TypeError as e:
        # graphql-core reports SDL validation failures as TypeError
        logger.error("Invalid schema at %s: %s", path, e)
        raise GraphQLError(str(e)) from e


def load_documents(paths: list[str]) -> list[DocumentNode]:
    """Parse every operation document found under the given paths."""
    documents = []
    for path in paths:
        for file_path in collect_files(path, DOCUMENT_EXTENSIONS):
            with open(file_path) as f:
                content = f.read()
            try:
                documents.append(parse(content))
            except GraphQLError as e:
                logger.error("Error parsing %s: %s", file_path, e)
                raise
    return documents
