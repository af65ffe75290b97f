"""Load GraphQL documents from files using graphql-core.

Parses .graphql, .graphqls and .gql files and merges their definitions
into one DocumentNode ready for SchemaConverter.convert_document.
"""

import logging
import os

from graphql import DocumentNode, parse

logger = logging.getLogger(__name__)

GRAPHQL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def parse_source(source: str) -> DocumentNode:
    """Parse GraphQL source text into a document.

    Raises:
        GraphQLError: If the source is syntactically invalid
    """
    return parse(source)


class DocumentLoader:
    """Loads GraphQL documents from a file or a directory tree."""

    def __init__(self, source_path: str):
        """Initialize a loader with a path to a GraphQL file or directory."""
        self.source_path = source_path

    def load_all(self) -> DocumentNode:
        """Parse all GraphQL files and return their merged definitions."""
        definitions = []
        for file_path in self.collect_files():
            with open(file_path) as f:
                content = f.read()
            try:
                document = parse_source(content)
            except Exception:
                logger.error("Error parsing %s", os.path.basename(file_path))
                raise
            logger.debug(
                "Parsed %s: %d definitions", file_path, len(document.definitions)
            )
            definitions.extend(document.definitions)
        return DocumentNode(definitions=tuple(definitions))

    def collect_files(self) -> list[str]:
        """Collect all GraphQL files from the path."""
        files = []
        if os.path.isfile(self.source_path):
            if self.source_path.endswith(GRAPHQL_EXTENSIONS):
                files.append(self.source_path)
        else:
            for root, _, filenames in os.walk(self.source_path):
                for filename in filenames:
                    if filename.endswith(GRAPHQL_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)
