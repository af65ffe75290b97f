"""Generate JSON Schema (draft-06) documents from GraphQL ASTs."""

import logging

__version__ = "0.1.0"

# Diagnostics are logged as warnings; applications decide where they go
logging.getLogger(__name__).addHandler(logging.NullHandler())
