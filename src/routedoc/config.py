"""Explorer configuration.

ExplorerConfig holds the template a document is seeded with before any
router fragment is merged in, plus the media types used when declared
bodies and files are turned into ``requestBody`` objects. One config can
be shared by any number of explorers.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Defaults for the document template and generated operations.

    All fields have sensible defaults. Override what you need::

        config = ExplorerConfig(title="Orders API", version="2.1.0")
        document = explore(router, config)
    """

    # Document template
    openapi_version: str = "3.1.0"
    title: str = "OpenAPI title"
    version: str = "1.0.0"

    # Placeholder response every operation starts with
    default_status: str = "200"

    # Request body encodings
    json_media_type: str = "application/json"
    multipart_media_type: str = "multipart/form-data"
