"""Path parameter syntax.

Routes are declared with colon placeholders (``/users/:id``). OpenAPI
wants braces (``/users/{id}``). The rewrite happens once, on fully
assembled paths, so prefixes are never rewritten twice.
"""

import re

# Colon placeholder: ":id" -> group(1) == "id"
PARAM_PATTERN: re.Pattern[str] = re.compile(r":(\w+)")


def param_names(path: str) -> list[str]:
    """Return placeholder names in declaration order.

    Examples::

        "/users"                  -> []
        "/users/:id"              -> ["id"]
        "/users/:user_id/posts/:post_id" -> ["user_id", "post_id"]
    """
    return PARAM_PATTERN.findall(path)


def to_openapi_path(path: str) -> str:
    """Rewrite colon placeholders to OpenAPI brace form.

    ``"/test/:version/items/:id"`` -> ``"/test/{version}/items/{id}"``
    """
    return PARAM_PATTERN.sub(r"{\1}", path)


def join_path(*parts: str | None) -> str:
    """Concatenate path parts verbatim, treating ``None`` as empty.

    No slashes are added or collapsed: prefixes are expected to carry
    their own separators, exactly as they are mounted.
    """
    return "".join(part for part in parts if part)
