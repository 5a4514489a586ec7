"""Route — a single documented operation in the tree."""

from dataclasses import dataclass, field

from routedoc.declarations import Declarable
from routedoc.metadata import MetadataStore


@dataclass(frozen=True, slots=True)
class Route(Declarable):
    """A handler leaf owned by a router.

    ``path`` is relative to the owning router's prefix and may contain
    colon placeholders (``/items/:id``). Metadata is filled in through
    ``use()`` and the declaration calls; the identity fields never change.
    """

    method: str
    path: str = ""
    name: str | None = None
    metadata: MetadataStore = field(default_factory=MetadataStore, compare=False, repr=False)
