"""Abstract base class for engine adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from result_item.models import ResultItem


class BaseResultAdapter(ABC):
    """Contract that every search engine adapter must satisfy.

    Sub-classes implement :meth:`normalize` to translate the engine-specific
    raw response into :class:`~result_item.models.ResultItem` objects, and
    should build each one with :meth:`build_item` so the engine's
    configuration is copied onto it.
    """

    engine_id: Optional[str] = None

    def __init__(
        self,
        display_configuration: Any = None,
        decorator_reference: Optional[str] = None,
    ) -> None:
        self.display_configuration = display_configuration
        self.decorator_reference = decorator_reference

    def build_item(self, fields: Mapping[str, Any]) -> ResultItem:
        """Construct a :class:`ResultItem` stamped with this engine's configuration."""
        return ResultItem(
            fields,
            engine_id=self.engine_id,
            display_configuration=self.display_configuration,
            decorator_reference=self.decorator_reference,
        )

    @abstractmethod
    def normalize(self, raw: Any) -> List[ResultItem]:
        """Convert *raw* engine output to a list of :class:`ResultItem`.

        Parameters
        ----------
        raw:
            The raw data returned by the engine.  The expected type is
            specific to each concrete adapter.

        Returns
        -------
        list of ResultItem
            Hits in the order the engine ranked them.
        """
