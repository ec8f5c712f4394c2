"""Content filter options attached to a subscription."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rmwtypes.errors import InvalidArgumentError

__all__ = ["ContentFilterOptions", "content_filter_options_init"]


def _checked_parameters(expression_parameters: Sequence[str] | None) -> list[str]:
    if expression_parameters is None:
        return []
    if isinstance(expression_parameters, str):
        raise InvalidArgumentError("expression_parameters must be a sequence of strings")
    parameters = list(expression_parameters)
    for parameter in parameters:
        if not isinstance(parameter, str):
            raise InvalidArgumentError("failed to copy expression parameter")
    return parameters


def _checked_expression(filter_expression: str | None) -> str:
    if filter_expression is None:
        raise InvalidArgumentError("filter_expression argument is null")
    if not isinstance(filter_expression, str):
        raise InvalidArgumentError("filter_expression must be a string")
    return filter_expression


@dataclass
class ContentFilterOptions:
    """A filter expression and the parameters it refers to.

    A freshly built instance is zero initialized: no expression and no
    parameters.
    """

    filter_expression: str | None = None
    expression_parameters: list[str] = field(default_factory=list)

    def set(
        self,
        filter_expression: str,
        expression_parameters: Sequence[str] | None = None,
    ) -> None:
        """Finalize these options, then fill them with new values.

        If the new values are rejected the options stay finalized.
        """
        self.fini()
        expression = _checked_expression(filter_expression)
        parameters = _checked_parameters(expression_parameters)
        self.filter_expression = expression
        self.expression_parameters = parameters

    def copy_from(self, src: ContentFilterOptions) -> None:
        """Replace these options with a copy of ``src``."""
        if src is None:
            raise InvalidArgumentError("src argument is null")
        if not isinstance(src, ContentFilterOptions):
            raise InvalidArgumentError("src is not a ContentFilterOptions")
        self.set(src.filter_expression, list(src.expression_parameters))

    def fini(self) -> None:
        """Release the expression and parameters."""
        self.filter_expression = None
        self.expression_parameters = []


def content_filter_options_init(
    filter_expression: str,
    expression_parameters: Sequence[str] | None = None,
) -> ContentFilterOptions:
    """Build content filter options holding copies of the given values."""
    expression = _checked_expression(filter_expression)
    parameters = _checked_parameters(expression_parameters)
    return ContentFilterOptions(expression, parameters)