"""Options used when creating publishers and subscriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from rmwtypes.content_filter import ContentFilterOptions

__all__ = [
    "UniqueNetworkFlowEndpoints",
    "SubscriptionOptions",
    "PublisherOptions",
    "default_subscription_options",
    "default_publisher_options",
]


class UniqueNetworkFlowEndpoints(IntEnum):
    """Whether an endpoint needs network flow endpoints of its own."""

    NOT_REQUIRED = 0
    STRICTLY_REQUIRED = 1
    OPTIONALLY_REQUIRED = 2
    SYSTEM_DEFAULT = 3


@dataclass
class SubscriptionOptions:
    """Settings for a new subscription."""

    rmw_specific_subscription_payload: Any = None
    ignore_local_publications: bool = False
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpoints = (
        UniqueNetworkFlowEndpoints.NOT_REQUIRED
    )
    content_filter_options: ContentFilterOptions | None = None


@dataclass
class PublisherOptions:
    """Settings for a new publisher."""

    rmw_specific_publisher_payload: Any = None
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpoints = (
        UniqueNetworkFlowEndpoints.NOT_REQUIRED
    )


def default_subscription_options() -> SubscriptionOptions:
    """Return subscription options holding the default values."""
    return SubscriptionOptions(
        rmw_specific_subscription_payload=None,
        ignore_local_publications=False,
        require_unique_network_flow_endpoints=UniqueNetworkFlowEndpoints.NOT_REQUIRED,
        content_filter_options=None,
    )


def default_publisher_options() -> PublisherOptions:
    """Return publisher options holding the default values."""
    return PublisherOptions(
        rmw_specific_publisher_payload=None,
        require_unique_network_flow_endpoints=UniqueNetworkFlowEndpoints.NOT_REQUIRED,
    )