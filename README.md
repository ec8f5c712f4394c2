# rmwtypes

Plain Python data types for a robotics middleware layer. They cover QoS settings, durations, endpoint descriptions and the option records passed when publishers, subscriptions and contexts are created. There are no third-party dependencies.

## Modules

- `rmwtypes.errors`
  - `RmwError` is the base exception.
  - `InvalidArgumentError` subclasses both `RmwError` and `ValueError`.
  - `check_zero_string_array(array)` raises `RmwError` when `array` is `None` or not empty.
- `rmwtypes.time`
  - `Time(sec, nsec)` is a frozen duration. Both fields are unsigned 64-bit integers.
  - `time_total_nsec` returns the total nanoseconds and saturates at `INT64_MAX`.
  - `time_from_nsec` treats a negative value as `DURATION_INFINITE`.
  - `time_normalize` and `time_equal` build on the two functions above.
- `rmwtypes.qos`
  - The policy enums are `QosPolicyKind`, `HistoryPolicy`, `ReliabilityPolicy`, `DurabilityPolicy` and `LivelinessPolicy`.
  - `QosProfile` is a dataclass. Its defaults are the all-zero profile.
  - String conversions:
    - `policy_kind_to_str` and `policy_kind_from_str`
    - `policy_value_to_str`
    - `durability_policy_from_str`, `history_policy_from_str`, `liveliness_policy_from_str` and `reliability_policy_from_str`
  - Unknown strings map to `INVALID` or `UNKNOWN`.
  - Invalid or unknown values map to `None`.
- `rmwtypes.security_options`
  - `SecurityEnforcement` and `SecurityOptions` provide `copy_from`, `set_root_path` and `fini`.
  - `zero_initialized_security_options()` and `default_security_options()` build new instances.
- `rmwtypes.topic_endpoint_info`
  - `TopicEndpointInfo` has a setter for each member:
    - `set_node_name`, `set_node_namespace` and `set_topic_type`
    - `set_topic_type_hash`
    - `set_endpoint_type`
    - `set_gid`, which zero-pads to `GID_STORAGE_SIZE` (16) bytes.
    - `set_qos_profile`
  - `fini()` resets every member.
  - The module also defines `EndpointType` and `TypeHash`. A `TypeHash` holds a version and `TYPE_HASH_SIZE` (32) bytes.
- `rmwtypes.content_filter`
  - `ContentFilterOptions` holds a filter expression and its parameters. It provides `set`, `copy_from` and `fini`.
  - `content_filter_options_init(expression, parameters)` builds new options.
- `rmwtypes.subscription_options`
  - `SubscriptionOptions`, `PublisherOptions` and `UniqueNetworkFlowEndpoints`.
  - `default_subscription_options()` and `default_publisher_options()` return the defaults.
- `rmwtypes.discovery_options`
  - `AutomaticDiscoveryRange` and `DiscoveryOptions`.
  - `DiscoveryOptions` provides these methods:
    - `init(size)` requires a zero-initialized instance.
    - `equal(other)` compares the range and then the peers in order.
    - `fini()` resets the instance.
  - `discovery_options_copy(src, dst)` rejects `src is dst` and a `dst` that is not zero-initialized.
- `rmwtypes.message_sequence`
  - `MessageSequence` and `MessageInfoSequence` each have `data`, `size` and `capacity`, plus `init(size)` and `fini()`.
- `rmwtypes.enums`
  - `LocalhostOnly` and `Feature`.

Missing or ill-typed arguments raise `InvalidArgumentError`.

## Installation

```
pip install .
```

## Example

```python
from rmwtypes.time import Time, time_total_nsec, time_from_nsec
from rmwtypes.qos import ReliabilityPolicy, policy_value_to_str, reliability_policy_from_str
from rmwtypes.topic_endpoint_info import TopicEndpointInfo, EndpointType
from rmwtypes.discovery_options import DiscoveryOptions, discovery_options_copy

assert time_total_nsec(Time(sec=1, nsec=5)) == 1_000_000_005
assert time_from_nsec(2_500_000_000) == Time(sec=2, nsec=500_000_000)

assert policy_value_to_str(ReliabilityPolicy.BEST_EFFORT) == "best_effort"
assert reliability_policy_from_str("reliable") is ReliabilityPolicy.RELIABLE

info = TopicEndpointInfo()
info.set_node_name("talker")
info.set_node_namespace("/")
info.set_topic_type("std_msgs/msg/String")
info.set_endpoint_type(EndpointType.PUBLISHER)
info.set_gid(bytes(range(16)))
info.fini()  # back to the zero-initialized state

src = DiscoveryOptions()
src.init(1)
src.static_peers[0] = "192.168.0.0/24"
dst = DiscoveryOptions()
discovery_options_copy(src, dst)
assert src.equal(dst)
```

## What this package does not do

These are data types only. The package does not:

- discover nodes;
- open connections;
- publish or take messages;
- query a graph of nodes and topics.

`Feature` lists optional features, but nothing here reports whether a given middleware supports one.

## Running the tests

```
pip install .[test]
pytest
```