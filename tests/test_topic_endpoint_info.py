import pytest

from rmwtypes.errors import InvalidArgumentError
from rmwtypes.qos import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QosProfile,
    ReliabilityPolicy,
)
from rmwtypes.time import Time
from rmwtypes.topic_endpoint_info import (
    GID_STORAGE_SIZE,
    TYPE_HASH_SIZE,
    EndpointType,
    TopicEndpointInfo,
    TypeHash,
)


def _sample_qos():
    return QosProfile(
        history=HistoryPolicy.KEEP_LAST,
        depth=0,
        reliability=ReliabilityPolicy.RELIABLE,
        durability=DurabilityPolicy.VOLATILE,
        deadline=Time(1, 0),
        lifespan=Time(2, 0),
        liveliness=LivelinessPolicy.MANUAL_BY_TOPIC,
        liveliness_lease_duration=Time(3, 0),
        avoid_ros_namespace_conventions=False,
    )


def _assert_zero(info):
    assert info.node_name is None
    assert info.node_namespace is None
    assert info.topic_type is None
    assert info.endpoint_type == EndpointType.INVALID
    assert info.endpoint_gid == bytes(GID_STORAGE_SIZE)
    assert info.topic_type_hash == TypeHash()
    qos = info.qos_profile
    assert qos.history == 0
    assert qos.depth == 0
    assert qos.reliability == 0
    assert qos.durability == 0
    assert (qos.deadline.sec, qos.deadline.nsec) == (0, 0)
    assert (qos.lifespan.sec, qos.lifespan.nsec) == (0, 0)
    assert qos.liveliness == 0
    assert (qos.liveliness_lease_duration.sec, qos.liveliness_lease_duration.nsec) == (0, 0)
    assert qos.avoid_ros_namespace_conventions is False


def test_set_topic_type():
    info = TopicEndpointInfo()
    with pytest.raises(InvalidArgumentError):
        info.set_topic_type(None)
    assert info.topic_type is None
    value = "".join(["test_", "topic_type"])
    info.set_topic_type(value)
    del value
    assert info.topic_type == "test_topic_type"


def test_set_topic_type_rejects_non_string():
    info = TopicEndpointInfo()
    with pytest.raises(InvalidArgumentError):
        info.set_topic_type(42)


def test_set_topic_type_hash():
    info = TopicEndpointInfo()
    type_hash = TypeHash(version=22, value=bytes(range(TYPE_HASH_SIZE)))
    with pytest.raises(InvalidArgumentError):
        info.set_topic_type_hash(None)
    info.set_topic_type_hash(type_hash)
    assert info.topic_type_hash.version == 22
    assert list(info.topic_type_hash.value) == list(range(TYPE_HASH_SIZE))


def test_type_hash_requires_full_size_value():
    with pytest.raises(InvalidArgumentError):
        TypeHash(version=1, value=b"\x01\x02")


def test_set_node_name():
    info = TopicEndpointInfo()
    with pytest.raises(InvalidArgumentError):
        info.set_node_name(None)
    info.set_node_name("test_node_name")
    assert info.node_name == "test_node_name"


def test_set_node_namespace():
    info = TopicEndpointInfo()
    with pytest.raises(InvalidArgumentError):
        info.set_node_namespace(None)
    info.set_node_namespace("test_node_namespace")
    assert info.node_namespace == "test_node_namespace"


def test_set_gid():
    info = TopicEndpointInfo()
    gid = bytes(range(GID_STORAGE_SIZE))
    with pytest.raises(InvalidArgumentError):
        info.set_gid(bytes(range(GID_STORAGE_SIZE + 1)))
    info.set_gid(gid)
    assert info.endpoint_gid == gid


def test_set_gid_shorter_is_zero_padded():
    info = TopicEndpointInfo()
    info.set_gid(bytes(range(GID_STORAGE_SIZE)))
    info.set_gid(b"\x07\x08")
    assert info.endpoint_gid == b"\x07\x08" + bytes(GID_STORAGE_SIZE - 2)


def test_set_gid_rejects_none():
    info = TopicEndpointInfo()
    with pytest.raises(InvalidArgumentError):
        info.set_gid(None)


def test_set_qos_profile():
    info = TopicEndpointInfo()
    qos = _sample_qos()
    with pytest.raises(InvalidArgumentError):
        info.set_qos_profile(None)
    info.set_qos_profile(qos)
    got = info.qos_profile
    assert got.history == HistoryPolicy.KEEP_LAST
    assert got.depth == 0
    assert got.reliability == ReliabilityPolicy.RELIABLE
    assert got.durability == DurabilityPolicy.VOLATILE
    assert (got.deadline.sec, got.deadline.nsec) == (1, 0)
    assert (got.lifespan.sec, got.lifespan.nsec) == (2, 0)
    assert got.liveliness == LivelinessPolicy.MANUAL_BY_TOPIC
    assert (got.liveliness_lease_duration.sec, got.liveliness_lease_duration.nsec) == (3, 0)
    assert got.avoid_ros_namespace_conventions is False


def test_set_qos_profile_copies_value():
    info = TopicEndpointInfo()
    qos = _sample_qos()
    info.set_qos_profile(qos)
    qos.depth = 10
    assert info.qos_profile.depth == 0


def test_set_endpoint_type():
    info = TopicEndpointInfo()
    info.set_endpoint_type(EndpointType.PUBLISHER)
    assert info.endpoint_type == EndpointType.PUBLISHER
    info.set_endpoint_type(2)
    assert info.endpoint_type is EndpointType.SUBSCRIPTION


def test_set_endpoint_type_rejects_unknown_value():
    info = TopicEndpointInfo()
    with pytest.raises(InvalidArgumentError):
        info.set_endpoint_type(99)


def test_zero_init():
    _assert_zero(TopicEndpointInfo())


def test_fini():
    info = TopicEndpointInfo()
    info.set_qos_profile(_sample_qos())
    info.set_endpoint_type(EndpointType.PUBLISHER)
    info.set_gid(bytes(i * 12 for i in range(GID_STORAGE_SIZE)))
    info.set_node_namespace("namespace")
    info.set_node_name("name")
    info.set_topic_type("type")
    info.set_topic_type_hash(TypeHash(version=1, value=bytes(range(TYPE_HASH_SIZE))))
    assert info.node_name == "name"
    assert info.endpoint_type == EndpointType.PUBLISHER

    info.fini()
    _assert_zero(info)