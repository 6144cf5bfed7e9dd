import pytest

from opendaw.routing import AudioNode, NodeType, RoutingError, RoutingGraph


@pytest.fixture
def graph():
    return RoutingGraph()


def test_add_node_assigns_increasing_ids(graph):
    a = graph.add_node("Track 1", NodeType.TRACK)
    b = graph.add_node("Master", NodeType.MASTER)
    assert a == 1
    assert b == a + 1
    assert graph.nodes[b].name == "Master"
    assert graph.nodes[b].node_type is NodeType.MASTER
    assert graph.edges[a] == set()


def test_connect_and_disconnect(graph):
    a = graph.add_node("Track", NodeType.TRACK)
    m = graph.add_node("Master", NodeType.MASTER)
    graph.connect(a, m)
    assert graph.edges[a] == {m}
    graph.disconnect(a, m)
    assert graph.edges[a] == set()


def test_connect_missing_nodes(graph):
    a = graph.add_node("Track", NodeType.TRACK)
    with pytest.raises(RoutingError, match="Source node does not exist"):
        graph.connect(99, a)
    with pytest.raises(RoutingError, match="Destination node does not exist"):
        graph.connect(a, 99)


def test_connect_to_self_rejected(graph):
    a = graph.add_node("Track", NodeType.TRACK)
    with pytest.raises(RoutingError, match="Cannot connect a node to itself"):
        graph.connect(a, a)


def test_duplicate_edge_rejected(graph):
    a = graph.add_node("Track", NodeType.TRACK)
    m = graph.add_node("Master", NodeType.MASTER)
    graph.connect(a, m)
    with pytest.raises(RoutingError, match="Edge already exists"):
        graph.connect(a, m)


def test_cycle_rejected_and_rolled_back(graph):
    a = graph.add_node("A", NodeType.TRACK)
    b = graph.add_node("B", NodeType.SEND_BUS)
    c = graph.add_node("C", NodeType.MASTER)
    graph.connect(a, b)
    graph.connect(b, c)
    with pytest.raises(RoutingError, match="cycle"):
        graph.connect(c, a)
    assert graph.edges[c] == set()
    assert graph.edges[a] == {b}


def test_disconnect_errors(graph):
    a = graph.add_node("A", NodeType.TRACK)
    b = graph.add_node("B", NodeType.TRACK)
    with pytest.raises(RoutingError, match="Connection does not exist"):
        graph.disconnect(a, b)
    with pytest.raises(RoutingError, match="Source node does not exist"):
        graph.disconnect(42, b)


def test_remove_node_drops_incoming_edges(graph):
    a = graph.add_node("A", NodeType.TRACK)
    s = graph.add_node("Side", NodeType.SIDECHAIN)
    graph.connect(a, s)
    removed = graph.remove_node(s)
    assert removed == AudioNode(s, "Side", NodeType.SIDECHAIN)
    assert s not in graph.nodes
    assert s not in graph.edges
    assert graph.edges[a] == set()
    assert graph.remove_node(s) is None