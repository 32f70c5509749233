import networkx as nx

__all__ = ['to_networkx']

def to_networkx(graph) -> nx.DiGraph:
    """Convert an arena graph to a ``networkx.DiGraph`` keyed by vertex name.

    Edges keep their from -> to orientation.  Sensor antenna state is copied
    to node attributes.
    """
    H = nx.DiGraph()
    for _, node in graph.iter_vertices():
        attr = {"x": float(node.x), "y": float(node.y)}
        if node.antenna is not None:
            attr.update(
                antenna_type=node.antenna.type.value,
                antenna_range=node.antenna.range,
                antenna_angle=node.antenna.angle,
                antenna_direction=node.antenna.direction,
            )
        H.add_node(node.name, **attr)
    for e, link in graph.iter_edges():
        u, v = graph.end_vertices(e)
        H.add_edge(graph.vertex(u).name, graph.vertex(v).name, name=link.name, weight=link.weight)
    return H
